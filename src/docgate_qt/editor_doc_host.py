"""Connects a QPlainTextEdit to a documentation delay gate."""

import logging

from PySide6.QtCore import QEvent, QObject, Qt, QTimer, Signal
from PySide6.QtGui import QKeyEvent, QKeySequence, QShortcut, QTextCursor
from PySide6.QtWidgets import QPlainTextEdit, QWidget

from docgate import PICK_UP_ACTION_ID, DocGate, DocHost, DocRequestContext
from docgate_qt.dictionary_doc_producer import DictionaryDocProducer


class EditorActionEventFilter(QObject):
    """Event filter that turns editor input events into user actions."""

    action_started = Signal(str)

    MOVE_KEYS = {
        Qt.Key.Key_Left, Qt.Key.Key_Right, Qt.Key.Key_Up, Qt.Key.Key_Down,
        Qt.Key.Key_Home, Qt.Key.Key_End, Qt.Key.Key_PageUp, Qt.Key.Key_PageDown
    }
    DELETE_KEYS = {Qt.Key.Key_Backspace, Qt.Key.Key_Delete}
    MODIFIER_KEYS = {Qt.Key.Key_Shift, Qt.Key.Key_Control, Qt.Key.Key_Alt, Qt.Key.Key_Meta}

    def __init__(self, parent: QWidget | None = None) -> None:
        """Initialize the event filter."""
        super().__init__(parent)

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        """
        Filter events to detect user actions.

        Args:
            watched: The object that received the event
            event: The event that was received

        Returns:
            True if event was handled, False to pass to the target object
        """
        if event.type() == QEvent.Type.KeyPress:
            action_id = self._classify_key(event)  # type: ignore[arg-type]
            if action_id is not None:
                self.action_started.emit(action_id)

            return False  # Don't consume the event

        if event.type() == QEvent.Type.MouseButtonRelease:
            self.action_started.emit("mouse")
            return False  # Don't consume the event

        return super().eventFilter(watched, event)

    def _classify_key(self, event: QKeyEvent) -> str | None:
        key = event.key()

        # A modifier on its own is part of a chord, not an action
        if key in self.MODIFIER_KEYS:
            return None

        if key in self.MOVE_KEYS:
            return "move"

        if key in self.DELETE_KEYS:
            return "delete"

        text = event.text()
        if text and text.isprintable():
            return "insert"

        return "other"


class EditorDocHost(DocHost):
    """
    Tracks user actions in an editor and feeds documentation through a gate.

    Each key press or mouse release is one action.  Once the event loop has
    finished processing it, the gate is told the action completed and the
    documentation for the word under the cursor is recomputed.
    """

    def __init__(
        self,
        editor: QPlainTextEdit,
        producer: DictionaryDocProducer,
        display_actions: set[str] | None = None
    ) -> None:
        """
        Initialize the host.

        Args:
            editor: Editor whose cursor position drives documentation
            producer: Source of documentation text for a word
            display_actions: Action identifiers that keep pending documentation relevant
        """
        self._logger = logging.getLogger("EditorDocHost")
        self._editor = editor
        self._producer = producer
        self._display_actions = display_actions if display_actions is not None else {
            "move", "insert", "delete", "mouse"
        }
        self._gate: DocGate | None = None
        self._last_action: str | None = None
        self._actions_started = 0
        self._actions_completed = 0

        self._event_filter = EditorActionEventFilter(editor)
        self._event_filter.action_started.connect(self._on_action_started)

        self._pick_up_shortcut = QShortcut(QKeySequence("Ctrl+Shift+D"), editor)
        self._pick_up_shortcut.activated.connect(self._on_pick_up)

    def attach(self, gate: DocGate) -> None:
        """
        Route this editor's documentation through a gate and enable it.

        Args:
            gate: Gate to enable and feed
        """
        self.detach()
        self._gate = gate
        gate.enable()
        self._editor.installEventFilter(self._event_filter)

        # Mouse events go to the viewport, not the scroll area itself
        self._editor.viewport().installEventFilter(self._event_filter)

    def detach(self) -> None:
        """Disable the attached gate and stop tracking actions."""
        if self._gate is None:
            return

        self._editor.removeEventFilter(self._event_filter)
        self._editor.viewport().removeEventFilter(self._event_filter)
        self._gate.disable()
        self._gate = None

    def compute_and_present(self, context: DocRequestContext) -> None:
        if self._gate is None:
            return

        if not context.forced and not self.is_display_triggering_action(context.action_id):
            return

        word = self._word_under_cursor()
        self._gate.present(self._producer.documentation_for(word))

    def is_display_triggering_action(self, action_id: str | None) -> bool:
        return action_id in self._display_actions

    def last_action(self) -> str | None:
        return self._last_action

    def action_in_flight(self) -> bool:
        return self._actions_started > self._actions_completed

    def _on_action_started(self, action_id: str) -> None:
        self._actions_started += 1

        # Runs once the editor has processed the event
        QTimer.singleShot(0, lambda: self._on_action_completed(action_id))

    def _on_action_completed(self, action_id: str) -> None:
        self._actions_completed += 1
        self._last_action = action_id
        if self._gate is None:
            return

        self._gate.cancel_if_stale()
        self.compute_and_present(DocRequestContext(action_id=action_id))

    def _on_pick_up(self) -> None:
        if self._gate is None:
            return

        self._logger.debug("Documentation pick-up requested")
        self._last_action = PICK_UP_ACTION_ID
        self._gate.pick_up()

    def _word_under_cursor(self) -> str:
        cursor = self._editor.textCursor()
        cursor.select(QTextCursor.SelectionType.WordUnderCursor)
        return cursor.selectedText()
