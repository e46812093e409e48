"""Demo window: an editor with delayed documentation in the status bar."""

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QLabel, QMainWindow, QPlainTextEdit, QWidget

from docgate import DocGate, DocGateSettings
from docgate_qt.dictionary_doc_producer import DictionaryDocProducer
from docgate_qt.editor_doc_host import EditorDocHost
from docgate_qt.qt_timer_service import QtTimerService
from docgate_qt.status_label_presenter import StatusLabelPresenter


DEMO_ENTRIES = {
    "print": "print(*objects, sep=' ', end='\\n', file=None, flush=False)",
    "len": "len(s) -> int: return the number of items in a container",
    "range": "range(stop) / range(start, stop[, step]) -> range object",
    "open": "open(file, mode='r', buffering=-1, encoding=None, ...) -> file object",
    "sorted": "sorted(iterable, /, *, key=None, reverse=False) -> list",
}


class DocWindow(QMainWindow):
    """Main window of the demo application."""

    def __init__(self, settings: DocGateSettings, parent: QWidget | None = None) -> None:
        """
        Initialize the window.

        Args:
            settings: Gate timings
            parent: Optional parent widget
        """
        super().__init__(parent)
        self.setWindowTitle("docgate")
        self.resize(800, 600)

        self._editor = QPlainTextEdit(self)
        self._editor.setPlainText("print(len(range(10)))\n")
        self.setCentralWidget(self._editor)

        self._doc_label = QLabel(self)
        self.statusBar().addWidget(self._doc_label, 1)

        self._host = EditorDocHost(self._editor, DictionaryDocProducer(DEMO_ENTRIES))
        self._gate = DocGate(
            StatusLabelPresenter(self._doc_label),
            self._host,
            QtTimerService(self),
            settings
        )
        self._host.attach(self._gate)

    def closeEvent(self, event: QCloseEvent) -> None:
        """Disable the gate before the window goes away."""
        self._host.detach()
        super().closeEvent(event)
