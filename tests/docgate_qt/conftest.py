"""Shared fixtures for the Qt binding tests."""

import os

# Must be set before the QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest  # pylint: disable=wrong-import-position
from PySide6.QtCore import Qt  # pylint: disable=wrong-import-position
from PySide6.QtTest import QTest  # pylint: disable=wrong-import-position
from PySide6.QtWidgets import QApplication, QLabel, QPlainTextEdit  # pylint: disable=wrong-import-position

from docgate import DocGate, DocGateSettings  # pylint: disable=wrong-import-position
from docgate_qt import (  # pylint: disable=wrong-import-position
    DictionaryDocProducer, EditorDocHost, QtTimerService, StatusLabelPresenter
)


@pytest.fixture(scope="session")
def qt_app():
    """Create the application object shared by all Qt tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])

    return app


@pytest.fixture
def editor(qt_app):
    """Create a visible editor holding a short line of text."""
    widget = QPlainTextEdit()
    widget.setPlainText("print foo")
    widget.resize(400, 200)
    widget.show()
    QTest.qWaitForWindowExposed(widget)
    yield widget
    widget.close()
    widget.deleteLater()


@pytest.fixture
def doc_label(qt_app):
    """Create the label documentation is shown in."""
    return QLabel()


@pytest.fixture
def timer_service(qt_app):
    """Create a timer service on the Qt event loop."""
    return QtTimerService()


@pytest.fixture
def doc_host(editor):
    """Create a host that knows documentation for 'print' only."""
    return EditorDocHost(editor, DictionaryDocProducer({"print": "P"}))


@pytest.fixture
def doc_gate(doc_host, doc_label, timer_service):
    """Create a gate with short timings attached to the editor host."""
    gate = DocGate(
        StatusLabelPresenter(doc_label),
        doc_host,
        timer_service,
        DocGateSettings(delay_interval=0.2, pause_after_clear=0.1)
    )
    doc_host.attach(gate)
    yield gate
    doc_host.detach()


class QtTestHelpers:
    """Helper utilities for driving the editor."""

    @staticmethod
    def click_at(editor: QPlainTextEdit, position: int) -> None:
        """Click the editor viewport at a text position."""
        cursor = editor.textCursor()
        cursor.setPosition(position)
        point = editor.cursorRect(cursor).center()
        QTest.mouseClick(editor.viewport(), Qt.MouseButton.LeftButton, Qt.KeyboardModifier.NoModifier, point)


@pytest.fixture
def helpers():
    """Provide test helper utilities."""
    return QtTestHelpers
