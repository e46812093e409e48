"""Presenter that shows documentation in a status bar label."""

from PySide6.QtWidgets import QLabel

from docgate import DocPresenter


class StatusLabelPresenter(DocPresenter):
    """Shows documentation messages in a QLabel."""

    def __init__(self, label: QLabel) -> None:
        self._label = label
        self._message: str | None = None

    def show(self, message: str | None) -> str | None:
        self._message = message
        self._label.setText(message if message is not None else "")
        return message

    def last_visible_message(self) -> str | None:
        return self._message
