"""Qt binding and demo editor for the documentation delay gate."""

from docgate_qt.dictionary_doc_producer import DictionaryDocProducer
from docgate_qt.editor_doc_host import EditorActionEventFilter, EditorDocHost
from docgate_qt.qt_timer_service import QtTimerHandle, QtTimerService
from docgate_qt.status_label_presenter import StatusLabelPresenter

__all__ = [
    'DictionaryDocProducer',
    'EditorActionEventFilter',
    'EditorDocHost',
    'QtTimerHandle',
    'QtTimerService',
    'StatusLabelPresenter',
]
