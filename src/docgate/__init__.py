"""
Delayed presentation of contextual documentation.

This package provides a timer-driven gate that sits between a documentation
producer and whatever shows the documentation on screen, independent of any
particular GUI toolkit.
"""

from docgate.doc_gate import DocGate
from docgate.doc_gate_exceptions import DocGateError, DocGateSettingsError
from docgate.doc_gate_interfaces import DocHost, DocPresenter, TimerHandle, TimerService
from docgate.doc_gate_settings import DocGateSettings
from docgate.doc_gate_types import (
    PICK_UP_ACTION_ID,
    PICK_UP_DELAY,
    DocRequestContext,
    GateState,
    PendingPresentation,
)

__all__ = [
    # Exceptions
    'DocGateError',
    'DocGateSettingsError',
    # Types
    'DocRequestContext',
    'GateState',
    'PendingPresentation',
    'PICK_UP_ACTION_ID',
    'PICK_UP_DELAY',
    # Interfaces
    'DocHost',
    'DocPresenter',
    'TimerHandle',
    'TimerService',
    # Core classes
    'DocGateSettings',
    'DocGate',
]
