"""Shared fixtures and utilities for documentation gate tests."""

from typing import Callable

import pytest

from docgate.doc_gate import DocGate
from docgate.doc_gate_interfaces import DocHost, DocPresenter, TimerHandle, TimerService
from docgate.doc_gate_settings import DocGateSettings
from docgate.doc_gate_types import DocRequestContext


class FakeTimerHandle(TimerHandle):
    """Timer handle driven by a FakeTimerService."""

    def __init__(self, due: float, callback: Callable[[], None]):
        self.due = due
        self.callback = callback
        self.fired = False
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True

    def is_active(self) -> bool:
        return not self.fired and not self.cancelled


class FakeTimerService(TimerService):
    """Manual clock timer service; time only moves when advance() is called."""

    def __init__(self):
        self.now = 0.0
        self.handles: list[FakeTimerHandle] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        handle = FakeTimerHandle(self.now + delay, callback)
        self.handles.append(handle)
        return handle

    def active_handles(self) -> list[FakeTimerHandle]:
        """Get handles that are still due to fire."""
        return [h for h in self.handles if h.is_active()]

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in due order."""
        target = self.now + seconds
        while True:
            due = [h for h in self.active_handles() if h.due <= target + 1e-9]
            if not due:
                break

            handle = min(due, key=lambda h: h.due)
            self.now = max(self.now, handle.due)
            handle.fired = True
            handle.callback()

        self.now = target


class RecordingPresenter(DocPresenter):
    """Presenter that records every delivery with the time it happened."""

    def __init__(self, clock: FakeTimerService):
        self._clock = clock
        self.visible: str | None = None
        self.deliveries: list[tuple[float, str | None]] = []

    def show(self, message: str | None) -> str | None:
        self.visible = message
        self.deliveries.append((self._clock.now, message))
        return message

    def last_visible_message(self) -> str | None:
        return self.visible

    def shown_messages(self) -> list[str | None]:
        """Get the delivered messages without their times."""
        return [message for _, message in self.deliveries]


class ScriptedHost(DocHost):
    """Host whose producer answer and action history are set by the test."""

    def __init__(self):
        self.gate: DocGate | None = None
        self.documentation: str | None = "doc"
        self.answer_later = False
        self.requests: list[DocRequestContext] = []
        self.action: str | None = None
        self.in_flight = False
        self.display_actions = {"move", "insert"}

    def compute_and_present(self, context: DocRequestContext) -> None:
        self.requests.append(context)
        if not self.answer_later:
            assert self.gate is not None
            self.gate.present(self.documentation)

    def answer(self) -> None:
        """Deliver a deferred producer answer."""
        assert self.gate is not None
        self.gate.present(self.documentation)

    def is_display_triggering_action(self, action_id: str | None) -> bool:
        return action_id in self.display_actions

    def last_action(self) -> str | None:
        return self.action

    def action_in_flight(self) -> bool:
        return self.in_flight


@pytest.fixture
def timers():
    """Create a manual clock timer service."""
    return FakeTimerService()


@pytest.fixture
def presenter(timers):
    """Create a recording presenter on the manual clock."""
    return RecordingPresenter(timers)


@pytest.fixture
def host():
    """Create a scripted host."""
    return ScriptedHost()


@pytest.fixture
def settings():
    """Create default gate settings."""
    return DocGateSettings.create_default()


@pytest.fixture
def gate(presenter, host, timers, settings):
    """Create an enabled gate wired to the test collaborators."""
    doc_gate = DocGate(presenter, host, timers, settings)
    host.gate = doc_gate
    doc_gate.enable()
    return doc_gate
