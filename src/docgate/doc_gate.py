"""Delay gate between a documentation producer and its presenter."""

import logging

from docgate.doc_gate_interfaces import DocHost, DocPresenter, TimerService
from docgate.doc_gate_settings import DocGateSettings
from docgate.doc_gate_types import (
    PICK_UP_ACTION_ID, PICK_UP_DELAY, DocRequestContext, GateState, PendingPresentation
)


class DocGate:
    """
    Delays the presentation of contextual documentation.

    Every display or clear request from the producer is routed through
    present().  A new message is shown only after the configured delay,
    unless another message is already on screen (replacing it is immediate)
    or a clear happened within the last pause_after_clear seconds.  The
    pick_up() action shows pending documentation straight away, and
    cancel_if_stale() drops a pending message once the user has moved on.

    All methods and timer callbacks are expected to run on one event loop.
    """

    def __init__(
        self,
        presenter: DocPresenter,
        host: DocHost,
        timer_service: TimerService,
        settings: DocGateSettings | None = None
    ) -> None:
        """
        Initialize the gate.  The gate starts disabled.

        Args:
            presenter: Presenter that shows or clears messages
            host: Host providing recompute and action classification
            timer_service: Scheduler for delayed deliveries
            settings: User timings; defaults are used if not provided
        """
        self._logger = logging.getLogger("DocGate")
        self._presenter = presenter
        self._host = host
        self._timer_service = timer_service
        self._settings = settings if settings is not None else DocGateSettings.create_default()
        self._state: GateState | None = None

    def settings(self) -> DocGateSettings:
        """Get the settings the gate reads its timings from."""
        return self._settings

    def enabled(self) -> bool:
        """Check whether the gate is currently enabled."""
        return self._state is not None

    def enable(self) -> None:
        """Start a fresh gate session with default state."""
        if self._state is not None:
            self.disable()

        self._state = GateState(delay_interval=self._settings.delay_interval)
        self._logger.debug("Gate enabled, delay %.3fs", self._state.delay_interval)

    def disable(self) -> None:
        """Stop the gate session, leaving no scheduled work behind."""
        state = self._state
        if state is None:
            return

        self._cancel_pending(state)
        self._cancel_bypass(state)
        state.use_timer = True
        self._restore_delay_interval(state)
        self._state = None
        self._logger.debug("Gate disabled")

    def has_pending(self) -> bool:
        """Check whether a delayed delivery is outstanding."""
        return self._state is not None and self._state.pending is not None

    def pending_message(self) -> str | None:
        """Get the message of the outstanding delayed delivery, if any."""
        if self._state is None or self._state.pending is None:
            return None

        return self._state.pending.message

    def is_bypassing(self) -> bool:
        """Check whether delays are currently suppressed after a clear."""
        return self._state is not None and self._state.bypass_timer is not None and not self._state.use_timer

    def delay_interval(self) -> float:
        """Get the delay the next scheduling decision will use."""
        if self._state is None or not self._state.delay_overridden:
            return self._settings.delay_interval

        return self._state.delay_interval

    def present(self, message: str | None) -> str | None:
        """
        Show, clear or schedule a documentation message.

        Args:
            message: Documentation text, or None to clear the current message

        Returns:
            The presenter's result if something was delivered now, otherwise
            the message currently on screen
        """
        state = self._state
        if state is None:
            return self._presenter.show(message)

        # A new request always supersedes an undelivered one
        self._cancel_pending(state)

        # Read the effective delay, then undo any pick-up override
        delay = state.delay_interval if state.delay_overridden else self._settings.delay_interval
        self._restore_delay_interval(state)

        visible = self._presenter.last_visible_message()

        if not state.use_timer or (message is not None and visible is not None):
            return self._presenter.show(message)

        if message is None:
            result = self._presenter.show(None)
            if visible is not None:
                self._open_bypass_window(state)

            return result

        due_timer = self._timer_service.schedule(delay, self._on_pending_timeout)
        state.pending = PendingPresentation(
            due_timer=due_timer,
            message=message,
            deliver=lambda: self._presenter.show(message)
        )
        self._logger.debug("Scheduled documentation in %.3fs", delay)
        return visible

    def pick_up(self) -> None:
        """Show pending documentation now, recomputing it if nothing is pending."""
        state = self._state
        if state is None:
            self._logger.debug("Pick-up ignored, gate is disabled")
            return

        if state.pending is None:
            self._logger.debug("Pick-up with nothing pending, forcing a recompute")
            state.delay_interval = PICK_UP_DELAY
            state.delay_overridden = True
            self._host.compute_and_present(DocRequestContext(action_id=PICK_UP_ACTION_ID, forced=True))

        # The recompute may have run arbitrary host code
        state = self._state
        if state is None or state.pending is None:
            return

        pending = state.pending
        state.pending = None
        pending.due_timer.cancel()
        pending.deliver()

    def cancel_if_stale(self) -> None:
        """Drop the pending delivery if the user has moved on since it was requested."""
        state = self._state
        if state is None or state.pending is None:
            return

        action = self._host.last_action()
        if self._is_display_triggering(action) and not self._host.action_in_flight():
            return

        self._logger.debug("Cancelling stale documentation after action '%s'", action)
        self._cancel_pending(state)

    def _is_display_triggering(self, action_id: str | None) -> bool:
        if action_id == PICK_UP_ACTION_ID:
            return True

        return self._host.is_display_triggering_action(action_id)

    def _on_pending_timeout(self) -> None:
        """Deliver the pending message once its delay has elapsed."""
        state = self._state
        if state is None or state.pending is None:
            return

        pending = state.pending
        state.pending = None
        pending.deliver()

    def _open_bypass_window(self, state: GateState) -> None:
        self._cancel_bypass(state)
        state.use_timer = False
        state.bypass_timer = self._timer_service.schedule(
            self._settings.pause_after_clear, self._on_bypass_timeout
        )
        self._logger.debug("Skipping delays for %.3fs after clear", self._settings.pause_after_clear)

    def _on_bypass_timeout(self) -> None:
        state = self._state
        if state is None:
            return

        state.bypass_timer = None
        state.use_timer = True

    def _restore_delay_interval(self, state: GateState) -> None:
        state.delay_interval = self._settings.delay_interval
        state.delay_overridden = False

    def _cancel_pending(self, state: GateState) -> None:
        if state.pending is None:
            return

        state.pending.due_timer.cancel()
        state.pending = None

    def _cancel_bypass(self, state: GateState) -> None:
        if state.bypass_timer is None:
            return

        state.bypass_timer.cancel()
        state.bypass_timer = None
