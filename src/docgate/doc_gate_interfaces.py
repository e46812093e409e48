"""Abstract collaborators of the documentation delay gate."""

from abc import ABC, abstractmethod
from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from docgate.doc_gate_types import DocRequestContext


class TimerHandle(ABC):
    """Handle to a single-shot scheduled callback."""

    @abstractmethod
    def cancel(self) -> None:
        """
        Cancel the callback.

        Cancelling a handle that has already fired or been cancelled does nothing.
        """

    @abstractmethod
    def is_active(self) -> bool:
        """
        Check whether the callback is still due to run.

        Returns:
            True if the callback has neither fired nor been cancelled
        """


class TimerService(ABC):
    """Single-threaded cooperative timer service."""

    @abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """
        Schedule a single-shot callback.

        Args:
            delay: Delay in seconds
            callback: Function to call once the delay has elapsed

        Returns:
            Handle that can be used to cancel the callback
        """


class DocPresenter(ABC):
    """Shows or clears documentation messages."""

    @abstractmethod
    def show(self, message: str | None) -> str | None:
        """
        Show a message, or clear the current one.

        Args:
            message: Text to show, or None to clear

        Returns:
            The content now on screen
        """

    @abstractmethod
    def last_visible_message(self) -> str | None:
        """Get the message currently on screen, if any."""


class DocHost(ABC):
    """The editor side of the gate: producer access and action tracking."""

    @abstractmethod
    def compute_and_present(self, context: "DocRequestContext") -> None:
        """
        Recompute documentation for the current position.

        The result must be routed through the gate's present method, either
        before this call returns or on a later event loop turn.

        Args:
            context: Request context describing the triggering action
        """

    @abstractmethod
    def is_display_triggering_action(self, action_id: str | None) -> bool:
        """
        Check whether an action keeps pending documentation relevant.

        Args:
            action_id: Identifier of the action, or None if there was none

        Returns:
            True if documentation for the current position may still be shown
        """

    @abstractmethod
    def last_action(self) -> str | None:
        """Get the identifier of the most recently completed action."""

    @abstractmethod
    def action_in_flight(self) -> bool:
        """Check whether a newer user action has already started."""
