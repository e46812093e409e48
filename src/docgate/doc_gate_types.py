"""Shared dataclasses for the documentation delay gate."""

from dataclasses import dataclass
from typing import Callable

from docgate.doc_gate_interfaces import TimerHandle


# Action identifier used for the synthetic recompute issued by a pick-up
PICK_UP_ACTION_ID = "docgate-pick-up"

# Near-zero delay (seconds) used while a pick-up forces immediate delivery
PICK_UP_DELAY = 0.01


@dataclass
class DocRequestContext:
    """Context handed to the documentation producer on a forced recompute."""

    action_id: str
    forced: bool = False  # True means treat this as a legitimate display command


@dataclass
class PendingPresentation:
    """A scheduled delivery awaiting its timer, cancellation or pick-up."""

    due_timer: TimerHandle
    message: str | None
    deliver: Callable[[], str | None]


@dataclass
class GateState:
    """Mutable state of one enabled gate session."""

    delay_interval: float  # Seconds; mirrors the user setting unless overridden for a pick-up
    delay_overridden: bool = False
    use_timer: bool = True
    pending: PendingPresentation | None = None
    bypass_timer: TimerHandle | None = None
