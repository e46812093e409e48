"""Timer service running on the Qt event loop."""

from typing import Callable

from PySide6.QtCore import QObject, QTimer

from docgate import TimerHandle, TimerService


class QtTimerHandle(TimerHandle):
    """Handle wrapping a single-shot QTimer."""

    def __init__(self, timer: QTimer) -> None:
        self._timer: QTimer | None = timer

    def cancel(self) -> None:
        if self._timer is None:
            return

        self._timer.stop()
        self._timer.deleteLater()
        self._timer = None

    def is_active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def _on_timeout(self) -> None:
        """Release the timer once it has fired."""
        if self._timer is None:
            return

        self._timer.deleteLater()
        self._timer = None


class QtTimerService(TimerService):
    """Schedules single-shot callbacks with QTimer."""

    def __init__(self, parent: QObject | None = None) -> None:
        """
        Initialize the timer service.

        Args:
            parent: Optional owner for the created timers
        """
        self._parent = parent

    def schedule(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(max(0, round(delay * 1000)))
        handle = QtTimerHandle(timer)

        # Release the timer before running the callback so the handle reads as inactive
        timer.timeout.connect(handle._on_timeout)  # pylint: disable=protected-access
        timer.timeout.connect(callback)
        timer.start()
        return handle
