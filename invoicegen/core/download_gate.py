from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Optional, Protocol

logger = logging.getLogger(__name__)

DEFAULT_DELAY_MS = 500


class TimerHandle(Protocol):
    def stop(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> TimerHandle: ...


class DownloadState(enum.Enum):
    SUPPRESSED = "suppressed"
    READY = "ready"


class DownloadGate:
    """Debounce between data edits and the export control.

    Every data change moves the gate to SUPPRESSED and restarts the quiet
    period; once *delay_ms* pass with no further change it becomes READY.
    The gate owns at most one pending timer: it is stopped before a new one
    is scheduled.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        delay_ms: int = DEFAULT_DELAY_MS,
        on_state: Optional[Callable[[DownloadState], None]] = None,
    ) -> None:
        self._scheduler = scheduler
        self.delay_ms = int(delay_ms)
        self._on_state = on_state
        self._timer: Optional[TimerHandle] = None
        self._state = DownloadState.SUPPRESSED
        self._data: Any = None

    @property
    def state(self) -> DownloadState:
        return self._state

    @property
    def ready(self) -> bool:
        return self._state is DownloadState.READY

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def bind(self, data: Any) -> None:
        """Track *data*; a new reference restarts the quiet period."""
        if data is self._data and self._timer is not None:
            return
        if data is self._data and self.ready:
            return
        self._data = data
        self._set_state(DownloadState.SUPPRESSED)
        self._restart_timer()

    def cancel(self) -> None:
        if self._timer is not None:
            self._timer.stop()
            self._timer = None

    def _restart_timer(self) -> None:
        self.cancel()
        self._timer = self._scheduler.call_later(self.delay_ms, self._elapsed)

    def _elapsed(self) -> None:
        self._timer = None
        self._set_state(DownloadState.READY)

    def _set_state(self, state: DownloadState) -> None:
        if state is self._state:
            return
        logger.debug("Download gate %s -> %s", self._state.value, state.value)
        self._state = state
        if self._on_state is not None:
            self._on_state(state)
