import time
from typing import Callable, Optional


class PracticeTimer:
    """Pausable elapsed-time counter; time accumulates across start/stop."""
    def __init__(self, clock: Callable[[], float] = time.monotonic):
        self.clock = clock
        self._started_at: Optional[float] = None
        self._accumulated = 0.0

    @property
    def running(self) -> bool:
        return self._started_at is not None

    def start(self):
        if self._started_at is None:
            self._started_at = self.clock()

    def stop(self):
        if self._started_at is None:
            return
        self._accumulated += self.clock() - self._started_at
        self._started_at = None

    def toggle(self):
        if self.running:
            self.stop()
        else:
            self.start()

    def reset(self):
        self._started_at = None
        self._accumulated = 0.0

    def elapsed(self) -> float:
        if self._started_at is None:
            return self._accumulated
        return self._accumulated + (self.clock() - self._started_at)


def format_elapsed(seconds: float) -> str:
    total = int(seconds)
    return f"{total // 60:02d}:{total % 60:02d}"
