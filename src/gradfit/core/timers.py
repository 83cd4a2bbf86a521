from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from typing import Optional


class Timer:
    """Wall-clock stopwatch; `elapsed` keeps running until stop() is called."""

    def __init__(self):
        self.reset()

    def reset(self):
        self._t0 = time.perf_counter()
        self._t1: Optional[float] = None

    def stop(self) -> float:
        self._t1 = time.perf_counter()
        return self.elapsed

    @property
    def elapsed(self) -> float:
        end = self._t1 if self._t1 is not None else time.perf_counter()
        return end - self._t0

    def __repr__(self) -> str:
        return f"{self.elapsed:.3f}s"


@contextmanager
def timed(label: str, logger: Optional[logging.Logger] = None):
    log = logger or logging.getLogger("gradfit.timers")
    t = Timer()
    try:
        yield t
    finally:
        t.stop()
        log.info(f"[timer] {label}: {t}")
