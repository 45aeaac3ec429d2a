# -*- coding: utf-8 -*-
"""
Wall-clock timer used to benchmark the solvers.
"""

from __future__ import annotations
import time


class Timer:
    """Starts on construction; `elapsed()` returns seconds since the last (re)start."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    def reset(self) -> None:
        self._start = time.perf_counter()

    def elapsed(self) -> float:
        return time.perf_counter() - self._start

    def __enter__(self) -> "Timer":
        self.reset()
        return self

    def __exit__(self, *exc_info) -> None:
        return None
