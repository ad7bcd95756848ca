# clubsim/measure.py
from __future__ import annotations

import logging
import time
from typing import Callable, Protocol, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MeasureSink(Protocol):
    def __call__(self, label: str, thunk: Callable[[], T]) -> T: ...


def estimate_result(label: str, thunk: Callable[[], T]) -> T:
    """
    Run `thunk`, log how long it took under `label`, and hand back its result.

    Observability only: the return value is passed through untouched and any
    exception leaves exactly as it was raised (it is logged at DEBUG first).
    """
    started = time.perf_counter()
    try:
        result = thunk()
    except BaseException:
        elapsed_ms = (time.perf_counter() - started) * 1000.0
        logger.debug("%s: failed after %.3f ms", label, elapsed_ms)
        raise
    elapsed_ms = (time.perf_counter() - started) * 1000.0
    logger.debug("%s: %.3f ms", label, elapsed_ms)
    return result
