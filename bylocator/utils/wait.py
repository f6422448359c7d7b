from __future__ import annotations

import time
from typing import Callable, TypeVar

T = TypeVar("T")


def wait_until(
    predicate: Callable[[], T],
    timeout: float,
    interval: float = 0.2,
    *,
    clock: Callable[[], float] = time.monotonic,
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Polls ``predicate`` until it returns a truthy value or ``timeout`` elapses.

    The predicate runs at least once, so a zero timeout means a single attempt.
    The last result is returned either way.
    """

    deadline = clock() + timeout
    while True:
        result = predicate()
        remaining = deadline - clock()
        if result or remaining <= 0:
            return result
        sleep(min(interval, remaining))
