from __future__ import annotations

import time
from typing import Callable, Optional


def measure_duration(
    action: Callable[[], None],
    label: Optional[str] = None,
    echo: Callable[[str], None] = print,
    clock: Callable[[], float] = time.perf_counter,
) -> float:
    """
    Run ``action`` and return the elapsed wall-clock time in milliseconds.

    When ``label`` is given a ``"<label> in <ms> ms"`` line is emitted through
    ``echo``. Exceptions raised by ``action`` propagate and nothing is emitted.
    """
    started = clock()
    action()
    duration = max(0.0, (clock() - started) * 1000.0)
    if label is not None:
        echo(f"{label} in {duration} ms")
    return duration
