from __future__ import annotations

from collections.abc import Sequence
from random import Random

from .process import ProcessSpec, by_arrival

ARRIVAL_RANGE = (0, 10)
BURST_RANGE = (1, 20)
PRIORITY_RANGE = (1, 10)


def random_processes(
    count: int,
    *,
    seed: int | None = None,
    rng: Random | None = None,
    arrival_range: tuple[int, int] = ARRIVAL_RANGE,
    burst_range: tuple[int, int] = BURST_RANGE,
    priority_range: tuple[int, int] = PRIORITY_RANGE,
) -> list[ProcessSpec]:
    """Generate ``count`` processes with inclusive uniform attributes.

    Ids follow generation order (1..count); the result is stable-sorted by
    arrival time. Pass ``rng`` to share a random source, or ``seed`` for a
    reproducible one.
    """

    if count < 0:
        msg = "count cannot be negative"
        raise ValueError(msg)
    _check_range("arrival_range", arrival_range, minimum=0)
    _check_range("burst_range", burst_range, minimum=1)
    _check_range("priority_range", priority_range, minimum=1)

    source = rng if rng is not None else Random(seed)
    processes: list[ProcessSpec] = []
    for i in range(count):
        processes.append(
            ProcessSpec(
                process_id=i + 1,
                arrival_time=source.randint(*arrival_range),
                burst_time=source.randint(*burst_range),
                priority=source.randint(*priority_range),
            ),
        )
    return by_arrival(processes)


def from_rows(rows: Sequence[tuple[int, int] | tuple[int, int, int]]) -> list[ProcessSpec]:
    """Build processes from ``(arrival, burst[, priority])`` rows, ids 1..n."""

    processes = []
    for idx, row in enumerate(rows):
        arrival, burst, *rest = row
        priority = rest[0] if rest else 1
        processes.append(ProcessSpec(process_id=idx + 1, arrival_time=arrival, burst_time=burst, priority=priority))
    return by_arrival(processes)


def _check_range(name: str, bounds: tuple[int, int], *, minimum: int) -> None:
    low, high = bounds
    if low < minimum or high < low:
        msg = f"{name} must satisfy {minimum} <= low <= high"
        raise ValueError(msg)
