"""Round Robin state machine.

The run is modelled as an explicit :class:`RoundRobinState` advanced by
:func:`step`. Processes live in an index arena (``state.processes``) and the
ready queue holds indices into it, so copying the input never leaves the queue
pointing at stale objects.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Sequence

from .process import ProcessSpec, ProcessState, build_states
from .simulator import ExecSlice, SimulationResult

logger = logging.getLogger(__name__)

DEFAULT_TIME_QUANTUM = 4


@dataclass(slots=True)
class RoundRobinState:
    processes: list[ProcessState]
    clock: int = 0
    ready_queue: deque[int] = field(default_factory=deque)
    admitted: list[bool] = field(default_factory=list)
    completed: int = 0
    idle_time: int = 0
    timeline: list[ExecSlice] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.admitted:
            self.admitted = [False] * len(self.processes)

    @property
    def finished(self) -> bool:
        return not self.ready_queue and self.completed == len(self.processes)


def initial_state(specs: Sequence[ProcessSpec]) -> RoundRobinState:
    """Build a fresh state; processes are stable-sorted by arrival time."""

    ordered = sorted(specs, key=lambda spec: spec.arrival_time)
    state = RoundRobinState(processes=build_states(ordered))
    _admit_arrivals(state)
    return state


def step(state: RoundRobinState, quantum: int = DEFAULT_TIME_QUANTUM) -> ExecSlice | None:
    """Advance the state by one scheduling decision.

    Returns the executed slice, or ``None`` when the CPU idled for one tick.
    """

    if quantum < 1:
        msg = "quantum must be at least 1"
        raise ValueError(msg)

    _admit_arrivals(state)

    if not state.ready_queue:
        state.clock += 1
        state.idle_time += 1
        logger.debug("CPU idle at %d", state.clock - 1)
        return None

    index = state.ready_queue.popleft()
    current = state.processes[index]
    run_time = min(quantum, current.remaining_time)
    start = state.clock
    current.record_run(run_time)
    state.clock += run_time
    executed = ExecSlice(current.process_id, start, state.clock)
    state.timeline.append(executed)
    logger.debug(
        "Process %d: Time %d, Remaining Time = %d",
        current.process_id,
        state.clock,
        current.remaining_time,
    )

    # Arrivals during the slice queue ahead of the preempted process.
    _admit_arrivals(state)

    if current.is_complete():
        current.completion_time = state.clock
        current.waiting_time = state.clock - current.arrival_time - current.burst_time
        state.completed += 1
    else:
        state.ready_queue.append(index)
    return executed


def run(specs: Sequence[ProcessSpec], quantum: int = DEFAULT_TIME_QUANTUM) -> SimulationResult:
    state = initial_state(specs)
    while not state.finished:
        step(state, quantum)
    busy = sum(s.duration for s in state.timeline)
    return SimulationResult(
        processes=state.processes,
        timeline=state.timeline,
        total_time=state.clock,
        cpu_busy_time=busy,
        idle_time=state.idle_time,
    )


def _admit_arrivals(state: RoundRobinState) -> None:
    for index, process in enumerate(state.processes):
        if state.admitted[index] or process.arrival_time > state.clock:
            continue
        state.admitted[index] = True
        state.ready_queue.append(index)
