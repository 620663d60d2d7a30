from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Sequence

from .process import ProcessSpec, ProcessState, build_states

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExecSlice:
    process_id: int
    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass(slots=True)
class SimulationResult:
    processes: list[ProcessState]
    timeline: list[ExecSlice] = field(default_factory=list)
    total_time: int = 0
    cpu_busy_time: int = 0
    idle_time: int = 0

    @property
    def utilization(self) -> float:
        if self.total_time == 0:
            return 0.0
        return self.cpu_busy_time / self.total_time


@dataclass(slots=True)
class SimulationConfig:
    time_quantum: int = 4

    def __post_init__(self) -> None:
        if self.time_quantum < 1:
            msg = "time_quantum must be at least 1"
            raise ValueError(msg)


class Simulation:
    """Single-clock, run-to-completion simulation over a fixed dispatch order.

    Processes are served exactly in the order given. When the next process has
    not arrived yet the clock jumps forward to its arrival and the gap is
    accounted as idle time.
    """

    def __init__(self, order: Sequence[ProcessSpec]) -> None:
        self._states = build_states(order)
        self._now = 0
        self._idle = 0
        self._busy = 0
        self._timeline: list[ExecSlice] = []

    def run(self) -> SimulationResult:
        for state in self._states:
            if self._now < state.arrival_time:
                logger.debug("CPU idle from %d to %d", self._now, state.arrival_time)
                self._idle += state.arrival_time - self._now
                self._now = state.arrival_time

            state.waiting_time = self._now - state.arrival_time
            start = self._now
            self._now += state.burst_time
            self._busy += state.burst_time
            state.completion_time = self._now
            self._timeline.append(ExecSlice(state.process_id, start, self._now))
            logger.debug(
                "Process %d ran %d-%d, waited %d",
                state.process_id,
                start,
                self._now,
                state.waiting_time,
            )

        return SimulationResult(
            processes=self._states,
            timeline=self._timeline,
            total_time=self._now,
            cpu_busy_time=self._busy,
            idle_time=self._idle,
        )
