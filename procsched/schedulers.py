from __future__ import annotations

from collections.abc import Callable
from typing import Sequence

from . import round_robin
from .process import ProcessSpec, by_arrival
from .scheduler import Scheduler
from .simulator import Simulation, SimulationConfig, SimulationResult


class FcfsScheduler(Scheduler):
    """Non-preemptive First-Come, First-Served scheduler."""

    name = "FCFS"

    def simulate(self, processes: Sequence[ProcessSpec]) -> SimulationResult:
        return Simulation(self.dispatch_order(processes)).run()


class PriorityScheduler(Scheduler):
    """Non-preemptive priority scheduler; a lower value runs first.

    The order is fixed once, up front, by a stable sort on priority over the
    arrival-ordered input, so equal priorities keep their arrival order. A
    process that arrives later with a better priority does not jump ahead of
    one already placed before it.
    """

    name = "Priority"

    def dispatch_order(self, processes: Sequence[ProcessSpec]) -> list[ProcessSpec]:
        return sorted(by_arrival(processes), key=lambda spec: spec.priority)

    def simulate(self, processes: Sequence[ProcessSpec]) -> SimulationResult:
        return Simulation(self.dispatch_order(processes)).run()


class RoundRobinScheduler(Scheduler):
    """Preemptive Round Robin scheduler with a fixed time quantum."""

    name = "RR"

    def __init__(self, time_quantum: int = round_robin.DEFAULT_TIME_QUANTUM) -> None:
        if time_quantum < 1:
            msg = "time_quantum must be at least 1"
            raise ValueError(msg)
        self.time_quantum = time_quantum

    def simulate(self, processes: Sequence[ProcessSpec]) -> SimulationResult:
        return round_robin.run(processes, self.time_quantum)


SchedulerFactory = Callable[[SimulationConfig], Scheduler]

REGISTRY: dict[str, SchedulerFactory] = {
    "FCFS": lambda config: FcfsScheduler(),
    "RR": lambda config: RoundRobinScheduler(time_quantum=config.time_quantum),
    "Priority": lambda config: PriorityScheduler(),
}


def create(name: str, config: SimulationConfig | None = None) -> Scheduler:
    try:
        factory = REGISTRY[name]
    except KeyError:
        msg = f"unknown policy {name!r}; expected one of {', '.join(REGISTRY)}"
        raise ValueError(msg) from None
    return factory(config or SimulationConfig())
