from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from .process import ProcessSpec
from .simulator import SimulationResult


class Scheduler(ABC):
    """Abstract scheduling policy that simulates a whole process set."""

    name: str = "scheduler"

    @abstractmethod
    def simulate(self, processes: Sequence[ProcessSpec]) -> SimulationResult:
        """Run the policy to completion over a private copy of the processes."""

    def dispatch_order(self, processes: Sequence[ProcessSpec]) -> list[ProcessSpec]:
        """Order in which a non-preemptive policy serves the processes."""
        return sorted(processes, key=lambda spec: spec.arrival_time)
