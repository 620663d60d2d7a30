from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .errors import InvalidProcessError


@dataclass(frozen=True, slots=True)
class ProcessSpec:
    """Immutable process description shared by every simulation run."""

    process_id: int
    arrival_time: int
    burst_time: int
    priority: int = 1

    def __post_init__(self) -> None:
        if self.process_id < 1:
            msg = "process_id must be a positive integer"
            raise InvalidProcessError(msg)
        if self.arrival_time < 0:
            msg = "arrival_time cannot be negative"
            raise InvalidProcessError(msg)
        if self.burst_time <= 0:
            msg = "burst_time must be strictly positive"
            raise InvalidProcessError(msg)
        if self.priority < 1:
            msg = "priority must be a positive integer"
            raise InvalidProcessError(msg)


@dataclass(slots=True)
class ProcessState:
    """Mutable per-run state for a process."""

    spec: ProcessSpec
    remaining_time: int
    waiting_time: Optional[int] = None
    completion_time: Optional[int] = None

    @classmethod
    def from_spec(cls, spec: ProcessSpec) -> ProcessState:
        return cls(spec=spec, remaining_time=spec.burst_time)

    def record_run(self, delta: int) -> None:
        self.remaining_time -= delta

    def is_complete(self) -> bool:
        return self.remaining_time <= 0

    @property
    def process_id(self) -> int:
        return self.spec.process_id

    @property
    def arrival_time(self) -> int:
        return self.spec.arrival_time

    @property
    def burst_time(self) -> int:
        return self.spec.burst_time

    @property
    def priority(self) -> int:
        return self.spec.priority

    @property
    def turnaround_time(self) -> Optional[int]:
        if self.completion_time is None:
            return None
        return self.completion_time - self.arrival_time


def build_states(specs: Iterable[ProcessSpec]) -> list[ProcessState]:
    """Create fresh run states, rejecting duplicate process ids."""

    states: list[ProcessState] = []
    seen: set[int] = set()
    for spec in specs:
        if spec.process_id in seen:
            msg = f"duplicate process_id {spec.process_id}"
            raise InvalidProcessError(msg)
        seen.add(spec.process_id)
        states.append(ProcessState.from_spec(spec))
    return states


def by_arrival(specs: Iterable[ProcessSpec]) -> list[ProcessSpec]:
    """Stable sort on arrival time; input order breaks ties."""

    return sorted(specs, key=lambda spec: spec.arrival_time)
