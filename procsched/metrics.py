from __future__ import annotations

from dataclasses import dataclass
from statistics import mean
from typing import Iterable, Sequence

from .errors import EmptyInputError
from .process import ProcessState


@dataclass(slots=True)
class ProcessMetrics:
    process_id: int
    arrival_time: int
    burst_time: int
    priority: int
    waiting_time: int
    completion_time: int
    turnaround_time: int


@dataclass(slots=True)
class AggregateMetrics:
    count: int
    mean_waiting_time: float
    mean_turnaround_time: float
    max_waiting_time: int
    throughput: float
    cpu_utilization: float


def build_process_metrics(processes: Iterable[ProcessState]) -> list[ProcessMetrics]:
    """Per-process records, in run order; unfinished processes are skipped."""

    metrics: list[ProcessMetrics] = []
    for process in processes:
        if process.completion_time is None:
            continue
        turnaround = process.completion_time - process.arrival_time
        waiting = turnaround - process.burst_time
        metrics.append(
            ProcessMetrics(
                process_id=process.process_id,
                arrival_time=process.arrival_time,
                burst_time=process.burst_time,
                priority=process.priority,
                waiting_time=waiting,
                completion_time=process.completion_time,
                turnaround_time=turnaround,
            ),
        )
    return metrics


def summarise(metrics: Sequence[ProcessMetrics], total_time: int, cpu_busy_time: int | None = None) -> AggregateMetrics:
    if not metrics:
        msg = "cannot average metrics over zero processes"
        raise EmptyInputError(msg)
    busy = cpu_busy_time if cpu_busy_time is not None else sum(m.burst_time for m in metrics)
    return AggregateMetrics(
        count=len(metrics),
        mean_waiting_time=float(mean(m.waiting_time for m in metrics)),
        mean_turnaround_time=float(mean(m.turnaround_time for m in metrics)),
        max_waiting_time=max(m.waiting_time for m in metrics),
        throughput=len(metrics) / total_time if total_time else 0.0,
        cpu_utilization=busy / total_time if total_time else 0.0,
    )
