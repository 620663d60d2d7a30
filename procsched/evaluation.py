from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from . import metrics
from .process import ProcessSpec
from .schedulers import SchedulerFactory
from .simulator import SimulationConfig, SimulationResult

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class EvaluationOutcome:
    name: str
    simulation: SimulationResult
    per_process: list[metrics.ProcessMetrics]
    aggregate: metrics.AggregateMetrics


def evaluate_scheduler(
    name: str,
    factory: SchedulerFactory,
    processes: Sequence[ProcessSpec],
    *,
    config: SimulationConfig | None = None,
) -> EvaluationOutcome:
    scheduler = factory(config or SimulationConfig())
    result = scheduler.simulate(processes)
    per_process = metrics.build_process_metrics(result.processes)
    aggregate = metrics.summarise(per_process, result.total_time, result.cpu_busy_time)
    logger.info(
        "%s finished %d processes at t=%d (mean wait %.2f, mean turnaround %.2f)",
        name,
        aggregate.count,
        result.total_time,
        aggregate.mean_waiting_time,
        aggregate.mean_turnaround_time,
    )
    return EvaluationOutcome(name=name, simulation=result, per_process=per_process, aggregate=aggregate)


def evaluate_suite(
    factories: Sequence[tuple[str, SchedulerFactory]],
    processes: Sequence[ProcessSpec],
    *,
    config: SimulationConfig | None = None,
) -> list[EvaluationOutcome]:
    return [evaluate_scheduler(name, factory, processes, config=config) for name, factory in factories]
