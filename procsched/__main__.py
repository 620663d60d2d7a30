from __future__ import annotations

import argparse
import logging
from typing import Sequence

from . import evaluation, schedulers, workload
from .process import ProcessSpec
from .simulator import SimulationConfig


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate FCFS, Round Robin and Priority CPU scheduling.")
    parser.add_argument("--processes", type=positive_int, default=7, help="Number of random processes to generate.")
    parser.add_argument("--quantum", type=positive_int, default=4, help="Round Robin time quantum (time units).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for process generation.")
    parser.add_argument(
        "--policies",
        type=str,
        default="FCFS,RR,Priority",
        help=f"Comma-separated policies to run, from: {', '.join(schedulers.REGISTRY)}.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity; DEBUG traces every executed slice.",
    )
    return parser.parse_args(argv)


def positive_int(raw: str) -> int:
    value = int(raw)
    if value < 1:
        msg = f"expected a positive integer, got {raw}"
        raise argparse.ArgumentTypeError(msg)
    return value


def parse_policies(raw: str) -> list[str]:
    names = [item.strip() for item in raw.split(",") if item.strip()]
    if not names:
        msg = "policies must name at least one scheduler"
        raise ValueError(msg)
    unknown = [name for name in names if name not in schedulers.REGISTRY]
    if unknown:
        msg = f"unknown policies: {', '.join(unknown)}"
        raise ValueError(msg)
    return names


def print_processes(processes: Sequence[ProcessSpec]) -> None:
    print("\n*---- Generated Processes ----*")
    for p in processes:
        print(f"Process {p.process_id}: Arrival = {p.arrival_time}, Burst = {p.burst_time}, Priority = {p.priority}")


def print_outcome(outcome: evaluation.EvaluationOutcome) -> None:
    print(f"\n*---- {outcome.name} Scheduling ----*")
    show_priority = outcome.name == "Priority"
    for m in outcome.per_process:
        fields = [f"Arrival = {m.arrival_time}", f"Burst = {m.burst_time}"]
        if show_priority:
            fields.append(f"Priority = {m.priority}")
        fields.append(f"Waiting Time = {m.waiting_time}")
        fields.append(f"Completion Time = {m.completion_time}")
        print(f"Process {m.process_id}: " + ", ".join(fields))
    print(f"\n{outcome.name} Average Waiting Time: {outcome.aggregate.mean_waiting_time:.2f}")
    print(f"{outcome.name} Average Turnaround Time: {outcome.aggregate.mean_turnaround_time:.2f}")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_arguments(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")
    policies = parse_policies(args.policies)

    processes = workload.random_processes(args.processes, seed=args.seed)
    config = SimulationConfig(time_quantum=args.quantum)
    factories = [(name, schedulers.REGISTRY[name]) for name in policies]

    print_processes(processes)
    outcomes = evaluation.evaluate_suite(factories, processes, config=config)
    for outcome in outcomes:
        print_outcome(outcome)

    print(f"\nSimulated {len(processes)} processes with quantum {args.quantum}\n")
    header_fmt = "{:<10} {:>9} {:>9} {:>8} {:>6} {:>10}"
    row_fmt = "{:<10} {:>9.2f} {:>9.2f} {:>8d} {:>6d} {:>10.3f}"
    print(header_fmt.format("Scheduler", "MeanWait", "MeanTurn", "MaxWait", "End", "Throughput"))
    for outcome in outcomes:
        m = outcome.aggregate
        print(
            row_fmt.format(
                outcome.name,
                m.mean_waiting_time,
                m.mean_turnaround_time,
                m.max_waiting_time,
                outcome.simulation.total_time,
                m.throughput,
            ),
        )


if __name__ == "__main__":
    main()
