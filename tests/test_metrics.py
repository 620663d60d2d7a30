import pytest

from procsched import EmptyInputError, SimulationConfig, evaluation, metrics, round_robin, schedulers, workload
from procsched.schedulers import FcfsScheduler, RoundRobinScheduler


def _procs():
    return workload.from_rows([(0, 5, 2), (1, 3, 1), (2, 1, 3)])


def test_fcfs_averages():
    res = FcfsScheduler().simulate(_procs())
    per_process = metrics.build_process_metrics(res.processes)
    agg = metrics.summarise(per_process, res.total_time, res.cpu_busy_time)
    assert agg.count == 3
    assert agg.mean_waiting_time == pytest.approx(10 / 3)
    assert agg.mean_turnaround_time == pytest.approx(19 / 3)
    assert agg.max_waiting_time == 6
    assert agg.cpu_utilization == pytest.approx(1.0)
    assert agg.throughput == pytest.approx(3 / 9)


def test_rr_waiting_time_is_derived():
    res = RoundRobinScheduler(time_quantum=2).simulate(_procs())
    per_process = {m.process_id: m for m in metrics.build_process_metrics(res.processes)}
    assert per_process[1].waiting_time == 4
    assert per_process[3].turnaround_time == 3
    agg = metrics.summarise(list(per_process.values()), res.total_time)
    assert agg.mean_waiting_time == pytest.approx(10 / 3)


def test_unfinished_processes_are_skipped():
    state = round_robin.initial_state(_procs())
    assert metrics.build_process_metrics(state.processes) == []


def test_summarise_empty_raises():
    with pytest.raises(EmptyInputError):
        metrics.summarise([], total_time=0)


def test_evaluate_suite_runs_each_policy_independently():
    procs = workload.random_processes(6, seed=9)
    factories = list(schedulers.REGISTRY.items())
    outcomes = evaluation.evaluate_suite(factories, procs, config=SimulationConfig(time_quantum=2))
    assert [o.name for o in outcomes] == ["FCFS", "RR", "Priority"]
    for outcome in outcomes:
        assert outcome.aggregate.count == 6
        assert len(outcome.per_process) == 6
        ids = {p.process_id for p in outcome.simulation.processes}
        assert ids == {p.process_id for p in procs}
    assert all(o.simulation.processes is not outcomes[0].simulation.processes for o in outcomes[1:])


def test_evaluate_scheduler_on_empty_input_raises():
    with pytest.raises(EmptyInputError):
        evaluation.evaluate_scheduler("FCFS", schedulers.REGISTRY["FCFS"], [])


def test_config_rejects_zero_quantum():
    with pytest.raises(ValueError):
        SimulationConfig(time_quantum=0)
