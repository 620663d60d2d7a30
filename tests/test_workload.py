from random import Random

import pytest

from procsched import workload


def test_random_processes_respect_ranges():
    procs = workload.random_processes(200, seed=7)
    assert len(procs) == 200
    assert all(0 <= p.arrival_time <= 10 for p in procs)
    assert all(1 <= p.burst_time <= 20 for p in procs)
    assert all(1 <= p.priority <= 10 for p in procs)
    assert sorted(p.process_id for p in procs) == list(range(1, 201))


def test_random_processes_sorted_stably_by_arrival():
    procs = workload.random_processes(50, seed=3)
    arrivals = [p.arrival_time for p in procs]
    assert arrivals == sorted(arrivals)
    for a, b in zip(procs, procs[1:]):
        if a.arrival_time == b.arrival_time:
            assert a.process_id < b.process_id


def test_seed_is_reproducible():
    assert workload.random_processes(10, seed=42) == workload.random_processes(10, seed=42)


def test_injected_rng_is_used():
    first = workload.random_processes(5, rng=Random(1))
    second = workload.random_processes(5, rng=Random(1))
    assert first == second


def test_zero_count_gives_empty_list():
    assert workload.random_processes(0, seed=1) == []


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        workload.random_processes(-1)


def test_bad_burst_range_rejected():
    with pytest.raises(ValueError):
        workload.random_processes(3, burst_range=(0, 5))


def test_from_rows_assigns_ids_and_sorts():
    procs = workload.from_rows([(4, 2, 3), (0, 5)])
    assert [(p.process_id, p.arrival_time, p.burst_time, p.priority) for p in procs] == [
        (2, 0, 5, 1),
        (1, 4, 2, 3),
    ]
