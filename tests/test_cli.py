import pytest

from procsched.__main__ import main, parse_arguments, parse_policies


def test_defaults_match_original_program():
    args = parse_arguments([])
    assert args.processes == 7
    assert args.quantum == 4
    assert parse_policies(args.policies) == ["FCFS", "RR", "Priority"]


def test_main_prints_every_policy(capsys):
    main(["--processes", "4", "--seed", "3", "--quantum", "2"])
    out = capsys.readouterr().out
    assert "Generated Processes" in out
    for name in ("FCFS", "RR", "Priority"):
        assert f"{name} Average Waiting Time:" in out
        assert f"{name} Average Turnaround Time:" in out
    assert "Priority = " in out


def test_main_is_reproducible_with_seed(capsys):
    main(["--seed", "12"])
    first = capsys.readouterr().out
    main(["--seed", "12"])
    assert capsys.readouterr().out == first


def test_zero_processes_rejected():
    with pytest.raises(SystemExit):
        parse_arguments(["--processes", "0"])


def test_unknown_policy_rejected():
    with pytest.raises(ValueError):
        parse_policies("FCFS,MLFQ")
