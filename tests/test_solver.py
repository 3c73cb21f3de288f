import itertools
import random

import pytest

from pushswap.solver import main, solve
from pushswap.stacks import Operation, Stacks


def _replay(values, ops):
    stacks = Stacks(values)
    for op in ops:
        stacks.apply(op)
    return stacks


def _small_then_big(seed, count):
    rng = random.Random(seed)
    smalls = list(range(-count, 0))
    rng.shuffle(smalls)
    return smalls + [1000, 2000, 3000]


def test_already_sorted_needs_no_operations():
    assert solve([1, 2, 3, 4, 5]) == []


def test_single_value_needs_no_operations():
    assert solve([42]) == []


def test_two_values():
    assert solve([2, 1]) == [Operation.SA, Operation.RRA, Operation.SA]


def test_three_values_highest_on_top():
    assert solve([3, 2, 1]) == [Operation.RA, Operation.SA]


def test_three_values_only_swap():
    assert solve([2, 1, 3]) == [Operation.SA]


@pytest.mark.parametrize("values", list(itertools.permutations([7, -3, 12])))
def test_every_permutation_of_three_is_sorted(values):
    ops = solve(values)
    stacks = _replay(values, ops)
    assert stacks.is_sorted()
    assert len(ops) <= 2


@pytest.mark.parametrize("values", list(itertools.permutations([1, 2, 3, 4, 5])))
def test_five_values_keep_all_values_and_empty_b(values):
    ops = solve(values)
    stacks = _replay(values, ops)
    assert list(stacks.b) == []
    assert sorted(stacks.a) == sorted(values)
    assert ops.count(Operation.PA) == ops.count(Operation.PB)


@pytest.mark.parametrize("seed", range(8))
def test_small_values_before_large_tail_get_sorted(seed):
    values = _small_then_big(seed, 20)
    ops = solve(values)
    assert _replay(values, ops).is_sorted()


@pytest.mark.parametrize("seed", range(5))
def test_random_inputs_keep_values(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-500, 500), 60)
    ops = solve(values)
    stacks = _replay(values, ops)
    assert list(stacks.b) == []
    assert sorted(stacks.a) == sorted(values)


def test_solve_is_deterministic():
    values = [5, -1, 9, 3, 0, 12, -7]
    first = solve(list(values))
    second = solve(list(values))
    assert first == second
    assert len(first) > 0
    stacks = _replay(values, first)
    assert list(stacks.b) == []
    assert sorted(stacks.a) == sorted(values)


def test_duplicates_rejected():
    with pytest.raises(ValueError):
        solve([1, 2, 1])


def test_main_without_arguments(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_main_empty_argument_reports_error(capsys):
    assert main([""]) == 0
    assert capsys.readouterr().err == "Error\n"


@pytest.mark.parametrize("args", [["1", "a"], ["1", "1"], ["2147483648"], ["   "]])
def test_main_invalid_input(args, capsys):
    assert main(args) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_main_sorted_input_prints_nothing(capsys):
    assert main(["1 2", "3"]) == 0
    assert capsys.readouterr().out == ""


def test_main_prints_solution(capsys):
    values = _small_then_big(3, 10)
    assert main([" ".join(str(v) for v in values)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [str(op) for op in solve(values)]
    assert _replay(values, lines).is_sorted()