import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.algorithms import DuplicateValueError
from pushswap.cli import main, push_swap, sort
from pushswap.ringdeque import RingDeque


def _is_subsequence(small, big):
    it = iter(big)
    return all(any(x == y for y in it) for x in small)


def _output_numbers(captured):
    return [int(line) for line in captured.out.splitlines()]


def test_no_arguments_prints_nothing(capsys):
    assert main([]) == 0
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err == ""


def test_invalid_argument_reports_error(capsys):
    assert main(["1", "two", "3"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_trailing_garbage_is_invalid(capsys):
    assert main(["12a"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_duplicate_reports_error(capsys):
    assert main(["5", "3", "5"]) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error\n"
    assert captured.out == ""


def test_duplicate_after_sign_normalisation(capsys):
    assert main(["+7", "7"]) == 1
    assert capsys.readouterr().err == "Error\n"


def test_sorted_input_prints_all_ranks(capsys):
    assert main(["10", "20", "30"]) == 0
    captured = capsys.readouterr()
    assert captured.out == "0\n1\n2\n"
    assert captured.err == ""


def test_output_is_increasing_subsequence_of_ranks(capsys):
    args = ["4", "-1", "9", "2", "7", "0"]
    assert main(args) == 0
    numbers = _output_numbers(capsys.readouterr())
    ranks = sorted(range(len(args)), key=lambda i: int(args[i]))
    rank_of = [0] * len(args)
    for rank, index in enumerate(ranks):
        rank_of[index] = rank
    assert all(a < b for a, b in zip(numbers, numbers[1:]))
    assert _is_subsequence(numbers, rank_of)


def test_push_swap_raises_on_duplicates():
    with pytest.raises(DuplicateValueError):
        push_swap([1, 2, 1])


def test_push_swap_returns_what_it_prints(capsys):
    result = push_swap([3, 1, 2])
    assert _output_numbers(capsys.readouterr()) == result


def test_push_swap_handles_more_values_than_default_limit(capsys):
    values = list(range(1500))
    result = push_swap(values)
    assert result == values
    assert len(capsys.readouterr().out.splitlines()) == 1500


def test_sort_limits_to_stack_size(capsys):
    stack_a = RingDeque()
    stack_b = RingDeque()
    stack_a.push_front(0)
    stack_a.push_front(1)
    result = sort(stack_a, stack_b, [0, 1, 2, 3])
    assert result == [0, 1]
    assert len(stack_b) == 0
    assert _output_numbers(capsys.readouterr()) == result


@given(st.lists(st.integers(-(2**31), 2**31 - 1), unique=True, max_size=40))
def test_result_is_increasing_subsequence(values):
    result = push_swap(values)
    ranked = sorted(values)
    ranks = [ranked.index(v) for v in values]
    assert all(a < b for a, b in zip(result, result[1:]))
    assert _is_subsequence(result, ranks)
    assert (len(result) > 0) == (len(values) > 0)