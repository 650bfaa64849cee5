import io
import sys

import pytest

from kyopro.contest import (
    INF,
    harmonic_expectation,
    main,
    min_pair_time,
    min_window_mex,
    pairwise_square_sum,
)


def test_min_pair_time_single_worker():
    assert min_pair_time([4], [9]) == 4 + 9


def test_min_pair_time_empty_is_inf():
    assert min_pair_time([], []) == INF


def test_min_pair_time_split_is_better():
    assert min_pair_time([3, 10], [10, 3]) == 3


def test_min_pair_time_bounded_by_together():
    a = [5, 8, 2, 7]
    b = [6, 1, 9, 4]
    result = min_pair_time(a, b)
    assert result <= min(x + y for x, y in zip(a, b))
    assert result >= min(min(a), min(b))


def test_min_pair_time_length_mismatch():
    with pytest.raises(ValueError):
        min_pair_time([1, 2], [1])


def test_pairwise_square_sum_two_values():
    assert pairwise_square_sum([2, 7]) == (2 - 7) ** 2


def test_pairwise_square_sum_equal_values_zero():
    assert pairwise_square_sum([5, 5, 5, 5]) == 0


def test_pairwise_square_sum_shift_and_scale():
    values = [1, -4, 9, 9, 0, 3]
    base = pairwise_square_sum(values)
    assert pairwise_square_sum([v + 100 for v in values]) == base
    assert pairwise_square_sum([3 * v for v in values]) == 9 * base
    assert pairwise_square_sum(list(reversed(values))) == base


def test_harmonic_expectation_small():
    assert harmonic_expectation(1) == 0.0
    assert harmonic_expectation(2) == pytest.approx(2.0)


def test_harmonic_expectation_increasing():
    results = [harmonic_expectation(n) for n in range(1, 30)]
    assert all(x < y for x, y in zip(results, results[1:]))


def _check_mex(values, m, r):
    windows = [values[i : i + m] for i in range(len(values) - m + 1)]
    assert any(r not in w for w in windows)
    assert all(k in w for k in range(r) for w in windows)


@pytest.mark.parametrize(
    "values,m",
    [
        ([0, 1, 2, 0, 1, 2], 3),
        ([0, 0, 1, 0, 2, 1, 0], 2),
        ([3, 0, 1, 2, 0, 4, 1], 4),
        ([1, 1, 1], 2),
        ([0, 1, 0, 1, 0], 5),
    ],
)
def test_min_window_mex_property(values, m):
    _check_mex(values, m, min_window_mex(values, m))


def test_min_window_mex_missing_zero():
    assert min_window_mex([1, 1, 1], 2) == 0


def test_min_window_mex_bad_window():
    with pytest.raises(ValueError):
        min_window_mex([0, 1], 3)


def _run(monkeypatch, capsys, problem, text):
    monkeypatch.setattr(sys, "stdin", io.StringIO(text))
    assert main([problem]) == 0
    return capsys.readouterr().out.strip()


def test_main_b(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, "b", "2\n3 10\n10 3\n") == "3"


def test_main_c(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, "c", "2\n2 7\n") == str((2 - 7) ** 2)


def test_main_d(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, "d", "2\n") == "2.0000000000"


def test_main_e(monkeypatch, capsys):
    assert _run(monkeypatch, capsys, "e", "3 2\n1 1 1\n") == "0"


def test_main_short_input(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("3\n1 2\n"))
    with pytest.raises(SystemExit):
        main(["c"])