import random

import pytest

from concpatterns.pipeline import add_ten, generate_numbers, run_pipeline, square


class _FixedRng:
    def __init__(self, pick=0):
        self.pick = pick

    def randrange(self, stop):
        return min(self.pick, stop - 1)

    def random(self):
        return 0.0


def test_square_squares_each_value():
    assert list(square([1, 2, 3], time_scale=0)) == [1, 4, 9]


def test_add_ten_adds_ten():
    assert list(add_ten([0, 5], time_scale=0)) == [10, 15]


def test_generate_numbers_stays_in_range():
    values = list(generate_numbers(50, random.Random(3), 0))
    assert len(values) == 50
    assert all(1 <= value <= 10 for value in values)


def test_generate_numbers_upper_bound():
    values = list(generate_numbers(4, _FixedRng(pick=99), 0))
    assert values == [10, 10, 10, 10]


def test_run_pipeline_matches_chained_stages():
    expected = list(add_ten(square(generate_numbers(6, random.Random(11), 0), 0), 0))
    assert run_pipeline(6, random.Random(11), 0) == expected


def test_run_pipeline_empty():
    assert run_pipeline(0, random.Random(1), 0) == []


def test_stage_error_reaches_consumer():
    with pytest.raises(TypeError):
        list(square(["x"], time_scale=0))


def test_run_pipeline_reports_completion(capsys):
    results = run_pipeline(2, random.Random(5), 0)
    out = capsys.readouterr().out
    assert "Pipeline completed!" in out
    assert out.count("Result: ") == len(results)