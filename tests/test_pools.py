import random
import re

from concpatterns.pools import run_pools

_LINE = re.compile(r"Job (\d+) completed by worker (\d+) in (\d+)ms")


class _FixedRng:
    def __init__(self, pick=0):
        self.pick = pick

    def randrange(self, stop):
        return min(self.pick, stop - 1)

    def random(self):
        return 0.0


def test_every_job_is_completed_once():
    results = run_pools(2, 5, random.Random(8), 0)
    jobs = sorted(int(_LINE.fullmatch(line).group(1)) for line in results)
    assert jobs == [1, 2, 3, 4, 5]


def test_workers_and_durations_in_range():
    for line in run_pools(3, 6, random.Random(9), 0):
        match = _LINE.fullmatch(line)
        assert 1 <= int(match.group(2)) <= 3
        assert 200 <= int(match.group(3)) < 500


def test_shortest_duration():
    results = run_pools(1, 3, _FixedRng(0), 0)
    assert all(line.endswith("in 200ms") for line in results)
    assert len(results) == 3


def test_no_jobs():
    assert run_pools(3, 0, random.Random(1), 0) == []


def test_summary_printed(capsys):
    run_pools(2, 4, random.Random(3), 0)
    out = capsys.readouterr().out
    assert "Worker pool completed! Processed 4 jobs." in out