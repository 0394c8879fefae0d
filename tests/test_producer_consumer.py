import random

import pytest

from concpatterns.producer_consumer import run_producer_consumer


class _FixedRng:
    def __init__(self, pick=0):
        self.pick = pick

    def randrange(self, stop):
        return min(self.pick, stop - 1)

    def random(self):
        return 0.0


def test_all_items_consumed():
    consumed = run_producer_consumer(5, 2, 3, 4, random.Random(1), 0)
    assert len(consumed) == 2 * 4
    assert all(0 <= item < 100 for item in consumed)


def test_items_pass_through_unchanged():
    consumed = run_producer_consumer(2, 3, 2, 5, _FixedRng(42), 0)
    assert consumed == [42] * 15


def test_zero_buffer_still_works():
    consumed = run_producer_consumer(0, 1, 1, 3, random.Random(2), 0)
    assert len(consumed) == 3


def test_negative_buffer_rejected():
    with pytest.raises(ValueError):
        run_producer_consumer(-1, 1, 1, 1, random.Random(0), 0)


def test_consumers_required():
    with pytest.raises(ValueError):
        run_producer_consumer(5, 1, 0, 1, random.Random(0), 0)