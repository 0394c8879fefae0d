import random
import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from concpatterns.resource_pooling import Resource, ResourcePool, run_resource_pooling


def test_initial_resources_are_reused_before_creating():
    pool = ResourcePool(2, 4)
    first = pool.acquire()
    second = pool.acquire()
    assert {first.id, second.id} == {1, 2}
    assert pool.created == 2


def test_new_resources_created_up_to_max():
    pool = ResourcePool(1, 3)
    ids = [pool.acquire().id for _ in range(3)]
    assert sorted(ids) == [1, 2, 3]
    assert pool.created == pool.max_size


def test_released_resource_is_handed_out_again():
    pool = ResourcePool(0, 1)
    resource = pool.acquire()
    assert pool.release(resource) is True
    assert pool.acquire() is resource


def test_acquire_waits_for_release_when_exhausted():
    pool = ResourcePool(0, 1)
    held = pool.acquire()
    got = []
    waiter = threading.Thread(target=lambda: got.append(pool.acquire()))
    waiter.start()
    time.sleep(0.1)
    assert got == []
    pool.release(held)
    waiter.join(timeout=2)
    assert got == [held]


def test_release_into_full_pool_discards():
    pool = ResourcePool(2, 2)
    assert pool.release(Resource(99)) is False
    assert pool.idle == 2


def test_close_wakes_waiters_with_error():
    pool = ResourcePool(0, 1)
    pool.acquire()
    with ThreadPoolExecutor(max_workers=1) as executor:
        future = executor.submit(pool.acquire)
        time.sleep(0.05)
        assert future.done() is False
        pool.close()
        with pytest.raises(RuntimeError):
            future.result(timeout=2)


def test_closed_pool_rejects_use():
    pool = ResourcePool(1, 1)
    resource = pool.acquire()
    pool.close()
    with pytest.raises(RuntimeError):
        pool.acquire()
    with pytest.raises(RuntimeError):
        pool.release(resource)
    with pytest.raises(RuntimeError):
        pool.close()


@pytest.mark.parametrize("initial, max_size", [(-1, 2), (3, 2)])
def test_invalid_sizes_rejected(initial, max_size):
    with pytest.raises(ValueError):
        ResourcePool(initial, max_size)


def test_run_resource_pooling_stays_within_limits():
    created = run_resource_pooling(random.Random(5), time_scale=0.01)
    assert 3 <= created["db"] <= 5
    assert 2 <= created["http"] <= 4