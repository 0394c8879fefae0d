import pytest

from concpatterns.pubsub import Broadcaster, run_pubsub


def test_each_subscriber_gets_every_message():
    broadcaster = Broadcaster()
    first = broadcaster.subscribe()
    second = broadcaster.subscribe()
    broadcaster.publish("a")
    broadcaster.publish("b")
    broadcaster.close()
    assert list(first) == ["a", "b"]
    assert list(second) == ["a", "b"]


def test_publish_after_close_is_ignored():
    broadcaster = Broadcaster()
    messages = broadcaster.subscribe()
    broadcaster.publish("kept")
    broadcaster.close()
    broadcaster.publish("dropped")
    assert list(messages) == ["kept"]


def test_close_twice_is_harmless():
    broadcaster = Broadcaster()
    messages = broadcaster.subscribe()
    broadcaster.close()
    broadcaster.close()
    assert list(messages) == []


def test_subscribe_after_close_rejected():
    broadcaster = Broadcaster()
    broadcaster.close()
    with pytest.raises(RuntimeError):
        broadcaster.subscribe()


def test_invalid_buffer_size():
    with pytest.raises(ValueError):
        Broadcaster(buffer_size=0)


def test_run_pubsub_delivers_in_order():
    received = run_pubsub(3, 4, time_scale=0)
    expected = [f"Message {n}" for n in range(1, 5)]
    assert sorted(received) == [1, 2, 3]
    assert all(messages == expected for messages in received.values())