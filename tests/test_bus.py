import queue

import pytest

from aequa.bus import Bus, Event, Kind


@pytest.mark.parametrize(
    "value,member",
    [("duty", Kind.DUTY), ("consensus", Kind.CONSENSUS), ("tx", Kind.TX)],
)
def test_kind_lookup_by_value(value, member):
    assert Kind(value) is member
    assert Event(Kind(value)).kind == member


def test_unknown_kind_rejected():
    with pytest.raises(ValueError):
        Kind("block")


def test_publish_then_subscribe_receives_event():
    bus = Bus(4)
    ev = Event(Kind.DUTY, height=7, round=1, body={"x": 1}, trace_id="t1")
    assert bus.publish(ev) is True
    got = bus.subscribe().get_nowait()
    assert got == ev


def test_events_delivered_in_order():
    bus = Bus(8)
    for h in range(5):
        bus.publish(Event(Kind.CONSENSUS, height=h))
    sub = bus.subscribe()
    assert [sub.get_nowait().height for _ in range(5)] == list(range(5))


def test_drops_on_backpressure():
    bus = Bus(2)
    assert bus.publish(Event(Kind.TX, height=1))
    assert bus.publish(Event(Kind.TX, height=2))
    assert bus.publish(Event(Kind.TX, height=3)) is False
    sub = bus.subscribe()
    assert [sub.get_nowait().height, sub.get_nowait().height] == [1, 2]
    with pytest.raises(queue.Empty):
        sub.get_nowait()


@pytest.mark.parametrize("size", [0, -5])
def test_non_positive_size_uses_default(size):
    bus = Bus(size)
    assert bus.subscribe().maxsize == 128


def test_subscribers_share_one_channel():
    bus = Bus(4)
    first = bus.subscribe()
    ev = Event(Kind.DUTY, height=9)
    bus.publish(ev)
    assert bus.subscribe().get_nowait() == ev
    with pytest.raises(queue.Empty):
        first.get_nowait()