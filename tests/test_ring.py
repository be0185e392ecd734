import pytest

from ringipc.message import Message
from ringipc.ring import Ring


def _msgs(*payloads):
    return [Message(p) for p in payloads]


def test_new_ring_is_empty():
    ring = Ring(10)
    assert len(ring) == 0
    assert ring.size == 10
    assert ring.added == 0
    assert ring.deleted == 0
    assert not ring.is_full()


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Ring(-1)


def test_push_pop_is_fifo():
    ring = Ring(3)
    items = _msgs(b"a", b"b", b"c")
    for m in items:
        ring.push(m)
    assert [ring.pop() for _ in range(3)] == items
    assert len(ring) == 0


def test_counters_track_push_and_pop():
    ring = Ring(5)
    for m in _msgs(b"x", b"y", b"z"):
        ring.push(m)
    ring.pop()
    assert ring.added == 3
    assert ring.deleted == 1
    assert len(ring) == 2


def test_push_when_full_raises():
    ring = Ring(2)
    for m in _msgs(b"a", b"b"):
        ring.push(m)
    assert ring.is_full()
    with pytest.raises(OverflowError):
        ring.push(Message(b"c"))
    assert ring.added == 2


def test_zero_size_ring_is_full():
    ring = Ring(0)
    assert ring.is_full()
    with pytest.raises(OverflowError):
        ring.push(Message(b"a"))


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Ring(3).pop()


def test_iteration_goes_oldest_first():
    ring = Ring(3)
    items = _msgs(b"1", b"2")
    for m in items:
        ring.push(m)
    assert list(ring) == items


def test_grow_allows_another_push():
    ring = Ring(1)
    ring.push(Message(b"a"))
    ring.grow()
    assert ring.size == 2
    assert not ring.is_full()
    ring.push(Message(b"b"))
    assert len(ring) == 2


def test_shrink_without_overflow_keeps_messages():
    ring = Ring(3)
    ring.push(Message(b"a"))
    assert ring.shrink() is None
    assert ring.size == 2
    assert len(ring) == 1


def test_shrink_drops_oldest_when_over_capacity():
    ring = Ring(2)
    first, second = _msgs(b"old", b"new")
    ring.push(first)
    ring.push(second)
    dropped = ring.shrink()
    assert dropped == first
    assert list(ring) == [second]
    assert ring.size == 1
    assert ring.deleted == 0


def test_shrink_at_zero_raises():
    ring = Ring(1)
    ring.shrink()
    with pytest.raises(ValueError):
        ring.shrink()
    assert ring.size == 0


def test_clear_resets_everything():
    ring = Ring(4)
    for m in _msgs(b"a", b"b", b"c"):
        ring.push(m)
    ring.pop()
    ring.clear()
    assert len(ring) == 0
    assert ring.added == 0
    assert ring.deleted == 0
    assert ring.size == 0
    with pytest.raises(IndexError):
        ring.pop()