import pytest

from pilha.circular_queue import CircularQueue, QueueEmptyError, QueueFullError


def test_fifo_order():
    q = CircularQueue()
    for item in (1, 2, 3):
        q.enqueue(item)
    assert [q.dequeue() for _ in range(3)] == [1, 2, 3]
    assert q.is_empty()


def test_default_capacity_is_five():
    q = CircularQueue()
    for item in range(5):
        q.enqueue(item)
    assert q.is_full()
    with pytest.raises(QueueFullError, match="Queue is fully"):
        q.enqueue(99)
    assert len(q) == 5


def test_empty_errors():
    q = CircularQueue()
    with pytest.raises(QueueEmptyError, match="Queue is empty"):
        q.dequeue()
    with pytest.raises(QueueEmptyError, match="Queue is empty"):
        q.front()


def test_front_does_not_remove():
    q = CircularQueue()
    q.enqueue(4)
    q.enqueue(8)
    assert q.front() == 4
    assert len(q) == 2


def test_wraparound_keeps_order():
    q = CircularQueue(capacity=3)
    q.enqueue(1)
    q.enqueue(2)
    q.enqueue(3)
    assert q.dequeue() == 1
    q.enqueue(4)
    assert q.is_full()
    assert [q.dequeue() for _ in range(3)] == [2, 3, 4]
    assert len(q) == 0


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CircularQueue(capacity=0)


def test_render_after_enqueue():
    q = CircularQueue()
    q.enqueue(7)
    assert q.render() == (
        "=========ON MEMORY========\n"
        "[7 0 0 0 0 ]\n"
        "START =>0(0)\n"
        "END =>1(1)\n"
        "=========ON MEMORY========\n"
        "[7 ]\n"
    )