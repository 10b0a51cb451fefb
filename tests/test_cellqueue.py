import pytest

from sevencolors.cellqueue import CellQueue, cell_key, new_move_queues


def filled(n):
    queue = CellQueue()
    for i in range(n):
        queue.enqueue((i, i * 2))
    return queue


def test_fifo_order_and_length():
    queue = filled(10)
    assert len(queue) == 10
    removed = [queue.dequeue() for _ in range(5)]
    assert removed == [(i, i * 2) for i in range(5)]
    assert len(queue) == 5
    assert list(queue) == [(i, i * 2) for i in range(5, 10)]


def test_membership_after_dequeue():
    queue = filled(10)
    for _ in range(5):
        queue.dequeue()
    assert (5, 10) in queue
    assert (2, 4) not in queue
    assert (100, 200) not in queue


def test_enqueue_after_dequeue_keeps_order():
    queue = filled(10)
    for _ in range(5):
        queue.dequeue()
    for i in range(6):
        queue.enqueue((i + 10, (i + 10) * 2))
    assert len(queue) == 11
    assert list(queue) == [(i, i * 2) for i in range(5, 16)]
    assert all((i, i * 2) in queue for i in range(5, 16))


def test_dequeue_empty_raises():
    with pytest.raises(IndexError):
        CellQueue().dequeue()


def test_duplicates_are_counted():
    queue = CellQueue([(1, 1), (1, 1)])
    assert len(queue) == 2
    queue.dequeue()
    assert (1, 1) in queue
    queue.dequeue()
    assert (1, 1) not in queue


def test_reset_empties_queue():
    queue = filled(6)
    queue.reset()
    assert len(queue) == 0
    assert (0, 0) not in queue
    queue.enqueue((3, 4))
    assert list(queue) == [(3, 4)]


def test_copy_is_independent():
    queue = filled(4)
    clone = queue.copy()
    clone.dequeue()
    assert len(queue) == 4
    assert list(clone) == list(queue)[1:]
    assert (0, 0) in queue and (0, 0) not in clone


def test_extend_leaves_other_intact():
    first = filled(2)
    second = CellQueue([(7, 8), (9, 10)])
    first.extend(second)
    assert list(first) == [(0, 0), (1, 2), (7, 8), (9, 10)]
    assert list(second) == [(7, 8), (9, 10)]


def test_extend_with_itself():
    queue = filled(2)
    queue.extend(queue)
    assert list(queue) == [(0, 0), (1, 2), (0, 0), (1, 2)]


def test_str_forms():
    assert str(CellQueue()) == "Queue vide !"
    text = str(CellQueue([(1, 2), (3, 4)]))
    assert text.startswith("Queue : ")
    assert "[1, 2]" in text and "[3, 4]" in text


def test_membership_of_non_cells():
    queue = filled(3)
    assert "abc" not in queue
    assert (1, 2, 3) not in queue


def test_cell_key_is_injective_on_boards():
    keys = {cell_key((x, y)) for x in range(60) for y in range(60)}
    assert len(keys) == 3600


def test_cell_key_orders_by_row_first():
    assert cell_key((1, 0)) > cell_key((0, 999))
    assert cell_key((2, 3)) < cell_key((2, 4))


def test_new_move_queues():
    queues = new_move_queues()
    assert len(queues) == 7
    assert all(len(q) == 0 for q in queues)
    queues[0].enqueue((0, 0))
    assert all(len(q) == 0 for q in queues[1:])