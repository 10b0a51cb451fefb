"""A first-in first-out queue of board cells with fast membership tests."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Iterable, Iterator

Cell = tuple[int, int]

MOVE_COLORS = 7


def cell_key(cell: Cell) -> int:
    """Pack a cell's coordinates into one integer key."""
    x, y = cell
    return (x << 16) | (y & 0xFFFF)


class CellQueue:
    """FIFO of cells that may hold duplicates and answers ``in`` in constant time."""

    __slots__ = ("_items", "_keys")

    def __init__(self, cells: Iterable[Cell] = ()) -> None:
        self._items: deque[Cell] = deque()
        self._keys: Counter[int] = Counter()
        for cell in cells:
            self.enqueue(cell)

    def enqueue(self, cell: Cell) -> None:
        """Append a cell at the back."""
        x, y = cell
        self._items.append((x, y))
        self._keys[cell_key((x, y))] += 1

    def dequeue(self) -> Cell:
        """Remove and return the cell at the front."""
        if not self._items:
            raise IndexError("dequeue from an empty queue")
        cell = self._items.popleft()
        key = cell_key(cell)
        self._keys[key] -= 1
        if self._keys[key] == 0:
            del self._keys[key]
        return cell

    def extend(self, other: Iterable[Cell]) -> None:
        """Append every cell of ``other``, leaving ``other`` untouched."""
        for cell in list(other):
            self.enqueue(cell)

    def copy(self) -> CellQueue:
        """Return an independent queue with the same cells in the same order."""
        return CellQueue(self._items)

    def reset(self) -> None:
        """Remove every cell."""
        self._items.clear()
        self._keys.clear()

    def __contains__(self, cell: object) -> bool:
        if not isinstance(cell, tuple) or len(cell) != 2:
            return False
        return self._keys[cell_key(cell)] > 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Queue vide !"
        return "Queue : " + " ".join(f"[{x}, {y}]" for x, y in self._items)

    def __repr__(self) -> str:
        return f"CellQueue({list(self._items)!r})"


def new_move_queues() -> list[CellQueue]:
    """Return one empty queue per playable colour."""
    return [CellQueue() for _ in range(MOVE_COLORS)]