"""Board colours and the square game board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .utilities import get_random_scalar


class Color(IntEnum):
    """Values a board cell can hold."""

    ERROR = -1
    EMPTY = 0
    PLAYER_1 = 1
    PLAYER_2 = 2
    RED = 3
    GREEN = 4
    BLUE = 5
    YELLOW = 6
    MAGENTA = 7
    CYAN = 8
    WHITE = 9


@dataclass
class GameState:
    """A square board stored row by row; cell ``(x, y)`` is row ``x``, column ``y``."""

    size: int
    cells: list[int]

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError(f"negative board size: {self.size}")
        if len(self.cells) != self.size * self.size:
            raise ValueError(
                f"expected {self.size * self.size} cells, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls, size: int) -> GameState:
        """Return a board of the given size with every cell empty."""
        if size < 0:
            raise ValueError(f"negative board size: {size}")
        return cls(size, [int(Color.EMPTY)] * (size * size))

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) is outside a {self.size}x{self.size} board")
        return x * self.size + y

    def get(self, x: int, y: int) -> int:
        """Return the value of cell ``(x, y)``."""
        return self.cells[self._index(x, y)]

    def set(self, x: int, y: int, value: int) -> None:
        """Store ``value`` in cell ``(x, y)``."""
        self.cells[self._index(x, y)] = int(value)

    def fill_random(self) -> None:
        """Paint every cell with a random playable colour."""
        self.cells = [
            get_random_scalar(Color.RED, Color.WHITE) for _ in range(self.size * self.size)
        ]

    def copy(self) -> GameState:
        """Return an independent copy of the board."""
        return GameState(self.size, list(self.cells))


def new_game(size: int) -> GameState:
    """Return a randomly painted board with both players on their starting corners."""
    state = GameState.empty(size)
    state.fill_random()
    state.set(0, size - 1, Color.PLAYER_1)
    state.set(size - 1, 0, Color.PLAYER_2)
    return state