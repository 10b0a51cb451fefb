"""Board rules: flood fills, available moves, move application and game end."""

from __future__ import annotations

from enum import IntEnum

from .cellqueue import Cell, CellQueue, new_move_queues
from .gamestate import Color, GameState

DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Outcome(IntEnum):
    """Result of :func:`game_over`."""

    ONGOING = 0
    PLAYER_1 = 1
    PLAYER_2 = 2
    DRAW = 3


def _start(state: GameState, player: int) -> Cell:
    size = state.size
    return (0, size - 1) if player == 1 else (size - 1, 0)


def get_adjacent_cases(
    state: GameState,
    x: int,
    y: int,
    unexplored: CellQueue,
    explored: CellQueue,
    same_color: bool,
    movements: CellQueue | None,
) -> None:
    """Explore the neighbours of ``(x, y)`` and mark it explored.

    Unseen neighbours of the same colour go to ``unexplored``; unless
    ``same_color`` is set, unseen neighbours of a playable colour go to
    ``movements``.
    """
    size = state.size
    if not (0 <= x < size and 0 <= y < size):
        raise IndexError(f"cell ({x}, {y}) is outside a {size}x{size} board")
    color = state.get(x, y)
    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < size and 0 <= ny < size:
            pos = (nx, ny)
            if pos not in explored and pos not in unexplored:
                neighbour = state.get(nx, ny)
                if neighbour == color:
                    unexplored.enqueue(pos)
                elif not same_color and Color.RED <= neighbour <= Color.WHITE:
                    movements.enqueue(pos)
    explored.enqueue((x, y))


def get_network(
    state: GameState,
    pos: Cell,
    explored: CellQueue | None = None,
    frontier: CellQueue | None = None,
) -> CellQueue:
    """Add the same-coloured region containing ``pos`` to ``explored`` and return it."""
    if explored is None:
        explored = CellQueue()
    unexplored = CellQueue([pos])
    while unexplored:
        x, y = unexplored.dequeue()
        get_adjacent_cases(state, x, y, unexplored, explored, True, frontier)
    return explored


def update_map(state: GameState, network: CellQueue, player: int) -> None:
    """Drain ``network`` and give each of its cells to ``player``."""
    while network:
        x, y = network.dequeue()
        state.set(x, y, player)


def _capture(state: GameState, move: CellQueue) -> CellQueue:
    explored = CellQueue()
    while move:
        get_network(state, move.dequeue(), explored, move)
    return explored


def step(state: GameState, move: CellQueue, player: int) -> None:
    """Play ``move`` (its frontier cells) for ``player``; the move queue is drained."""
    update_map(state, _capture(state, move), player)


def virtual_glouton_step(state: GameState, move: CellQueue, player: int) -> int:
    """Return how many cells ``move`` would capture; the move queue is drained."""
    return len(_capture(state, move))


def virtual_depth_step(state: GameState, move: CellQueue, player: int) -> GameState:
    """Return a copy of ``state`` with ``move`` played; the move queue is drained."""
    new_state = state.copy()
    step(new_state, move, player)
    return new_state


def get_move_available(state: GameState, player: int) -> list[CellQueue]:
    """Return, per playable colour, the frontier cells of ``player``'s territory."""
    unexplored = CellQueue([_start(state, player)])
    explored = CellQueue()
    movements = CellQueue()
    while unexplored:
        x, y = unexplored.dequeue()
        get_adjacent_cases(state, x, y, unexplored, explored, False, movements)

    moves = new_move_queues()
    for x, y in movements:
        index = state.get(x, y) - Color.RED
        if 0 <= index < len(moves):
            moves[index].enqueue((x, y))
    return moves


def get_total_moves(state: GameState, player: int) -> list[CellQueue]:
    """Return, per playable colour, every cell that choosing it would capture."""
    totals = new_move_queues()
    for total, frontier in zip(totals, get_move_available(state, player)):
        for cell in frontier:
            get_network(state, cell, total)
    return totals


def game_over(state: GameState) -> Outcome:
    """Decide whether a player owns more than half the board or the board is shared."""
    size = state.size
    area = size * size
    length_1 = len(get_network(state, (0, size - 1)))
    length_2 = len(get_network(state, (size - 1, 0)))
    if length_1 > area // 2 and length_1 > length_2:
        return Outcome.PLAYER_1
    if length_2 > area // 2 and length_2 > length_1:
        return Outcome.PLAYER_2
    if length_1 + length_2 == area:
        return Outcome.DRAW
    return Outcome.ONGOING