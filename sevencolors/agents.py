"""Move-choosing agents and the evaluation functions they search with.

Every agent takes a board and the player to move (1 or 2) and returns the
index of the chosen colour (0 for red up to 6 for white), or ``None`` when it
has no move to offer.
"""

from __future__ import annotations

import random
from collections.abc import Callable

from .board import Outcome, game_over, get_move_available, get_network, virtual_depth_step
from .board import virtual_glouton_step
from .cellqueue import Cell, CellQueue
from .gamestate import GameState
from .utilities import MOVE_COLORS, condense, exp_approx, random_bit_index, tanh_approx

Heuristic = Callable[[GameState], float]
Agent = Callable[[GameState, int], "int | None"]

_MASK_SPREAD = 0.3


def _bound(state: GameState) -> int:
    return 10 * state.size * state.size


def _search(state: GameState, player: int, depth: int, heuristic: Heuristic) -> tuple[float, int | None]:
    bound = _bound(state)
    return alpha_beta_minmax(state, depth, -bound, bound, player, heuristic)


def alpha_beta_minmax(
    state: GameState,
    depth: int,
    alpha: float,
    beta: float,
    player: int,
    heuristic: Heuristic,
) -> tuple[float, int | None]:
    """Search ``depth`` plies and return ``(value, best colour index)``.

    Player 1 maximises the heuristic and player 2 minimises it. The move is
    ``None`` at a leaf or when the player has nothing to play.
    """
    if game_over(state) != Outcome.ONGOING or depth == 0:
        return heuristic(state), None

    maximizing = player == 1
    opponent = 2 if maximizing else 1
    bound = _bound(state)
    best_value: float = -bound if maximizing else bound
    best_move: int | None = None

    for colour, move in enumerate(get_move_available(state, player)):
        if not move:
            continue
        child = virtual_depth_step(state, move, player)
        value, _ = alpha_beta_minmax(child, depth - 1, alpha, beta, opponent, heuristic)
        if maximizing:
            if value > best_value:
                best_value, best_move = value, colour
            alpha = max(alpha, value)
            if best_value >= beta:
                break
        else:
            if value < best_value:
                best_value, best_move = value, colour
            beta = min(beta, value)
            if best_value <= alpha:
                break
    return best_value, best_move


def heuristic_mask(state: GameState, x: int, y: int, player: int) -> float:
    """Positional weight of cell ``(x, y)`` from ``player``'s point of view."""
    size = float(state.size)
    half = size / 2
    dx, dy = x - half, y - half
    delta = 1.0 if player == 1 else -1.0
    slope = tanh_approx(2 * dx / size) + tanh_approx(-2 * dy / size)
    centre = exp_approx(-(dx * dx + dy * dy) / (size * size * _MASK_SPREAD * _MASK_SPREAD))
    return 1 + delta * (slope + delta * centre) * 1.5


def heuristic_minmax(state: GameState) -> float:
    """Score owned territory, weighted by position; positive favours player 1."""
    size = state.size
    area = size * size
    max_reward = area * 1.5

    territory_1 = get_network(state, (0, size - 1))
    if len(territory_1) > area // 2:
        return max_reward
    length_1 = len(territory_1)
    score = sum(heuristic_mask(state, x, y, 1) for x, y in territory_1)

    territory_2 = get_network(state, (size - 1, 0))
    if len(territory_2) > area // 2:
        return -max_reward
    if length_1 + len(territory_2) == area:
        return 0.0
    score -= sum(heuristic_mask(state, x, y, 2) for x, y in territory_2)
    return score


def heuristic_frontier(state: GameState) -> float:
    """Player 1's frontier size minus player 2's."""
    own = sum(len(queue) for queue in get_move_available(state, 1))
    other = sum(len(queue) for queue in get_move_available(state, 2))
    return float(own - other)


def heuristic_frontier_upgraded(state: GameState) -> float:
    """Frontier difference with every frontier cell weighted by its position."""
    own = sum(
        heuristic_mask(state, x, y, 1) for queue in get_move_available(state, 1) for x, y in queue
    )
    other = sum(
        heuristic_mask(state, x, y, 2) for queue in get_move_available(state, 2) for x, y in queue
    )
    return own - other


def full_random(state: GameState, player: int) -> int:
    """Return any colour index, playable or not."""
    return random.randrange(MOVE_COLORS)


def random_agent(state: GameState, player: int) -> int | None:
    """Return a random colour among those the player can play."""
    mask = condense(get_move_available(state, player))
    if mask == 0:
        return None
    return random_bit_index(mask)


def greedy(state: GameState, player: int) -> int | None:
    """Return the colour that captures the most cells right now."""
    moves = get_move_available(state, player)
    if not any(moves):
        return None
    best, best_gain = 0, 0
    for colour, move in enumerate(moves):
        if not move:
            continue
        gain = virtual_glouton_step(state, move, player)
        if gain > best_gain:
            best, best_gain = colour, gain
    return best


def greedy_heuristic(state: GameState, player: int) -> int | None:
    """One-ply search with the territory heuristic."""
    return _search(state, player, 1, heuristic_minmax)[1]


def minmax1(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 1 ply, territory heuristic."""
    return _search(state, player, 1, heuristic_minmax)[1]


def minmax2(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 2 plies, territory heuristic."""
    return _search(state, player, 2, heuristic_minmax)[1]


def minmax3(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 3 plies, territory heuristic."""
    return _search(state, player, 3, heuristic_minmax)[1]


def minmax4(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 4 plies, territory heuristic."""
    return _search(state, player, 4, heuristic_minmax)[1]


def minmax5(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 5 plies, territory heuristic."""
    return _search(state, player, 5, heuristic_minmax)[1]


def minmax6(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 6 plies, territory heuristic."""
    return _search(state, player, 6, heuristic_minmax)[1]


def minmax7(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 7 plies, territory heuristic."""
    return _search(state, player, 7, heuristic_minmax)[1]


def minmax8(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 8 plies, territory heuristic."""
    return _search(state, player, 8, heuristic_minmax)[1]


def minmax8_evaluation(state: GameState, player: int) -> float:
    """Value of the position after an 8-ply search with the territory heuristic."""
    return _search(state, player, 8, heuristic_minmax)[0]


def frontier5(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 5 plies, plain frontier heuristic."""
    return _search(state, player, 5, heuristic_frontier)[1]


def frontier5_heuristic(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 5 plies, weighted frontier heuristic."""
    return _search(state, player, 5, heuristic_frontier_upgraded)[1]


def frontier8_heuristic(state: GameState, player: int) -> int | None:
    """Alpha-beta search, 8 plies, weighted frontier heuristic."""
    return _search(state, player, 8, heuristic_frontier_upgraded)[1]


def hegemonic(state: GameState, player: int) -> int | None:
    """Return the colour with the most frontier cells (first one on ties)."""
    moves = get_move_available(state, player)
    if not any(moves):
        return None
    best, best_length = 0, 0
    for colour, move in enumerate(moves):
        if len(move) > best_length:
            best, best_length = colour, len(move)
    return best


def mixed(state: GameState, player: int) -> int | None:
    """Expansion-first strategy.

    Its reach lookahead never finds a colour that widens the frontier beyond
    the current one, so it always settles on the greedy choice.
    """
    if not any(get_move_available(state, player)):
        return None
    return greedy(state, player)


def _take_half(queue: CellQueue) -> list[Cell]:
    # Consumes cells while fewer have been taken than remain: ceil(n / 2) of them.
    taken: list[Cell] = []
    while len(taken) < len(queue):
        taken.append(queue.dequeue())
    return taken


def _weighted_reach(state: GameState, queues: list[CellQueue], player: int) -> int:
    total = 0
    for queue in queues:
        for x, y in _take_half(queue):
            total = int(total + heuristic_mask(state, x, y, player))
    return total


def hegemonic_heuristic(state: GameState, player: int) -> int | None:
    """Pick the colour whose follow-up frontier weighs most, else search one ply."""
    moves = get_move_available(state, player)
    if not any(moves):
        return None
    reach = _weighted_reach(state, moves, player)
    best, best_reach = 0, 0
    for colour in range(MOVE_COLORS):
        after = virtual_depth_step(state, moves[colour], player)
        moves = get_move_available(after, player)
        current = _weighted_reach(state, moves, player)
        if current > best_reach:
            best, best_reach = colour, current
    if best_reach > reach:
        return best
    return greedy_heuristic(state, player)