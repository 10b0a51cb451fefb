"""Interactive game session behind the graphical interface.

The drawing layer only forwards mouse positions; everything that changes the
game lives here.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .agents import (
    Agent,
    frontier5,
    frontier5_heuristic,
    greedy,
    greedy_heuristic,
    hegemonic,
    hegemonic_heuristic,
    minmax3,
    minmax6,
    minmax8,
    minmax8_evaluation,
    random_agent,
)
from .board import Outcome, game_over, get_move_available, get_network, get_total_moves, step
from .cellqueue import Cell
from .gamestate import GameState, new_game
from .utilities import clip

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600

SLIDER_X = 250
SLIDER_Y = 500
SLIDER_WIDTH = 300
SLIDER_HEIGHT = 10
SLIDER_KNOB_RADIUS = 10

GRID_MIN = 4
GRID_MAX = 15
CELL_SIZE = 60
CELL_PADDING = 8
GRID_OFFSET_X = 250
GRID_OFFSET_Y = 50
COLOR_COUNT = 9
PLAYER1_COLOR = 1
PLAYER2_COLOR = 2
NUM_AGENTS = 9
DEFAULT_GRID_SIZE = 8
CURSOR_LIMIT = 100

AGENT_NAMES = (
    "Aléatoire      (elo:1000)",
    "  Glouton      (elo:1400)",
    "  Glouton      Heuristique    (elo 1450)",
    "  Minmax3      (elo 1600)",
    "  Minmax8      (elo 1800)",
    "Frontière5     (elo 1700)",
    "Frontière5    Heuristique (elo 1700)",
    "Hégémonique    (elo 1200)",
    "Mixte          (elo 1400)",
)

AGENTS: tuple[Agent, ...] = (
    random_agent,
    greedy,
    greedy_heuristic,
    minmax3,
    minmax6,
    frontier5,
    frontier5_heuristic,
    hegemonic,
    hegemonic_heuristic,
)

# RGB colour of each cell value; index 0 is never drawn.
COLORS = (
    (0, 0, 0),
    (200, 165, 0),
    (128, 0, 128),
    (230, 0, 0),
    (0, 200, 0),
    (0, 0, 200),
    (200, 200, 0),
    (240, 0, 240),
    (0, 220, 220),
    (255, 255, 255),
)

Rect = tuple[int, int, int, int]


def in_rect(x: int, y: int, rect: Rect) -> bool:
    """Whether point ``(x, y)`` lies in ``rect`` (x, y, width, height), edges included."""
    left, top, width, height = rect
    return left <= x <= left + width and top <= y <= top + height


def slider_grid_size(x: int) -> int:
    """Grid size selected by a click at horizontal position ``x`` on the slider."""
    norm = (x - SLIDER_X) / SLIDER_WIDTH
    size = int(GRID_MIN + norm * (GRID_MAX - GRID_MIN))
    return max(GRID_MIN, min(GRID_MAX, size))


def _toward_zero(numerator: int, denominator: int) -> int:
    quotient = abs(numerator) // denominator
    return quotient if numerator >= 0 else -quotient


def screen_to_cell(mouse_x: int, mouse_y: int, size: int, rotated: bool) -> Cell | None:
    """Board cell ``(row, column)`` under the mouse, or ``None`` outside the board."""
    column = _toward_zero(mouse_x - GRID_OFFSET_X, CELL_SIZE)
    row = _toward_zero(mouse_y - GRID_OFFSET_Y, CELL_SIZE)
    if rotated:
        row = size - 1 - row
        column = size - 1 - column
    if not (0 <= row < size and 0 <= column < size):
        return None
    return row, column


def _announce(outcome: Outcome) -> None:
    if outcome == Outcome.DRAW:
        print("Partie nulle !")
    else:
        print(f"Partie terminée ! Joueur {int(outcome)} a gagné.")


@dataclass
class GameSession:
    """State of a game played through the graphical interface."""

    grid_size: int = DEFAULT_GRID_SIZE
    state: GameState | None = None
    current_player: int = 1
    winner: int = 0
    cursor_active: bool = False
    cursor_position: int = 0
    agent: int | None = None
    swap_sides: bool = False
    swap_choice: bool = False
    hint: bool = False
    _hover_position: Cell | None = field(default=None, repr=False)
    _hover_cells: list[Cell] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.state is None:
            self.state = new_game(self.grid_size)
        else:
            self.grid_size = self.state.size

    def _rotated(self) -> bool:
        return self.swap_choice and self.swap_sides

    def _forget_hover(self) -> None:
        self._hover_position = None
        self._hover_cells = []

    def restart(self, grid_size: int) -> None:
        """Start a fresh game on a new random board of ``grid_size``."""
        self.grid_size = grid_size
        self.state = new_game(grid_size)
        self.winner = 0
        self.current_player = 1
        self.cursor_active = False
        self.cursor_position = 0
        self.swap_sides = False
        self.swap_choice = False
        self.hint = False
        self._forget_hover()

    def update_cursor(self) -> None:
        """Refresh the evaluation gauge when it is switched on."""
        if not self.cursor_active:
            return
        evaluation = minmax8_evaluation(self.state, self.current_player)
        print(f"Evaluation : {evaluation:f}")
        max_reward = self.state.size * self.state.size
        self.cursor_position = int(
            clip(evaluation * 100 / max_reward, -CURSOR_LIMIT, CURSOR_LIMIT)
        )

    def _check_end(self) -> None:
        outcome = game_over(self.state)
        if outcome != Outcome.ONGOING:
            _announce(outcome)
            self.winner = int(outcome)

    def handle_grid_click(self, mouse_x: int, mouse_y: int) -> bool:
        """Play the colour of the clicked cell if it can be captured; report whether a move was made."""
        cell = screen_to_cell(mouse_x, mouse_y, self.state.size, self._rotated())
        if cell is None:
            return False

        totals = get_total_moves(self.state, self.current_player)
        colour = next((index for index, cells in enumerate(totals) if cell in cells), None)
        if colour is None:
            return False

        step(self.state, totals[colour], self.current_player)
        self._forget_hover()
        self.update_cursor()
        self.hint = False
        self._check_end()

        self.current_player = 2 if self.current_player == 1 else 1
        if self.swap_choice:
            self.swap_sides = not self.swap_sides

        if self.current_player == 2 and self.agent is not None:
            moves = get_move_available(self.state, 2)
            choice = AGENTS[self.agent](self.state, 2)
            if choice is None:
                print("L'adversaire abandonne. Joueur 1 gagne.")
                self.winner = 1
            else:
                print(f"Coup de l'agent {self.agent} : {cell}")
                step(self.state, moves[choice], 2)
                self._forget_hover()
                self.update_cursor()
                self._check_end()
                self.current_player = 1
        return True

    def hover_network(self, mouse_x: int, mouse_y: int) -> list[Cell] | None:
        """Cells of the same-coloured region under the mouse, or ``None`` off the board."""
        cell = screen_to_cell(mouse_x, mouse_y, self.state.size, self._rotated())
        if cell is None:
            return None
        if cell != self._hover_position:
            self._hover_cells = list(get_network(self.state, cell))
            self._hover_position = cell
        return list(self._hover_cells)

    def hint_cells(self) -> list[Cell]:
        """Cells the deep search would capture for the player to move; empty if it gives up."""
        totals = get_total_moves(self.state, self.current_player)
        shot = minmax8(self.state, self.current_player)
        if shot is None:
            print(f"Abandon {self.current_player}.")
            return []
        return list(totals[shot])

    def resign(self) -> int:
        """Concede the game for the player to move; return the winner."""
        self.winner = 2 if self.current_player == 1 else 1
        print(f"Le joueur {self.current_player} a abandonné. Le joueur {self.winner} gagne.")
        return self.winner