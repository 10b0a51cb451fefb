"""Terminal rendering of the board and interactive prompts for the arena mode."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from .agents import (
    Agent,
    frontier5,
    frontier5_heuristic,
    greedy,
    greedy_heuristic,
    hegemonic_heuristic,
    minmax3,
    minmax6,
    minmax8,
    mixed,
    random_agent,
)
from .board import get_move_available
from .gamestate import Color, GameState

RESET = "\033[0m"

_TEXT_CODES = {
    Color.ERROR: "\033[31m",
    Color.EMPTY: "\033[37m",
    Color.PLAYER_1: "\033[34m",
    Color.PLAYER_2: "\033[32m",
    Color.RED: "\033[31m",
    Color.GREEN: "\033[32m",
    Color.BLUE: "\033[34m",
    Color.YELLOW: "\033[33m",
    Color.MAGENTA: "\033[35m",
    Color.CYAN: "\033[36m",
    Color.WHITE: "\033[37m",
}

_BACKGROUND_CODES = {
    Color.ERROR: "\033[48;5;1m",
    Color.EMPTY: "\033[48;5;15m",
    Color.PLAYER_1: "\033[48;5;4m",
    Color.PLAYER_2: "\033[48;5;2m",
    Color.RED: "\033[48;5;9m",
    Color.GREEN: "\033[48;5;10m",
    Color.BLUE: "\033[48;5;12m",
    Color.YELLOW: "\033[48;5;11m",
    Color.MAGENTA: "\033[48;5;13m",
    Color.CYAN: "\033[48;5;14m",
    Color.WHITE: "\033[48;5;7m",
}

# Colour index -> (key shown to the player, label).
_MOVE_LABELS = (
    ("R", "Rouge"),
    ("V", "Vert"),
    ("B", "Bleu"),
    ("J", "Jaune"),
    ("M", "Magenta"),
    ("C", "Cyan"),
    ("W", "Blanc"),
)
_MOVE_KEYS = {key.lower(): index for index, (key, _) in enumerate(_MOVE_LABELS)}

_PLAYER_1_MENU = (
    "[0] Humain   [1] Random   [2] Glouton   [3] Glouton Heuristique   [4] MinMax3   "
    "[5] MinMax6   [6] Frontière5   [7] Frontière5+heuristique   [6] Mixte   "
    "[9] Hégémonique Heuristique [A] ELO classement   [B] classement général"
)
_PLAYER_2_MENU = (
    "[0] Humain   [1] Random   [2] Glouton   [3] Glouton Heuristique   [4] MinMax3   "
    "[5] MinMax6   [6] Frontière5   [7] Frontière5+heuristique   [8] Mixte   "
    "[9] Hégémonique Heuristique"
)


def color_code(color: int) -> str:
    """ANSI foreground code used to draw a cell of the given colour."""
    try:
        return _TEXT_CODES[Color(color)]
    except ValueError:
        return RESET


def background_color_code(color: int) -> str:
    """ANSI 256-colour background code used to draw a cell of the given colour."""
    try:
        return _BACKGROUND_CODES[Color(color)]
    except ValueError:
        return _BACKGROUND_CODES[Color.EMPTY]


def _cell_text(value: int) -> str:
    if value == Color.PLAYER_1:
        label = " 1 "
    elif value == Color.PLAYER_2:
        label = " 2 "
    else:
        label = " O "
    return f"{background_color_code(value)}{color_code(value)}{label}{RESET}"


def render(state: GameState) -> str:
    """Return the board drawn with box characters and ANSI colours."""
    size = state.size
    rule = "───" * size
    lines = [f"┌{rule}┐"]
    for x in range(size):
        row = "".join(_cell_text(state.get(x, y)) for y in range(size))
        lines.append(f"│{row}│")
        if x < size - 1:
            lines.append(f"├{rule}┤")
    lines.append(f"└{rule}┘")
    return "\n".join(lines) + "\n" + RESET


def plot(state: GameState) -> None:
    """Print the board to standard output."""
    print(render(state), end="")


def _read_chars(prompt: str = "") -> Iterator[str]:
    """Yield the non-blank characters typed by the user, line after line."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        prompt = ""
        for char in line:
            if not char.isspace():
                yield char


def _read_ints(prompt: str = "") -> Iterator[int]:
    """Yield the integers typed by the user, skipping anything that is not one."""
    while True:
        try:
            line = input(prompt)
        except EOFError:
            return
        prompt = ""
        for token in line.split():
            try:
                yield int(token)
            except ValueError:
                print("Choix invalide")


def _next_int(prompt: str = "") -> int:
    for value in _read_ints(prompt):
        return value
    raise EOFError("input ended before a number was given")


def get_user_input(state: GameState, player: int) -> int | None:
    """Ask a human for a colour; return its index, or ``None`` to quit or when stuck."""
    moves = get_move_available(state, player)
    available = [len(queue) > 0 for queue in moves]
    if not any(available):
        return None

    print(f"Joueur {player}, choisissez une couleur parmi les suivantes :")
    offers = "".join(
        f"[{key}] {label}   "
        for (key, label), free in zip(_MOVE_LABELS, available)
        if free
    )
    print(offers + "[Q] Quitter")

    for char in _read_chars():
        lowered = char.lower()
        if lowered == "q":
            return None
        index = _MOVE_KEYS.get(lowered)
        if index is None:
            print("\nTouche non reconnue : ")
        elif available[index]:
            return index
        print("Le coup joué est invalide")
    return None


@dataclass
class MatchSetup:
    """What the arena should run: a ranking, or a series of matches."""

    elo: int = 0
    games: int = 0
    show: bool = False
    decision1: Agent | None = None
    decision2: Agent | None = None


_PLAYER_1_AGENTS: dict[str, Agent] = {
    "0": get_user_input,
    "1": random_agent,
    "2": greedy,
    "3": greedy_heuristic,
    "4": minmax3,
    "5": minmax8,
    "6": frontier5,
    "7": frontier5_heuristic,
    "8": mixed,
    "9": hegemonic_heuristic,
}

_PLAYER_2_AGENTS: dict[int, Agent] = {
    0: get_user_input,
    1: random_agent,
    2: greedy,
    3: greedy_heuristic,
    4: minmax3,
    5: minmax6,
    6: frontier5,
    7: frontier5_heuristic,
    8: hegemonic_heuristic,
    9: mixed,
}

_RANKINGS = {"a": 1, "b": 2}


def ask_match_setup() -> MatchSetup:
    """Ask which agents play, how many matches and whether to draw the board."""
    setup = MatchSetup()
    print("Agent du joueur 1 : ")
    print(_PLAYER_1_MENU)
    for char in _read_chars():
        ranking = _RANKINGS.get(char.lower())
        if ranking is not None:
            setup.decision1 = random_agent
            setup.elo = ranking
            return setup
        agent = _PLAYER_1_AGENTS.get(char)
        if agent is not None:
            setup.decision1 = agent
            break
        print("Choix invalide")
    else:
        raise EOFError("input ended before player 1 was chosen")

    print("Agent du joueur 2 : ")
    print(_PLAYER_2_MENU)
    for number in _read_ints():
        agent = _PLAYER_2_AGENTS.get(number)
        if agent is not None:
            setup.decision2 = agent
            break
        print("Choix invalide")
    else:
        raise EOFError("input ended before player 2 was chosen")

    setup.games = _next_int("Combien d'affrontements souhaites tu voir: ")
    setup.show = bool(_next_int("Souhaites-tu un affichage ? (1 pour oui, 0 pour non): "))
    return setup