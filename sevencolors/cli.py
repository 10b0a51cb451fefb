"""Command-line entry point: one-shot agent decisions or the interactive menu."""

from __future__ import annotations

import re
import sys
from collections.abc import Sequence

from .agents import (
    Agent,
    frontier5,
    frontier5_heuristic,
    greedy,
    greedy_heuristic,
    hegemonic,
    hegemonic_heuristic,
    minmax3,
    minmax8,
    mixed,
    random_agent,
)
from .display import plot
from .gamestate import Color, GameState

PROGRAM = "7color"
MIN_GRID = 2
MAX_GRID = 1000
NO_MOVE = int(Color.ERROR)

AGENTS_BY_NAME: dict[str, Agent] = {
    "random_player": random_agent,
    "glouton": greedy,
    "minmax3": minmax3,
    "minmax8": minmax8,
    "frontier_IA5": frontier5,
    "frontier_IA5_heuristique": frontier5_heuristic,
    "hegemonique": hegemonic,
    "hegemonique_heuristique": hegemonic_heuristic,
    "mixte": mixed,
    "glouton_heuristique": greedy_heuristic,
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class CliError(ValueError):
    """Raised when the command-line arguments cannot be acted upon."""


def _atoi(text: str) -> int:
    """Read the leading integer of ``text``; 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _usage() -> str:
    return f"Usage: {PROGRAM} taille_de_la_carte --ia nom_de_lia numero_du_joueur liste_etats"


def agent_by_name(name: str) -> Agent:
    """Return the agent registered under ``name``."""
    try:
        return AGENTS_BY_NAME[name]
    except KeyError:
        raise CliError(f"IA inconnue: {name}") from None


def decide_from_args(argv: Sequence[str]) -> int | None:
    """Build the board described by ``argv``, print it and return the agent's move.

    ``argv`` is ``size --ia agent player cell...`` with the cells row by row.
    The move is a colour index, or ``None`` when the agent has nothing to play.
    """
    args = list(argv)
    if len(args) < 4 or args[1] != "--ia":
        raise CliError(_usage())

    size = _atoi(args[0])
    name = args[2]
    player = _atoi(args[3])
    if not (MIN_GRID <= size <= MAX_GRID) or player not in (1, 2):
        raise CliError("mauvaise taille de grille ou couleur de joueurs.")
    if len(args) != 4 + size * size:
        raise CliError("nombre d'arguments invalides.")

    state = GameState(size, [_atoi(value) for value in args[4:]])
    if state.get(size - 1, 0) != Color.PLAYER_2 or state.get(0, size - 1) != Color.PLAYER_1:
        raise CliError(
            "Les case de départs des joueurs ne sont pas valides "
            "(ils doivent commencer dans les bons coins)."
        )
    plot(state)
    agent = agent_by_name(name)
    return agent(state, player)


def _interactive() -> int:
    print("Bienvenue dans le jeu des 7 couleurs !")
    print("Choisissez une option :")
    print("[1] Jouer dans le mode Arène (pour l'évaluation et le test)")
    print("[2] Jouer dans l'interface graphique")
    while True:
        try:
            line = input("Entrez votre choix (1 ou 2) : ")
        except EOFError:
            return 1
        choice = _atoi(line)
        if choice == 1:
            from .console import evaluation_main

            evaluation_main()
            return 0
        if choice == 2:
            from .gui import visual_main

            visual_main()
            return 0
        print("Choix invalide. Veuillez choisir 1 ou 2.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the program; return the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return _interactive()
    try:
        move = decide_from_args(args)
    except CliError as error:
        print(error)
        return 1
    print(NO_MOVE if move is None else move)
    return 0


if __name__ == "__main__":
    sys.exit(main())