"""Arena mode: matches between agents, Elo rankings and the interactive menu."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Sequence

from .agents import (
    Agent,
    frontier5,
    frontier5_heuristic,
    frontier8_heuristic,
    greedy,
    greedy_heuristic,
    hegemonic,
    minmax1,
    minmax2,
    minmax3,
    minmax4,
    minmax5,
    minmax6,
    minmax7,
    minmax8,
    mixed,
    random_agent,
)
from .board import Outcome, game_over, get_move_available, step
from .display import _next_int, ask_match_setup, plot
from .gamestate import new_game

NUM_AGENTS = 10
RANKING_SIZES = tuple(range(3, 16))
GAMES_PER_RANKING = 1400
RANKING_REPEATS = 7
INITIAL_ELO = 1500.0
DRAW = 1.5

_AGENT_SETS: dict[int, tuple[Agent, ...]] = {
    1: (greedy, minmax1, minmax2, minmax3, minmax4, minmax5, minmax6, minmax7, minmax8, minmax8),
    2: (
        random_agent,
        greedy,
        greedy_heuristic,
        minmax3,
        minmax8,
        frontier5,
        frontier5_heuristic,
        frontier8_heuristic,
        hegemonic,
        mixed,
    ),
    3: (
        random_agent,
        greedy,
        greedy_heuristic,
        minmax3,
        minmax8,
        frontier5,
        frontier5_heuristic,
        hegemonic,
        mixed,
        minmax8,
    ),
}


def agent_vs_agent(decision1: Agent, decision2: Agent, size: int, show: bool = False) -> float:
    """Play one game on a fresh board; return 1 or 2 for the winner, 1.5 for a draw."""
    state = new_game(size)
    result = 0
    while True:
        if show:
            plot(state)
        moves = get_move_available(state, 1)
        if not any(moves):
            result = 2
            break
        choice = decision1(state, 1)
        if choice is None:
            result = 2
            break
        step(state, moves[choice], 1)

        if show:
            plot(state)
        result = game_over(state)
        if result != Outcome.ONGOING:
            break
        moves = get_move_available(state, 2)
        if not any(moves):
            result = 1
            break
        choice = decision2(state, 2)
        if choice is None:
            result = 1
            break
        step(state, moves[choice], 2)

        result = game_over(state)
        if result != Outcome.ONGOING:
            break
    if show:
        plot(state)
    return DRAW if result == Outcome.DRAW else float(result)


def _k_factor(matches: int, elo: float) -> float:
    if matches < 30:
        return 40.0
    return 20.0 if elo < 2400 else 10.0


def elo_ranking(choice: int, size: int, games: int = GAMES_PER_RANKING) -> list[float]:
    """Rank a set of agents by Elo over ``games`` random pairings on ``size`` boards.

    ``choice`` 1 ranks the minmax depths, 2 every agent, anything else the
    alternative line-up.
    """
    agents = _AGENT_SETS.get(choice, _AGENT_SETS[3])
    print("Début du classement Elo")
    elos = [INITIAL_ELO] * NUM_AGENTS
    matches = [0] * NUM_AGENTS

    for game in range(games):
        if game % 1000 == 0:
            print(f"Partie {game} sur {games}")
        first, second = random.sample(range(NUM_AGENTS), 2)
        difference = elos[first] - elos[second]
        expected_first = 1 / (1 + 10 ** (-difference / 400))
        expected_second = 1 - expected_first

        outcome = agent_vs_agent(agents[first], agents[second], size, False)
        score = 0.5 if outcome == DRAW else (0.0 if outcome == 2 else 1.0)

        k_first = _k_factor(matches[first], elos[first])
        k_second = _k_factor(matches[second], elos[second])
        elos[first] += k_first * (score - expected_first)
        elos[second] += k_second * ((1 - score) - expected_second)
        matches[first] += 1
        matches[second] += 1

    for number, (elo, played) in enumerate(zip(elos, matches), start=1):
        print(f"Elo du joueur {number} : {elo:.2f} (matches joués : {played})")
    return elos


def save_float_array_to_file(rows: Sequence[Sequence[float]], filename: str) -> None:
    """Write the rows as comma-separated values with six decimals."""
    with open(filename, "w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(",".join(f"{value:.6f}" for value in row) + "\n")


def general_ranking(filename: str = "GR0_elo_ranking.csv") -> list[list[float]]:
    """Average the full Elo ranking over several runs for every board size and save it."""
    start = time.process_time()
    table: list[list[float]] = []
    for size in RANKING_SIZES:
        print(f"======================\nTaille de la carte : {size}")
        averages = [0.0] * NUM_AGENTS
        for run in range(RANKING_REPEATS):
            print(f"----------------------itération {run + 1}")
            elos = elo_ranking(2, size)
            averages = [total + elo / RANKING_REPEATS for total, elo in zip(averages, elos)]
        table.append(averages)

    print("Classement Elo des agents :")
    for size, averages in zip(RANKING_SIZES, table):
        print(f"Taille de la carte : {size}")
        for number, elo in enumerate(averages, start=1):
            print(f"Elo du joueur {number} : {elo:.2f}")
        print()
    save_float_array_to_file(table, filename)
    elapsed = time.process_time() - start
    print(f"temps d'execution de l'elo : {elapsed:.6f} seconds")
    return table


def _ask_size() -> int:
    while True:
        size = _next_int("Donne la taille de la carte que tu souhaites: ")
        if 3 <= size <= 1000:
            return size


def _ask_agent_set() -> int:
    print("choisis les agents:")
    print(
        "[1] Minmaxs   [2] Tous agents   "
        "[3] Agents externe (voir dans la fonction GR0_elo_ranking)"
    )
    while True:
        choice = _next_int("choix: ")
        if choice in (1, 2, 3):
            return choice


def evaluation_main() -> int:
    """Run the arena menu: a ranking or a series of matches between two agents."""
    setup = ask_match_setup()
    size = _ask_size() if setup.elo != 2 else 0

    if setup.elo == 1:
        choice = _ask_agent_set()
        start = time.process_time()
        elo_ranking(choice, size)
        elapsed = time.process_time() - start
        print(f"temps d'execution de l'elo : {elapsed:.6f} seconds")
    elif setup.elo == 2:
        general_ranking()
    else:
        total = 0.0
        for game in range(setup.games):
            # Sides alternate; ``score`` is always the first chosen agent's result.
            if game % 2:
                score = 2 - agent_vs_agent(setup.decision1, setup.decision2, size, setup.show)
            else:
                score = agent_vs_agent(setup.decision2, setup.decision1, size, setup.show) - 1
            total += score
            if score == 0.5:
                print("Partie nulle !")
            elif score == 1:
                print("Le joueur 1 a gagné !")
            elif score == 0:
                print("Le joueur 2 a gagné !")
            else:
                print(f"Erreur dans le résultat de la partie {score:f}!")
        winrate = total / setup.games * 100 if setup.games else math.nan
        print(f"Winrate du joueur 1 :{winrate:.2f} % \n")
    return 0