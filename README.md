# sevencolors

The game of the 7 colours on a square grid. Player 1 starts in the top-right
corner and player 2 in the bottom-left corner. Every other cell holds one of
seven colours. On each turn a player picks a colour, and every cell of that
colour touching their territory joins it, together with the same-coloured
cells connected to those. A player who holds more than half of the board
wins. When the two territories cover the whole board with neither holding
more than half, the game is a draw.

The package provides:

- the game rules (`sevencolors.gamestate`, `sevencolors.board`): the board,
  flood fills, available moves, playing a move and deciding the end of game;
- computer players (`sevencolors.agents`): random, greedy, greedy with a
  positional heuristic, alpha-beta minimax at depths 1 to 8, frontier-based
  minimax, hegemonic, hegemonic with a heuristic, and a mixed strategy that
  settles on the greedy choice;
- a console arena (`sevencolors.console`, `sevencolors.display`) to pit two
  players against each other, human or computer, and to rank the computer
  players with an Elo tournament;
- a graphical interface built on pygame (`sevencolors.gui`, with its game
  logic in `sevencolors.session`), with an evaluation gauge, hints, board
  rotation, resignation and a choice of computer opponent.

## Installation

```
pip install .
```

## Interactive play

```
sevencolors
```

You are asked to pick a mode:

1. **Arena** — choose the agent for each player (or a human), the board size
   (3 to 1000), the number of games and whether to show the board. The sides
   alternate from one game to the next, and the win rate of the first agent
   chosen is printed at the end. Choosing `A` for player 1 runs an Elo
   tournament between a set of agents on one board size; choosing `B` runs a
   general ranking over board sizes 3 to 15, whose averaged results are
   written to `GR0_elo_ranking.csv` in the current directory.
2. **Graphical interface** — choose the grid size (4 to 15) with the slider,
   optionally pick a computer opponent, then play by clicking on a cell of the
   colour you want to take.

In the console, a human player chooses a colour by its letter:
`R` red, `V` green, `B` blue, `J` yellow, `M` magenta, `C` cyan, `W` white,
or `Q` to give up.

## Asking an agent for one move

```
sevencolors SIZE --ia AGENT PLAYER CELL...
```

- `SIZE` is the side of the board (2 to 1000);
- `AGENT` is one of `random_player`, `glouton`, `glouton_heuristique`,
  `minmax3`, `minmax8`, `frontier_IA5`, `frontier_IA5_heuristique`,
  `hegemonique`, `hegemonique_heuristique`, `mixte`;
- `PLAYER` is `1` or `2`;
- the `SIZE × SIZE` cells follow row by row: `1` and `2` for the players'
  territories, `3` to `9` for the colours red, green, blue, yellow, magenta,
  cyan and white.

The bottom-left cell must be `2` and the top-right cell must be `1`. The
board is printed, then the chosen move as a colour index from `0` (red) to
`6` (white), or `-1` when the agent has no move to offer. On bad arguments a
message is printed and the command exits with status 1.

```
sevencolors 3 --ia glouton 1  3 4 1  5 3 6  2 7 8
```

## Using the library

```python
from sevencolors.gamestate import new_game
from sevencolors.agents import minmax3
from sevencolors.board import get_move_available, step, game_over

state = new_game(8)
moves = get_move_available(state, 1)
choice = minmax3(state, 1)
step(state, moves[choice], 1)
print(game_over(state))
```

Agents take a board and the player to move and return a colour index, or
`None` when they have nothing to play. `sevencolors.console.agent_vs_agent`
plays a whole game between two agents and returns `1` or `2` for the winner,
or `1.5` for a draw; `sevencolors.console.elo_ranking` runs a tournament
between them and returns the final ratings.

## Tests

```
pip install .[test]
pytest
```