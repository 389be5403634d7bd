# labyrush

A maze game for the terminal, meant to be played by a program. The player
never sees the whole maze. Each turn it receives only the 5x5 square around
its position, and it must answer with one move.

## The game

The player starts on `E`. It must reach the goal `O`, then return to `E`.
When the goal is first reached, a countdown starts. The countdown equals the
length of the shortest path between the two cells, computed with A\* when the
game starts. The way back must therefore be found with no wasted steps.

Each turn the game prints five lines of five characters:

- `#` is a wall, and so is anything outside the maze
- `.` is floor
- `O` is the goal
- `E` is the start
- `P` is the player, always in the centre

The player answers with one line that starts with `RIGHT`, `DOWN`, `LEFT` or
`UP`, followed by a newline. The French words `DROITE`, `BAS`, `GAUCHE` and
`HAUT` are accepted too.

The game is lost in any of these cases:

- the player walks into a wall;
- the player sends an unknown command;
- the countdown runs out;
- more than 10,000 moves are made.

A player that says it is a bot must answer each view within one second. The
answer that follows picking up the goal gets extra time: the time the A\*
search took, doubled, plus one second.

## Installing

```
pip install .
```

## Playing

To start the game with a freshly generated maze, run:

```
labyrush
```

The maze comes from one of the two generators, picked at random.

You can also load a maze from a text file:

```
labyrush path/to/maze.txt
```

The file holds one line per row, with `E` for the start and `O` for the goal.
Both LF and CRLF line endings are accepted.

The session runs in this order:

1. The game prints the raw maze on standard error.
2. It asks `are you a bot ? (y/n)`. Any answer other than `y` or `n` ends
   the program.
3. It prints the maze size and the starting position.
4. It prints the countdown value.
5. It prints the first view.

At the end the game prints a summary. A full record of the session goes to
`result.log` in the current directory. The record includes every view, every
answer, and an emoji drawing of the final maze.

## The bundled solver

`labyrush-solver` is an automatic player. It reads the game's output on
standard input and writes its moves on standard output. It answers `y` to the
bot question. Then it keeps a map of every cell it has seen and plays as
follows:

- While there is unexplored space it can reach, it explores. A breadth-first
  search scores the known floor cells by the unexplored cells they lead to.
  At each step the solver moves to the neighbouring cell with the lowest
  non-zero score.
- When nothing is left to explore, it uses A\* to walk to the goal.
- Once at the goal, it uses A\* again to walk back to where it started.

When it has no move left it answers `fini`. The game does not accept `fini`
as a command.

The solver writes its map and the scores to `output.log` as it plays.

Neither command starts the other. To let the solver play, connect the
solver's input to the game's output and the game's input to the solver's
output, for example with a pair of named pipes.

## Using it as a library

```python
import random

from labyrush.mazer_v2 import generate_dense
from labyrush.astar import shortest_path_length
from labyrush.display import view_around

maze, start, goal = generate_dense(random.Random(42))
print(shortest_path_length(maze, start, goal))
print(view_around(maze, start))
```

The modules in the package:

| Module | What it provides |
| --- | --- |
| `labyrush.maze` | `Maze`, a grid indexed by `(x, y)`, and `Pos` coordinates |
| `labyrush.unionfind` | `DisjointSets`, the labelled union-find used by the generators |
| `labyrush.mazer` | `generate_sparse`: rooms on odd cells, 51 to 71 cells a side, with some loops |
| `labyrush.mazer_v2` | `generate_dense`: corridors carved cell by cell, 31 to 49 cells a side |
| `labyrush.astar` | `shortest_path_length`, which raises `ValueError` when there is no path |
| `labyrush.display` | `view_around`, `render_emoji` and `debug_dump` |
| `labyrush.game` | `Game` with `Game.step`, plus `Command`, `Outcome` and `parse_command` |
| `labyrush.cli` | `main` for `labyrush`, plus `load_maze`, `choose_maze` and `ask_if_bot` |
| `labyrush.solver` | `Solver`, `find_path`, and `main` for `labyrush-solver` |

Both generators take an optional `random.Random`, so a seeded generator gives
the same maze every time. Each returns the maze, the start position and the
goal position.