"""Labyrinth generator carving corridors one cell at a time.

The grid starts solid. Every cell is its own set; four walkers (the start,
the goal and two random cells) wander one cell at a time and carve the cell
they step into whenever it belongs to another set. Generation stops once the
start, the goal and both random walkers share one set.
"""

from __future__ import annotations

import random

from labyrush.maze import FLOOR, GOAL, START, WALL, Maze, Pos
from labyrush.unionfind import DisjointSets

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _odd(n: int) -> int:
    return n + 1 if n % 2 == 0 else n


def _random_cell(rng: random.Random, width: int, height: int) -> Pos:
    return Pos(1 + rng.randrange(width - 2), 1 + rng.randrange(height - 2))


def _wander(maze: Maze, sets: DisjointSets, walker: Pos, rng: random.Random) -> Pos:
    options = [
        (dx, dy)
        for dx, dy in _DIRECTIONS
        if 0 < walker.x + dx < maze.width - 1 and 0 < walker.y + dy < maze.height - 1
    ]
    dx, dy = rng.choice(options)
    target = walker.offset(dx, dy)
    if sets.union(walker, target):
        maze[target] = FLOOR
    return target


def generate_dense(rng: random.Random | None = None) -> tuple[Maze, Pos, Pos]:
    """Generate a maze of 31 to 49 cells a side.

    Return the maze with ``E`` at the start and ``O`` at the goal, the start
    position and the goal position.
    """
    rng = rng or random.Random()
    width = _odd(rng.randrange(20) + 30)
    height = _odd(rng.randrange(20) + 30)

    maze = Maze.filled(width, height, WALL)
    sets = DisjointSets()
    for y in range(height):
        for x in range(width):
            sets.make_set(Pos(x, y))

    start = _random_cell(rng, width, height)
    goal = start
    while goal == start:
        goal = _random_cell(rng, width, height)
    roamer = _random_cell(rng, width, height)
    roamer2 = _random_cell(rng, width, height)

    # walkers move in this order: first random, start, goal, second random
    walkers = [roamer, start, goal, roamer2]

    def joined() -> bool:
        label = sets.find(goal)
        return all(sets.find(p) == label for p in (start, walkers[0], walkers[3]))

    while not joined():
        walkers = [_wander(maze, sets, walker, rng) for walker in walkers]

    maze[start] = START
    maze[goal] = GOAL
    return maze, start, goal