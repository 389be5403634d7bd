"""Labyrinth generator working on a lattice of rooms separated by walls.

Rooms sit on odd coordinates. Four walkers (the start, the goal and two
random rooms) wander two cells at a time; a walker knocks down the wall it
crosses when the two rooms are not yet joined, and now and then knocks down
a wall between joined rooms too, which creates loops. Generation stops once
the start, the goal and both random walkers share one set.
"""

from __future__ import annotations

import random

from labyrush.maze import FLOOR, GOAL, START, WALL, Maze, Pos
from labyrush.unionfind import DisjointSets

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))
_LOOP_CHANCE = 7


def _odd(n: int) -> int:
    return n + 1 if n % 2 == 0 else n


def _random_room(rng: random.Random, width: int, height: int) -> Pos:
    return Pos(2 * rng.randrange(width // 2) + 1, 2 * rng.randrange(height // 2) + 1)


def _wander(maze: Maze, sets: DisjointSets, walker: Pos, rng: random.Random) -> Pos:
    options = [
        (dx, dy)
        for dx, dy in _DIRECTIONS
        if 0 < walker.x + 2 * dx < maze.width - 1 and 0 < walker.y + 2 * dy < maze.height - 1
    ]
    dx, dy = rng.choice(options)
    target = walker.offset(2 * dx, 2 * dy)
    between = walker.offset(dx, dy)
    if sets.union(walker, target):
        maze[between] = FLOOR
    elif maze[between] == WALL and rng.randrange(_LOOP_CHANCE) == 0:
        maze[between] = FLOOR
    return target


def generate_sparse(rng: random.Random | None = None) -> tuple[Maze, Pos, Pos]:
    """Generate a maze of 51 to 71 cells a side.

    Return the maze with ``E`` at the start and ``O`` at the goal, the start
    position and the goal position.
    """
    rng = rng or random.Random()
    width = _odd(rng.randrange(21) + 50)
    height = _odd(rng.randrange(21) + 50)

    maze = Maze.filled(width, height, WALL)
    sets = DisjointSets()
    for y in range(1, height, 2):
        for x in range(1, width - 1, 2):
            maze[x, y] = FLOOR
            sets.make_set(Pos(x, y))

    start = goal = Pos(0, 0)
    while start == goal:
        start = _random_room(rng, width, height)
        goal = _random_room(rng, width, height)
        roamer = _random_room(rng, width, height)
        roamer2 = _random_room(rng, width, height)

    walkers = [roamer, roamer2, start, goal]

    def joined() -> bool:
        label = sets.find(goal)
        return all(sets.find(p) == label for p in (start, walkers[0], walkers[1]))

    while not joined():
        walkers = [_wander(maze, sets, walker, rng) for walker in walkers]

    maze[start] = START
    maze[goal] = GOAL
    return maze, start, goal