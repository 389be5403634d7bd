"""A* search for the length of the shortest path through a maze."""

from __future__ import annotations

import heapq

from labyrush.maze import UNKNOWN, WALL, Maze, Pos

_BLOCKED = frozenset((WALL, UNKNOWN))
_DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def _passable(maze: Maze, pos: Pos) -> bool:
    return maze.in_bounds(pos) and maze[pos] not in _BLOCKED


def shortest_path_length(maze: Maze, start: tuple[int, int], goal: tuple[int, int]) -> int:
    """Return the number of moves from ``start`` to ``goal``.

    Walls (``#``) and unexplored cells (``?``) cannot be crossed. Raises
    ValueError when the goal cannot be reached.
    """
    start, goal = Pos(*start), Pos(*goal)
    if not _passable(maze, goal):
        raise ValueError(f"goal {tuple(goal)} is not a free cell")

    best = {start: 0}
    heap = [(start.manhattan(goal), 0, start)]
    closed: set[Pos] = set()
    while heap:
        _, cost, pos = heapq.heappop(heap)
        if pos == goal:
            return cost
        if pos in closed:
            continue
        closed.add(pos)
        for dx, dy in _DIRECTIONS:
            nxt = pos.offset(dx, dy)
            if not _passable(maze, nxt):
                continue
            new_cost = cost + 1
            if new_cost < best.get(nxt, new_cost + 1):
                best[nxt] = new_cost
                heapq.heappush(heap, (new_cost + nxt.manhattan(goal), new_cost, nxt))
    raise ValueError(f"no path from {tuple(start)} to {tuple(goal)}")