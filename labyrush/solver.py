"""Automatic player that explores a labyrinth through its 5x5 view.

The player keeps a map of what it has seen. While the goal is unknown it
walks towards unexplored cells, guided by scores computed with a breadth
first search. Once nothing is left to explore it heads for the goal with A*,
then comes back to where it started.
"""

from __future__ import annotations

import heapq
import itertools
import re
import sys
from collections import deque
from typing import Iterable

from labyrush.maze import FLOOR, GOAL, PLAYER, UNKNOWN, WALL, Pos

VIEW_SIZE = 5
LOG_NAME = "output.log"
FINISHED = "fini\n"

_MOVES = {
    (1, 0): "RIGHT\n",
    (0, 1): "DOWN\n",
    (-1, 0): "LEFT\n",
    (0, -1): "UP\n",
}
# Order in which the search looks at neighbours: left, up, down, right.
_SEARCH_ORDER = ((-1, 0), (0, -1), (0, 1), (1, 0))
# Order used while exploring: right, down, left, up.
_EXPLORE_ORDER = ((1, 0), (0, 1), (-1, 0), (0, -1))
_INTEGER = re.compile(r"\s*([+-]?\d+)")


def find_path(zone: Iterable[tuple[int, int]], start: tuple[int, int],
              end: tuple[int, int]) -> list[Pos]:
    """Return the shortest walk from ``start`` to ``end`` through ``zone``.

    The walk excludes ``start`` and ends with ``end``. It is empty when the
    two are the same cell or when ``end`` cannot be reached.
    """
    cells = {Pos(*cell) for cell in zone}
    start, end = Pos(*start), Pos(*end)
    if start == end:
        return []
    counter = itertools.count()
    best = {start: 0}
    came_from: dict[Pos, Pos] = {}
    closed: set[Pos] = set()
    heap = [(start.manhattan(end), next(counter), start)]
    while heap:
        _, _, pos = heapq.heappop(heap)
        if pos == end:
            path = []
            while pos != start:
                path.append(pos)
                pos = came_from[pos]
            path.reverse()
            return path
        if pos in closed:
            continue
        closed.add(pos)
        cost = best[pos] + 1
        for dx, dy in _SEARCH_ORDER:
            nxt = pos.offset(dx, dy)
            if nxt not in cells or cost >= best.get(nxt, cost + 1):
                continue
            best[nxt] = cost
            came_from[nxt] = pos
            heapq.heappush(heap, (cost + nxt.manhattan(end), next(counter), nxt))
    return []


class Solver:
    """Map and strategy of the automatic player."""

    def __init__(self, width: int, high: int, x: int, y: int, timer: int):
        if width <= 0 or high <= 0:
            raise ValueError("map dimensions must be positive")
        self.width = width
        self.high = high
        self.timer = timer
        self.pos = Pos(x, y)
        self.start = self.pos
        self.goal: Pos | None = None
        self.goal_reached = False
        self._chars = [[UNKNOWN] * width for _ in range(high)]
        self._scores = [[0] * width for _ in range(high)]
        self._zone: set[Pos] = set()
        self._path: deque[Pos] = deque()

    @property
    def path(self) -> list[Pos]:
        """The cells still to walk through, in order."""
        return list(self._path)

    def cell(self, pos: tuple[int, int]) -> str:
        """Return what the map holds at ``pos``."""
        x, y = pos
        return self._chars[y][x]

    def score(self, pos: tuple[int, int]) -> int:
        """Return the exploration score at ``pos``."""
        x, y = pos
        return self._scores[y][x]

    def _in_map(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.high

    def read_view(self, lines: Iterable[str]) -> bool:
        """Record the 5x5 view around the player; return True if it showed new cells."""
        rows = [line.removesuffix("\n").removesuffix("\r") for line in lines]
        if len(rows) != VIEW_SIZE or any(len(row) < VIEW_SIZE for row in rows):
            raise ValueError(f"a view is {VIEW_SIZE} lines of {VIEW_SIZE} characters")
        discovered = False
        for i, row in enumerate(rows):
            y = self.pos.y + i - 2
            for j, char in enumerate(row[:VIEW_SIZE]):
                x = self.pos.x + j - 2
                if not self._in_map(x, y) or self._chars[y][x] != UNKNOWN:
                    continue
                discovered = True
                if char != WALL:
                    self._zone.add(Pos(x, y))
                if char == PLAYER:
                    self._chars[y][x] = FLOOR
                else:
                    if char == GOAL:
                        self.goal = Pos(x, y)
                    self._chars[y][x] = char
        return discovered

    def _reset_scores(self) -> None:
        for row in self._scores:
            row[:] = [0] * self.width

    def _score_chain(self, cell: Pos, parents: dict[Pos, Pos]) -> None:
        self._scores[cell.y][cell.x] += 1
        while parents[cell] != cell:
            cell = parents[cell]
            self._scores[cell.y][cell.x] += 1

    def _bfs_scores(self) -> None:
        """Score every cell by the unexplored cells reachable through it."""
        self._reset_scores()
        queue = deque([self.pos])
        parents = {self.pos: self.pos}
        while queue:
            here = queue.popleft()
            for dx, dy in _EXPLORE_ORDER:
                nxt = here.offset(dx, dy)
                if not (0 < nxt.x < self.width - 1 and 0 < nxt.y < self.high - 1):
                    continue
                char = self._chars[nxt.y][nxt.x]
                if char in (WALL, GOAL):
                    continue
                if char == UNKNOWN:
                    self._score_chain(here, parents)
                elif char == FLOOR:
                    if nxt not in parents:
                        parents[nxt] = here
                        queue.append(nxt)
                else:
                    raise ValueError(f"unexpected character {char!r} on the map")

    def _next_step(self, step: Pos, visited: set[Pos]) -> Pos | None:
        visited.add(step)
        candidates = []
        for dx, dy in _EXPLORE_ORDER:
            nxt = step.offset(dx, dy)
            if nxt in visited or not self._in_map(*nxt):
                continue
            value = self._scores[nxt.y][nxt.x]
            if value:
                candidates.append((value, nxt))
        if not candidates:
            return None
        # lowest score wins; among equal scores the later direction wins
        return min(reversed(candidates), key=lambda item: item[0])[1]

    def set_new_path(self) -> None:
        """Plan the next walk: explore, else go to the goal, else go home."""
        if self.goal_reached:
            self._path = deque(find_path(self._zone, self.pos, self.start))
            return
        self._path.clear()
        self._bfs_scores()
        visited: set[Pos] = set()
        step: Pos | None = self.pos
        while (step := self._next_step(step, visited)) is not None:
            self._path.append(step)
        if not self._path:
            if self.goal is not None:
                self._path = deque(find_path(self._zone, self.pos, self.goal))
            self.goal_reached = True

    def follow_path(self) -> str:
        """Take the next step of the walk and return the command for it."""
        if not self._path:
            return FINISHED
        nxt = self._path.popleft()
        delta = (nxt.x - self.pos.x, nxt.y - self.pos.y)
        command = _MOVES.get(delta, "UP\n")
        dx, dy = delta if delta in _MOVES else (0, -1)
        self.pos = self.pos.offset(dx, dy)
        return command

    def path_empty(self) -> bool:
        """Return True when there is no walk left to follow."""
        return not self._path

    def debug_map(self) -> str:
        """Return the map with the player, each row followed by its scores."""
        lines = []
        for y, (chars, scores) in enumerate(zip(self._chars, self._scores)):
            shown = list(chars)
            if y == self.pos.y:
                shown[self.pos.x] = PLAYER
            digits = "".join(str(s) if s <= 9 else "9" for s in scores)
            lines.append("".join(shown) + "  " + digits + "\n")
        return "".join(lines) + "\n"


def _atoi(text: str) -> int:
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def _read_fields(line: str, count: int) -> list[int]:
    values = []
    index = 0
    for _ in range(count):
        index = line.find("=", index) + 1
        values.append(_atoi(line[index:]))
    return values


def main(argv: list[str] | None = None) -> int:
    """Play a game on the standard streams, logging the map to output.log."""
    stdin, stdout = sys.stdin, sys.stdout
    with open(LOG_NAME, "w", encoding="utf-8") as log:
        stdin.readline()
        stdout.write("y\n")
        stdout.flush()
        width, high, begin_x, begin_y = _read_fields(stdin.readline(), 4)
        (timer,) = _read_fields(stdin.readline(), 1)
        try:
            solver = Solver(width, high, begin_x, begin_y, timer)
        except ValueError as exc:
            sys.stderr.write(f"{exc}\n")
            return 1
        while True:
            view = [stdin.readline() for _ in range(VIEW_SIZE)]
            if not view[-1]:
                return 0
            try:
                solver.read_view(view)
            except ValueError:
                return 0
            if solver.path_empty():
                log.write("setting up a new path\n")
                solver.set_new_path()
                log.write("new path set up\n")
            log.write(solver.debug_map())
            log.flush()
            stdout.write(solver.follow_path())
            stdout.flush()


if __name__ == "__main__":
    sys.exit(main())