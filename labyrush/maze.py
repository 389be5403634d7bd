"""Grid of characters that makes up a labyrinth."""

from __future__ import annotations

from typing import Iterable, NamedTuple

WALL = "#"
FLOOR = "."
UNKNOWN = "?"
START = "E"
GOAL = "O"
PLAYER = "P"
CRASH = "%"


class Pos(NamedTuple):
    """A cell position: ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Pos:
        """Return the position moved by ``(dx, dy)``."""
        return Pos(self.x + dx, self.y + dy)

    def manhattan(self, other: tuple[int, int]) -> int:
        """Return the Manhattan distance to ``other``."""
        ox, oy = other
        return abs(self.x - ox) + abs(self.y - oy)


class Maze:
    """A rectangular grid of single characters, indexed by ``(x, y)``."""

    def __init__(self, rows: Iterable[str]):
        self._rows = [list(row) for row in rows]
        if not self._rows or not self._rows[0]:
            raise ValueError("a maze needs at least one non-empty row")

    @classmethod
    def filled(cls, width: int, height: int, char: str = WALL) -> Maze:
        """Return a ``width`` x ``height`` maze holding ``char`` everywhere."""
        if width <= 0 or height <= 0:
            raise ValueError("maze dimensions must be positive")
        return cls([char * width] * height)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> Maze:
        """Build a maze from text lines, dropping line endings (LF or CRLF)."""
        return cls(line.removesuffix("\n").removesuffix("\r") for line in lines)

    @property
    def width(self) -> int:
        return len(self._rows[0])

    @property
    def height(self) -> int:
        return len(self._rows)

    def in_bounds(self, pos: tuple[int, int]) -> bool:
        x, y = pos
        return 0 <= x < self.width and 0 <= y < self.height

    def _locate(self, pos: tuple[int, int]) -> tuple[int, int]:
        if not self.in_bounds(pos):
            raise IndexError(f"position {tuple(pos)} is outside the maze")
        x, y = pos
        return x, y

    def __getitem__(self, pos: tuple[int, int]) -> str:
        x, y = self._locate(pos)
        return self._rows[y][x]

    def __setitem__(self, pos: tuple[int, int], value: str) -> None:
        if len(value) != 1:
            raise ValueError("a maze cell holds exactly one character")
        x, y = self._locate(pos)
        self._rows[y][x] = value

    def lines(self) -> list[str]:
        """Return the rows as strings, without line endings."""
        return ["".join(row) for row in self._rows]

    def find(self, char: str) -> Pos | None:
        """Return the first position holding ``char`` in row order, or None."""
        for y, row in enumerate(self._rows):
            for x, cell in enumerate(row):
                if cell == char:
                    return Pos(x, y)
        return None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Maze):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Maze(width={self.width}, height={self.height})"