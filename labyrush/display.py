"""Text renderings of a maze: the player's view, the emoji summary, the dump."""

from __future__ import annotations

from labyrush.maze import CRASH, FLOOR, GOAL, PLAYER, START, WALL, Maze

VIEW_RADIUS = 2

EMOJI = {
    CRASH: "💥",
    WALL: "🏰",
    GOAL: "🥧",
    START: "🍽",
    FLOOR: "🔲",
    PLAYER: "🚙",
}


def view_around(maze: Maze, pos: tuple[int, int]) -> str:
    """Return the 5x5 window centred on ``pos``, one line per row.

    The centre cell shows ``P``; cells outside the maze show as walls.
    """
    px, py = pos
    span = range(-VIEW_RADIUS, VIEW_RADIUS + 1)
    rows = []
    for dy in span:
        y = py + dy
        if not 0 <= y < maze.height:
            rows.append(WALL * len(span))
            continue
        cells = []
        for dx in span:
            x = px + dx
            if dx == 0 and dy == 0:
                cells.append(PLAYER)
            elif 0 <= x < maze.width:
                cells.append(maze[x, y])
            else:
                cells.append(WALL)
        rows.append("".join(cells))
    return "".join(row + "\n" for row in rows)


def render_emoji(maze: Maze) -> str:
    """Return the maze drawn with emoji, one line per row."""
    return "".join(
        "".join(EMOJI.get(cell, cell) for cell in line) + "\n" for line in maze.lines()
    )


def debug_dump(maze: Maze) -> str:
    """Return the raw maze text framed by blank lines."""
    return "\n" + "".join(line + "\n" for line in maze.lines()) + "\n"