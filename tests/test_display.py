from labyrush.display import debug_dump, render_emoji, view_around
from labyrush.maze import Maze, Pos


def small_maze():
    return Maze.from_lines(["#####", "#E.O#", "#####"])


def test_view_has_five_rows_of_five():
    view = view_around(small_maze(), Pos(1, 1))
    rows = view.split("\n")
    assert rows[-1] == ""
    assert [len(r) for r in rows[:-1]] == [5] * 5
    assert len(view) == 30


def test_view_center_is_player():
    rows = view_around(small_maze(), Pos(2, 1)).splitlines()
    assert rows[2][2] == "P"


def test_view_out_of_bounds_is_wall():
    rows = view_around(small_maze(), Pos(1, 1)).splitlines()
    assert rows[0] == "#####"
    assert rows[4] == "#####"
    assert rows[2] == "##P.O"


def test_view_copies_maze_cells():
    maze = small_maze()
    rows = view_around(maze, Pos(2, 1)).splitlines()
    assert rows[2][1] == maze[1, 1]
    assert rows[2][3] == maze[3, 1]


def test_render_emoji_maps_cells():
    maze = Maze.from_lines(["#.", "OE", "P%"])
    assert render_emoji(maze) == "🏰🔲\n🥧🍽\n🚙💥\n"


def test_render_emoji_keeps_unknown_chars():
    maze = Maze.from_lines(["?#"])
    assert render_emoji(maze) == "?🏰\n"


def test_debug_dump_round_trips():
    maze = small_maze()
    dump = debug_dump(maze)
    assert dump.startswith("\n") and dump.endswith("\n\n")
    assert Maze.from_lines(dump.strip("\n").split("\n")) == maze