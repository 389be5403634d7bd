import io

import pytest

from labyrush.maze import Pos
from labyrush.solver import FINISHED, Solver, find_path, main

CLOSED_VIEW = ["#####\n", "#...#\n", "#.P.#\n", "#..O#\n", "#####\n"]
CORRIDOR_VIEW = ["#####\n", "#####\n", "..P..\n", "#####\n", "#####\n"]


def _adjacent(a, b):
    return abs(a[0] - b[0]) + abs(a[1] - b[1]) == 1


def test_find_path_straight_corridor():
    zone = {(0, 0), (1, 0), (2, 0)}
    assert find_path(zone, (0, 0), (2, 0)) == [Pos(1, 0), Pos(2, 0)]


def test_find_path_same_cell_is_empty():
    assert find_path({(1, 1)}, (1, 1), (1, 1)) == []


def test_find_path_unreachable_is_empty():
    zone = {(0, 0), (1, 0), (5, 5)}
    assert find_path(zone, (0, 0), (5, 5)) == []


def test_find_path_is_shortest_and_connected():
    zone = {(x, y) for x in range(6) for y in range(6)} - {(2, y) for y in range(5)}
    path = find_path(zone, (0, 0), (5, 0))
    assert path[-1] == (5, 0)
    assert all(cell in zone for cell in path)
    assert _adjacent((0, 0), path[0])
    assert all(_adjacent(a, b) for a, b in zip(path, path[1:]))
    # the wall forces a detour through row 5
    assert len(path) == 5 + 2 * 5


def test_solver_rejects_empty_map():
    with pytest.raises(ValueError):
        Solver(0, 5, 1, 1, 0)


def test_read_view_records_cells_once():
    solver = Solver(7, 7, 3, 3, 0)
    assert solver.read_view(CLOSED_VIEW) is True
    assert solver.read_view(CLOSED_VIEW) is False
    assert solver.goal == Pos(4, 4)
    assert solver.cell((3, 3)) == "."
    assert solver.cell((1, 1)) == "#"
    assert solver.cell((0, 0)) == "?"


def test_read_view_rejects_short_lines():
    solver = Solver(7, 7, 3, 3, 0)
    with pytest.raises(ValueError):
        solver.read_view(["###\n"] * 5)


def test_read_view_rejects_wrong_line_count():
    solver = Solver(7, 7, 3, 3, 0)
    with pytest.raises(ValueError):
        solver.read_view(CLOSED_VIEW[:4])


def test_known_map_goes_to_goal_then_home():
    solver = Solver(7, 7, 3, 3, 0)
    solver.read_view(CLOSED_VIEW)
    solver.set_new_path()
    assert solver.goal_reached is True
    assert solver.path[-1] == Pos(4, 4)
    assert len(solver.path) == 2
    while not solver.path_empty():
        assert solver.follow_path() in ("RIGHT\n", "DOWN\n")
    assert solver.pos == Pos(4, 4)
    solver.set_new_path()
    assert solver.path[-1] == Pos(3, 3)
    while not solver.path_empty():
        solver.follow_path()
    assert solver.pos == solver.start


def test_follow_empty_path_reports_finished():
    solver = Solver(7, 7, 3, 3, 0)
    assert solver.follow_path() == FINISHED
    assert solver.pos == Pos(3, 3)


def test_exploration_scores_and_tie_break():
    solver = Solver(9, 9, 4, 4, 0)
    solver.read_view(CORRIDOR_VIEW)
    solver.set_new_path()
    assert solver.goal_reached is False
    assert solver.score((4, 4)) == 2
    assert solver.score((2, 4)) == 1
    assert solver.score((6, 4)) == 1
    assert solver.path == [Pos(3, 4), Pos(2, 4)]
    assert solver.follow_path() == "LEFT\n"
    assert solver.pos == Pos(3, 4)


def test_unexpected_character_raises():
    solver = Solver(9, 9, 4, 4, 0)
    solver.read_view(["#####\n", "#####\n", ".XP..\n", "#####\n", "#####\n"])
    with pytest.raises(ValueError):
        solver.set_new_path()


def test_main_plays_first_move(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    text = (
        "are you a bot ? (y/n)\n"
        "width = 7 high = 7 begin_x = 3 begin_y = 3\n"
        "timer until O (goal) reached = 2\n" + "".join(CLOSED_VIEW)
    )
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "y"
    assert lines[1] in ("RIGHT", "DOWN")
    assert len(lines) == 2
    log = (tmp_path / "output.log").read_text(encoding="utf-8")
    assert "setting up a new path" in log
    assert "P" in log


def test_main_rejects_bad_header(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    text = "question\nnothing here\ntimer = 1\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 1