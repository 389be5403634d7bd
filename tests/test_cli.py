import io
import random

import pytest

from labyrush.cli import ask_if_bot, choose_maze, load_maze, main
from labyrush.maze import Pos

CORRIDOR = "#######\n#E..O.#\n#######\n"


def write_maze(tmp_path, text=CORRIDOR, newline="\n"):
    path = tmp_path / "maze.txt"
    path.write_bytes(text.replace("\n", newline).encode())
    return path


def test_load_maze_finds_start_and_goal(tmp_path):
    maze, start, goal = load_maze(str(write_maze(tmp_path)))
    assert (maze.width, maze.height) == (7, 3)
    assert start == Pos(1, 1)
    assert goal == Pos(4, 1)


def test_load_maze_strips_crlf(tmp_path):
    maze, _, _ = load_maze(str(write_maze(tmp_path, newline="\r\n")))
    assert maze.lines() == CORRIDOR.splitlines()


def test_load_maze_without_goal(tmp_path):
    with pytest.raises(ValueError):
        load_maze(str(write_maze(tmp_path, "###\n#E#\n###\n")))


def test_load_maze_empty_file(tmp_path):
    with pytest.raises(ValueError):
        load_maze(str(write_maze(tmp_path, "")))


def test_choose_maze_marks_endpoints():
    maze, start, goal = choose_maze(random.Random(3))
    assert maze[start] == "E"
    assert maze[goal] == "O"
    assert start != goal


@pytest.mark.parametrize("answer, expected", [("y\n", True), ("n\n", False)])
def test_ask_if_bot(answer, expected):
    out = io.StringIO()
    assert ask_if_bot(io.StringIO(answer), out) is expected
    assert out.getvalue() == "are you a bot ? (y/n)\n"


def test_ask_if_bot_rejects_other_answers():
    out = io.StringIO()
    with pytest.raises(ValueError):
        ask_if_bot(io.StringIO("maybe\n"), out)
    assert out.getvalue().endswith("????\n")


def run_main(tmp_path, monkeypatch, moves):
    path = write_maze(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("n\n" + moves))
    code = main([str(path)])
    return code, (tmp_path / "result.log").read_text(encoding="utf-8")


def test_main_victory(tmp_path, monkeypatch, capsys):
    code, log = run_main(tmp_path, monkeypatch, "RIGHT\n" * 3 + "LEFT\n" * 3)
    out = capsys.readouterr().out
    assert code == 0
    assert "--VICTOIRE--" in log
    assert " score : 6 mouvements" in out
    assert "timer until O (goal) reached = 3" in out
    assert "width = 7 high = 3 begin_x = 1 begin_y = 1" in log


def test_main_defeat_on_wall(tmp_path, monkeypatch, capsys):
    code, log = run_main(tmp_path, monkeypatch, "UP\n")
    assert code == 0
    assert "--DEFAITE--" in log
    assert "💥" in log
    assert "--DEFAITE--" in capsys.readouterr().out


def test_main_shortcut(tmp_path, monkeypatch):
    code, log = run_main(tmp_path, monkeypatch, "Je suis Chuck Norris\n")
    assert code == 0
    assert " score : 0 mouvement" in log


def test_main_missing_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert main([str(tmp_path / "absent.txt")]) == 1


def test_main_bad_bot_answer(tmp_path, monkeypatch, capsys):
    path = write_maze(tmp_path)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("what\n"))
    assert main([str(path)]) == 0
    assert "????" in capsys.readouterr().out