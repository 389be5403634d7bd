"""Command that runs a game on the standard streams and logs it."""

from __future__ import annotations

import os
import random
import sys
import threading
import time
from typing import TextIO

from labyrush.astar import shortest_path_length
from labyrush.display import debug_dump, render_emoji, view_around
from labyrush.game import Game, Outcome
from labyrush.maze import GOAL, START, Maze, Pos
from labyrush.mazer import generate_sparse
from labyrush.mazer_v2 import generate_dense

LOG_NAME = "result.log"
INPUT_TIMEOUT = 1.0
_POLL = 0.001


def load_maze(path: str) -> tuple[Maze, Pos, Pos]:
    """Read a maze file; return the maze, its start ``E`` and its goal ``O``."""
    with open(path, encoding="utf-8", newline="") as handle:
        lines = handle.readlines()
    if not lines:
        raise ValueError(f"{path} is empty")
    maze = Maze.from_lines(lines)
    start, goal = maze.find(START), maze.find(GOAL)
    if start is None or goal is None:
        raise ValueError(f"{path} needs both a start {START!r} and a goal {GOAL!r}")
    return maze, start, goal


def choose_maze(rng: random.Random) -> tuple[Maze, Pos, Pos]:
    """Generate a maze with one of the two generators, picked at random."""
    if rng.randrange(2) == 1:
        return generate_sparse(rng)
    return generate_dense(rng)


def ask_if_bot(stdin: TextIO, stdout: TextIO) -> bool:
    """Ask whether the player is a program; raise ValueError on a bad answer."""
    stdout.write("are you a bot ? (y/n)\n")
    stdout.flush()
    answer = stdin.readline()
    if answer.startswith("y\n"):
        return True
    if answer.startswith("n\n"):
        return False
    stdout.write("????\n")
    stdout.flush()
    raise ValueError(f"unexpected answer {answer!r}")


class _Watchdog:
    """Ends the process when the player takes too long to answer."""

    def __init__(self, log: TextIO, goal_limit: float):
        self._log = log
        self._goal_limit = goal_limit
        self._limit = INPUT_TIMEOUT
        self._last = time.monotonic()
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread = threading.Thread(target=self._run, daemon=True)

    def start(self) -> None:
        self._thread.start()

    def stop(self) -> None:
        self._stop.set()
        self._thread.join()

    def touch(self) -> None:
        with self._lock:
            self._last = time.monotonic()
            if self._limit == self._goal_limit:
                self._limit = INPUT_TIMEOUT

    def extend(self) -> None:
        with self._lock:
            self._limit = self._goal_limit

    def _run(self) -> None:
        while not self._stop.wait(_POLL):
            with self._lock:
                if time.monotonic() - self._last > self._limit:
                    text = "\ntimeout...\n\n --DEFAITE-- \n\n"
                    self._log.write(text)
                    self._log.flush()
                    sys.stderr.write(text)
                    sys.stderr.flush()
                    os._exit(0)


def _play(maze: Maze, start: Pos, goal: Pos, log: TextIO) -> int:
    stdin, stdout, stderr = sys.stdin, sys.stdout, sys.stderr
    stderr.write("maze done/parsed \n")
    stderr.write(debug_dump(maze))
    try:
        is_bot = ask_if_bot(stdin, stdout)
    except ValueError:
        return 0

    header = (
        f"width = {maze.width} high = {maze.height} "
        f"begin_x = {start.x} begin_y = {start.y}\n"
    )
    stdout.write(header)
    log.write(header)

    began = time.monotonic()
    try:
        timer = shortest_path_length(maze, start, goal)
    except ValueError as exc:
        stderr.write(f"{exc}\n")
        return 1
    elapsed = time.monotonic() - began
    stderr.write(f"a star done in time : {int(elapsed * 1_000_000)} usec \n")
    stdout.write(f"timer until O (goal) reached = {timer}\n")
    log.write(f"timer until O (goal) reached = {timer}\n\n")

    watchdog = None
    begin = last_input = time.monotonic()
    if is_bot:
        watchdog = _Watchdog(log, 2 * elapsed + INPUT_TIMEOUT)
        watchdog.start()
    game = Game(maze, start, timer, on_goal=watchdog.extend if watchdog else None)

    try:
        while game.outcome is Outcome.PLAYING:
            view = view_around(game.maze, game.pos)
            log.write("Current vision : \n\n" + view)
            stdout.write(view)
            stdout.flush()
            text = stdin.readline()
            if watchdog is not None:
                last_input = time.monotonic()
                watchdog.touch()
            log.write(f"\nsolver said : {text}\n")
            game.step(text)
    finally:
        if watchdog is not None:
            watchdog.stop()

    banner = "\n\n -----------BILAN---------- \n\n"
    stdout.write(banner)
    log.write(banner)
    log.write(render_emoji(game.maze))
    if game.outcome is Outcome.VICTORY:
        text = f"\n\n--VICTOIRE--\n\n score : {game.moves} mouvements\n\n"
        stdout.write(text)
        log.write(text)
        if is_bot:
            usecs = int((last_input - begin) * 1_000_000)
            log.write(f"time to resolve : {usecs} usecs\n\n")
    elif game.outcome is Outcome.SHORTCUT:
        text = "\n\n--VICTOIRE--\n\n score : 0 mouvement\n\n"
        stdout.write(text)
        log.write(text)
    else:
        message = game.message if game.message is not None else "(null)"
        body = f"\n\n{message}\n\n--DEFAITE-- \n\n {game.moves} mouvements\n"
        stdout.write(body + "\n")
        log.write(body)
    stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run a game on a maze file given as argument, or on a generated one."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        if args:
            maze, start, goal = load_maze(args[0])
        else:
            maze, start, goal = choose_maze(random.Random())
    except (OSError, ValueError):
        sys.stderr.write("erreur lors de la récupération ou la création du labyrinthe\n")
        return 1
    try:
        log = open(LOG_NAME, "w", encoding="utf-8")
    except OSError:
        sys.stderr.write("le ficher result.log ne s'est pas crée\n")
        return 3
    with log:
        return _play(maze, start, goal, log)


if __name__ == "__main__":
    sys.exit(main())