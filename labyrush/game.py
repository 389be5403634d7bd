"""Rules of a game: reading commands, moving the player, deciding the end."""

from __future__ import annotations

import enum
import random
from dataclasses import dataclass, field
from typing import Callable

from labyrush.maze import CRASH, GOAL, PLAYER, START, WALL, Maze, Pos

MAX_MOVES = 10000

WRONG_COMMAND_REPLIES = {
    "Coucou\n": "euh... coucou ? :D\n",
    "Ca va?\n": "Ouiiiiiii ! Et toaaaaaa ?? <3\n",
    "Fait un truc\n": "Hello World\n",
}

WRONG_COMMAND_MESSAGES = (
    "Soudain, vous mourrez de décès\n",
    "Vous marchez sur un champignon invisible, explosif et toxique, pas de chance\n",
    "Vous avez attrapé le COVID, vous êtes confiné 2 semaines, cheh.\n",
    "Elden Ring vous appelle, vous décidez d'abandonner mon jeu trop simple\n",
    "L'echo de votre commande retentit, vous vous rendez compte que vous vous êtes "
    "trompé\nVous vous suicidez de honte\nIl vous vous en faut peu...\n",
)

TIMER_MESSAGES = (
    "Trop tard, le petit pot de beurre que vous deviez apporter à mère-grand s'est périmé.\n",
    "En se sortant les doigts ça marche mieux!\n",
    "La montre fait *tic* *toc* *tic* *toc*... !!! NON PAS TICTOC !!!\n"
    "Vous préfèrez mourir que de connaître la suite, tout le monde vous comprend\n",
    "zzzZZZzzz...\nZZz...\n\nz..?\n..!! Ah oui pardon, meurs !\nVoila\n\nzzz...\n",
    "Un petit pas pour l'homme, mais un pas de trop pour ce test\n",
)

WALL_MESSAGES = (
    "On a oublié de vous dire que les murs sont électrisés. Oups!\n",
    "Boire ou conduire, il faut boire\n",
    "Ce mur n'était pas comestible\n",
    "Seg faulted\n",
    "On est pas dans Wolfenstein 3D !\n",
)


class Command(enum.Enum):
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)
    CHUCK_NORRIS = (0, 0)

    @property
    def delta(self) -> tuple[int, int]:
        return self.value


class Outcome(enum.Enum):
    PLAYING = "playing"
    VICTORY = "victory"
    SHORTCUT = "shortcut"
    DEFEAT = "defeat"


_PREFIXES = (
    (("DROITE\n", "RIGHT\n"), Command.RIGHT),
    (("BAS\n", "DOWN\n"), Command.DOWN),
    (("GAUCHE\n", "LEFT\n"), Command.LEFT),
    (("HAUT\n", "UP\n"), Command.UP),
)


def parse_command(text: str) -> Command | None:
    """Return the command that ``text`` starts with, or None if there is none."""
    for prefixes, command in _PREFIXES:
        if text.startswith(prefixes):
            return command
    if text == "Je suis Chuck Norris\n":
        return Command.CHUCK_NORRIS
    return None


def wrong_command_message(text: str, rng: random.Random) -> str:
    """Return the reply to an unknown command."""
    reply = WRONG_COMMAND_REPLIES.get(text)
    if reply is not None:
        return reply
    return WRONG_COMMAND_MESSAGES[rng.randrange(len(WRONG_COMMAND_MESSAGES))]


def timer_message(rng: random.Random) -> str:
    """Return a message for running out of moves on the way back."""
    return TIMER_MESSAGES[rng.randrange(len(TIMER_MESSAGES))]


def wall_message(rng: random.Random) -> str:
    """Return a message for walking into a wall."""
    return WALL_MESSAGES[rng.randrange(len(WALL_MESSAGES))]


@dataclass
class Game:
    """State of one game.

    The player must reach the goal ``O`` and then come back to the start
    ``E`` within ``timer`` moves. ``on_goal`` is called once, when the goal
    is first reached.
    """

    maze: Maze
    pos: Pos
    timer: int
    on_goal: Callable[[], None] | None = None
    max_moves: int = MAX_MOVES
    rng: random.Random = field(default_factory=random.Random)
    countdown: bool = False
    outcome: Outcome = Outcome.PLAYING
    message: str | None = None
    moves: int = 0

    def __post_init__(self) -> None:
        self.pos = Pos(*self.pos)

    def _lose(self, message: str) -> None:
        self.outcome = Outcome.DEFEAT
        self.message = message

    def step(self, text: str) -> Outcome:
        """Play the command in ``text`` and return the resulting outcome."""
        if self.outcome is not Outcome.PLAYING:
            raise RuntimeError("the game is over")
        command = parse_command(text)
        if command is None:
            self._lose(wrong_command_message(text, self.rng))
            return self.outcome
        if command is Command.CHUCK_NORRIS:
            self.outcome = Outcome.SHORTCUT
            return self.outcome

        self.moves += 1
        if self.countdown:
            self.timer -= 1
            if self.timer < 0:
                self.maze[self.pos] = PLAYER
                self._lose(timer_message(self.rng))
                return self.outcome

        target = self.pos.offset(*command.delta)
        if not self.maze.in_bounds(target) or self.maze[target] == WALL:
            self.maze[self.pos] = PLAYER
            if self.maze.in_bounds(target):
                self.maze[target] = CRASH
            self._lose(wall_message(self.rng))
            return self.outcome

        self.pos = target
        cell = self.maze[target]
        if cell == GOAL and not self.countdown:
            self.countdown = True
            if self.on_goal is not None:
                self.on_goal()
        if cell == START and self.countdown:
            self.outcome = Outcome.VICTORY
        elif self.moves > self.max_moves:
            self.outcome = Outcome.DEFEAT
        return self.outcome