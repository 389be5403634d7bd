"""A blind maze game with two maze generators, A* search and an automatic solver."""

__version__ = "1.0.0"