"""Disjoint sets of cells, each set carrying a numeric label."""

from __future__ import annotations

from typing import Hashable


class DisjointSets:
    """Union-find over hashable cells.

    Every set has a label, handed out from 1 upwards by ``make_set``. When two
    sets are joined, the label of the first one is kept.
    """

    def __init__(self) -> None:
        self._parent: dict[Hashable, Hashable] = {}
        self._size: dict[Hashable, int] = {}
        self._label: dict[Hashable, int] = {}
        self._next_label = 1

    def make_set(self, cell: Hashable) -> int:
        """Put ``cell`` alone in a new set and return that set's label."""
        if cell in self._parent:
            raise ValueError(f"{cell!r} already belongs to a set")
        label = self._next_label
        self._next_label += 1
        self._parent[cell] = cell
        self._size[cell] = 1
        self._label[cell] = label
        return label

    def _root(self, cell: Hashable) -> Hashable:
        if cell not in self._parent:
            raise KeyError(cell)
        root = cell
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[cell] != root:
            self._parent[cell], cell = root, self._parent[cell]
        return root

    def find(self, cell: Hashable) -> int:
        """Return the label of the set holding ``cell``."""
        return self._label[self._root(cell)]

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Join the sets of ``a`` and ``b``; return False if already joined."""
        root_a, root_b = self._root(a), self._root(b)
        if root_a == root_b:
            return False
        label = self._label[root_a]
        if self._size[root_a] < self._size[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        self._size[root_a] += self._size.pop(root_b)
        del self._label[root_b]
        self._label[root_a] = label
        return True

    @property
    def set_count(self) -> int:
        """Number of distinct sets."""
        return len(self._label)

    def __contains__(self, cell: object) -> bool:
        return cell in self._parent

    def __len__(self) -> int:
        return len(self._parent)