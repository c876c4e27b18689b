"""Persistent paths through the grid.

A path is a chain of nodes linked from the newest cell back to the origin.
Extending a path allocates one node that points at its parent, so sibling
branches share every cell they have in common and nothing is copied.
Python's reference counting keeps a node alive exactly as long as some
path (or a pending search frame) still reaches it.
"""
from __future__ import annotations

from typing import Iterator

from wordgrid.grid import Cell


class PathNode:
    __slots__ = ("position", "character", "parent", "depth")

    def __init__(self, position: Cell, character: str, parent: PathNode | None = None):
        self.position = position
        self.character = character
        self.parent = parent
        self.depth: int = 1 if parent is None else parent.depth + 1

    @property
    def is_root(self) -> bool:
        return self.parent is None

    def extend(self, position: Cell, character: str) -> PathNode:
        return PathNode(position, character, self)

    def iter_chain(self) -> Iterator[PathNode]:
        """Yield this node, then each ancestor up to and including the root."""
        node = self
        while node is not None:
            yield node
            node = node.parent

    def __iter__(self) -> Iterator[PathNode]:
        return self.iter_chain()

    def characters_so_far(self) -> str:
        chars = [node.character for node in self.iter_chain()]
        chars.reverse()
        return "".join(chars)

    def positions_so_far(self, reverse: bool = False) -> list[Cell]:
        """Cells from this node back to the root; reverse=True gives root first."""
        cells = [node.position for node in self.iter_chain()]
        if reverse:
            cells.reverse()
        return cells

    def contains_position(self, cell: Cell) -> bool:
        return any(node.position == cell for node in self.iter_chain())

    def __len__(self) -> int:
        return self.depth

    def __repr__(self) -> str:
        return f"PathNode({self.characters_so_far()!r}, end={self.position})"


def extend(parent: PathNode, position: Cell, character: str) -> PathNode:
    return parent.extend(position, character)
