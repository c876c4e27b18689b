from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterable, Iterator

from wordgrid.errors import BoardError, InvariantViolation

logger = logging.getLogger("wordgrid")

Cell = tuple[int, int]

# Moore neighborhood, walked counter-clockwise starting from the left cell.
# Search output order depends on this sequence.
NEIGHBOR_OFFSETS: tuple[Cell, ...] = (
    (0, -1),
    (1, -1),
    (1, 0),
    (1, 1),
    (0, 1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)

_ROW_SEPARATOR = re.compile(r"[\n/]")


def positions(x: int, y: int) -> list[Cell]:
    """All cells of an x-by-y grid in row-major order."""
    if x <= 0 or y <= 0:
        raise InvariantViolation(f"grid dimensions must be positive, got {x}x{y}")
    return [(i, j) for i in range(x) for j in range(y)]


def neighbor_pairs(x: int, y: int) -> list[tuple[Cell, Cell]]:
    """(cell, neighbor) for every in-bounds Moore neighbor, both directions included."""
    pairs = []
    for i, j in positions(x, y):
        for di, dj in NEIGHBOR_OFFSETS:
            ni, nj = i + di, j + dj
            if 0 <= ni < x and 0 <= nj < y:
                pairs.append(((i, j), (ni, nj)))

    if not pairs and x * y > 1:
        raise InvariantViolation(f"no neighbor pairs generated for a {x}x{y} grid")
    return pairs


class AdjacencyGraph:
    """Undirected graph over grid cells. Immutable once built."""

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y
        self.positions: tuple[Cell, ...] = tuple(positions(x, y))
        self.nodes: dict[Cell, int] = {cell: idx for idx, cell in enumerate(self.positions)}
        self._adjacent: list[list[int]] = [[] for _ in self.positions]
        self._edges: set[tuple[Cell, Cell]] = set()

        for a, b in neighbor_pairs(x, y):
            node_a = self.node(a)
            node_b = self.node(b)
            if (a, b) not in self._edges and (b, a) not in self._edges:
                self._edges.add((a, b))
            # Each pair is generated from both ends, so every end records its own side.
            self._adjacent[node_a].append(node_b)

    @property
    def edges(self) -> frozenset[tuple[Cell, Cell]]:
        return frozenset(self._edges)

    def node(self, cell: Cell) -> int:
        try:
            return self.nodes[cell]
        except KeyError:
            raise InvariantViolation(f"cell {cell} has no node in the {self.x}x{self.y} graph") from None

    def neighbors(self, cell: Cell) -> list[Cell]:
        """Adjacent cells in NEIGHBOR_OFFSETS order."""
        return [self.positions[idx] for idx in self._adjacent[self.node(cell)]]

    def degree(self, cell: Cell) -> int:
        return len(self._adjacent[self.node(cell)])

    def __len__(self) -> int:
        return len(self.positions)

    def __contains__(self, cell) -> bool:
        return cell in self.nodes

    def __repr__(self) -> str:
        return f"AdjacencyGraph({self.x}x{self.y}, nodes={len(self)}, edges={len(self._edges)})"


def build_graph(x: int, y: int) -> AdjacencyGraph:
    graph = AdjacencyGraph(x, y)
    logger.debug("Built %r", graph)
    return graph


class Board:
    """Fixed rectangular grid of single characters."""

    __slots__ = ("rows", "x", "y")

    def __init__(self, rows: Iterable[Iterable[str]]):
        grid = tuple(tuple(row) for row in rows)
        if not grid or not grid[0]:
            raise BoardError("board is empty")

        width = len(grid[0])
        for r, row in enumerate(grid):
            if len(row) != width:
                raise BoardError(f"row {r} has {len(row)} cells, expected {width}")
            for c, ch in enumerate(row):
                if not isinstance(ch, str) or len(ch) != 1:
                    raise BoardError(f"cell ({r},{c}) must be a single character, got {ch!r}")

        self.rows: tuple[tuple[str, ...], ...] = grid
        self.x = len(grid)
        self.y = width

    def __getitem__(self, cell: Cell) -> str:
        i, j = cell
        return self.rows[i][j]

    def __iter__(self) -> Iterator[tuple[str, ...]]:
        return iter(self.rows)

    def __eq__(self, other) -> bool:
        return isinstance(other, Board) and self.rows == other.rows

    def __hash__(self) -> int:
        return hash(self.rows)

    def as_lists(self) -> list[list[str]]:
        return [list(row) for row in self.rows]

    def __str__(self) -> str:
        return "/".join("".join(row) for row in self.rows)

    def __repr__(self) -> str:
        return f"Board({self.x}x{self.y}, {str(self)!r})"


def _split_row(row: str) -> list[str]:
    row = row.strip()
    if any(ch.isspace() for ch in row):
        return row.split()
    return list(row)


def parse_board(text: str) -> Board:
    """Parse rows separated by newlines or '/'.

    A row is either a run of characters ("atgc") or single characters
    separated by whitespace ("a t g c"). Blank rows are ignored.
    """
    rows = [_split_row(line) for line in _ROW_SEPARATOR.split(text) if line.strip()]
    return Board(rows)


def load_board(path: str | Path) -> Board:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise BoardError(f"could not read board from {path}: {e}") from e
    board = parse_board(text)
    logger.info("Loaded %dx%d board from %s", board.x, board.y, path)
    return board
