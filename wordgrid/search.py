from __future__ import annotations

import logging
from enum import Enum
from typing import Iterator, NamedTuple

from wordgrid.dictionary import Trie, TrieNode
from wordgrid.errors import InvariantViolation
from wordgrid.grid import AdjacencyGraph, Board, Cell, build_graph
from wordgrid.metrics import SearchStats
from wordgrid.path import PathNode

logger = logging.getLogger("wordgrid")

# Words must be strictly longer than three characters to be reported.
MIN_EMIT_LENGTH = 4


class OriginState(Enum):
    INITIALIZED = "initialized"
    EXPANDING = "expanding"
    EXHAUSTED = "exhausted"


class Discovery(NamedTuple):
    word: str
    path: tuple[Cell, ...]


class SearchEngine:
    """Depth-first word search over a board with trie prefix pruning.

    Each origin is searched with an explicit LIFO stack of (path, trie node)
    frames, so search depth is not limited by the interpreter's recursion
    limit. Candidate neighbors are pushed in NEIGHBOR_OFFSETS order and
    therefore visited in the reverse of that order. Every discovery is
    reported, including the same word reached along different paths.
    """

    def __init__(self, board: Board, graph: AdjacencyGraph, dictionary: Trie, stats: SearchStats | None = None):
        if (board.x, board.y) != (graph.x, graph.y):
            raise InvariantViolation(
                f"board is {board.x}x{board.y} but graph was built for {graph.x}x{graph.y}"
            )
        self.board = board
        self.graph = graph
        self.dictionary = dictionary
        self.stats = stats if stats is not None else SearchStats()

    def _enter(self, origin: Cell, state: OriginState):
        logger.debug("origin=%s state=%s", origin, state.value)

    def _extensions(self, path: PathNode, node: TrieNode) -> Iterator[tuple[PathNode, TrieNode]]:
        for cell in self.graph.neighbors(path.position):
            ch = self.board[cell]
            next_node = node.child(ch)
            if next_node is None:
                self.stats.pruned_prefix += 1
                continue
            if path.contains_position(cell):
                self.stats.pruned_revisit += 1
                continue
            yield path.extend(cell, ch), next_node

    def search_origin(self, origin: Cell) -> Iterator[Discovery]:
        self.graph.node(origin)
        self.stats.origins += 1
        self._enter(origin, OriginState.INITIALIZED)

        ch = self.board[origin]
        root_node = self.dictionary.root.child(ch)
        if root_node is None:
            self._enter(origin, OriginState.EXHAUSTED)
            return

        stack: list[tuple[PathNode, TrieNode]] = [(PathNode(origin, ch), root_node)]
        self._enter(origin, OriginState.EXPANDING)

        while stack:
            path, node = stack.pop()
            if node.is_word and path.depth >= MIN_EMIT_LENGTH:
                self.stats.discoveries += 1
                yield Discovery(path.characters_so_far(), tuple(path.positions_so_far(reverse=True)))

            for frame in self._extensions(path, node):
                self.stats.expansions += 1
                stack.append(frame)

        self._enter(origin, OriginState.EXHAUSTED)

    def discoveries(self) -> Iterator[Discovery]:
        for origin in self.graph.positions:
            yield from self.search_origin(origin)

    def words(self) -> Iterator[str]:
        for discovery in self.discoveries():
            yield discovery.word


def find_words(board: Board, dictionary: Trie, stats: SearchStats | None = None) -> list[str]:
    """Every word discovery on the board, in search order, duplicates kept."""
    engine = SearchEngine(board, build_graph(board.x, board.y), dictionary, stats)
    return list(engine.words())
