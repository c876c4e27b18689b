"""Print every word discovered on a board, one per line."""
import argparse
import logging
import sys

from wordgrid.dictionary import load_dictionary
from wordgrid.errors import BoardError, DictionaryLoadError
from wordgrid.grid import build_graph, load_board, parse_board
from wordgrid.metrics import SearchStats, StageTimer
from wordgrid.search import SearchEngine
from wordgrid.settings import settings

logger = logging.getLogger("wordgrid")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wordgrid", description=__doc__)
    parser.add_argument("--dictionary", default=str(settings.DICTIONARY_PATH),
                        help="word list, one word per line (default: %(default)s)")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--board", default=settings.BOARD,
                        help="board rows separated by '/' (default: %(default)s)")
    source.add_argument("--board-file", help="read the board from a file, one row per line")
    parser.add_argument("--paths", action="store_true", help="print the cell path after each word")
    parser.add_argument("--debug", action="store_true", default=settings.DEBUG)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )

    timer = StageTimer()
    try:
        with timer.stage("load"):
            trie = load_dictionary(args.dictionary)
            board = load_board(args.board_file) if args.board_file else parse_board(args.board)
    except (DictionaryLoadError, BoardError) as e:
        logger.error("%s", e)
        return 2

    with timer.stage("graph"):
        graph = build_graph(board.x, board.y)

    stats = SearchStats()
    with timer.stage("search"):
        for discovery in SearchEngine(board, graph, trie, stats).discoveries():
            if args.paths:
                path = " ".join(f"{i},{j}" for i, j in discovery.path)
                print(f"{discovery.word} {path}")
            else:
                print(discovery.word)

    logger.info("Board %s: %d discoveries, %d expansions", board, stats.discoveries, stats.expansions)
    logger.info("Timings: %s", timer.summary())
    return 0


if __name__ == "__main__":
    sys.exit(main())
