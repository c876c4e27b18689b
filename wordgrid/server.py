import logging

from fastapi import FastAPI, Request, HTTPException, BackgroundTasks
from fastapi.responses import JSONResponse

from wordgrid.settings import settings

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger("wordgrid")

# Populated at startup
_trie = None


def _board_from_payload(payload):
    from wordgrid.errors import BoardError
    from wordgrid.grid import Board, parse_board

    if isinstance(payload, str):
        return parse_board(payload)
    if isinstance(payload, list) and all(isinstance(row, str) for row in payload):
        return parse_board("\n".join(payload))
    if isinstance(payload, list) and all(isinstance(row, list) for row in payload):
        return Board(payload)
    raise BoardError("'board' must be a string, a list of row strings or a list of character lists")


def create_app() -> FastAPI:
    from contextlib import asynccontextmanager

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        global _trie

        if settings.DEBUG:
            logging.getLogger("wordgrid").setLevel(logging.DEBUG)

        from wordgrid.dictionary import load_dictionary
        from wordgrid.errors import DictionaryLoadError
        logger.info("Loading dictionary from %s", settings.DICTIONARY_PATH)
        try:
            _trie = load_dictionary(settings.DICTIONARY_PATH)
        except DictionaryLoadError as e:
            _trie = None
            logger.error("Dictionary unavailable, /solve disabled: %s", e)

        yield

        _trie = None

    application = FastAPI(title="Word Grid Solver", lifespan=lifespan)

    @application.get("/health")
    async def health():
        return {"status": "ok", "dictionary_loaded": _trie is not None}

    @application.post("/solve")
    async def solve(request: Request, background_tasks: BackgroundTasks):
        from wordgrid.errors import BoardError
        from wordgrid.grid import build_graph
        from wordgrid.metrics import SearchStats, StageTimer
        from wordgrid.notifier import send_notification
        from wordgrid.search import SearchEngine

        if _trie is None:
            raise HTTPException(503, "Dictionary not loaded")

        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(400, "Request body must be JSON")
        if not isinstance(body, dict) or "board" not in body:
            raise HTTPException(400, "Missing 'board' in request body")

        timer = StageTimer()

        with timer.stage("parse"):
            try:
                board = _board_from_payload(body["board"])
            except BoardError as e:
                raise HTTPException(400, str(e))
            if board.x * board.y > settings.MAX_BOARD_CELLS:
                raise HTTPException(413, f"Board too large (max {settings.MAX_BOARD_CELLS} cells)")

        logger.info("Board %dx%d: %s", board.x, board.y, board)

        with timer.stage("graph"):
            graph = build_graph(board.x, board.y)

        stats = SearchStats()
        with timer.stage("search"):
            all_words = list(SearchEngine(board, graph, _trie, stats).words())

        words = all_words[:settings.MAX_RESULTS] if settings.MAX_RESULTS > 0 else all_words
        logger.info("Found %d words (returning %d)", len(all_words), len(words))

        if settings.NOTIFY:
            background_tasks.add_task(
                send_notification, all_words, board.as_lists(),
                timer.summary(), settings.NTFY_TOPIC, settings.NTFY_URL,
            )

        return JSONResponse({
            "rows": board.x,
            "cols": board.y,
            "board": board.as_lists(),
            "words": words,
            "word_count": len(all_words),
            "processing_time": timer.total_ms,
            "stage_timings": timer.summary(),
            "stats": stats.as_dict(),
        })

    @application.get("/api/settings")
    async def api_get_settings():
        from wordgrid.settings import get_editable_settings, EDITABLE_FIELDS
        values = get_editable_settings(settings)
        field_types = {k: v.__name__ for k, v in EDITABLE_FIELDS.items()}
        return JSONResponse({"settings": values, "field_types": field_types})

    @application.post("/api/settings")
    async def api_post_settings(request: Request):
        from wordgrid.settings import update_settings, get_editable_settings
        body = await request.json()
        errors = update_settings(settings, **body)
        if errors:
            return JSONResponse({"updated": get_editable_settings(settings), "errors": errors}, status_code=400)
        logger.info("Settings updated: %s", body)
        return JSONResponse({"updated": get_editable_settings(settings)})

    return application


app = create_app()
