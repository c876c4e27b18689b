import logging
from collections import defaultdict

import httpx

logger = logging.getLogger("wordgrid")

WORDS_PER_GROUP = 10


async def send_notification(
    words: list[str],
    board: list[list[str]],
    timings: dict,
    topic: str,
    ntfy_url: str = "https://ntfy.sh",
    transport: httpx.AsyncBaseTransport | None = None,
):
    """Push a solve summary to ntfy. Best-effort — failures are logged, not raised."""
    try:
        # The search reports every path; the summary only lists each word once.
        by_length: dict[int, list[str]] = defaultdict(list)
        for w in dict.fromkeys(words):
            by_length[len(w)].append(w)

        rows, cols = len(board), len(board[0]) if board else 0
        unique = sum(len(g) for g in by_length.values())
        title = f"Word grid {rows}x{cols} - {unique} words ({len(words)} paths)"

        selected = []
        for length in sorted(by_length.keys(), reverse=True):
            selected.extend(by_length[length][:WORDS_PER_GROUP])

        counts = " | ".join(f"{l}L:{len(g)}" for l, g in sorted(by_length.items()))
        body = ",".join(selected) + "\n\n" + counts
        if "total" in timings:
            body += f"\n{timings['total']}ms"

        async with httpx.AsyncClient(timeout=10.0, transport=transport) as client:
            resp = await client.post(
                f"{ntfy_url}/{topic}",
                content=body.encode("utf-8"),
                headers={
                    "Title": title,
                    "Tags": "abc",
                },
            )
            resp.raise_for_status()
            logger.info("Notification sent to %s/%s (status %d)", ntfy_url, topic, resp.status_code)

    except Exception as e:
        logger.error("Failed to send notification: %s", e)
