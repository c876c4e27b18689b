import logging
import time
from contextlib import contextmanager
from dataclasses import asdict, dataclass

logger = logging.getLogger("wordgrid")


class StageTimer:
    """Collects per-stage timing for a single solve."""

    def __init__(self):
        self.timings: dict[str, float] = {}
        self._start = time.perf_counter()

    @contextmanager
    def stage(self, name: str):
        t0 = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - t0
            self.timings[name] = round(elapsed * 1000, 1)  # ms
            logger.info("stage=%s elapsed=%.1fms", name, self.timings[name])

    @property
    def total_ms(self) -> float:
        return round((time.perf_counter() - self._start) * 1000, 1)

    def summary(self) -> dict:
        return {**self.timings, "total": self.total_ms}


@dataclass
class SearchStats:
    """Counters filled in by SearchEngine while it runs."""

    origins: int = 0
    expansions: int = 0
    pruned_prefix: int = 0
    pruned_revisit: int = 0
    discoveries: int = 0

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
