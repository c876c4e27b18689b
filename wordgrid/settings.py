import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    # Reference 4x4 board, rows separated by "/"
    BOARD: str = "atgc/lrje/jrfg/mhes"

    MAX_RESULTS: int = 0
    MAX_BOARD_CELLS: int = 64

    NOTIFY: bool = False
    NTFY_TOPIC: str = "wordgrid"
    NTFY_URL: str = "https://ntfy.sh"

    DEBUG: bool = False
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "words"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


# Fields that may be changed at runtime through update_settings / the HTTP API
EDITABLE_FIELDS: dict[str, type] = {
    "MAX_RESULTS": int,
    "MAX_BOARD_CELLS": int,
    "NOTIFY": bool,
    "NTFY_TOPIC": str,
    "DEBUG": bool,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        return int(value)
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply runtime updates. Returns {field: error} for rejected fields; valid ones still apply."""
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            setattr(cfg, name, _coerce(getattr(cfg, name), value))
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value {value!r}: {e}"
    return errors


settings = Settings()
