"""Application configuration models and helpers."""
from __future__ import annotations

from dataclasses import dataclass
import os


def _flag(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.strip() == "1"


def _int(value: str | None, default: int) -> int:
    try:
        return int(value) if value is not None else default
    except (TypeError, ValueError):
        return default


@dataclass(slots=True)
class AppConfig:
    debug_log: bool
    default_number: int
    host: str
    port: int
    flask_debug: bool

    @classmethod
    def from_env(cls) -> "AppConfig":
        return cls(
            debug_log=_flag(os.getenv("DEBUG_LOG"), False),
            default_number=_int(os.getenv("ROOT_CHECK_NUMBER"), 57600),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_int(os.getenv("PORT"), 5000),
            flask_debug=_flag(os.getenv("FLASK_DEBUG"), True),
        )


__all__ = ["AppConfig"]
