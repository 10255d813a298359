"""
Runtime settings for the encoding visualizer.

Values are read from environment variables after loading ``.env`` from the
project root (if present):

- SIGNAL_ENCODING_APPEND_FINAL_STATE: repeat last sample for stepped charts (default: true)
- SIGNAL_ENCODING_DEFAULT_BITS: initial bitstring in the input box (default: 10110010)
- SIGNAL_ENCODING_RANDOM_BITS_MAX: upper bound of the random-bits slider (default: 64)
- LOG_LEVEL: structlog level (default: INFO)
- LOG_FORMAT: json | console (default: console)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

_ROOT = Path(__file__).resolve().parent.parent
_ENV_PATH = _ROOT / ".env"

_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off")
LOG_FORMATS = ("json", "console")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    append_final_state: bool = True
    default_bits: str = "10110010"
    random_bits_max: int = 64
    log_level: str = "INFO"
    log_format: str = "console"


def load_env() -> None:
    """Load .env from project root. Safe to call multiple times."""
    load_dotenv(_ENV_PATH)


def _env_bool(name: str, default: bool) -> bool:
    raw = (os.getenv(name) or "").strip().lower()
    if not raw:
        return default
    if raw in _TRUE:
        return True
    if raw in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
    if value < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {value}")
    return value


def get_settings() -> Settings:
    load_env()
    defaults = Settings()

    default_bits = (os.getenv("SIGNAL_ENCODING_DEFAULT_BITS") or defaults.default_bits).strip()
    if any(c not in "01" for c in default_bits):
        raise ValueError(f"SIGNAL_ENCODING_DEFAULT_BITS must be binary, got {default_bits!r}")

    log_format = (os.getenv("LOG_FORMAT") or defaults.log_format).strip().lower()
    if log_format not in LOG_FORMATS:
        raise ValueError(f"LOG_FORMAT must be one of {LOG_FORMATS}, got {log_format!r}")

    log_level = (os.getenv("LOG_LEVEL") or defaults.log_level).strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {LOG_LEVELS}, got {log_level!r}")

    return Settings(
        append_final_state=_env_bool("SIGNAL_ENCODING_APPEND_FINAL_STATE", defaults.append_final_state),
        default_bits=default_bits,
        random_bits_max=_env_int("SIGNAL_ENCODING_RANDOM_BITS_MAX", defaults.random_bits_max),
        log_level=log_level,
        log_format=log_format,
    )
