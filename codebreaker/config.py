"""
Single place to:
- Read settings from env (and a local .env if present)
- Build a Settings object for the generator and the store
- Configure logging once for the process

Why: keeps knobs like the retry cap out of the game logic and easy to override in tests.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

# 1) Load env vars from .env if present
# dev convenience; a real deployment injects env vars
load_dotenv()

DEFAULT_MAX_ATTEMPTS = 10_000
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Per-profile cap on rejection sampling draws
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    # Re-score clues touched by the coverage patch and give them a matching label
    relabel_patched: bool = False
    log_level: str = "INFO"


def _read_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}.")
    if value <= 0:
        raise RuntimeError(f"{name} must be positive, got {value}.")
    return value


def load_settings() -> Settings:
    """Read settings from the environment (no caching)."""
    return Settings(
        max_attempts=_read_int("CODEBREAKER_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
        relabel_patched=os.getenv("CODEBREAKER_RELABEL_PATCHED", "false").strip().lower() in _TRUTHY,
        log_level=os.getenv("CODEBREAKER_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        raise RuntimeError(f"Unknown log level {settings.log_level!r}.")
    logging.basicConfig(level=level, format=LOG_FORMAT)
