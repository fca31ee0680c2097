"""Client configuration from environment variables.

``python-dotenv`` loads a ``.env`` file (when present) at import time;
:func:`load_settings` then reads ``BOT_TOKEN``, ``TELEGRAM_API_HOST``,
``TELEGRAM_TIMEOUT``, ``LOG_LEVEL`` and ``LOG_DIR`` into an immutable
:class:`Settings` snapshot.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os
from dataclasses import dataclass
from typing import Optional

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

DEFAULT_API_HOST = "api.telegram.org"
DEFAULT_TIMEOUT = 10


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_timeout(raw: Optional[str]) -> int:
    """Parse ``TELEGRAM_TIMEOUT``; anything that is not a positive int falls back to the default."""
    if not raw:
        return DEFAULT_TIMEOUT
    try:
        value = int(raw.strip())
    except ValueError:
        return DEFAULT_TIMEOUT
    return value if value > 0 else DEFAULT_TIMEOUT


def _parse_level(raw: Optional[str]) -> int:
    if not raw:
        return logging.INFO
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else logging.INFO


# ── Public API ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Settings:
    bot_token: Optional[str]
    api_host: str = DEFAULT_API_HOST
    timeout: int = DEFAULT_TIMEOUT
    log_level: int = logging.INFO
    log_dir: Optional[str] = None


def load_settings() -> Settings:
    """Read the current environment into a :class:`Settings` snapshot."""
    return Settings(
        bot_token=os.environ.get("BOT_TOKEN") or None,
        api_host=(os.environ.get("TELEGRAM_API_HOST") or DEFAULT_API_HOST).strip().rstrip("/"),
        timeout=_parse_timeout(os.environ.get("TELEGRAM_TIMEOUT")),
        log_level=_parse_level(os.environ.get("LOG_LEVEL")),
        log_dir=os.environ.get("LOG_DIR") or None,
    )
