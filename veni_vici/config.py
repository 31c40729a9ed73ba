"""
Application settings read from the environment.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.thecatapi.com"
DEFAULT_PORT = 8000


def _env_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}")
        return None


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}, using {default}")
        return default


@dataclass
class Settings:
    api_key: Optional[str] = None  # sent as x-api-key when set
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None  # None = transport default
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = DEFAULT_PORT
    debug: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv()
        return cls(
            api_key=os.getenv("CAT_API_KEY") or None,
            base_url=os.getenv("CAT_API_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
            timeout=_env_float("CAT_API_TIMEOUT"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            host=os.getenv("HOST", "0.0.0.0"),
            port=_env_int("PORT", DEFAULT_PORT),
            debug=os.getenv("FLASK_DEBUG", "").lower() in ("1", "true", "yes"),
        )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
