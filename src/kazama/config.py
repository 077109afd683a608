import logging
import os
import sys
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(key: str) -> Optional[float]:
    raw = os.getenv(key, "").strip()
    return float(raw) if raw else None


class Settings:
    APP_ENV: str = os.getenv("APP_ENV", "dev")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    # None = wait as long as the server takes (a pull can run for minutes)
    HTTP_TIMEOUT_S: Optional[float] = _optional_float("KAZAMA_HTTP_TIMEOUT_S")
    TRACE_FILE: str = os.getenv("KAZAMA_TRACE_FILE", "logs/traces.jsonl")

settings = Settings()


def setup_logging(level: Optional[str] = None, name: Optional[str] = None) -> logging.Logger:
    """Stdout logging for scripts (root logger by default); the library never calls this itself."""
    lg = logging.getLogger(name)
    if lg.handlers:
        return lg
    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s"))
    lg.addHandler(h)
    lg.setLevel((level or settings.LOG_LEVEL).upper())
    return lg
