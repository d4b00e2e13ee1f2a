"""
Central configuration loader.
Reads from environment variables (via .env) and sets up logging.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


# ---------------------------------------------------------------------------
# Load .env from repo root (if present)
# ---------------------------------------------------------------------------
_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env")

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _get(key: str, default: Optional[str] = None, required: bool = False) -> Optional[str]:
    val = os.getenv(key, default)
    if required and not val:
        raise EnvironmentError(f"Missing required environment variable: {key}")
    return val


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
def get_repo_root() -> Path:
    return _REPO_ROOT


def get_db_path() -> Path:
    raw = _get("SALESDAO_DB_PATH")
    if raw:
        return Path(raw).expanduser()
    return _REPO_ROOT / "data" / "sales.db"


# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
def get_log_level() -> int:
    name = (_get("SALESDAO_LOG_LEVEL", default="INFO") or "INFO").upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise EnvironmentError(f"Unknown log level in SALESDAO_LOG_LEVEL: {name}")
    return level


def configure_logging(level: Optional[int] = None) -> None:
    """Configure the root logger for scripts and demos."""
    logging.basicConfig(
        level=get_log_level() if level is None else level,
        format=LOG_FORMAT,
    )
