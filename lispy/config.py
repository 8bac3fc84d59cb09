from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

# Defaults
DEFAULT_PROMPT = "lispy> "
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def str_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None or not raw.strip():
        return default
    return raw


def get_prompt() -> str:
    # Whitespace is significant in a prompt, so it is not stripped.
    return os.environ.get('LISPY_PROMPT') or DEFAULT_PROMPT


def get_history_file() -> Optional[Path]:
    raw = os.environ.get('LISPY_HISTORY_FILE')
    if not raw or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


def get_log_level() -> str:
    return str_from_env('LISPY_LOG_LEVEL', DEFAULT_LOG_LEVEL).strip().upper()


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root handler; later calls only adjust the level."""
    name = (level or get_log_level()).upper()
    numeric = logging.getLevelName(name)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level!r}")
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger().setLevel(numeric)
