from __future__ import annotations
import os
from pathlib import Path
from typing import Optional


# Defaults
_DEFAULT_PROMPT = "cinder> "
_DEFAULT_HISTORY = Path.home() / ".cinder_history"
_DEFAULT_LOG_LEVEL = "WARNING"


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if raw is None:
        return default
    return raw


def get_prompt() -> str:
    return value_from_env('CINDER_PROMPT', _DEFAULT_PROMPT)


def get_history_file() -> Optional[Path]:
    # An empty CINDER_HISTORY disables history
    raw = value_from_env('CINDER_HISTORY', str(_DEFAULT_HISTORY))
    if not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


def get_log_level() -> str:
    return value_from_env('CINDER_LOG_LEVEL', _DEFAULT_LOG_LEVEL).strip().upper()
