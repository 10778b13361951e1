from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict


@dataclass(frozen=True)
class Config:
    default_statement_format: str = "text"
    log_level: str = "WARNING"


_ENV_PREFIX = "VIDEOSTORE_"


def _find_pyproject(start_dir: Path) -> Path | None:
    for directory in (start_dir, *start_dir.parents):
        candidate = directory / "pyproject.toml"
        if candidate.exists():
            return candidate
    return None


def _load_toml(path: Path) -> Dict[str, Any]:
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError:
        return {}


def _to_format_name(value: Any, default: str) -> str:
    if isinstance(value, str) and value.strip():
        return value.strip().lower()
    return default


def _to_log_level(value: Any, default: str) -> str:
    if isinstance(value, str):
        normalized = value.strip().upper()
        if isinstance(logging.getLevelName(normalized), int):
            return normalized
    return default


def _from_sources(raw: Dict[str, Any]) -> Config:
    default_format = _to_format_name(
        os.getenv(f"{_ENV_PREFIX}DEFAULT_FORMAT", raw.get("default_statement_format", "text")), "text"
    )
    log_level = _to_log_level(os.getenv(f"{_ENV_PREFIX}LOG_LEVEL", raw.get("log_level", "WARNING")), "WARNING")
    return Config(default_statement_format=default_format, log_level=log_level)


@lru_cache(maxsize=32)
def load_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    root = Path(start_dir or os.getcwd()).resolve()
    pyproject = _find_pyproject(root)
    if pyproject is None:
        return _from_sources({})

    parsed = _load_toml(pyproject)
    tool = parsed.get("tool", {}) if isinstance(parsed, dict) else {}
    section = tool.get("videostore", {}) if isinstance(tool, dict) else {}
    return _from_sources(section if isinstance(section, dict) else {})


def get_config() -> Config:
    return load_config(os.getcwd())


def refresh_config(start_dir: str | os.PathLike[str] | None = None) -> Config:
    load_config.cache_clear()
    return load_config(start_dir)
