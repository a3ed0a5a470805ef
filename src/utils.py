"""
utils.py
--------
Small shared helpers: logging setup, JSON cache reads/writes and
lookups that never raise on odd keys.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from src.config import CACHE_DIR, LOG_DIR


def setup_logging(name: str, level: int = logging.INFO) -> Path:
    """Send log records to logs/<name>.log."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    log_file = LOG_DIR / f"{name}.log"
    logging.basicConfig(
        filename=str(log_file),
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    return log_file


def read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def write_json(path: Path, data: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def fetch_with_cache(fetch: Callable[[], Any], name: str, refresh: bool = False,
                     cache_dir: Optional[Path] = None) -> Any:
    """Return data/cache/<name>.json if present, else call fetch() and store it."""
    path = (cache_dir or CACHE_DIR) / f"{name}.json"
    if path.exists() and not refresh:
        logging.info("Cache hit for %s: %s", name, path)
        return read_json(path)
    data = fetch()
    write_json(path, data)
    logging.info("Cached %s -> %s", name, path)
    return data


def safe_get(mapping: Optional[Mapping], key: Any, default: Any = None) -> Any:
    """mapping.get(key) that tolerates a missing map and unhashable keys."""
    if mapping is None or key is None:
        return default
    try:
        return mapping.get(key, default)
    except TypeError:
        # list/dict ids from malformed records
        return default
