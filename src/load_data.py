"""
load_data.py
------------
Fetches SpaceX launches plus the rocket / launchpad / payload lookup tables
and packs them into one immutable DashboardData snapshot.
- Caches every collection under data/cache/<name>.json
- Builds id -> name maps for rockets and launchpads
- Builds id -> record map for payloads
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import requests
from rich.console import Console

from src.config import API_BASE_URL, CACHE_DIR, COLLECTIONS, REQUEST_TIMEOUT
from src.models import DashboardData
from src.utils import fetch_with_cache, read_json, setup_logging

console = Console()


class DataLoadError(RuntimeError):
    """A collection came back in a shape the dashboard cannot use."""


def collection_url(name: str) -> str:
    return f"{API_BASE_URL}/{name}"


def fetch_collection(name: str) -> List[Dict[str, Any]]:
    url = collection_url(name)
    console.print(f"Fetching [cyan]{url}[/cyan] ...")
    resp = requests.get(url, timeout=REQUEST_TIMEOUT)
    resp.raise_for_status()
    return _require_list(name, resp.json())


def _require_list(name: str, data: Any) -> List[Dict[str, Any]]:
    if not isinstance(data, list):
        raise DataLoadError(f"{name}: expected a JSON list, got {type(data).__name__}")
    return data


def build_reference_maps(rockets: List[Dict[str, Any]], launchpads: List[Dict[str, Any]],
                         payloads: List[Dict[str, Any]]) -> Tuple[Dict[str, str], Dict[str, str], Dict[str, Dict[str, Any]]]:
    """id -> display name for rockets/launchpads, id -> full record for payloads."""
    rocket_map = {rk["id"]: rk.get("name") for rk in rockets if rk.get("id") and rk.get("name")}
    launchpad_map = {
        lp["id"]: (lp.get("name") or lp.get("full_name"))
        for lp in launchpads
        if lp.get("id") and (lp.get("name") or lp.get("full_name"))
    }
    payload_map = {pl["id"]: pl for pl in payloads if pl.get("id")}
    return rocket_map, launchpad_map, payload_map


def loading_placeholder() -> DashboardData:
    """The snapshot the dashboard holds before the first load completes."""
    return DashboardData(loading=True)


def load_dashboard_data(refresh: bool = False, cache_only: bool = False,
                        cache_dir: Optional[Path] = None) -> DashboardData:
    """
    Load all four collections. With cache_only, never touch the network and
    raise FileNotFoundError for anything not cached yet.
    """
    cache_dir = cache_dir or CACHE_DIR
    raw = {}
    for name in COLLECTIONS:
        if cache_only:
            path = cache_dir / f"{name}.json"
            if not path.exists():
                raise FileNotFoundError(f"No cached {name} at {path}. Run without --offline first.")
            raw[name] = _require_list(name, read_json(path))
        else:
            raw[name] = _require_list(
                name,
                fetch_with_cache(lambda n=name: fetch_collection(n), name, refresh=refresh, cache_dir=cache_dir),
            )

    rocket_map, launchpad_map, payload_map = build_reference_maps(
        raw["rockets"], raw["launchpads"], raw["payloads"]
    )
    logging.info(
        "Loaded launches=%d rockets=%d launchpads=%d payloads=%d",
        len(raw["launches"]), len(rocket_map), len(launchpad_map), len(payload_map),
    )
    return DashboardData(
        launches=tuple(raw["launches"]),
        rockets=rocket_map,
        launchpads=launchpad_map,
        payloads=payload_map,
        loading=False,
    )


if __name__ == "__main__":
    setup_logging("load_data")
    try:
        data = load_dashboard_data(refresh=True)
        console.print(f"[green]Snapshot ready:[/green] {len(data.launches)} launches cached in {CACHE_DIR}")
    except Exception as e:
        logging.exception("Load failed: %s", e)
        console.print(f"[red]Load failed:[/red] {e}")
        raise SystemExit(1)
