"""
filters.py
----------
Filter stage: narrows the full launch set by status, then by a window
relative to an explicit clock. Order is preserved; nothing is mutated.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime, timedelta
from typing import Callable, Dict, List, Union

import pandas as pd

from src.dates import as_utc, parse_utc
from src.models import FilterCriteria, Launch, StatusFilter, TimeWindow

log = logging.getLogger(__name__)

STATUS_PREDICATES: Dict[StatusFilter, Callable[[Launch], bool]] = {
    StatusFilter.UPCOMING: lambda l: l.get("upcoming") is True,
    StatusFilter.SUCCESSFUL: lambda l: l.get("success") is True and l.get("upcoming") is False,
    StatusFilter.FAILED: lambda l: l.get("success") is False and l.get("upcoming") is False,
}


def ensure_sequence(launches) -> Sequence:
    """The only fatal input: a launch collection that is not a sequence at all."""
    if isinstance(launches, (str, bytes, Mapping)) or not isinstance(launches, Sequence):
        raise TypeError(f"launches must be a sequence of records, got {type(launches).__name__}")
    return launches


def window_cutoff(window: TimeWindow, now: Union[datetime, pd.Timestamp]) -> pd.Timestamp:
    if window.days is None:
        raise ValueError("ALL_TIME has no cutoff")
    return as_utc(now) - timedelta(days=window.days)


def filter_by_status(launches: Sequence[Launch], status: StatusFilter) -> List[Launch]:
    if status is StatusFilter.ALL:
        return list(launches)
    keep = STATUS_PREDICATES[status]
    return [l for l in launches if isinstance(l, Mapping) and keep(l)]


def filter_by_window(launches: Sequence[Launch], window: TimeWindow,
                     now: Union[datetime, pd.Timestamp]) -> List[Launch]:
    if window is TimeWindow.ALL_TIME:
        return list(launches)
    cutoff = window_cutoff(window, now)
    kept = []
    for l in launches:
        ts = parse_utc(l.get("date_utc")) if isinstance(l, Mapping) else None
        if ts is None:
            log.debug("Dropping launch %r: unparseable date_utc", l.get("id") if isinstance(l, Mapping) else l)
            continue
        if ts >= cutoff:
            kept.append(l)
    return kept


def filter_launches(launches: Sequence[Launch], criteria: FilterCriteria,
                    now: Union[datetime, pd.Timestamp]) -> List[Launch]:
    """Status predicate first, then the time window."""
    ensure_sequence(launches)
    filtered = filter_by_status(launches, criteria.status)
    filtered = filter_by_window(filtered, criteria.time_window, now)
    log.debug("Filter %s/%s kept %d of %d launches",
              criteria.status.value, criteria.time_window.value, len(filtered), len(launches))
    return filtered
