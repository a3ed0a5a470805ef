"""
dates.py
--------
UTC timestamp parsing and display formatting for launch dates.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional, Union

import pandas as pd

from src.config import PLACEHOLDER

# pandas resolves these against the wall clock
RELATIVE_WORDS = {"now", "today"}


def parse_utc(value: Any) -> Optional[pd.Timestamp]:
    """Parse an ISO-8601 string to a UTC timestamp; None when unparseable."""
    if not isinstance(value, str) or not value.strip():
        return None
    if value.strip().lower() in RELATIVE_WORDS:
        return None
    try:
        ts = pd.to_datetime(value, errors="coerce", utc=True)
    except (ValueError, OverflowError):
        return None
    if pd.isna(ts):
        return None
    return ts


def as_utc(now: Union[datetime, pd.Timestamp]) -> pd.Timestamp:
    """Naive clocks are read as UTC."""
    ts = pd.Timestamp(now)
    if ts.tzinfo is None:
        return ts.tz_localize("UTC")
    return ts.tz_convert("UTC")


def format_utc_date(value: Any) -> str:
    """'2006-03-24T22:30:00.000Z' -> '24 March 2006 at 22:30'."""
    ts = parse_utc(value)
    if ts is None:
        return PLACEHOLDER
    return f"{ts.day:02d} {ts.strftime('%B %Y')} at {ts.strftime('%H:%M')}"
