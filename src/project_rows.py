"""
project_rows.py
---------------
Row projection stage: joins each launch on the current page with the
rocket / launchpad / payload lookup maps and flattens it into a DisplayRow.
Any reference that cannot be resolved becomes the "-" placeholder.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence

from src.config import PLACEHOLDER
from src.dates import format_utc_date
from src.models import DisplayRow, Launch, LaunchDetail, StatusLabel
from src.utils import safe_get

log = logging.getLogger(__name__)


# --- small helpers -----------------------------------------------------------

def first_payload(launch: Launch, payloads: Mapping) -> Optional[Dict[str, Any]]:
    """Resolve only the first payload id; multi-payload launches are not aggregated."""
    ids = launch.get("payloads")
    if not isinstance(ids, (list, tuple)) or not ids:
        return None
    record = safe_get(payloads, ids[0])
    return dict(record) if isinstance(record, Mapping) else None


def status_label(launch: Launch) -> StatusLabel:
    """upcoming wins, then success; anything else (including success=None) is a failure."""
    if launch.get("upcoming") is True:
        return StatusLabel.UPCOMING
    if launch.get("success") is True:
        return StatusLabel.SUCCESS
    return StatusLabel.FAILURE


def _text(value: Any) -> str:
    if value is None or value == "":
        return PLACEHOLDER
    return str(value)


# --- main --------------------------------------------------------------------

def project_row(launch: Launch, index: int, rockets: Mapping, launchpads: Mapping,
                payloads: Mapping, page_offset: int = 0) -> DisplayRow:
    if not isinstance(launch, Mapping):
        log.debug("Projecting non-mapping launch record at index %d", index)
        launch = {}

    payload = first_payload(launch, payloads)
    rocket_name = safe_get(rockets, launch.get("rocket"))
    launchpad_name = safe_get(launchpads, launch.get("launchpad"))
    date_utc = launch.get("date_utc")

    return DisplayRow(
        serial=page_offset + index + 1,
        id=launch.get("id") or index,
        formatted_date=format_utc_date(date_utc) if date_utc else PLACEHOLDER,
        location_name=_text(launchpad_name),
        name=_text(launch.get("name")),
        orbit=_text(payload.get("orbit") if payload else None),
        status_label=status_label(launch),
        rocket_name=_text(rocket_name),
        full_detail=LaunchDetail(
            launch=dict(launch),
            rocket_name=_text(rocket_name) if rocket_name else None,
            launchpad_name=_text(launchpad_name) if launchpad_name else None,
            payload=payload,
        ),
    )


def project_rows(page_launches: Sequence[Launch], rockets: Mapping, launchpads: Mapping,
                 payloads: Mapping, page_offset: int = 0) -> List[DisplayRow]:
    """Serials continue from page_offset so they rank globally across pages."""
    return [
        project_row(launch, i, rockets, launchpads, payloads, page_offset)
        for i, launch in enumerate(page_launches)
    ]
