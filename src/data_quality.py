"""
data_quality.py
---------------
Audits a loaded snapshot for records the dashboard will have to degrade:
unparseable dates, rocket / launchpad ids missing from their lookup tables,
and launches without payloads. Uses pandas + pandera; never fails the load,
only logs warnings and returns a QualityReport.
"""
from __future__ import annotations

import logging
from collections.abc import Mapping

import pandas as pd
import pandera as pa
from pandera import Check, Column
from pydantic import BaseModel

from src.dates import parse_utc
from src.models import DashboardData
from src.utils import safe_get

import warnings
warnings.filterwarnings("ignore", category=FutureWarning, module="pandera")

CHECKED_COLUMNS = {
    "date_parsed": "unparseable_dates",
    "rocket_resolved": "unresolved_rockets",
    "launchpad_resolved": "unresolved_launchpads",
    "has_payload": "missing_payloads",
}


class QualityReport(BaseModel):
    total: int = 0
    unparseable_dates: int = 0
    unresolved_rockets: int = 0
    unresolved_launchpads: int = 0
    missing_payloads: int = 0

    @property
    def clean(self) -> bool:
        return not any(getattr(self, f) for f in CHECKED_COLUMNS.values())


def build_schema() -> pa.DataFrameSchema:
    return pa.DataFrameSchema(
        columns={c: Column(pa.Bool, nullable=False, checks=Check.eq(True)) for c in CHECKED_COLUMNS},
        coerce=True,
        strict=False,
    )


def audit_frame(data: DashboardData) -> pd.DataFrame:
    records = []
    for launch in data.launches:
        launch = launch if isinstance(launch, Mapping) else {}
        payload_ids = launch.get("payloads")
        records.append({
            "id": launch.get("id"),
            "date_parsed": parse_utc(launch.get("date_utc")) is not None,
            "rocket_resolved": safe_get(data.rockets, launch.get("rocket")) is not None,
            "launchpad_resolved": safe_get(data.launchpads, launch.get("launchpad")) is not None,
            "has_payload": isinstance(payload_ids, (list, tuple)) and len(payload_ids) > 0,
        })
    return pd.DataFrame(records, columns=["id", *CHECKED_COLUMNS])


def audit_snapshot(data: DashboardData) -> QualityReport:
    df = audit_frame(data)
    counts = {}
    try:
        build_schema().validate(df, lazy=True)
    except pa.errors.SchemaErrors as err:
        failures = err.failure_cases
        per_column = failures[failures["check"].astype(str).str.contains("equal_to")]
        counts = per_column["column"].value_counts().to_dict()
        logging.warning("Snapshot quality issues:\n%s", failures.head(50).to_string())

    report = QualityReport(
        total=len(df),
        **{field: int(counts.get(col, 0)) for col, field in CHECKED_COLUMNS.items()},
    )
    if report.clean:
        logging.info("SNAPSHOT_QUALITY_OK (%d launches)", report.total)
    else:
        logging.warning("Snapshot quality: %s", report.model_dump())
    return report
