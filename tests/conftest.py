"""Shared fixtures: a fixed clock, reference maps and a launch factory."""

from datetime import datetime, timedelta, timezone

import pytest

from src.models import DashboardData

NOW = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)


def iso(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%S.000Z")


def make_launch(idx: int, *, days_ago: float = 1000, upcoming: bool = False, success=True, **overrides):
    launch = {
        "id": f"launch-{idx:03d}",
        "name": f"Mission {idx}",
        "flight_number": idx,
        "date_utc": iso(NOW - timedelta(days=days_ago)),
        "upcoming": upcoming,
        "success": success,
        "rocket": "falcon9",
        "launchpad": "slc40",
        "payloads": [f"payload-{idx:03d}"],
    }
    launch.update(overrides)
    return launch


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def rockets():
    return {"falcon1": "Falcon 1", "falcon9": "Falcon 9", "falconheavy": "Falcon Heavy"}


@pytest.fixture
def launchpads():
    return {"slc40": "CCSFS SLC 40", "lc39a": "KSC LC 39A", "kwajalein": "Kwajalein Atoll"}


@pytest.fixture
def payloads():
    return {f"payload-{i:03d}": {"id": f"payload-{i:03d}", "name": f"Sat {i}", "orbit": "LEO"} for i in range(1, 40)}


@pytest.fixture
def launches():
    return [make_launch(i) for i in range(1, 26)]


@pytest.fixture
def data(launches, rockets, launchpads, payloads):
    return DashboardData(
        launches=tuple(launches),
        rockets=rockets,
        launchpads=launchpads,
        payloads=payloads,
    )
