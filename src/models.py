"""
models.py
---------
Types shared by the projection engine and its collaborators.
Launch and payload records stay plain dicts, exactly as the API returns them.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

from src.config import PAGE_SIZE

Launch = Mapping[str, Any]


class StatusFilter(str, Enum):
    ALL = "all"
    UPCOMING = "upcoming"
    SUCCESSFUL = "successful"
    FAILED = "failed"

    @property
    def label(self) -> str:
        return {
            "all": "All Launches",
            "upcoming": "Upcoming Launches",
            "successful": "Successful Launches",
            "failed": "Failed Launches",
        }[self.value]


class TimeWindow(str, Enum):
    ALL_TIME = "all-time"
    PAST_WEEK = "past-week"
    PAST_MONTH = "past-month"
    PAST_3_MONTHS = "past-3-months"
    PAST_6_MONTHS = "past-6-months"
    PAST_YEAR = "past-year"
    PAST_2_YEARS = "past-2-years"

    @property
    def label(self) -> str:
        return self.value.replace("-", " ").title()

    @property
    def days(self) -> Optional[int]:
        """Length of the window in days; None for ALL_TIME."""
        return WINDOW_DAYS.get(self)


WINDOW_DAYS = {
    TimeWindow.PAST_WEEK: 7,
    TimeWindow.PAST_MONTH: 30,
    TimeWindow.PAST_3_MONTHS: 90,
    TimeWindow.PAST_6_MONTHS: 180,
    TimeWindow.PAST_YEAR: 365,
    TimeWindow.PAST_2_YEARS: 730,
}


class StatusLabel(str, Enum):
    UPCOMING = "Upcoming"
    SUCCESS = "Success"
    FAILURE = "Failure"


class FilterCriteria(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: StatusFilter = StatusFilter.ALL
    time_window: TimeWindow = TimeWindow.ALL_TIME

    @property
    def is_default(self) -> bool:
        return self.status is StatusFilter.ALL and self.time_window is TimeWindow.ALL_TIME


class PageState(BaseModel):
    model_config = ConfigDict(frozen=True)

    page_size: int = Field(PAGE_SIZE, ge=1)
    current_page: int = 1

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.page_size


class LaunchDetail(BaseModel):
    """Everything the detail view needs for one opened launch."""
    model_config = ConfigDict(frozen=True)

    launch: Dict[str, Any]
    rocket_name: Optional[str] = None
    launchpad_name: Optional[str] = None
    payload: Optional[Dict[str, Any]] = None


class DisplayRow(BaseModel):
    model_config = ConfigDict(frozen=True)

    serial: int
    id: Any
    formatted_date: str
    location_name: str
    name: str
    orbit: str
    status_label: StatusLabel
    rocket_name: str
    full_detail: LaunchDetail


class DashboardData(BaseModel):
    """One immutable snapshot from the data loader. Reloads replace it whole."""
    model_config = ConfigDict(frozen=True)

    launches: Tuple[Dict[str, Any], ...] = ()
    rockets: Dict[str, str] = Field(default_factory=dict)
    launchpads: Dict[str, str] = Field(default_factory=dict)
    payloads: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    loading: bool = False


class DashboardState(BaseModel):
    """Selections owned by the caller; every event produces a new instance."""
    model_config = ConfigDict(frozen=True)

    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    page: PageState = Field(default_factory=PageState)
    opened: Optional[LaunchDetail] = None


class DashboardView(BaseModel):
    model_config = ConfigDict(frozen=True)

    rows: Tuple[DisplayRow, ...] = ()
    total_pages: int = 1
    current_page: int = 1
    filtered_count: int = 0
    filter_active: bool = False
    loading: bool = False
    opened: Optional[LaunchDetail] = None
