"""
dashboard.py
------------
Wires the three stages into one pass (filter -> paginate -> project) and
defines the state transitions that trigger a pass.

The state lives in an explicit DashboardState owned by the caller. Every event
is a pure function returning a new state; the page invariant is restored by a
single reconciliation step inside build_view, so it holds after filter changes,
page changes and data reloads alike.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Tuple, Union

import pandas as pd

from src.filters import filter_launches
from src.models import (
    DashboardData,
    DashboardState,
    DashboardView,
    DisplayRow,
    FilterCriteria,
    LaunchDetail,
    StatusFilter,
    TimeWindow,
)
from src.paginate import paginate, reconcile_page, total_pages
from src.project_rows import project_rows

log = logging.getLogger(__name__)

Clock = Callable[[], Union[datetime, pd.Timestamp]]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# --- events ------------------------------------------------------------------

def set_status_filter(state: DashboardState, status: StatusFilter) -> DashboardState:
    criteria = state.criteria.model_copy(update={"status": StatusFilter(status)})
    return state.model_copy(update={"criteria": criteria})


def set_time_window(state: DashboardState, window: TimeWindow) -> DashboardState:
    criteria = state.criteria.model_copy(update={"time_window": TimeWindow(window)})
    return state.model_copy(update={"criteria": criteria})


def go_to_page(state: DashboardState, page: int) -> DashboardState:
    return state.model_copy(update={"page": state.page.model_copy(update={"current_page": int(page)})})


def open_row(state: DashboardState, row: DisplayRow) -> DashboardState:
    return state.model_copy(update={"opened": row.full_detail})


def close_detail(state: DashboardState) -> DashboardState:
    return state.model_copy(update={"opened": None})


def is_filter_active(criteria: FilterCriteria, loading: bool) -> bool:
    """Display hint only: a non-default axis is selected and data has arrived."""
    return not criteria.is_default and not loading


# --- pipeline ----------------------------------------------------------------

def build_view(data: DashboardData, state: DashboardState,
               now: Union[datetime, pd.Timestamp]) -> Tuple[DashboardView, DashboardState]:
    """Run one full pass. Returns the view and the reconciled state."""
    if data.loading:
        return DashboardView(
            loading=True,
            current_page=state.page.current_page,
            opened=state.opened,
        ), state

    filtered = filter_launches(data.launches, state.criteria, now)
    pages = total_pages(len(filtered), state.page.page_size)
    page_state = reconcile_page(state.page, pages)
    if page_state is not state.page:
        log.info("Page %d out of range (total %d); reset to 1", state.page.current_page, pages)
        state = state.model_copy(update={"page": page_state})

    page = paginate(filtered, page_state.page_size, page_state.current_page)
    rows = project_rows(page.items, data.rockets, data.launchpads, data.payloads, page_state.offset)

    view = DashboardView(
        rows=tuple(rows),
        total_pages=page.total_pages,
        current_page=page_state.current_page,
        filtered_count=len(filtered),
        filter_active=is_filter_active(state.criteria, data.loading),
        loading=False,
        opened=state.opened,
    )
    return view, state


class DashboardSession:
    """
    Holds the current data snapshot and state, and re-runs the pipeline after
    every state-changing event. Reloads swap the snapshot atomically.
    """

    def __init__(self, data: Optional[DashboardData] = None,
                 state: Optional[DashboardState] = None, clock: Clock = utc_now):
        self.data = data or DashboardData(loading=True)
        self.state = state or DashboardState()
        self.clock = clock
        self.view = DashboardView(loading=True)
        self.refresh()

    def refresh(self) -> DashboardView:
        self.view, self.state = build_view(self.data, self.state, self.clock())
        return self.view

    def _apply(self, state: DashboardState) -> DashboardView:
        self.state = state
        return self.refresh()

    def load(self, data: DashboardData) -> DashboardView:
        log.info("Loaded snapshot: %d launches (loading=%s)", len(data.launches), data.loading)
        self.data = data
        return self.refresh()

    def set_status_filter(self, status: StatusFilter) -> DashboardView:
        return self._apply(set_status_filter(self.state, status))

    def set_time_window(self, window: TimeWindow) -> DashboardView:
        return self._apply(set_time_window(self.state, window))

    def go_to_page(self, page: int) -> DashboardView:
        return self._apply(go_to_page(self.state, page))

    def open_row(self, row: DisplayRow) -> LaunchDetail:
        self._apply(open_row(self.state, row))
        return row.full_detail

    def open_launch(self, launch_id) -> Optional[LaunchDetail]:
        """Open a row on the current page by launch id; None if it is not shown."""
        for row in self.view.rows:
            if row.id == launch_id:
                return self.open_row(row)
        return None

    def close_detail(self) -> DashboardView:
        return self._apply(close_detail(self.state))
