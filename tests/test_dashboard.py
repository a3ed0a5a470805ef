"""
Dashboard Pipeline Tests
========================
End-to-end passes (filter -> paginate -> project), state events, page
reconciliation and the loading gate.
"""

import pytest

from src.dashboard import (
    DashboardSession,
    build_view,
    go_to_page,
    is_filter_active,
    set_status_filter,
    set_time_window,
)
from src.models import DashboardData, DashboardState, FilterCriteria, StatusFilter, TimeWindow
from tests.conftest import NOW, make_launch


@pytest.fixture
def session(data):
    return DashboardSession(data, clock=lambda: NOW)


class TestBuildView:

    def test_third_page_of_25(self, data):
        view, state = build_view(data, go_to_page(DashboardState(), 3), NOW)
        assert view.total_pages == 3
        assert view.current_page == 3
        assert [r.serial for r in view.rows] == [21, 22, 23, 24, 25]
        assert [r.id for r in view.rows] == [f"launch-{i:03d}" for i in range(21, 26)]
        assert state.page.current_page == 3

    def test_empty_result(self, data):
        state = set_status_filter(DashboardState(), StatusFilter.UPCOMING)
        view, _ = build_view(data, state, NOW)
        assert view.rows == ()
        assert view.total_pages == 1
        assert view.filtered_count == 0
        assert view.filter_active is True

    def test_loading_skips_the_pass(self, data):
        loading = data.model_copy(update={"loading": True})
        state = go_to_page(DashboardState(), 7)
        view, after = build_view(loading, state, NOW)
        assert view.loading is True
        assert view.rows == ()
        assert view.filter_active is False
        assert after.page.current_page == 7

    def test_inputs_untouched(self, data):
        before = [dict(l) for l in data.launches]
        build_view(data, DashboardState(), NOW)
        assert [dict(l) for l in data.launches] == before

    def test_non_sequence_launches_fatal(self):
        class Broken:
            launches = None
            loading = False
        with pytest.raises(TypeError):
            build_view(Broken(), DashboardState(), NOW)


class TestFilterActive:

    @pytest.mark.parametrize("status,window,loading,expected", [
        (StatusFilter.ALL, TimeWindow.ALL_TIME, False, False),
        (StatusFilter.FAILED, TimeWindow.ALL_TIME, False, True),
        (StatusFilter.ALL, TimeWindow.PAST_YEAR, False, True),
        (StatusFilter.FAILED, TimeWindow.PAST_YEAR, True, False),
    ])
    def test_hint(self, status, window, loading, expected):
        assert is_filter_active(FilterCriteria(status=status, time_window=window), loading) is expected


class TestReconciliation:

    def test_filter_change_shrinking_pages_resets_to_first(self, rockets, launchpads, payloads):
        launches = [make_launch(i, days_ago=400 if i <= 35 else 3) for i in range(1, 51)]
        data = DashboardData(launches=tuple(launches), rockets=rockets, launchpads=launchpads, payloads=payloads)
        session = DashboardSession(data, clock=lambda: NOW)
        assert session.go_to_page(5).current_page == 5

        view = session.set_time_window(TimeWindow.PAST_2_YEARS)
        assert view.total_pages == 5
        assert view.current_page == 5

        view = session.set_time_window(TimeWindow.PAST_MONTH)
        assert view.total_pages == 2
        assert view.current_page == 1
        assert session.state.page.current_page == 1
        assert [r.serial for r in view.rows] == list(range(1, 11))

    def test_page_kept_when_still_in_range(self, session):
        session.go_to_page(2)
        view = session.set_status_filter(StatusFilter.SUCCESSFUL)
        assert view.current_page == 2

    def test_data_reload_reconciles(self, session, rockets, launchpads, payloads):
        session.go_to_page(3)
        smaller = DashboardData(launches=tuple(make_launch(i) for i in range(1, 6)),
                                rockets=rockets, launchpads=launchpads, payloads=payloads)
        view = session.load(smaller)
        assert view.current_page == 1
        assert len(view.rows) == 5

    def test_page_past_the_end_resets(self, session):
        view = session.go_to_page(99)
        assert view.current_page == 1
        assert view.rows[0].serial == 1


class TestSession:

    def test_starts_loading_without_data(self):
        session = DashboardSession(clock=lambda: NOW)
        assert session.view.loading is True

    def test_load_then_filter(self, rockets, launchpads, payloads):
        session = DashboardSession(clock=lambda: NOW)
        session.set_status_filter(StatusFilter.FAILED)
        launches = [make_launch(1, success=False), make_launch(2), make_launch(3, success=False)]
        view = session.load(DashboardData(launches=tuple(launches), rockets=rockets,
                                          launchpads=launchpads, payloads=payloads))
        assert [r.id for r in view.rows] == ["launch-001", "launch-003"]
        assert view.filter_active is True

    def test_open_and_close_detail(self, session):
        row = session.view.rows[4]
        detail = session.open_row(row)
        assert detail.launch["id"] == "launch-005"
        assert session.view.opened == detail
        assert session.state.opened == detail

        view = session.close_detail()
        assert view.opened is None

    def test_open_launch_by_id(self, session):
        assert session.open_launch("launch-002").rocket_name == "Falcon 9"
        assert session.open_launch("launch-024") is None

    def test_events_do_not_mutate_previous_state(self):
        state = DashboardState()
        changed = set_time_window(set_status_filter(state, StatusFilter.UPCOMING), TimeWindow.PAST_WEEK)
        assert state.criteria.is_default
        assert changed.criteria == FilterCriteria(status=StatusFilter.UPCOMING, time_window=TimeWindow.PAST_WEEK)

    def test_string_values_accepted_for_events(self):
        state = set_status_filter(DashboardState(), "failed")
        assert state.criteria.status is StatusFilter.FAILED


class TestLabels:

    def test_status_labels(self):
        assert [s.label for s in StatusFilter] == [
            "All Launches", "Upcoming Launches", "Successful Launches", "Failed Launches",
        ]

    def test_window_labels(self):
        assert [w.label for w in TimeWindow] == [
            "All Time", "Past Week", "Past Month", "Past 3 Months", "Past 6 Months", "Past Year", "Past 2 Years",
        ]
