"""
show_dashboard.py
-----------------
Terminal view of the launch dashboard: one page of the filtered launch table,
a pagination footer and, optionally, the detail panel for one launch.

usage: python -m src.show_dashboard [--status failed] [--window past-year]
                                    [--page 2] [--open LAUNCH_ID]
                                    [--refresh | --offline]
"""

from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from rich.console import Console, Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from src.dashboard import DashboardSession
from src.data_quality import audit_snapshot
from src.load_data import load_dashboard_data, loading_placeholder
from src.models import DashboardView, LaunchDetail, StatusFilter, StatusLabel, TimeWindow
from src.utils import setup_logging

console = Console()

STATUS_STYLES = {
    StatusLabel.UPCOMING: "bold yellow",
    StatusLabel.SUCCESS: "bold green",
    StatusLabel.FAILURE: "bold red",
}

COLUMNS = ["No:", "Launched (UTC)", "Location", "Mission", "Orbit", "Launch Status", "Rocket"]


def render_table(view: DashboardView) -> Table:
    table = Table(show_lines=False, header_style="bold cyan")
    for col in COLUMNS:
        table.add_column(col, no_wrap=col in ("No:", "Launch Status"))
    for row in view.rows:
        # plain Text cells: launch data may contain [brackets]
        table.add_row(
            f"{row.serial:02d}",
            Text(row.formatted_date),
            Text(row.location_name),
            Text(row.name),
            Text(row.orbit),
            Text(row.status_label.value, style=STATUS_STYLES[row.status_label]),
            Text(row.rocket_name),
        )
    return table


def empty_message(view: DashboardView) -> str:
    if view.filter_active:
        return "No results found for the specified filter"
    return "No launches"


def _field(value) -> str:
    """Escaped display text for one detail value."""
    if isinstance(value, (list, tuple)):
        value = ", ".join(map(str, value))
    if value is None or value == "":
        return "-"
    return escape(str(value))


def render_detail(detail: LaunchDetail) -> Panel:
    launch = detail.launch
    payload = detail.payload or {}
    lines = [
        f"[bold]{_field(launch.get('name'))}[/bold]  ({_field(detail.rocket_name)})",
        f"Flight number: {_field(launch.get('flight_number'))}",
        f"Launch date:   {_field(launch.get('date_utc'))}",
        f"Launch site:   {_field(detail.launchpad_name)}",
        f"Payload:       {_field(payload.get('name'))} ({_field(payload.get('type'))})",
        f"Orbit:         {_field(payload.get('orbit'))}",
        f"Manufacturer:  {_field(payload.get('manufacturers'))}",
        f"Nationality:   {_field(payload.get('nationalities'))}",
    ]
    if launch.get("details"):
        lines += ["", _field(launch["details"])]
    links = launch.get("links") or {}
    if not isinstance(links, dict):
        links = {}
    for label, key in (("Wikipedia", "wikipedia"), ("Webcast", "webcast"), ("Article", "article")):
        if links.get(key):
            lines.append(f"{label}: {_field(links[key])}")
    return Panel("\n".join(lines), title="Launch detail", expand=False)


def render(view: DashboardView) -> Group:
    if view.loading:
        return Group(Text("Loading launches ...", style="dim"))
    parts = [render_table(view)]
    if not view.rows:
        parts.append(Text(empty_message(view), style="italic"))
    parts.append(Text(f"Page {view.current_page} of {view.total_pages}  ({view.filtered_count} launches)",
                      justify="right"))
    if view.opened is not None:
        parts.append(render_detail(view.opened))
    return Group(*parts)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Browse SpaceX launches in the terminal.")
    p.add_argument("--status", choices=[s.value for s in StatusFilter], default=StatusFilter.ALL.value)
    p.add_argument("--window", choices=[w.value for w in TimeWindow], default=TimeWindow.ALL_TIME.value)
    p.add_argument("--page", type=int, default=1)
    p.add_argument("--open", dest="open_id", default=None, help="launch id to show in the detail panel")
    source = p.add_mutually_exclusive_group()
    source.add_argument("--refresh", action="store_true", help="re-download every collection")
    source.add_argument("--offline", action="store_true", help="use cached collections only")
    p.add_argument("--json", action="store_true", help="print the view as JSON instead of a table")
    return p.parse_args(argv)


def run(argv: Optional[List[str]] = None) -> DashboardView:
    args = parse_args(argv)
    session = DashboardSession(loading_placeholder())
    session.set_status_filter(StatusFilter(args.status))
    session.set_time_window(TimeWindow(args.window))
    session.go_to_page(args.page)

    data = load_dashboard_data(refresh=args.refresh, cache_only=args.offline)
    audit_snapshot(data)
    session.load(data)

    if args.open_id is not None and session.open_launch(args.open_id) is None:
        console.print(f"[yellow]Launch {escape(args.open_id)} is not on page {session.view.current_page}[/yellow]")

    if args.json:
        console.print_json(json.dumps(session.view.model_dump(mode="json")))
    else:
        console.print(render(session.view))
    return session.view


if __name__ == "__main__":
    setup_logging("show_dashboard")
    try:
        run()
    except Exception as e:
        logging.exception("Dashboard failed: %s", e)
        console.print(f"[red]Dashboard failed:[/red] {e}")
        raise SystemExit(1)
