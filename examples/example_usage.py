"""Example: run the accounting engine on plain entries (no Flask, no backend)."""

from src.timesheet_system.timesheet_system.accounting.aggregator import summarize
from src.timesheet_system.timesheet_system.accounting.calculator.duration_calculator import format_duration
from src.timesheet_system.timesheet_system.accounting.export import build_export
from src.timesheet_system.timesheet_system.accounting.windows import AggregationWindow
from src.timesheet_system.timesheet_system.common.datetime_utils import IsoDate
from src.timesheet_system.timesheet_system.time_entries.model import TimeEntry


def main():
    entries = [
        TimeEntry(id="1", user_id="u1", date=IsoDate("2024-03-09"), start_time="08:00", end_time="16:30"),
        TimeEntry(id="2", user_id="u1", date=IsoDate("2024-03-10"), start_time="23:00", end_time="01:00"),
        TimeEntry(id="3", user_id="u1", date=IsoDate("2024-03-11"), verlof=True),
    ]
    window = AggregationWindow.month_of(2024, 3)

    summary = summarize(entries, window)
    print(window.title(), format_duration(summary.total_minutes), summary.to_dict())
    for row in build_export(entries, window).rows[7:12]:
        print(row.to_dict())


if __name__ == "__main__":
    main()
