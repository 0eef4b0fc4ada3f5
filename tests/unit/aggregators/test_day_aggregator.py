"""Unit tests for per-day grouping."""

import datetime as dt
from decimal import Decimal

from chantier_tracker.aggregators.day_aggregator import (
    available_days,
    compute_day_stats,
    filter_by_date,
    group_by_day,
)
from chantier_tracker.aggregators.totals_aggregator import compute_totals
from chantier_tracker.models.expense import Expense
from chantier_tracker.models.time_entry import TimeEntry

MAY_1 = dt.date(2024, 5, 1)
MAY_2 = dt.date(2024, 5, 2)
MAY_3 = dt.date(2024, 5, 3)


def entry(day, arrived_at, departed_at="17:00", rate="20") -> TimeEntry:
    return TimeEntry(
        date=day, arrived_at=arrived_at, departed_at=departed_at, hourly_rate=rate
    )


class TestAvailableDays:
    def test_union_of_both_streams_newest_first(self):
        entries = [entry(MAY_1, "08:00"), entry(MAY_3, "08:00")]
        expenses = [Expense(date=MAY_2, base_amount="5")]
        assert available_days(entries, expenses) == [MAY_3, MAY_2, MAY_1]

    def test_dates_are_distinct(self):
        entries = [entry(MAY_1, "08:00"), entry(MAY_1, "13:00")]
        expenses = [Expense(date=MAY_1, base_amount="5")]
        assert available_days(entries, expenses) == [MAY_1]

    def test_undated_expenses_are_left_out(self):
        assert available_days([], [Expense(base_amount="5")]) == []

    def test_empty(self):
        assert available_days([], []) == []


class TestFilterByDate:
    def test_keeps_matching_day(self):
        records = [entry(MAY_1, "08:00"), entry(MAY_2, "08:00")]
        assert [r.date for r in filter_by_date(records, MAY_2)] == [MAY_2]

    def test_none_keeps_everything(self):
        records = [entry(MAY_1, "08:00"), entry(MAY_2, "08:00")]
        assert filter_by_date(records, None) == records


class TestComputeDayStats:
    def test_entries_sorted_by_arrival(self):
        entries = [
            entry(MAY_1, "13:00"),
            entry(MAY_1, None),
            entry(MAY_1, "07:30"),
        ]
        stats = compute_day_stats(MAY_1, entries, [])
        arrivals = [e.arrived_at for e in stats.time_entries]
        assert arrivals == [dt.time(7, 30), dt.time(13, 0), None]

    def test_ignores_other_days(self):
        entries = [entry(MAY_1, "08:00"), entry(MAY_2, "08:00")]
        expenses = [Expense(date=MAY_2, base_amount="10")]
        stats = compute_day_stats(MAY_1, entries, expenses)
        assert len(stats.time_entries) == 1
        assert stats.expenses == ()
        assert stats.totals.total_expenses == 0

    def test_totals_match_compute_totals(self):
        entries = [entry(MAY_1, "08:00", "12:00", "15")]
        expenses = [Expense(date=MAY_1, base_amount="40", margin="25")]
        stats = compute_day_stats(MAY_1, entries, expenses)
        assert stats.totals == compute_totals(entries, expenses)
        assert stats.totals.net_total == Decimal("110")

    def test_day_with_only_expenses(self):
        stats = compute_day_stats(MAY_2, [], [Expense(date=MAY_2, base_amount="9")])
        assert stats.totals.total_minutes == 0
        assert stats.totals.display()["total_hours"] == "0h 0m"
        assert stats.totals.net_total == Decimal("9")


class TestGroupByDay:
    def test_one_stats_per_day_newest_first(self):
        entries = [
            entry(MAY_1, "08:00", "12:00", "10"),
            entry(MAY_3, "08:00", "10:00", "10"),
            entry(MAY_1, "13:00", "14:00", "10"),
        ]
        expenses = [Expense(date=MAY_2, base_amount="5")]

        days = group_by_day(entries, expenses)

        assert [d.date for d in days] == [MAY_3, MAY_2, MAY_1]
        assert days[0].totals.total_minutes == 120
        assert days[1].totals.total_expenses == Decimal("5")
        assert days[2].totals.total_minutes == 300
        assert days[2].totals.total_earnings == Decimal("50")

    def test_day_totals_add_up_to_dated_site_totals(self):
        entries = [
            entry(MAY_1, "08:00", "12:10", "18"),
            entry(MAY_2, "22:00", "03:00", "12"),
        ]
        expenses = [
            Expense(date=MAY_1, base_amount="12", margin="8"),
            Expense(date=MAY_2, amount="30"),
        ]
        site = compute_totals(entries, expenses)
        days = group_by_day(entries, expenses)
        assert sum(d.totals.total_minutes for d in days) == site.total_minutes
        assert sum(d.totals.net_total for d in days) == site.net_total

    def test_undated_expense_not_grouped(self):
        expenses = [Expense(base_amount="5"), Expense(date=MAY_1, base_amount="7")]
        days = group_by_day([], expenses)
        assert len(days) == 1
        assert days[0].totals.total_expenses == Decimal("7")
