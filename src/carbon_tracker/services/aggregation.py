"""Pure aggregations over a snapshot of entries.

None of these functions mutate their inputs; the same snapshot and arguments
always produce the same result.
"""

from collections.abc import Sequence
from datetime import date, timedelta

from carbon_tracker.domain.catalog import ActivityType, find_activity_type
from carbon_tracker.domain.entries import Entry
from carbon_tracker.domain.summaries import (
    CategoryShare,
    DailySummary,
    MonthlyTotal,
    WeeklySummary,
)

DAYS_IN_WEEK = 7
DECEMBER = 12
TREND_WINDOW = 30
TREND_HALF_SIZE = 15


def daily_summary(entries: Sequence[Entry], day: date) -> DailySummary:
    """Return the total CO2e of entries that occurred on the given day."""
    day_entries = [entry for entry in entries if entry.occurred_on == day]
    return DailySummary(
        date=day,
        total_co2e=sum(entry.co2e for entry in day_entries),
        entries=day_entries,
    )


def weekly_summary(
    entries: Sequence[Entry],
    start_date: date,
    activity_types: Sequence[ActivityType] = (),
) -> WeeklySummary:
    """Summarise the inclusive window [start_date, start_date + 6 days]."""
    end_date = start_date + timedelta(days=DAYS_IN_WEEK - 1)
    week_entries = entries_by_date_range(entries, start_date, end_date)
    total = sum(entry.co2e for entry in week_entries)
    daily = [
        daily_summary(entries, start_date + timedelta(days=offset))
        for offset in range(DAYS_IN_WEEK)
    ]
    return WeeklySummary(
        start_date=start_date,
        end_date=end_date,
        total_co2e=total,
        daily_breakdown=daily,
        top_categories=_rank_categories(
            category_totals(week_entries, activity_types), total
        ),
    )


def recent_entries(entries: Sequence[Entry], limit: int = 10) -> list[Entry]:
    """Return the most recently created entries, newest first."""
    ordered = sorted(entries, key=lambda entry: entry.created_at, reverse=True)
    return ordered[:limit]


def total_footprint(entries: Sequence[Entry]) -> float:
    """Return the all-time CO2e total."""
    return sum(entry.co2e for entry in entries)


def entries_by_date_range(
    entries: Sequence[Entry], start: date, end: date
) -> list[Entry]:
    """Return entries with start <= occurred_on <= end."""
    return [entry for entry in entries if start <= entry.occurred_on <= end]


def category_totals(
    entries: Sequence[Entry], activity_types: Sequence[ActivityType] = ()
) -> dict[str, float]:
    """Sum CO2e per category; entries with an unknown type are skipped."""
    totals: dict[str, float] = {}
    for entry in entries:
        activity_type = entry.activity_type or find_activity_type(
            list(activity_types), entry.activity_type_id
        )
        if activity_type is None:
            continue
        totals[activity_type.category] = (
            totals.get(activity_type.category, 0.0) + entry.co2e
        )
    return totals


def monthly_comparison(
    entries: Sequence[Entry], today: date, months: int = 3
) -> list[MonthlyTotal]:
    """Return calendar-month totals for the last `months` months, oldest first."""
    current = today.replace(day=1)
    starts = [current]
    for _ in range(months - 1):
        starts.append(_previous_month(starts[-1]))
    totals = []
    for start in reversed(starts):
        end = _next_month(start) - timedelta(days=1)
        month_entries = entries_by_date_range(entries, start, end)
        total = total_footprint(month_entries)
        totals.append(MonthlyTotal(month=start, total_co2e=total))
    return totals


def emission_trend(entries: Sequence[Entry]) -> float:
    """Return the difference between the two halves of the recent entries.

    The 30 most recent entries, newest first, are split by position, not by
    date: the first 15 against the rest, each half divided by a fixed 15, and
    the trend is the second half minus the first. Because the first half holds
    the newest entries, a negative value means the older entries were lower.
    With sparse logging or fewer than 30 entries this is only an approximation
    of a half-month comparison.
    """
    window = recent_entries(entries, TREND_WINDOW)
    first_half = window[:TREND_HALF_SIZE]
    second_half = window[TREND_HALF_SIZE:]
    first_avg = sum(entry.co2e for entry in first_half) / TREND_HALF_SIZE
    second_avg = sum(entry.co2e for entry in second_half) / TREND_HALF_SIZE
    return second_avg - first_avg


def _rank_categories(totals: dict[str, float], total: float) -> list[CategoryShare]:
    shares = [
        CategoryShare(
            category=category,
            co2e=co2e,
            percentage=(co2e / total) * 100 if total > 0 else 0.0,
        )
        for category, co2e in totals.items()
    ]
    return sorted(shares, key=lambda share: share.co2e, reverse=True)


def _previous_month(month_start: date) -> date:
    if month_start.month == 1:
        return month_start.replace(year=month_start.year - 1, month=DECEMBER)
    return month_start.replace(month=month_start.month - 1)


def _next_month(month_start: date) -> date:
    if month_start.month == DECEMBER:
        return month_start.replace(year=month_start.year + 1, month=1)
    return month_start.replace(month=month_start.month + 1)
