"""Analytics derived from entries: streaks, achievements and goal progress."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta

from carbon_tracker.domain.catalog import ActivityType
from carbon_tracker.domain.entries import Entry
from carbon_tracker.domain.goals import Achievement, Goal, GoalPeriod, GoalProgress
from carbon_tracker.services.aggregation import (
    category_totals,
    emission_trend,
    recent_entries,
    total_footprint,
)

GLOBAL_DAILY_AVERAGE_KG = 6.85
STREAK_WINDOW_DAYS = 30
RECENT_WINDOWS: dict[GoalPeriod, int] = {
    GoalPeriod.DAILY: 1,
    GoalPeriod.WEEKLY: 7,
    GoalPeriod.MONTHLY: 30,
}


@dataclass
class AnalyticsSnapshot:
    """Headline numbers for the analytics dashboard."""

    weekly_average: float
    monthly_total: float
    trend: float
    total_footprint: float
    category_totals: dict[str, float]
    streak: int
    achievements: list[Achievement]


def tracking_streak(
    entries: Sequence[Entry], today: date, max_days: int = STREAK_WINDOW_DAYS
) -> int:
    """Count consecutive days, ending today, with at least one logged entry."""
    logged_days = {entry.occurred_on for entry in recent_entries(entries, max_days)}
    streak = 0
    for offset in range(max_days):
        if today - timedelta(days=offset) not in logged_days:
            break
        streak += 1
    return streak


def achievements(
    entries: Sequence[Entry], daily_goal: float = GLOBAL_DAILY_AVERAGE_KG
) -> list[Achievement]:
    """Evaluate milestone badges."""
    last_week = recent_entries(entries, 7)
    last_month = recent_entries(entries, 30)
    return [
        Achievement(
            title="Eco Warrior",
            description="7 days below daily goal",
            icon="🌱",
            achieved=all(entry.co2e < daily_goal for entry in last_week),
        ),
        Achievement(
            title="Carbon Conscious",
            description="Logged activities for 30 days",
            icon="📊",
            achieved=len(last_month) >= 30,
        ),
        Achievement(
            title="Trend Setter",
            description="Reduced emissions this month",
            icon="📉",
            achieved=emission_trend(entries) < 0,
        ),
    ]


def analytics_snapshot(
    entries: Sequence[Entry],
    activity_types: Sequence[ActivityType],
    today: date,
    daily_goal: float = GLOBAL_DAILY_AVERAGE_KG,
) -> AnalyticsSnapshot:
    """Compute the analytics dashboard numbers."""
    last_week = recent_entries(entries, 7)
    last_month = recent_entries(entries, 30)
    return AnalyticsSnapshot(
        weekly_average=total_footprint(last_week) / 7,
        monthly_total=total_footprint(last_month),
        trend=emission_trend(entries),
        total_footprint=total_footprint(entries),
        category_totals=category_totals(last_month, activity_types),
        streak=tracking_streak(entries, today),
        achievements=achievements(entries, daily_goal),
    )


def goal_progress(
    goals: Sequence[Goal],
    entries: Sequence[Entry],
    activity_types: Sequence[ActivityType] = (),
) -> list[GoalProgress]:
    """Measure each goal against the most recent entries of its period.

    Goals scoped to a category only count entries of that category.
    """
    progress = []
    for goal in goals:
        window = recent_entries(entries, RECENT_WINDOWS[goal.period])
        if goal.category:
            current = category_totals(window, activity_types).get(goal.category, 0.0)
        else:
            current = total_footprint(window)
        progress.append(
            GoalProgress(
                goal=goal,
                current_value=current,
                achieved=current <= goal.target_value,
                percentage=min(current / goal.target_value * 100, 100.0),
            )
        )
    return progress
