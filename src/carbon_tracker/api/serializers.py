"""Conversion of domain objects to JSON-ready dicts."""

from dataclasses import asdict

from carbon_tracker.domain.catalog import ActivityType
from carbon_tracker.domain.entries import Entry
from carbon_tracker.domain.goals import Achievement, GoalProgress
from carbon_tracker.domain.identity import Identity
from carbon_tracker.domain.notifications import Notification
from carbon_tracker.domain.profile import Profile
from carbon_tracker.domain.summaries import DailySummary, MonthlyTotal, WeeklySummary
from carbon_tracker.services.insights import AnalyticsSnapshot


def serialize_activity_type(activity_type: ActivityType) -> dict[str, object]:
    return asdict(activity_type)


def serialize_entry(entry: Entry) -> dict[str, object]:
    return {
        "id": entry.id,
        "user_id": entry.user_id,
        "activity_type_id": entry.activity_type_id,
        "amount": entry.amount,
        "occurred_on": entry.occurred_on.isoformat(),
        "co2e": entry.co2e,
        "created_at": entry.created_at.isoformat(),
        "activity_type": serialize_activity_type(entry.activity_type)
        if entry.activity_type
        else None,
    }


def serialize_daily(summary: DailySummary) -> dict[str, object]:
    return {
        "date": summary.date.isoformat(),
        "total_co2e": summary.total_co2e,
        "entries": [serialize_entry(entry) for entry in summary.entries],
    }


def serialize_weekly(summary: WeeklySummary) -> dict[str, object]:
    return {
        "start_date": summary.start_date.isoformat(),
        "end_date": summary.end_date.isoformat(),
        "total_co2e": summary.total_co2e,
        "daily_breakdown": [serialize_daily(day) for day in summary.daily_breakdown],
        "top_categories": [asdict(share) for share in summary.top_categories],
    }


def serialize_monthly(total: MonthlyTotal) -> dict[str, object]:
    return {
        "month": total.month.strftime("%b %Y"),
        "short_month": total.month.strftime("%b"),
        "start_date": total.month.isoformat(),
        "total_co2e": total.total_co2e,
    }


def serialize_achievement(achievement: Achievement) -> dict[str, object]:
    return asdict(achievement)


def serialize_analytics(snapshot: AnalyticsSnapshot) -> dict[str, object]:
    return {
        "weekly_average": snapshot.weekly_average,
        "monthly_total": snapshot.monthly_total,
        "trend": snapshot.trend,
        "total_footprint": snapshot.total_footprint,
        "category_totals": snapshot.category_totals,
        "streak": snapshot.streak,
        "achievements": [serialize_achievement(a) for a in snapshot.achievements],
    }


def serialize_goal_progress(progress: GoalProgress) -> dict[str, object]:
    goal = progress.goal
    return {
        "id": goal.id,
        "title": goal.title,
        "target_value": goal.target_value,
        "period": str(goal.period),
        "category": goal.category,
        "current_value": progress.current_value,
        "achieved": progress.achieved,
        "percentage": progress.percentage,
    }


def serialize_identity(identity: Identity, loading: bool) -> dict[str, object]:
    return {
        "kind": str(identity.kind),
        "user_id": identity.user_id,
        "email": identity.email,
        "loading": loading,
    }


def serialize_profile(profile: Profile) -> dict[str, object]:
    return {
        "display_name": profile.display_name,
        "avatar_url": profile.avatar_url,
        "bio": profile.bio,
        "location": profile.location,
        "joined_date": profile.joined_date.isoformat()
        if profile.joined_date
        else None,
    }


def serialize_notifications(
    notifications: list[Notification],
) -> list[dict[str, object]]:
    return [asdict(notification) for notification in notifications]
