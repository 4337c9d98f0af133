"""Dashboard, analytics and goal endpoints."""

from __future__ import annotations

from datetime import date, timedelta
from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from carbon_tracker.api.schemas import GoalCreate  # noqa: TC001
from carbon_tracker.api.serializers import (
    serialize_analytics,
    serialize_daily,
    serialize_goal_progress,
    serialize_monthly,
    serialize_notifications,
    serialize_weekly,
)
from carbon_tracker.services.aggregation import (
    daily_summary,
    monthly_comparison,
    total_footprint,
    weekly_summary,
)
from carbon_tracker.services.insights import analytics_snapshot

if TYPE_CHECKING:
    from carbon_tracker.containers import AppContainer

router = APIRouter(tags=["summaries"])


def _week_start(today: date) -> date:
    """Return the Sunday that starts the week containing today."""
    return today - timedelta(days=(today.weekday() + 1) % 7)


@router.get("/summary/daily")
async def get_daily_summary(
    request: Request, day: date | None = None
) -> dict[str, object]:
    """Return the total for a day, today by default."""
    container: AppContainer = request.app.state.container
    summary = daily_summary(container.entry_store.entries, day or date.today())
    return serialize_daily(summary)


@router.get("/summary/weekly")
async def get_weekly_summary(
    request: Request, start: date | None = None
) -> dict[str, object]:
    """Return a seven-day summary, the current week by default."""
    container: AppContainer = request.app.state.container
    store = container.entry_store
    summary = weekly_summary(
        store.entries, start or _week_start(date.today()), store.activity_types
    )
    payload = serialize_weekly(summary)
    payload["average_daily_co2e"] = summary.total_co2e / 7
    return payload


@router.get("/summary/monthly")
async def get_monthly_comparison(
    request: Request, months: int = Query(3, ge=1)
) -> dict[str, object]:
    """Return calendar-month totals, oldest first."""
    container: AppContainer = request.app.state.container
    totals = monthly_comparison(container.entry_store.entries, date.today(), months)
    return {"months": [serialize_monthly(total) for total in totals]}


@router.get("/summary/total")
async def get_total_footprint(request: Request) -> dict[str, object]:
    """Return the all-time total."""
    container: AppContainer = request.app.state.container
    return {"total_co2e": total_footprint(container.entry_store.entries)}


@router.get("/insights")
async def get_insights(request: Request) -> dict[str, object]:
    """Return analytics dashboard numbers."""
    container: AppContainer = request.app.state.container
    store = container.entry_store
    snapshot = analytics_snapshot(
        store.entries,
        store.activity_types,
        date.today(),
        daily_goal=container.settings.daily_goal_kg,
    )
    return serialize_analytics(snapshot)


@router.get("/goals")
async def list_goals(request: Request) -> dict[str, object]:
    """Return goals with their progress."""
    container: AppContainer = request.app.state.container
    store = container.entry_store
    progress = container.goal_service.progress(store.entries, store.activity_types)
    return {"goals": [serialize_goal_progress(item) for item in progress]}


@router.post("/goals")
async def create_goal(payload: GoalCreate, request: Request) -> JSONResponse:
    """Add a goal."""
    container: AppContainer = request.app.state.container
    goal = container.goal_service.add_goal(
        payload.title, payload.target_value, payload.period, payload.category
    )
    notifications = serialize_notifications(container.notifier.drain())
    if goal is None:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "error": "A title and a positive target are required.",
                "notifications": notifications,
            },
        )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={"id": goal.id, "notifications": notifications},
    )


@router.delete("/goals/{goal_id}")
async def delete_goal(goal_id: str, request: Request) -> dict[str, object]:
    """Remove a goal."""
    container: AppContainer = request.app.state.container
    container.goal_service.delete_goal(goal_id)
    return {"notifications": serialize_notifications(container.notifier.drain())}
