"""Emission goal management."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from uuid import uuid4

from carbon_tracker.domain.catalog import ActivityType
from carbon_tracker.domain.entries import Entry
from carbon_tracker.domain.goals import Goal, GoalPeriod, GoalProgress
from carbon_tracker.services.emissions import validate_amount
from carbon_tracker.services.insights import goal_progress
from carbon_tracker.services.notifications import Notifier


def default_goals() -> list[Goal]:
    """Return the starter goals every session begins with."""
    return [
        Goal(
            id="1",
            title="Daily Carbon Limit",
            target_value=6.85,
            period=GoalPeriod.DAILY,
        ),
        Goal(id="2", title="Weekly Target", target_value=48, period=GoalPeriod.WEEKLY),
        Goal(
            id="3",
            title="Monthly Eco Goal",
            target_value=200,
            period=GoalPeriod.MONTHLY,
        ),
    ]


@dataclass
class GoalService:
    """Session-scoped list of goals."""

    notifier: Notifier
    goals: list[Goal] = field(default_factory=default_goals)

    def list_goals(self) -> list[Goal]:
        """Return goals in creation order."""
        return list(self.goals)

    def add_goal(
        self,
        title: str,
        target_value: object,
        period: GoalPeriod,
        category: str | None = None,
    ) -> Goal | None:
        """Create a goal; returns None when the title or target is invalid."""
        target = validate_amount(target_value)
        if not title.strip() or target is None:
            return None
        goal = Goal(
            id=uuid4().hex,
            title=title.strip(),
            target_value=target,
            period=period,
            category=category or None,
        )
        self.goals = [*self.goals, goal]
        self.notifier.notify(
            "Goal added!", f"Your new {goal.period} goal has been created."
        )
        return goal

    def delete_goal(self, goal_id: str) -> None:
        """Remove a goal if present."""
        self.goals = [goal for goal in self.goals if goal.id != goal_id]
        self.notifier.notify("Goal deleted", "The goal has been removed.")

    def progress(
        self, entries: Sequence[Entry], activity_types: Sequence[ActivityType] = ()
    ) -> list[GoalProgress]:
        """Evaluate every goal against the entries."""
        return goal_progress(self.goals, entries, activity_types)
