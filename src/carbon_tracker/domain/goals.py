"""Domain models for emission goals and achievements."""

from dataclasses import dataclass
from enum import StrEnum


class GoalPeriod(StrEnum):
    """Window a goal is measured over."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


@dataclass(frozen=True)
class Goal:
    """An upper bound on emitted kg CO2e for a period."""

    id: str
    title: str
    target_value: float
    period: GoalPeriod
    category: str | None = None


@dataclass(frozen=True)
class GoalProgress:
    """Goal with its current value."""

    goal: Goal
    current_value: float
    achieved: bool
    percentage: float


@dataclass(frozen=True)
class Achievement:
    """A milestone badge."""

    title: str
    description: str
    icon: str
    achieved: bool
