"""Derived summary models."""

from dataclasses import dataclass
from datetime import date

from carbon_tracker.domain.entries import Entry


@dataclass(frozen=True)
class DailySummary:
    """Total CO2e for one calendar day."""

    date: date
    total_co2e: float
    entries: list[Entry]


@dataclass(frozen=True)
class CategoryShare:
    """A category's summed CO2e and share of a period total."""

    category: str
    co2e: float
    percentage: float


@dataclass(frozen=True)
class WeeklySummary:
    """Seven-day window summary with per-day and per-category breakdowns."""

    start_date: date
    end_date: date
    total_co2e: float
    daily_breakdown: list[DailySummary]
    top_categories: list[CategoryShare]


@dataclass(frozen=True)
class MonthlyTotal:
    """Total CO2e for a calendar month."""

    month: date
    total_co2e: float
