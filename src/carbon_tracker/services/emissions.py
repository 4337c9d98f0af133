"""Emission calculation rules."""

import math

from carbon_tracker.domain.catalog import ActivityType


def calculate_co2e(amount: float, activity_type: ActivityType) -> float:
    """Return kg CO2e for an amount of an activity, unrounded."""
    return amount * activity_type.emission_factor


def validate_amount(amount: object) -> float | None:
    """Return the amount as a float, or None when it is not a positive number."""
    if isinstance(amount, bool) or not isinstance(amount, int | float):
        return None
    value = float(amount)
    if not math.isfinite(value) or value <= 0:
        return None
    return value
