"""Domain models for the emission catalog."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ActivityType:
    """Catalog entry with a fixed emission factor (kg CO2e per unit)."""

    id: str
    slug: str
    name: str
    unit: str
    emission_factor: float
    icon: str
    category: str


DEFAULT_ACTIVITY_TYPES: tuple[ActivityType, ...] = (
    ActivityType("1", "car_miles", "Car Travel", "miles", 0.25, "🚗", "transport"),
    ActivityType("2", "electricity_kwh", "Electricity", "kWh", 0.42, "⚡", "energy"),
    ActivityType("3", "beef_meal", "Beef Meal", "meals", 6.0, "🥩", "food"),
    ActivityType("4", "chicken_meal", "Chicken Meal", "meals", 1.5, "🍗", "food"),
    ActivityType("5", "vegetarian_meal", "Vegetarian Meal", "meals", 0.4, "🥗", "food"),
    ActivityType(
        "6", "public_transport", "Public Transport", "miles", 0.05, "🚌", "transport"
    ),
    ActivityType("7", "flight_miles", "Flight", "miles", 0.31, "✈️", "transport"),
    ActivityType("8", "natural_gas", "Natural Gas", "therms", 5.3, "🔥", "energy"),
)


def find_activity_type(
    activity_types: tuple[ActivityType, ...] | list[ActivityType], activity_type_id: str
) -> ActivityType | None:
    """Return the activity type with the given id, if present."""
    for activity_type in activity_types:
        if activity_type.id == activity_type_id:
            return activity_type
    return None
