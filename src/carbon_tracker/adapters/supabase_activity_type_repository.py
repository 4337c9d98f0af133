"""Supabase repository for the emission catalog."""

from dataclasses import dataclass

from supabase import Client

from carbon_tracker.domain.catalog import ActivityType
from carbon_tracker.services.entries import ActivityTypeRepository


@dataclass
class SupabaseActivityTypeRepository(ActivityTypeRepository):
    """Supabase implementation for activity types."""

    client: Client

    def list_activity_types(self) -> list[ActivityType]:
        """Return the catalog ordered by name."""
        response = (
            self.client.table("activity_types")
            .select("id, slug, name, unit, emission_factor, icon, category")
            .order("name", desc=False)
            .execute()
        )
        return [parse_activity_type(row) for row in response.data or []]


def parse_activity_type(row: dict[str, object]) -> ActivityType:
    """Build an activity type from a table row."""
    return ActivityType(
        id=str(row["id"]),
        slug=str(row.get("slug", "")),
        name=str(row.get("name", "")),
        unit=str(row.get("unit", "")),
        emission_factor=float(row.get("emission_factor", 0.0)),
        icon=str(row.get("icon", "")),
        category=str(row.get("category", "")),
    )
