"""Supabase repository for activity entries."""

from dataclasses import dataclass
from datetime import date, datetime

from supabase import Client

from carbon_tracker.adapters.supabase_activity_type_repository import (
    parse_activity_type,
)
from carbon_tracker.domain.entries import Entry
from carbon_tracker.services.entries import EntryRepository

_ENTRY_WITH_TYPE = "*, activity_types!inner(*)"


@dataclass
class SupabaseEntryRepository(EntryRepository):
    """Supabase implementation for entries, scoped by user id."""

    client: Client

    def list_entries(self, user_id: str) -> list[Entry]:
        """Return the user's entries, newest first."""
        response = (
            self.client.table("entries")
            .select(_ENTRY_WITH_TYPE)
            .eq("user_id", user_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [_parse_entry(row) for row in response.data or []]

    def create_entry(  # noqa: PLR0913
        self,
        user_id: str,
        activity_type_id: str,
        amount: float,
        occurred_on: date,
        co2e: float,
    ) -> Entry:
        """Insert an entry row and return it."""
        response = (
            self.client.table("entries")
            .insert(
                {
                    "user_id": user_id,
                    "activity_type_id": activity_type_id,
                    "amount": amount,
                    "occurred_on": occurred_on.isoformat(),
                    "co2e": co2e,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create entry")
        return _parse_entry(response.data[0])

    def delete_entry(self, entry_id: str, user_id: str) -> None:
        """Delete an entry only when it belongs to the user."""
        self.client.table("entries").delete().eq("id", entry_id).eq(
            "user_id", user_id
        ).execute()


def _parse_entry(row: dict[str, object]) -> Entry:
    joined = row.get("activity_types")
    return Entry(
        id=str(row["id"]),
        user_id=str(row["user_id"]),
        activity_type_id=str(row["activity_type_id"]),
        amount=float(row.get("amount", 0.0)),
        occurred_on=date.fromisoformat(str(row["occurred_on"])),
        co2e=float(row.get("co2e", 0.0)),
        created_at=datetime.fromisoformat(str(row["created_at"])),
        activity_type=parse_activity_type(joined) if isinstance(joined, dict) else None,
    )
