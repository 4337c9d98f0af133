"""Serialization of guest entries to and from local storage."""

import logging
from datetime import date, datetime

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from carbon_tracker.domain.catalog import ActivityType
from carbon_tracker.domain.entries import Entry

_logger = logging.getLogger(__name__)


class StoredActivityType(BaseModel):
    """Activity type as embedded in a stored entry."""

    id: str
    slug: str
    name: str
    unit: str
    emission_factor: float
    icon: str
    category: str


class StoredEntry(BaseModel):
    """Entry as written to local storage."""

    id: str
    user_id: str
    activity_type_id: str
    amount: float
    occurred_on: date
    co2e: float
    created_at: datetime
    activity_types: StoredActivityType | None = Field(default=None)


_SNAPSHOT = TypeAdapter(list[StoredEntry])


def encode_entries(entries: list[Entry]) -> str:
    """Serialize the whole entry list."""
    stored = [_to_stored(entry) for entry in entries]
    return _SNAPSHOT.dump_json(stored).decode("utf-8")


def decode_entries(raw: str | None) -> list[Entry]:
    """Parse a stored snapshot; malformed data is treated as empty."""
    if not raw:
        return []
    try:
        stored = _SNAPSHOT.validate_json(raw)
    except ValidationError as exc:
        _logger.warning("Discarding malformed guest entries: %s", exc.error_count())
        return []
    return [_from_stored(item) for item in stored]


def _to_stored(entry: Entry) -> StoredEntry:
    activity_type = entry.activity_type
    return StoredEntry(
        id=entry.id,
        user_id=entry.user_id,
        activity_type_id=entry.activity_type_id,
        amount=entry.amount,
        occurred_on=entry.occurred_on,
        co2e=entry.co2e,
        created_at=entry.created_at,
        activity_types=StoredActivityType(
            id=activity_type.id,
            slug=activity_type.slug,
            name=activity_type.name,
            unit=activity_type.unit,
            emission_factor=activity_type.emission_factor,
            icon=activity_type.icon,
            category=activity_type.category,
        )
        if activity_type
        else None,
    )


def _from_stored(item: StoredEntry) -> Entry:
    joined = item.activity_types
    return Entry(
        id=item.id,
        user_id=item.user_id,
        activity_type_id=item.activity_type_id,
        amount=item.amount,
        occurred_on=item.occurred_on,
        co2e=item.co2e,
        created_at=item.created_at,
        activity_type=ActivityType(**joined.model_dump()) if joined else None,
    )
