"""Domain models for logged activity entries."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

from carbon_tracker.domain.catalog import ActivityType

GUEST_USER_ID = "guest"


@dataclass(frozen=True)
class Entry:
    """A single logged activity with its frozen CO2e snapshot."""

    id: str
    user_id: str
    activity_type_id: str
    amount: float
    occurred_on: date
    co2e: float
    created_at: datetime
    activity_type: ActivityType | None = None


class AddEntryError(StrEnum):
    """Reasons an entry could not be added."""

    MISSING_FIELD = "missing_field"
    INVALID_AMOUNT = "invalid_amount"
    UNKNOWN_ACTIVITY_TYPE = "unknown_activity_type"
    NOT_SIGNED_IN = "not_signed_in"
    STORE_UNAVAILABLE = "store_unavailable"


@dataclass(frozen=True)
class AddEntryResult:
    """Outcome of an add: either the created entry or an error."""

    entry: Entry | None = None
    error: AddEntryError | None = None
    message: str | None = None

    @property
    def ok(self) -> bool:
        """Return True when the entry was created."""
        return self.error is None and self.entry is not None
