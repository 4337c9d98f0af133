"""Entry store: the current identity's activity log and its mutators."""

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from typing import Protocol
from uuid import uuid4

from carbon_tracker.domain.catalog import ActivityType, find_activity_type
from carbon_tracker.domain.entries import (
    GUEST_USER_ID,
    AddEntryError,
    AddEntryResult,
    Entry,
)
from carbon_tracker.domain.identity import Identity
from carbon_tracker.services.emissions import calculate_co2e, validate_amount
from carbon_tracker.services.guest_snapshot import decode_entries, encode_entries
from carbon_tracker.services.notifications import Notifier
from carbon_tracker.services.sessions import SessionService
from carbon_tracker.services.storage import GUEST_ENTRIES_KEY, LocalStorage

_logger = logging.getLogger(__name__)

StoreListener = Callable[[tuple[Entry, ...]], None]


class ActivityTypeRepository(Protocol):
    """Persistence interface for the emission catalog."""

    def list_activity_types(self) -> list[ActivityType]:
        """Return all activity types ordered by name."""


class EntryRepository(Protocol):
    """Persistence interface for authenticated users' entries."""

    def list_entries(self, user_id: str) -> list[Entry]:
        """Return a user's entries, newest first, joined with their type."""

    def create_entry(  # noqa: PLR0913
        self,
        user_id: str,
        activity_type_id: str,
        amount: float,
        occurred_on: date,
        co2e: float,
    ) -> Entry:
        """Insert an entry and return the stored row."""

    def delete_entry(self, entry_id: str, user_id: str) -> None:
        """Delete an entry owned by the user."""


@dataclass
class EntryStore:
    """Authoritative holder of entries; every write goes through here.

    Persistence is always written before the in-memory snapshot is replaced,
    so a failed write leaves the previous state untouched.
    """

    session: SessionService
    activity_type_repository: ActivityTypeRepository
    entry_repository: EntryRepository
    storage: LocalStorage
    notifier: Notifier
    entries: tuple[Entry, ...] = ()
    activity_types: tuple[ActivityType, ...] = ()
    loading: bool = False
    last_error: str | None = None
    _listeners: list[StoreListener] = field(
        default_factory=list, init=False, repr=False
    )

    def subscribe(self, listener: StoreListener) -> Callable[[], None]:
        """Register a callback invoked with the entries after each change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def handle_identity_change(self, identity: Identity) -> None:
        """Reload whenever the session identity changes."""
        _logger.info("Identity changed to %s, reloading entries", identity.kind)
        await self.load()

    async def load(self) -> None:
        """Fetch the catalog and the current identity's entries."""
        identity = self.session.identity
        self.loading = True
        try:
            activity_types = tuple(self.activity_type_repository.list_activity_types())
            if identity.is_guest:
                snapshot = self.storage.get_item(GUEST_ENTRIES_KEY)
                entries = tuple(decode_entries(snapshot))
            elif identity.is_authenticated and identity.user_id:
                entries = tuple(self.entry_repository.list_entries(identity.user_id))
            else:
                entries = ()
        except Exception as exc:
            _logger.exception("Error loading data")
            self.last_error = str(exc)
            self.notifier.notify("Error loading data", str(exc), destructive=True)
            return
        finally:
            self.loading = False
        self.activity_types = activity_types
        self.last_error = None
        self._publish(entries)

    async def add_entry(
        self, activity_type_id: str, amount: object, occurred_on: date | None
    ) -> AddEntryResult:
        """Validate, price and persist a new entry."""
        if not activity_type_id or occurred_on is None:
            return self._reject(
                AddEntryError.MISSING_FIELD,
                "Please fill in all fields.",
            )
        value = validate_amount(amount)
        if value is None:
            return self._reject(
                AddEntryError.INVALID_AMOUNT,
                "Amount must be a positive number.",
            )
        activity_type = find_activity_type(self.activity_types, activity_type_id)
        if activity_type is None:
            return self._reject(
                AddEntryError.UNKNOWN_ACTIVITY_TYPE,
                f"Unknown activity type: {activity_type_id}.",
            )
        co2e = calculate_co2e(value, activity_type)
        identity = self.session.identity

        if identity.is_guest:
            entry = Entry(
                id=_guest_entry_id(),
                user_id=GUEST_USER_ID,
                activity_type_id=activity_type.id,
                amount=value,
                occurred_on=occurred_on,
                co2e=co2e,
                created_at=datetime.now(tz=UTC),
                activity_type=activity_type,
            )
            updated = (entry, *self.entries)
            try:
                self.storage.set_item(
                    GUEST_ENTRIES_KEY, encode_entries(list(updated))
                )
            except Exception as exc:
                _logger.exception("Error saving guest entries")
                return self._reject(
                    AddEntryError.STORE_UNAVAILABLE,
                    str(exc),
                    title="Error adding entry",
                )
            self._publish(updated)
            self.notifier.notify(
                "Entry added (Guest Mode)",
                f"Added {activity_type.name} activity. Sign up to save permanently.",
            )
            return AddEntryResult(entry=entry)

        if not identity.is_authenticated or not identity.user_id:
            return self._reject(
                AddEntryError.NOT_SIGNED_IN,
                "Please sign in to add entries.",
                title="Authentication required",
            )

        try:
            created = self.entry_repository.create_entry(
                user_id=identity.user_id,
                activity_type_id=activity_type.id,
                amount=value,
                occurred_on=occurred_on,
                co2e=co2e,
            )
        except Exception as exc:
            _logger.exception("Error adding entry")
            return self._reject(
                AddEntryError.STORE_UNAVAILABLE,
                str(exc),
                title="Error adding entry",
            )
        entry = created if created.activity_type else _with_type(created, activity_type)
        self._publish((entry, *self.entries))
        self.notifier.notify("Entry added", f"Added {activity_type.name} activity.")
        return AddEntryResult(entry=entry)

    async def delete_entry(self, entry_id: str) -> bool:
        """Remove an entry; unknown ids are a no-op. Returns False on failure."""
        identity = self.session.identity
        remaining = tuple(entry for entry in self.entries if entry.id != entry_id)
        if not identity.is_guest and not (
            identity.is_authenticated and identity.user_id
        ):
            return True

        try:
            if identity.is_guest:
                self.storage.set_item(
                    GUEST_ENTRIES_KEY, encode_entries(list(remaining))
                )
            else:
                self.entry_repository.delete_entry(entry_id, identity.user_id)
        except Exception as exc:
            _logger.exception("Error deleting entry")
            self.notifier.notify("Error deleting entry", str(exc), destructive=True)
            return False
        self._publish(remaining)
        self.notifier.notify("Entry deleted", "Activity entry has been removed.")
        return True

    def _publish(self, entries: tuple[Entry, ...]) -> None:
        self.entries = entries
        for listener in list(self._listeners):
            listener(entries)

    def _reject(
        self, error: AddEntryError, message: str, title: str = "Invalid entry"
    ) -> AddEntryResult:
        _logger.info("Entry rejected: %s", error)
        self.notifier.notify(title, message, destructive=True)
        return AddEntryResult(error=error, message=message)


def _guest_entry_id() -> str:
    return f"guest-{time.time_ns() // 1_000_000}-{uuid4().hex[:8]}"


def _with_type(entry: Entry, activity_type: ActivityType) -> Entry:
    return Entry(
        id=entry.id,
        user_id=entry.user_id,
        activity_type_id=entry.activity_type_id,
        amount=entry.amount,
        occurred_on=entry.occurred_on,
        co2e=entry.co2e,
        created_at=entry.created_at,
        activity_type=activity_type,
    )
