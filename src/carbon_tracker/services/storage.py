"""On-device key-value storage interface."""

from typing import Protocol

GUEST_MODE_KEY = "guestMode"
GUEST_ENTRIES_KEY = "guestEntries"


class LocalStorage(Protocol):
    """String key-value storage scoped to one device."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, if present."""

    def set_item(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    def remove_item(self, key: str) -> None:
        """Remove a value if present."""
