"""Notification side channel for the presentation layer."""

from dataclasses import dataclass, field
from typing import Protocol

from carbon_tracker.domain.notifications import Notification


class Notifier(Protocol):
    """Sink for user-visible notifications."""

    def notify(
        self, title: str, description: str, *, destructive: bool = False
    ) -> None:
        """Emit a notification."""


@dataclass
class InMemoryNotifier(Notifier):
    """Queue notifications until the API layer drains them."""

    pending: list[Notification] = field(default_factory=list)

    def notify(
        self, title: str, description: str, *, destructive: bool = False
    ) -> None:
        """Queue a notification."""
        self.pending.append(
            Notification(title=title, description=description, destructive=destructive)
        )

    def drain(self) -> list[Notification]:
        """Return and clear queued notifications."""
        drained = self.pending
        self.pending = []
        return drained
