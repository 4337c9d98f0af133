"""Domain models for user-facing notifications."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Notification:
    """Human-readable message for the presentation layer."""

    title: str
    description: str
    destructive: bool = False
