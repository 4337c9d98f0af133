"""Domain models for user profiles."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Profile:
    """Public profile details of an authenticated user."""

    display_name: str
    avatar_url: str
    bio: str = ""
    location: str = ""
    joined_date: datetime | None = None
