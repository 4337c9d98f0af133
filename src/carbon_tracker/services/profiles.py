"""Profile service for authenticated users."""

import logging
from dataclasses import dataclass
from typing import Protocol

from carbon_tracker.domain.profile import Profile
from carbon_tracker.services.notifications import Notifier

_logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: str) -> Profile | None:
        """Return the profile for a user, if one exists."""

    def upsert_profile(self, user_id: str, profile: Profile) -> None:
        """Create or replace a user's profile."""


@dataclass
class ProfileService:
    """Application service for profile reads and updates."""

    repository: ProfileRepository
    notifier: Notifier

    def get_profile(self, user_id: str) -> Profile | None:
        """Return the user's profile; failures are logged and read as missing."""
        try:
            return self.repository.get_profile(user_id)
        except Exception:
            _logger.exception("Error fetching profile")
            return None

    def update_profile(self, user_id: str, profile: Profile) -> bool:
        """Persist the profile and report the outcome."""
        try:
            self.repository.upsert_profile(user_id, profile)
        except Exception as exc:
            _logger.exception("Error updating profile")
            self.notifier.notify("Error updating profile", str(exc), destructive=True)
            return False
        self.notifier.notify(
            "Profile updated", "Your profile has been successfully updated."
        )
        return True
