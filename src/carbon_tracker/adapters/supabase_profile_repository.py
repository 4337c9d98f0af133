"""Supabase repository for user profiles."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from carbon_tracker.domain.profile import Profile
from carbon_tracker.services.profiles import ProfileRepository


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the profiles table."""

    client: Client

    def get_profile(self, user_id: str) -> Profile | None:
        """Return the profile row for a user, if present."""
        response = (
            self.client.table("profiles")
            .select("*")
            .eq("user_id", user_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        created_at = row.get("created_at")
        return Profile(
            display_name=str(row.get("display_name") or ""),
            avatar_url=str(row.get("avatar_url") or ""),
            bio=str(row.get("bio") or ""),
            location=str(row.get("location") or ""),
            joined_date=datetime.fromisoformat(created_at)
            if isinstance(created_at, str) and created_at
            else None,
        )

    def upsert_profile(self, user_id: str, profile: Profile) -> None:
        """Create or update the profile row."""
        self.client.table("profiles").upsert(
            {
                "user_id": user_id,
                "display_name": profile.display_name,
                "avatar_url": profile.avatar_url,
                "bio": profile.bio,
                "location": profile.location,
                "updated_at": datetime.now(tz=UTC).isoformat(),
            }
        ).execute()
