"""Pydantic models for API request payloads."""

from datetime import date

from pydantic import BaseModel, Field

from carbon_tracker.domain.goals import GoalPeriod


class Credentials(BaseModel):
    """Email and password sign-in payload."""

    email: str = Field(min_length=3)
    password: str = Field(min_length=1)


class EntryCreate(BaseModel):
    """Payload for logging an activity."""

    activity_type_id: str
    amount: float
    occurred_on: date


class GoalCreate(BaseModel):
    """Payload for adding a goal."""

    title: str
    target_value: float
    period: GoalPeriod = GoalPeriod.DAILY
    category: str | None = None


class ProfileUpdate(BaseModel):
    """Payload for updating the profile."""

    display_name: str = ""
    avatar_url: str = ""
    bio: str = ""
    location: str = ""
