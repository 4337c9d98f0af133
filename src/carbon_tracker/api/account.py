"""Session and profile endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from carbon_tracker.api.schemas import Credentials, ProfileUpdate  # noqa: TC001
from carbon_tracker.api.serializers import (
    serialize_identity,
    serialize_notifications,
    serialize_profile,
)
from carbon_tracker.domain.profile import Profile

if TYPE_CHECKING:
    from carbon_tracker.containers import AppContainer

router = APIRouter(tags=["account"])


def _session_payload(container: AppContainer) -> dict[str, object]:
    session = container.session_service
    return {
        "session": serialize_identity(session.identity, session.loading),
        "notifications": serialize_notifications(container.notifier.drain()),
    }


def _require_user_id(container: AppContainer) -> str:
    identity = container.session_service.identity
    if not identity.is_authenticated or not identity.user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return identity.user_id


@router.get("/session")
async def get_session(request: Request) -> dict[str, object]:
    """Return the current identity."""
    container: AppContainer = request.app.state.container
    return _session_payload(container)


@router.post("/session/guest")
async def sign_in_as_guest(request: Request) -> dict[str, object]:
    """Start a guest session."""
    container: AppContainer = request.app.state.container
    await container.session_service.sign_in_as_guest()
    return _session_payload(container)


@router.post("/session/sign-in")
async def sign_in(payload: Credentials, request: Request) -> dict[str, object]:
    """Sign in with email and password."""
    container: AppContainer = request.app.state.container
    await container.session_service.sign_in_with_email(
        payload.email, payload.password
    )
    return _session_payload(container)


@router.post("/session/sign-up")
async def sign_up(payload: Credentials, request: Request) -> dict[str, object]:
    """Register a new account."""
    container: AppContainer = request.app.state.container
    sent = await container.session_service.sign_up_with_email(
        payload.email, payload.password
    )
    response = _session_payload(container)
    response["confirmation_sent"] = sent
    return response


@router.post("/session/sign-out")
async def sign_out(request: Request) -> dict[str, object]:
    """End the current session."""
    container: AppContainer = request.app.state.container
    await container.session_service.sign_out()
    return _session_payload(container)


@router.get("/profile")
async def get_profile(request: Request) -> dict[str, object]:
    """Return the signed-in user's profile."""
    container: AppContainer = request.app.state.container
    user_id = _require_user_id(container)
    profile = container.profile_service.get_profile(user_id)
    return {
        "email": container.session_service.identity.email,
        "profile": serialize_profile(profile) if profile else None,
    }


@router.put("/profile")
async def update_profile(
    payload: ProfileUpdate, request: Request
) -> dict[str, object]:
    """Update the signed-in user's profile."""
    container: AppContainer = request.app.state.container
    user_id = _require_user_id(container)
    updated = container.profile_service.update_profile(
        user_id,
        Profile(
            display_name=payload.display_name,
            avatar_url=payload.avatar_url,
            bio=payload.bio,
            location=payload.location,
        ),
    )
    return {
        "updated": updated,
        "notifications": serialize_notifications(container.notifier.drain()),
    }
