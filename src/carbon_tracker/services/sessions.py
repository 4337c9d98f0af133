"""Session and identity management."""

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Protocol

from carbon_tracker.domain.identity import Identity
from carbon_tracker.services.notifications import Notifier
from carbon_tracker.services.storage import GUEST_MODE_KEY, LocalStorage

_logger = logging.getLogger(__name__)

IdentityListener = Callable[[Identity], Awaitable[None]]


class AuthProvider(Protocol):
    """Interface for the hosted authentication provider."""

    def get_current_user(self) -> Identity | None:
        """Return the identity of an existing session, if any."""

    def sign_in_with_password(self, email: str, password: str) -> Identity:
        """Sign in and return the authenticated identity."""

    def sign_up(self, email: str, password: str, redirect_to: str) -> None:
        """Register a new account and send a confirmation email."""

    def sign_out(self) -> None:
        """End the remote session."""


@dataclass
class SessionService:
    """Holds the current identity and applies sign-in/sign-out rules."""

    auth_provider: AuthProvider
    storage: LocalStorage
    notifier: Notifier
    site_url: str = "http://localhost:8000/"
    identity: Identity = field(default_factory=Identity.anonymous)
    loading: bool = True
    _listeners: list[IdentityListener] = field(
        default_factory=list, init=False, repr=False
    )

    def subscribe(self, listener: IdentityListener) -> Callable[[], None]:
        """Register a coroutine called on every identity change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def initialize(self) -> Identity:
        """Resolve the identity on start: guest flag first, then remote session."""
        self.loading = True
        if self.storage.get_item(GUEST_MODE_KEY) == "true":
            identity = Identity.guest()
        else:
            try:
                identity = self.auth_provider.get_current_user() or Identity.anonymous()
            except Exception:
                _logger.exception("Failed to restore remote session")
                identity = Identity.anonymous()
        self.loading = False
        await self._set_identity(identity)
        return identity

    async def sign_in_as_guest(self) -> Identity:
        """Switch to guest mode and persist the guest flag."""
        try:
            self.storage.set_item(GUEST_MODE_KEY, "true")
        except Exception as exc:
            _logger.exception("Failed to save guest flag")
            self.notifier.notify(
                "Error starting guest mode", str(exc), destructive=True
            )
            return self.identity
        self.loading = False
        self.notifier.notify(
            "Welcome Guest!",
            "You're exploring in guest mode. Sign up to save your data.",
        )
        await self._set_identity(Identity.guest())
        return self.identity

    async def sign_in_with_email(self, email: str, password: str) -> Identity:
        """Sign in with email and password."""
        try:
            identity = self.auth_provider.sign_in_with_password(email, password)
        except Exception as exc:
            _logger.warning("Sign in failed: %s", exc)
            self.notifier.notify("Error signing in", str(exc), destructive=True)
            return self.identity
        self.notifier.notify("Welcome back!", "You've successfully signed in.")
        await self._set_identity(identity)
        return identity

    async def sign_up_with_email(self, email: str, password: str) -> bool:
        """Register an account; returns True when the confirmation was sent."""
        try:
            self.auth_provider.sign_up(email, password, redirect_to=self.site_url)
        except Exception as exc:
            _logger.warning("Sign up failed: %s", exc)
            self.notifier.notify("Error signing up", str(exc), destructive=True)
            return False
        self.notifier.notify("Check your email", "We've sent you a confirmation link.")
        return True

    async def sign_out(self) -> Identity:
        """End the guest session or the remote session."""
        if self.identity.is_guest:
            self.storage.remove_item(GUEST_MODE_KEY)
            self.notifier.notify(
                "Guest session ended", "Create an account to save your data."
            )
            await self._set_identity(Identity.anonymous())
            return self.identity
        try:
            self.auth_provider.sign_out()
            self.storage.remove_item(GUEST_MODE_KEY)
        except Exception as exc:
            _logger.warning("Sign out failed: %s", exc)
            self.notifier.notify("Error signing out", str(exc), destructive=True)
            return self.identity
        self.notifier.notify("Signed out", "You've been signed out successfully.")
        await self._set_identity(Identity.anonymous())
        return self.identity

    async def _set_identity(self, identity: Identity) -> None:
        self.identity = identity
        for listener in list(self._listeners):
            await listener(identity)
