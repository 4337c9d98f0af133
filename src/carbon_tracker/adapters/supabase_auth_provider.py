"""Supabase Auth adapter."""

from dataclasses import dataclass

from supabase import Client

from carbon_tracker.domain.identity import Identity
from carbon_tracker.services.sessions import AuthProvider


@dataclass
class SupabaseAuthProvider(AuthProvider):
    """Email/password authentication backed by Supabase Auth."""

    client: Client

    def get_current_user(self) -> Identity | None:
        """Return the identity of the stored session, if any."""
        session = self.client.auth.get_session()
        if session is None or session.user is None:
            return None
        return Identity.authenticated(str(session.user.id), session.user.email)

    def sign_in_with_password(self, email: str, password: str) -> Identity:
        """Sign in with email and password."""
        response = self.client.auth.sign_in_with_password(
            {"email": email, "password": password}
        )
        if response.user is None:
            raise RuntimeError("Sign in returned no user")
        return Identity.authenticated(str(response.user.id), response.user.email)

    def sign_up(self, email: str, password: str, redirect_to: str) -> None:
        """Register a new account."""
        self.client.auth.sign_up(
            {
                "email": email,
                "password": password,
                "options": {"email_redirect_to": redirect_to},
            }
        )

    def sign_out(self) -> None:
        """Sign out of the remote session."""
        self.client.auth.sign_out()
