"""Domain models for the current session identity."""

from dataclasses import dataclass
from enum import StrEnum


class IdentityKind(StrEnum):
    """Who is using the tracker."""

    AUTHENTICATED = "authenticated"
    GUEST = "guest"
    ANONYMOUS = "anonymous"


@dataclass(frozen=True)
class Identity:
    """Tri-state identity signal."""

    kind: IdentityKind
    user_id: str | None = None
    email: str | None = None

    @classmethod
    def anonymous(cls) -> "Identity":
        return cls(kind=IdentityKind.ANONYMOUS)

    @classmethod
    def guest(cls) -> "Identity":
        return cls(kind=IdentityKind.GUEST)

    @classmethod
    def authenticated(cls, user_id: str, email: str | None) -> "Identity":
        return cls(kind=IdentityKind.AUTHENTICATED, user_id=user_id, email=email)

    @property
    def is_guest(self) -> bool:
        return self.kind == IdentityKind.GUEST

    @property
    def is_authenticated(self) -> bool:
        return self.kind == IdentityKind.AUTHENTICATED
