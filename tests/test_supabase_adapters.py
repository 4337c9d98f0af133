"""Tests for Supabase adapter implementations."""

from dataclasses import dataclass, field
from datetime import date
from types import SimpleNamespace

import pytest

from carbon_tracker.adapters.supabase_activity_type_repository import (
    SupabaseActivityTypeRepository,
)
from carbon_tracker.adapters.supabase_auth_provider import SupabaseAuthProvider
from carbon_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from carbon_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from carbon_tracker.domain.profile import Profile

ELECTRICITY_ROW = {
    "id": "2",
    "slug": "electricity_kwh",
    "name": "Electricity",
    "unit": "kWh",
    "emission_factor": 0.42,
    "icon": "⚡",
    "category": "energy",
}


@dataclass
class FakeResponse:
    data: list[dict[str, object]] | None


@dataclass
class FakeTable:
    name: str
    response_queue: dict[str, list[list[dict[str, object]]]] = field(
        default_factory=lambda: {
            "select": [],
            "insert": [],
            "upsert": [],
            "delete": [],
        }
    )
    last_payload: object | None = None
    last_select: str | None = None
    last_filters: list[tuple[str, object]] = field(default_factory=list)
    last_order: tuple[str, bool] | None = None

    def queue(self, action: str, data: list[dict[str, object]]) -> None:
        self.response_queue[action].append(data)

    def select(self, columns: str = "*") -> "FakeTable":
        self._action = "select"
        self.last_select = columns
        return self

    def insert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "insert"
        self.last_payload = payload
        return self

    def upsert(self, payload) -> "FakeTable":  # type: ignore[no-untyped-def]
        self._action = "upsert"
        self.last_payload = payload
        return self

    def delete(self) -> "FakeTable":
        self._action = "delete"
        return self

    def eq(self, column: str, value) -> "FakeTable":  # type: ignore[no-untyped-def]
        self.last_filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeTable":
        return self

    def order(self, column: str, desc: bool = False) -> "FakeTable":
        self.last_order = (column, desc)
        return self

    def execute(self) -> FakeResponse:
        action = getattr(self, "_action", "select")
        queue = self.response_queue.get(action, [])
        data = queue.pop(0) if queue else []
        return FakeResponse(data=data)


@dataclass
class FakeAuth:
    session: object | None = None
    calls: list[tuple[str, object]] = field(default_factory=list)

    def get_session(self):  # type: ignore[no-untyped-def]
        return self.session

    def sign_in_with_password(self, credentials):  # type: ignore[no-untyped-def]
        self.calls.append(("sign_in", credentials))
        return SimpleNamespace(
            user=SimpleNamespace(id="user-1", email=credentials["email"]),
            session=None,
        )

    def sign_up(self, credentials):  # type: ignore[no-untyped-def]
        self.calls.append(("sign_up", credentials))

    def sign_out(self) -> None:
        self.calls.append(("sign_out", None))


@dataclass
class FakeSupabaseClient:
    tables: dict[str, FakeTable] = field(default_factory=dict)
    auth: FakeAuth = field(default_factory=FakeAuth)

    def table(self, name: str) -> FakeTable:
        if name not in self.tables:
            self.tables[name] = FakeTable(name=name)
        return self.tables[name]


def test_activity_type_repository_orders_by_name() -> None:
    client = FakeSupabaseClient()
    table = client.table("activity_types")
    table.queue("select", [ELECTRICITY_ROW])

    activity_types = SupabaseActivityTypeRepository(client).list_activity_types()

    assert activity_types[0].emission_factor == 0.42
    assert activity_types[0].category == "energy"
    assert table.last_order == ("name", False)


def test_entry_repository_lists_joined_entries() -> None:
    client = FakeSupabaseClient()
    table = client.table("entries")
    table.queue(
        "select",
        [
            {
                "id": "e-1",
                "user_id": "user-1",
                "activity_type_id": "2",
                "amount": 10,
                "occurred_on": "2024-01-05",
                "co2e": 4.2,
                "created_at": "2024-01-05T10:00:00+00:00",
                "activity_types": ELECTRICITY_ROW,
            }
        ],
    )

    entries = SupabaseEntryRepository(client).list_entries("user-1")

    assert entries[0].occurred_on == date(2024, 1, 5)
    assert entries[0].amount == 10.0
    assert entries[0].activity_type is not None
    assert entries[0].activity_type.name == "Electricity"
    assert table.last_select == "*, activity_types!inner(*)"
    assert table.last_filters == [("user_id", "user-1")]
    assert table.last_order == ("created_at", True)


def test_entry_repository_insert_and_scoped_delete() -> None:
    client = FakeSupabaseClient()
    table = client.table("entries")
    table.queue(
        "insert",
        [
            {
                "id": "e-2",
                "user_id": "user-1",
                "activity_type_id": "2",
                "amount": 10,
                "occurred_on": "2024-01-05",
                "co2e": 4.2,
                "created_at": "2024-01-05T10:00:00+00:00",
            }
        ],
    )
    repository = SupabaseEntryRepository(client)

    created = repository.create_entry("user-1", "2", 10.0, date(2024, 1, 5), 4.2)
    repository.delete_entry("e-2", "user-1")

    assert created.id == "e-2"
    assert created.activity_type is None
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["occurred_on"] == "2024-01-05"
    assert table.last_payload["co2e"] == 4.2
    assert table.last_filters == [("id", "e-2"), ("user_id", "user-1")]


def test_entry_repository_insert_without_data_raises() -> None:
    repository = SupabaseEntryRepository(FakeSupabaseClient())

    with pytest.raises(RuntimeError, match="Failed to create entry"):
        repository.create_entry("user-1", "2", 10.0, date(2024, 1, 5), 4.2)


def test_profile_repository_roundtrip() -> None:
    client = FakeSupabaseClient()
    table = client.table("profiles")
    table.queue(
        "select",
        [
            {
                "user_id": "user-1",
                "display_name": "Ada",
                "avatar_url": None,
                "bio": "Cyclist",
                "location": "London",
                "created_at": "2024-01-01T00:00:00+00:00",
            }
        ],
    )
    repository = SupabaseProfileRepository(client)

    profile = repository.get_profile("user-1")
    repository.upsert_profile("user-1", Profile(display_name="Ada", avatar_url=""))

    assert profile is not None
    assert profile.display_name == "Ada"
    assert profile.avatar_url == ""
    assert profile.joined_date is not None
    assert isinstance(table.last_payload, dict)
    assert table.last_payload["user_id"] == "user-1"
    assert "updated_at" in table.last_payload


def test_auth_provider_maps_users() -> None:
    client = FakeSupabaseClient()
    client.auth.session = SimpleNamespace(
        user=SimpleNamespace(id="user-9", email="grace@example.com")
    )
    provider = SupabaseAuthProvider(client)

    current = provider.get_current_user()
    signed_in = provider.sign_in_with_password("ada@example.com", "secret")
    provider.sign_up("new@example.com", "pw", redirect_to="http://localhost:8000/")
    provider.sign_out()

    assert current is not None
    assert current.user_id == "user-9"
    assert signed_in.email == "ada@example.com"
    assert [call[0] for call in client.auth.calls] == [
        "sign_in",
        "sign_up",
        "sign_out",
    ]
    assert client.auth.calls[1][1]["options"] == {
        "email_redirect_to": "http://localhost:8000/"
    }


def test_auth_provider_without_session() -> None:
    assert SupabaseAuthProvider(FakeSupabaseClient()).get_current_user() is None
