"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from carbon_tracker.adapters.json_local_storage import JsonFileLocalStorage
from carbon_tracker.adapters.supabase_activity_type_repository import (
    SupabaseActivityTypeRepository,
)
from carbon_tracker.adapters.supabase_auth_provider import SupabaseAuthProvider
from carbon_tracker.adapters.supabase_entry_repository import SupabaseEntryRepository
from carbon_tracker.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from carbon_tracker.config import Settings
from carbon_tracker.services.entries import EntryStore
from carbon_tracker.services.goals import GoalService
from carbon_tracker.services.notifications import InMemoryNotifier
from carbon_tracker.services.profiles import ProfileService
from carbon_tracker.services.sessions import SessionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    notifier: InMemoryNotifier
    session_service: SessionService
    entry_store: EntryStore
    goal_service: GoalService
    profile_service: ProfileService


def wire_session(session_service: SessionService, entry_store: EntryStore) -> None:
    """Reload the entry store whenever the identity changes."""
    session_service.subscribe(entry_store.handle_identity_change)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_anon_key
    )
    storage = JsonFileLocalStorage(resolved_settings.guest_storage_path)
    notifier = InMemoryNotifier()
    session_service = SessionService(
        auth_provider=SupabaseAuthProvider(supabase_client),
        storage=storage,
        notifier=notifier,
        site_url=resolved_settings.site_url,
    )
    entry_store = EntryStore(
        session=session_service,
        activity_type_repository=SupabaseActivityTypeRepository(supabase_client),
        entry_repository=SupabaseEntryRepository(supabase_client),
        storage=storage,
        notifier=notifier,
    )
    wire_session(session_service, entry_store)
    return AppContainer(
        settings=resolved_settings,
        notifier=notifier,
        session_service=session_service,
        entry_store=entry_store,
        goal_service=GoalService(notifier),
        profile_service=ProfileService(
            SupabaseProfileRepository(supabase_client), notifier
        ),
    )
