"""Entry and catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import JSONResponse

from carbon_tracker.api.schemas import EntryCreate  # noqa: TC001
from carbon_tracker.api.serializers import (
    serialize_activity_type,
    serialize_entry,
    serialize_notifications,
)
from carbon_tracker.domain.entries import AddEntryError
from carbon_tracker.services.aggregation import recent_entries

if TYPE_CHECKING:
    from carbon_tracker.containers import AppContainer

router = APIRouter(tags=["entries"])

_ERROR_STATUS: dict[AddEntryError, int] = {
    AddEntryError.MISSING_FIELD: status.HTTP_400_BAD_REQUEST,
    AddEntryError.INVALID_AMOUNT: status.HTTP_400_BAD_REQUEST,
    AddEntryError.UNKNOWN_ACTIVITY_TYPE: status.HTTP_404_NOT_FOUND,
    AddEntryError.NOT_SIGNED_IN: status.HTTP_401_UNAUTHORIZED,
    AddEntryError.STORE_UNAVAILABLE: status.HTTP_503_SERVICE_UNAVAILABLE,
}


@router.get("/activity-types")
async def list_activity_types(request: Request) -> dict[str, object]:
    """Return the emission catalog."""
    container: AppContainer = request.app.state.container
    return {
        "activity_types": [
            serialize_activity_type(activity_type)
            for activity_type in container.entry_store.activity_types
        ]
    }


@router.get("/entries")
async def list_entries(
    request: Request, limit: int = Query(10, ge=0)
) -> dict[str, object]:
    """Return the most recently logged entries."""
    container: AppContainer = request.app.state.container
    store = container.entry_store
    return {
        "loading": store.loading,
        "error": store.last_error,
        "entries": [
            serialize_entry(entry) for entry in recent_entries(store.entries, limit)
        ],
    }


@router.post("/entries")
async def create_entry(payload: EntryCreate, request: Request) -> JSONResponse:
    """Log a new activity."""
    container: AppContainer = request.app.state.container
    result = await container.entry_store.add_entry(
        payload.activity_type_id, payload.amount, payload.occurred_on
    )
    notifications = serialize_notifications(container.notifier.drain())
    if not result.ok or result.entry is None:
        error = result.error or AddEntryError.STORE_UNAVAILABLE
        return JSONResponse(
            status_code=_ERROR_STATUS[error],
            content={
                "error": str(error),
                "message": result.message,
                "notifications": notifications,
            },
        )
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content={
            "entry": serialize_entry(result.entry),
            "notifications": notifications,
        },
    )


@router.delete("/entries/{entry_id}")
async def delete_entry(entry_id: str, request: Request) -> JSONResponse:
    """Delete an entry by id."""
    container: AppContainer = request.app.state.container
    deleted = await container.entry_store.delete_entry(entry_id)
    return JSONResponse(
        status_code=status.HTTP_200_OK
        if deleted
        else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={
            "deleted": deleted,
            "notifications": serialize_notifications(container.notifier.drain()),
        },
    )
