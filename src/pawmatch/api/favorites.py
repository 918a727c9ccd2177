"""Favorites API endpoints."""

from __future__ import annotations

from dataclasses import asdict
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

if TYPE_CHECKING:
    from pawmatch.containers import AppContainer

router = APIRouter(prefix="/favorites", tags=["favorites"])


def match_payload(container: AppContainer) -> dict[str, object]:
    """Serialize the match resolver state."""
    resolver = container.match_resolver
    result = resolver.result
    return {
        "state": resolver.state.value,
        "match": asdict(result.record) if result else None,
        "error": resolver.error,
        "notices": container.notices.active(),
    }


def _selection_payload(container: AppContainer, dog_id: str) -> dict[str, object]:
    store = container.selection_store
    return {
        "id": dog_id,
        "favorite": dog_id in store,
        "ids": list(store.snapshot()),
        "share_url": container.favorites_service.share_url(),
        "match": match_payload(container),
    }


@router.get("")
async def list_favorites(request: Request, ids: str | None = None) -> dict[str, object]:
    """Return hydrated favorites, adopting a shared selection if given."""
    container: AppContainer = request.app.state.container
    container.favorites_service.adopt_link(ids)
    view = await container.favorites_service.load()
    return {
        "ids": list(view.snapshot),
        "records": [asdict(record) for record in view.records],
        "share_url": view.share_url,
        "match": match_payload(container),
    }


@router.get("/share")
async def share_link(request: Request) -> dict[str, object]:
    """Return the shareable link for the current favorites."""
    container: AppContainer = request.app.state.container
    return {
        "url": container.favorites_service.share_url(),
        "ids": list(container.selection_store.snapshot()),
    }


@router.put("/{dog_id}")
async def add_favorite(dog_id: str, request: Request) -> dict[str, object]:
    """Add a dog to favorites."""
    container: AppContainer = request.app.state.container
    container.selection_store.add(dog_id)
    return _selection_payload(container, dog_id)


@router.delete("/{dog_id}")
async def remove_favorite(dog_id: str, request: Request) -> dict[str, object]:
    """Remove a dog from favorites, clearing its match if shown."""
    container: AppContainer = request.app.state.container
    container.selection_store.remove(dog_id)
    return _selection_payload(container, dog_id)


@router.post("/{dog_id}/toggle")
async def toggle_favorite(dog_id: str, request: Request) -> dict[str, object]:
    """Flip a dog's favorite state."""
    container: AppContainer = request.app.state.container
    container.selection_store.toggle(dog_id)
    return _selection_payload(container, dog_id)
