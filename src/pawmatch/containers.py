"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path

from supabase import create_client

from pawmatch.adapters.catalog_client import CatalogClient, HttpxCatalogClient
from pawmatch.adapters.file_selection_storage import FileSelectionStorage
from pawmatch.adapters.supabase_selection_storage import SupabaseSelectionStorage
from pawmatch.config import Settings, parse_sort_direction
from pawmatch.domain.search import SearchCursor
from pawmatch.services.catalog import CatalogService
from pawmatch.services.favorites import FavoritesService
from pawmatch.services.match import MatchResolver
from pawmatch.services.notices import NoticeBoard
from pawmatch.services.search import SearchService
from pawmatch.services.selection import (
    SelectionStorage,
    SelectionStore,
    open_selection_store,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog_client: CatalogClient
    catalog_service: CatalogService
    selection_store: SelectionStore
    search_service: SearchService
    match_resolver: MatchResolver
    favorites_service: FavoritesService
    notices: NoticeBoard
    close_resources: Callable[[], Awaitable[None]]


def build_selection_storage(settings: Settings) -> SelectionStorage:
    """Create the selection storage configured by ``selection_backend``."""
    backend = settings.selection_backend.strip().lower()
    if backend == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError("Supabase selection storage needs url and service key")
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseSelectionStorage(client, namespace=settings.selection_namespace)
    if backend == "file":
        return FileSelectionStorage(
            path=Path(settings.selection_file_path),
            namespace=settings.selection_namespace,
        )
    raise ValueError(f"Unknown selection backend: {settings.selection_backend}")


def wire_container(
    settings: Settings,
    catalog_client: CatalogClient,
    storage: SelectionStorage,
    close_resources: Callable[[], Awaitable[None]],
) -> AppContainer:
    """Assemble services around the given client and storage."""
    notices = NoticeBoard(default_ttl_seconds=settings.notice_ttl_seconds)
    catalog_service = CatalogService(catalog_client)
    selection_store = open_selection_store(storage)
    match_resolver = MatchResolver(catalog=catalog_service, notices=notices)
    selection_store.add_removal_listener(match_resolver.on_identifier_removed)
    selection_store.add_addition_listener(match_resolver.on_identifier_added)
    cursor = SearchCursor(
        page_size=settings.page_size,
        sort_direction=parse_sort_direction(settings.default_sort),
    )
    search_service = SearchService(
        catalog=catalog_service, cursor=cursor, notices=notices
    )
    favorites_service = FavoritesService(
        store=selection_store,
        catalog=catalog_service,
        notices=notices,
        share_base_url=settings.share_base_url,
    )
    return AppContainer(
        settings=settings,
        catalog_client=catalog_client,
        catalog_service=catalog_service,
        selection_store=selection_store,
        search_service=search_service,
        match_resolver=match_resolver,
        favorites_service=favorites_service,
        notices=notices,
        close_resources=close_resources,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    catalog_client = HttpxCatalogClient.create(
        base_url=resolved_settings.catalog_base_url,
        timeout=resolved_settings.catalog_timeout_seconds,
    )
    storage = build_selection_storage(resolved_settings)

    async def close_resources() -> None:
        await catalog_client.close()

    return wire_container(
        settings=resolved_settings,
        catalog_client=catalog_client,
        storage=storage,
        close_resources=close_resources,
    )
