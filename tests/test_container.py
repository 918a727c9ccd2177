"""Tests for container wiring."""

import asyncio

import pytest

from pawmatch.adapters.file_selection_storage import FileSelectionStorage
from pawmatch.containers import build_container, build_selection_storage


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.search_service.cursor.page_size == 12
    assert isinstance(container.selection_store.storage, FileSelectionStorage)
    assert container.favorites_service.store is container.selection_store
    asyncio.run(container.close_resources())


def test_container_links_removals_to_match_resolver(container) -> None:
    container.selection_store.add("d1")
    asyncio.run(
        container.match_resolver.resolve(container.selection_store.snapshot())
    )
    assert container.match_resolver.result is not None

    container.selection_store.remove("d1")

    assert container.match_resolver.result is None


def test_selection_backend_validation(settings) -> None:
    with pytest.raises(ValueError):
        build_selection_storage(settings.model_copy(update={"selection_backend": "redis"}))
    with pytest.raises(ValueError):
        build_selection_storage(
            settings.model_copy(update={"selection_backend": "supabase"})
        )
