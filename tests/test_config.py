"""Tests for configuration helpers."""

from pawmatch.config import Settings, parse_sort_direction
from pawmatch.domain.search import SortDirection


def test_parse_sort_direction() -> None:
    assert parse_sort_direction(None) is SortDirection.ASC
    assert parse_sort_direction(" DESC ") is SortDirection.DESC
    assert parse_sort_direction("breed:desc") is SortDirection.DESC
    assert parse_sort_direction("sideways") is SortDirection.ASC


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.setenv("CATALOG_BASE_URL", "https://catalog.test")

    settings = Settings()

    assert settings.catalog_base_url == "https://catalog.test"
    assert settings.page_size == 12
    assert settings.selection_namespace == "favorites"
    assert settings.selection_backend == "file"
