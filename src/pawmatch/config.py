"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from pawmatch.domain.search import SortDirection

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    catalog_base_url: str
    catalog_timeout_seconds: float = 10.0
    page_size: int = 12
    default_sort: str = "asc"
    share_base_url: str = "http://localhost:3000"
    selection_namespace: str = "favorites"
    selection_backend: str = "file"
    selection_file_path: str = ".pawmatch/selection.json"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    notice_ttl_seconds: float = 2.5
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_sort_direction(raw: str | None) -> SortDirection:
    """Parse a sort direction from config or query input, defaulting to ASC."""
    if raw is None:
        return SortDirection.ASC
    cleaned = raw.strip().lower()
    if cleaned.startswith("breed:"):
        cleaned = cleaned.removeprefix("breed:")
    if cleaned == SortDirection.DESC.value:
        return SortDirection.DESC
    return SortDirection.ASC
