"""Pydantic models for API request bodies."""

from typing import Literal

from pydantic import BaseModel


class FilterRequest(BaseModel):
    """Breed filter change; an empty or missing breed clears the filter."""

    breed: str | None = None


class SortRequest(BaseModel):
    """Sort direction change."""

    direction: Literal["asc", "desc"] = "asc"
