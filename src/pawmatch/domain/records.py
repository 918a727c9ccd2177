"""Domain models for catalog records."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Record:
    """A hydrated catalog entry for one adoptable dog."""

    id: str
    image: str
    name: str
    age: int
    zip_code: str
    breed: str


@dataclass(frozen=True)
class MatchResult:
    """The identifier chosen by the match service and its hydrated record."""

    identifier: str
    record: Record
