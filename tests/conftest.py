"""Shared test fixtures."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from pawmatch.adapters.catalog_client import CatalogClient, CatalogError
from pawmatch.config import Settings
from pawmatch.containers import AppContainer, wire_container
from pawmatch.domain.selection import SelectionSnapshot
from pawmatch.services.selection import SelectionStorage

BREEDS = ["Beagle", "Husky", "Poodle"]


def make_dog(index: int) -> dict[str, object]:
    return {
        "id": f"d{index}",
        "img": f"https://images.test/d{index}.jpg",
        "name": f"Dog {index}",
        "age": index % 15,
        "zip_code": f"{10000 + index}",
        "breed": BREEDS[index % len(BREEDS)],
    }


def _default_dogs() -> dict[str, dict[str, object]]:
    return {f"d{index}": make_dog(index) for index in range(20)}


@dataclass
class InMemorySelectionStorage(SelectionStorage):
    """In-memory selection storage for tests."""

    stored: object | None = None
    saves: list[SelectionSnapshot] = field(default_factory=list)

    def load(self) -> Sequence[object] | None:
        return self.stored  # type: ignore[return-value]

    def save(self, snapshot: SelectionSnapshot) -> None:
        self.stored = list(snapshot)
        self.saves.append(snapshot)


@dataclass
class FakeCatalogClient(CatalogClient):
    """Fake catalog with an in-memory dog table that records calls."""

    dogs: dict[str, dict[str, object]] = field(default_factory=_default_dogs)
    breeds: list[object] = field(default_factory=lambda: list(BREEDS))
    match_id: str | None = None
    fail_search: bool = False
    fail_fetch: bool = False
    fail_match: bool = False
    breed_calls: int = 0
    search_calls: list[dict[str, object]] = field(default_factory=list)
    fetch_calls: list[list[str]] = field(default_factory=list)
    match_calls: list[list[str]] = field(default_factory=list)

    async def get_breeds(self) -> list[object]:
        self.breed_calls += 1
        return list(self.breeds)

    async def search_dogs(self, params: dict[str, object]) -> dict[str, object]:
        self.search_calls.append(dict(params))
        if self.fail_search:
            raise CatalogError("search unavailable")
        breeds = params.get("breeds")
        dogs = [
            dog
            for dog in self.dogs.values()
            if not breeds or dog["breed"] in breeds  # type: ignore[operator]
        ]
        descending = params.get("sort") == "breed:desc"
        dogs.sort(key=lambda dog: (str(dog["breed"]), str(dog["id"])), reverse=descending)
        start = int(params.get("from", 0))  # type: ignore[arg-type]
        size = int(params.get("size", 25))  # type: ignore[arg-type]
        page = dogs[start : start + size]
        return {"resultIds": [dog["id"] for dog in page], "total": len(dogs)}

    async def fetch_dogs(self, dog_ids: Sequence[str]) -> list[object]:
        self.fetch_calls.append(list(dog_ids))
        if self.fail_fetch:
            raise CatalogError("fetch unavailable")
        return [self.dogs[dog_id] for dog_id in reversed(dog_ids) if dog_id in self.dogs]

    async def match_dogs(self, dog_ids: Sequence[str]) -> dict[str, object]:
        self.match_calls.append(list(dog_ids))
        if self.fail_match:
            raise CatalogError("match unavailable")
        return {"match": self.match_id or dog_ids[0]}


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        catalog_base_url="https://catalog.test",
        selection_file_path=str(tmp_path / "selection.json"),
        share_base_url="https://pawmatch.test",
    )


@pytest.fixture
def catalog_client() -> FakeCatalogClient:
    return FakeCatalogClient()


@pytest.fixture
def selection_storage() -> InMemorySelectionStorage:
    return InMemorySelectionStorage()


@pytest.fixture
def container(
    settings: Settings,
    catalog_client: FakeCatalogClient,
    selection_storage: InMemorySelectionStorage,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return wire_container(
        settings=settings,
        catalog_client=catalog_client,
        storage=selection_storage,
        close_resources=close_resources,
    )
