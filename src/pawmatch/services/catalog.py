"""Catalog service turning raw catalog payloads into domain records."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from pawmatch.adapters.catalog_client import CatalogClient, CatalogError
from pawmatch.domain.records import Record

_logger = logging.getLogger(__name__)


@dataclass
class CatalogService:
    """Read access to the dog catalog."""

    client: CatalogClient
    _breeds: list[str] | None = field(default=None, init=False, repr=False)

    async def list_breeds(self, refresh: bool = False) -> list[str]:
        """Return breed names, cached after the first successful call."""
        if self._breeds is not None and not refresh:
            return list(self._breeds)
        payload = await self.client.get_breeds()
        self._breeds = [str(breed) for breed in payload if isinstance(breed, str)]
        return list(self._breeds)

    async def search_ids(self, query: dict[str, object]) -> tuple[str, ...]:
        """Run a search and return the ordered result identifiers."""
        payload = await self.client.search_dogs(query)
        result_ids = payload.get("resultIds") or []
        if not isinstance(result_ids, list):
            raise CatalogError("Search payload resultIds is not a list")
        return tuple(str(dog_id) for dog_id in result_ids)

    async def fetch_records(self, dog_ids: Sequence[str]) -> list[Record]:
        """Hydrate identifiers into records, ordered like ``dog_ids``.

        Identifiers the catalog no longer knows, and entries it returns in
        an unusable shape, are dropped.
        """
        if not dog_ids:
            return []
        payload = await self.client.fetch_dogs(dog_ids)
        by_id: dict[str, Record] = {}
        for item in payload:
            try:
                record = _parse_record(item)
            except CatalogError as exc:
                _logger.warning("Skipping dog payload entry: %s", exc)
                continue
            by_id[record.id] = record
        records = [by_id[dog_id] for dog_id in dog_ids if dog_id in by_id]
        missing = len(dog_ids) - len(records)
        if missing:
            _logger.info("Dropped %s unknown identifiers during hydration", missing)
        return records

    async def fetch_record(self, dog_id: str) -> Record:
        """Hydrate a single identifier or raise if the catalog lacks it."""
        records = await self.fetch_records([dog_id])
        if not records:
            raise CatalogError(f"Catalog has no record for {dog_id}")
        return records[0]

    async def resolve_match(self, dog_ids: Sequence[str]) -> str:
        """Ask the catalog to choose one identifier from ``dog_ids``."""
        payload = await self.client.match_dogs(dog_ids)
        match = payload.get("match")
        if not isinstance(match, str) or not match:
            raise CatalogError("Match payload has no identifier")
        return match


def _parse_record(item: object) -> Record:
    if not isinstance(item, dict):
        raise CatalogError("Dog payload entry is not an object")
    try:
        age = int(item.get("age", 0))
        return Record(
            id=str(item["id"]),
            image=str(item.get("img", "")),
            name=str(item.get("name", "")),
            age=max(age, 0),
            zip_code=str(item.get("zip_code", "")),
            breed=str(item.get("breed", "")),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise CatalogError("Dog payload entry is malformed") from exc
