"""Remote dog catalog API client."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

import httpx


class CatalogError(RuntimeError):
    """Raised when the catalog service fails or returns an unusable payload."""


class CatalogClient(Protocol):
    """Interface for catalog API interactions."""

    async def get_breeds(self) -> list[object]:
        """Return the raw breed list."""

    async def search_dogs(self, params: dict[str, object]) -> dict[str, object]:
        """Run a search and return the raw result page."""

    async def fetch_dogs(self, dog_ids: Sequence[str]) -> list[object]:
        """Fetch raw dog payloads for the given ids."""

    async def match_dogs(self, dog_ids: Sequence[str]) -> dict[str, object]:
        """Ask the service to pick one match from the given ids."""


@dataclass
class HttpxCatalogClient(CatalogClient):
    """HTTPX-backed catalog client."""

    base_url: str
    http_client: httpx.AsyncClient
    timeout: float = 10.0

    @classmethod
    def create(cls, base_url: str, timeout: float = 10.0) -> "HttpxCatalogClient":
        """Create a catalog client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            timeout=timeout,
        )

    async def get_breeds(self) -> list[object]:
        """Fetch all breed names."""
        payload = await self._request("GET", "/dogs/breeds")
        if not isinstance(payload, list):
            raise CatalogError("Breed list payload is not a list")
        return payload

    async def search_dogs(self, params: dict[str, object]) -> dict[str, object]:
        """Search dogs with filter, sort and paging parameters."""
        payload = await self._request("GET", "/dogs/search", params=params)
        if not isinstance(payload, dict):
            raise CatalogError("Search payload is not an object")
        return payload

    async def fetch_dogs(self, dog_ids: Sequence[str]) -> list[object]:
        """Bulk fetch dogs by id."""
        payload = await self._request("POST", "/dogs", json=list(dog_ids))
        if not isinstance(payload, list):
            raise CatalogError("Dog payload is not a list")
        return payload

    async def match_dogs(self, dog_ids: Sequence[str]) -> dict[str, object]:
        """Resolve a single match from candidate ids."""
        payload = await self._request("POST", "/dogs/match", json=list(dog_ids))
        if not isinstance(payload, dict):
            raise CatalogError("Match payload is not an object")
        return payload

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, object] | None = None,
        json: object | None = None,
    ) -> object:
        url = f"{self.base_url}{path}"
        try:
            response = await self.http_client.request(
                method, url, params=params, json=json, timeout=self.timeout
            )
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as exc:
            raise CatalogError(
                f"{method} {path} failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise CatalogError(f"{method} {path} failed: {exc}") from exc
        except ValueError as exc:
            raise CatalogError(f"{method} {path} returned invalid JSON") from exc
