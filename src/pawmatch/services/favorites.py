"""Favorites view service tying the selection to links and the catalog."""

import logging
from dataclasses import dataclass

from pawmatch.adapters.catalog_client import CatalogError
from pawmatch.domain.records import Record
from pawmatch.domain.selection import SelectionSnapshot
from pawmatch.services import link_codec
from pawmatch.services.catalog import CatalogService
from pawmatch.services.notices import NoticeBoard
from pawmatch.services.selection import SelectionStore

_logger = logging.getLogger(__name__)

FAVORITES_FAILED_NOTICE = "Could not load favorite dogs."


@dataclass(frozen=True)
class FavoritesView:
    """Hydrated favorites ready for display."""

    snapshot: SelectionSnapshot
    records: tuple[Record, ...]
    share_url: str


@dataclass
class FavoritesService:
    """Service for the favorites page."""

    store: SelectionStore
    catalog: CatalogService
    notices: NoticeBoard
    share_base_url: str

    def adopt_link(self, ids_param: str | None) -> SelectionSnapshot:
        """Replace the selection with one carried by a shared link, if any."""
        decoded = link_codec.decode(ids_param)
        if decoded:
            self.store.restore(decoded)
        return self.store.snapshot()

    def share_url(self) -> str:
        return link_codec.build_share_url(self.share_base_url, self.store.snapshot())

    async def load(self) -> FavoritesView:
        """Hydrate the current selection in selection order."""
        snapshot = self.store.snapshot()
        try:
            records = await self.catalog.fetch_records(snapshot)
        except CatalogError:
            _logger.warning("Loading favorites failed", exc_info=True)
            self.notices.post(FAVORITES_FAILED_NOTICE)
            raise
        return FavoritesView(
            snapshot=snapshot,
            records=tuple(records),
            share_url=link_codec.build_share_url(self.share_base_url, snapshot),
        )
