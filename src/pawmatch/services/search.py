"""Paginated catalog search driven by a search cursor."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from pawmatch.adapters.catalog_client import CatalogError
from pawmatch.domain.requests import RequestSequencer
from pawmatch.domain.search import SearchCursor, SearchPage, SortDirection
from pawmatch.services.catalog import CatalogService
from pawmatch.services.notices import NoticeBoard

_logger = logging.getLogger(__name__)

SEARCH_FAILED_NOTICE = "Could not load dogs. Please try again."


@dataclass
class SearchService:
    """Fetches and hydrates result pages for the current cursor.

    Each fetch is tagged by a request sequencer so that a slow response
    for an older cursor state never replaces a newer page. When a fetch
    fails the cursor goes back to the state that produced the page on
    display, or to its state before the change if no page was shown yet.
    """

    catalog: CatalogService
    cursor: SearchCursor
    notices: NoticeBoard
    current_page: SearchPage | None = None
    _shown_cursor: SearchCursor | None = field(default=None, init=False, repr=False)
    _sequencer: RequestSequencer = field(
        default_factory=RequestSequencer, init=False, repr=False
    )

    @property
    def has_next(self) -> bool:
        return self.current_page is not None and self.current_page.has_next

    @property
    def has_prev(self) -> bool:
        return self.cursor.page_offset > 0

    async def refresh(self) -> SearchPage | None:
        """Fetch the page for the current cursor."""
        return await self._load()

    async def set_filter(self, breed: str | None) -> SearchPage | None:
        return await self._apply(lambda cursor: cursor.set_filter(breed))

    async def set_sort(self, direction: SortDirection) -> SearchPage | None:
        return await self._apply(lambda cursor: cursor.set_sort(direction))

    async def toggle_sort(self) -> SearchPage | None:
        return await self._apply(lambda cursor: cursor.toggle_sort())

    async def next_page(self) -> SearchPage | None:
        """Advance one page unless the last page fetched was short."""
        if not self.has_next:
            return None
        return await self._apply(lambda cursor: cursor.next_page())

    async def prev_page(self) -> SearchPage | None:
        return await self._apply(lambda cursor: cursor.prev_page())

    async def _apply(self, change: Callable[[SearchCursor], None]) -> SearchPage | None:
        previous = replace(self.cursor)
        change(self.cursor)
        try:
            return await self._load()
        except CatalogError:
            if self._shown_cursor is not None:
                previous = replace(self._shown_cursor)
            self.cursor = previous
            raise

    async def _load(self) -> SearchPage | None:
        requested = replace(self.cursor)
        query = requested.to_query()
        page_size = requested.page_size
        pending = self._sequencer.begin()
        try:
            result_ids = await self.catalog.search_ids(query)
            records = await self.catalog.fetch_records(result_ids)
        except CatalogError:
            if not self._sequencer.is_current(pending):
                _logger.debug("Ignoring failure of superseded search %s", pending.seq)
                return None
            _logger.warning("Search failed for %s", query, exc_info=True)
            self.notices.post(SEARCH_FAILED_NOTICE)
            raise

        page = SearchPage(
            query=query,
            result_ids=result_ids,
            records=tuple(records),
            page_size=page_size,
        )
        resolved = self._sequencer.complete(pending, page)
        if resolved is None:
            _logger.debug("Discarding stale search response %s", pending.seq)
            return None
        self.current_page = resolved.data
        self._shown_cursor = requested
        return resolved.data
