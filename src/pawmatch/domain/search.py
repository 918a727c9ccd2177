"""Search cursor and result page models."""

from dataclasses import dataclass, field
from enum import Enum

from pawmatch.domain.records import Record

DEFAULT_PAGE_SIZE = 12


class SortDirection(Enum):
    """Sort direction for breed ordering."""

    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        """Return the opposite direction."""
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


@dataclass
class SearchCursor:
    """Filter, sort and paging state that derives the next search request."""

    page_size: int = DEFAULT_PAGE_SIZE
    breed_filter: str | None = None
    sort_direction: SortDirection = SortDirection.ASC
    page_offset: int = 0

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("page_size must be positive")
        if self.page_offset < 0 or self.page_offset % self.page_size:
            raise ValueError("page_offset must be a non-negative multiple of page_size")

    def set_filter(self, breed: str | None) -> None:
        """Replace the breed filter and return to the first page."""
        self.breed_filter = breed or None
        self.page_offset = 0

    def set_sort(self, direction: SortDirection) -> None:
        """Replace the sort direction without moving the page."""
        self.sort_direction = direction

    def toggle_sort(self) -> None:
        """Flip between ascending and descending order."""
        self.sort_direction = self.sort_direction.flipped()

    def next_page(self) -> None:
        """Advance one page; callers stop at the end of results."""
        self.page_offset += self.page_size

    def prev_page(self) -> None:
        """Go back one page, never below the first."""
        self.page_offset = max(0, self.page_offset - self.page_size)

    @property
    def page_number(self) -> int:
        return self.page_offset // self.page_size + 1

    def to_query(self) -> dict[str, object]:
        """Return remote search parameters for the current state."""
        query: dict[str, object] = {}
        if self.breed_filter:
            query["breeds"] = [self.breed_filter]
        query["size"] = self.page_size
        query["from"] = self.page_offset
        query["sort"] = f"breed:{self.sort_direction.value}"
        return query


@dataclass(frozen=True)
class SearchPage:
    """One fetched page of search results."""

    query: dict[str, object]
    result_ids: tuple[str, ...]
    records: tuple[Record, ...] = field(default_factory=tuple)
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def has_next(self) -> bool:
        """A short page marks the end of results."""
        return len(self.result_ids) >= self.page_size

    @property
    def has_prev(self) -> bool:
        return int(self.query.get("from", 0)) > 0
