"""Tests for the search cursor."""

import pytest

from pawmatch.domain.search import SearchCursor, SearchPage, SortDirection


def test_set_filter_resets_offset() -> None:
    cursor = SearchCursor(page_size=12, page_offset=36)

    cursor.set_filter("Husky")

    assert cursor.breed_filter == "Husky"
    assert cursor.page_offset == 0


def test_empty_filter_clears_breed() -> None:
    cursor = SearchCursor(breed_filter="Husky")

    cursor.set_filter("")

    assert cursor.breed_filter is None
    assert "breeds" not in cursor.to_query()


def test_set_sort_keeps_offset() -> None:
    cursor = SearchCursor(page_size=12, page_offset=24)

    cursor.set_sort(SortDirection.DESC)

    assert cursor.sort_direction is SortDirection.DESC
    assert cursor.page_offset == 24


def test_toggle_sort_flips_direction() -> None:
    cursor = SearchCursor()

    cursor.toggle_sort()
    assert cursor.sort_direction is SortDirection.DESC
    cursor.toggle_sort()
    assert cursor.sort_direction is SortDirection.ASC


def test_next_then_prev_returns_to_offset() -> None:
    cursor = SearchCursor(page_size=12, page_offset=12)

    cursor.next_page()
    assert cursor.page_offset == 24
    cursor.prev_page()
    assert cursor.page_offset == 12


def test_prev_page_floors_at_zero() -> None:
    cursor = SearchCursor(page_size=12)

    cursor.prev_page()

    assert cursor.page_offset == 0
    assert cursor.page_number == 1


def test_to_query_shapes_request() -> None:
    cursor = SearchCursor(page_size=12)
    assert cursor.to_query() == {"size": 12, "from": 0, "sort": "breed:asc"}

    cursor.set_filter("Beagle")
    cursor.set_sort(SortDirection.DESC)
    cursor.next_page()

    assert cursor.to_query() == {
        "breeds": ["Beagle"],
        "size": 12,
        "from": 12,
        "sort": "breed:desc",
    }


def test_invalid_cursor_state_is_rejected() -> None:
    with pytest.raises(ValueError):
        SearchCursor(page_size=0)
    with pytest.raises(ValueError):
        SearchCursor(page_size=12, page_offset=5)
    with pytest.raises(ValueError):
        SearchCursor(page_size=12, page_offset=-12)


def test_short_page_marks_end_of_results() -> None:
    query = {"size": 12, "from": 0, "sort": "breed:asc"}
    full = SearchPage(query=query, result_ids=tuple(f"d{i}" for i in range(12)))
    short = SearchPage(query=query, result_ids=tuple(f"d{i}" for i in range(5)))

    assert full.has_next is True
    assert short.has_next is False
    assert full.has_prev is False
