"""Selection snapshot helpers."""

from collections.abc import Iterable

SelectionSnapshot = tuple[str, ...]


def normalize_identifiers(values: Iterable[object]) -> SelectionSnapshot:
    """Keep non-empty string identifiers in order of first occurrence."""
    seen: set[str] = set()
    identifiers: list[str] = []
    for value in values:
        if not isinstance(value, str) or not value or value in seen:
            continue
        seen.add(value)
        identifiers.append(value)
    return tuple(identifiers)


def snapshots_equivalent(left: SelectionSnapshot, right: SelectionSnapshot) -> bool:
    """Return True when both snapshots hold the same identifiers."""
    return set(left) == set(right)
