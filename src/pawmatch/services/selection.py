"""Favorite selection store with write-through persistence."""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from typing import Protocol

from pawmatch.domain.selection import SelectionSnapshot, normalize_identifiers

_logger = logging.getLogger(__name__)

SelectionListener = Callable[[str], None]


class SelectionStorage(Protocol):
    """Persistence interface for one namespaced selection entry."""

    def load(self) -> Sequence[object] | None:
        """Return the stored identifiers, or None if missing or unreadable."""

    def save(self, snapshot: SelectionSnapshot) -> None:
        """Replace the stored identifiers."""


class SelectionStore:
    """Ordered, deduplicated set of favorite identifiers.

    Every change is written through to ``storage`` before it takes effect
    in memory, so a failed write leaves membership untouched. Listeners
    registered with :meth:`add_removal_listener` hear about each identifier
    that leaves the store, which is how a displayed match gets cleared;
    addition listeners hear about identifiers that join it.
    """

    def __init__(self, storage: SelectionStorage) -> None:
        self.storage = storage
        self._members: dict[str, None] = {}
        self._removal_listeners: list[SelectionListener] = []
        self._addition_listeners: list[SelectionListener] = []
        stored = storage.load()
        if stored is None:
            return
        if isinstance(stored, str | bytes) or not isinstance(stored, Iterable):
            _logger.warning("Ignoring stored selection with unexpected shape")
            return
        self._members = dict.fromkeys(normalize_identifiers(stored))

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._members

    def __len__(self) -> int:
        return len(self._members)

    def __iter__(self) -> Iterator[str]:
        return iter(self.snapshot())

    def add_removal_listener(self, listener: SelectionListener) -> None:
        """Call ``listener`` with every identifier removed from the store."""
        self._removal_listeners.append(listener)

    def add_addition_listener(self, listener: SelectionListener) -> None:
        """Call ``listener`` with every identifier added to the store."""
        self._addition_listeners.append(listener)

    def add(self, identifier: str) -> None:
        """Add an identifier; no-op when already present."""
        if not identifier or identifier in self._members:
            return
        self._commit((*self._members, identifier))

    def remove(self, identifier: str) -> None:
        """Remove an identifier; no-op when absent."""
        if identifier not in self._members:
            return
        self._commit(tuple(member for member in self._members if member != identifier))

    def toggle(self, identifier: str) -> bool:
        """Flip membership and return True if the identifier is now present."""
        if identifier in self._members:
            self.remove(identifier)
            return False
        self.add(identifier)
        return identifier in self._members

    def snapshot(self) -> SelectionSnapshot:
        """Return the current members in insertion order."""
        return tuple(self._members)

    def restore(self, snapshot: Iterable[object]) -> None:
        """Replace all members with ``snapshot``, deduplicated."""
        self._commit(normalize_identifiers(snapshot))

    def _commit(self, members: SelectionSnapshot) -> None:
        previous = self.snapshot()
        self.storage.save(members)
        self._members = dict.fromkeys(members)
        removed = [member for member in previous if member not in self._members]
        added = [member for member in members if member not in previous]
        _notify(self._removal_listeners, removed)
        _notify(self._addition_listeners, added)


def _notify(listeners: list[SelectionListener], identifiers: list[str]) -> None:
    for identifier in identifiers:
        for listener in listeners:
            listener(identifier)


def open_selection_store(
    storage: SelectionStorage, link_snapshot: SelectionSnapshot | None = None
) -> SelectionStore:
    """Build a store from persisted state, letting a shared link win."""
    store = SelectionStore(storage)
    if link_snapshot:
        store.restore(link_snapshot)
    return store
