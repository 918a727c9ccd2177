"""Request sequencing for superseded remote calls."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Pending:
    """A request that has been issued and not yet settled."""

    seq: int


@dataclass(frozen=True)
class Resolved(Generic[T]):
    """A request whose response is still the latest one issued."""

    seq: int
    data: T


class RequestSequencer:
    """Issue monotonically increasing request tags and reject stale ones."""

    def __init__(self) -> None:
        self._latest = 0

    @property
    def latest(self) -> int:
        return self._latest

    def begin(self) -> Pending:
        """Tag a new request, superseding every earlier one."""
        self._latest += 1
        return Pending(seq=self._latest)

    def is_current(self, pending: Pending) -> bool:
        """Return True if no newer request was issued after ``pending``."""
        return pending.seq == self._latest

    def complete(self, pending: Pending, data: T) -> Resolved[T] | None:
        """Wrap ``data`` for a current request, or return None if stale."""
        if not self.is_current(pending):
            return None
        return Resolved(seq=pending.seq, data=data)

    def invalidate(self) -> None:
        """Mark every in-flight request as stale."""
        self._latest += 1
