"""Transient user-facing notices."""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta


@dataclass
class _NoticeEntry:
    text: str
    expires_at: datetime


@dataclass
class NoticeBoard:
    """Short-lived notices that expire after a TTL."""

    default_ttl_seconds: float = 2.5
    _entries: list[_NoticeEntry] = field(default_factory=list, init=False)

    def post(self, text: str, ttl_seconds: float | None = None) -> None:
        """Show ``text`` until its TTL elapses."""
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        expires_at = datetime.now(tz=UTC) + timedelta(seconds=ttl)
        self._entries.append(_NoticeEntry(text=text, expires_at=expires_at))

    def active(self) -> list[str]:
        """Return unexpired notices, oldest first."""
        now = datetime.now(tz=UTC)
        self._entries = [entry for entry in self._entries if entry.expires_at > now]
        return [entry.text for entry in self._entries]

    def clear(self) -> None:
        self._entries.clear()
