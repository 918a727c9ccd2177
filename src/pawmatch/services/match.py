"""Match resolution state machine."""

import logging
from dataclasses import dataclass, field
from enum import Enum

from pawmatch.adapters.catalog_client import CatalogError
from pawmatch.domain.records import MatchResult
from pawmatch.domain.requests import RequestSequencer
from pawmatch.domain.selection import SelectionSnapshot
from pawmatch.services.catalog import CatalogService
from pawmatch.services.notices import NoticeBoard

_logger = logging.getLogger(__name__)

MATCH_FAILED_NOTICE = "Could not find a match. Please try again."


class MatchState(Enum):
    """Lifecycle of a match request."""

    IDLE = "idle"
    RESOLVING = "resolving"
    RESOLVED = "resolved"
    FAILED = "failed"


@dataclass
class MatchResolver:
    """Turns a favorite selection into one hydrated match.

    Flow: IDLE -> RESOLVING -> RESOLVED, or RESOLVING -> FAILED, which
    returns to IDLE on the next resolve, dismiss or acknowledge.
    """

    catalog: CatalogService
    notices: NoticeBoard
    state: MatchState = MatchState.IDLE
    result: MatchResult | None = None
    error: str | None = None
    _sequencer: RequestSequencer = field(
        default_factory=RequestSequencer, init=False, repr=False
    )
    _withdrawn: set[str] = field(default_factory=set, init=False, repr=False)

    async def resolve(self, snapshot: SelectionSnapshot) -> MatchResult | None:
        """Resolve a match for a non-empty selection; empty is a no-op."""
        if not snapshot:
            _logger.debug("Skipping match resolution for an empty selection")
            return None

        pending = self._sequencer.begin()
        self._withdrawn.clear()
        self.state = MatchState.RESOLVING
        self.result = None
        self.error = None
        try:
            identifier = await self.catalog.resolve_match(list(snapshot))
            record = await self.catalog.fetch_record(identifier)
        except CatalogError as exc:
            if not self._sequencer.is_current(pending):
                return None
            _logger.warning("Match resolution failed: %s", exc)
            self.state = MatchState.FAILED
            self.result = None
            self.error = str(exc)
            self.notices.post(MATCH_FAILED_NOTICE)
            return None

        resolved = self._sequencer.complete(
            pending, MatchResult(identifier=identifier, record=record)
        )
        if resolved is None:
            _logger.debug("Discarding superseded match response %s", pending.seq)
            return None
        if identifier in self._withdrawn:
            _logger.info("Match %s was removed from favorites while resolving", identifier)
            self._reset()
            return None
        self.state = MatchState.RESOLVED
        self.result = resolved.data
        return resolved.data

    def dismiss(self) -> None:
        """Discard the current match, including one still in flight."""
        self._sequencer.invalidate()
        self._reset()

    def acknowledge(self) -> None:
        """Return from FAILED to IDLE once the failure has been reported."""
        if self.state is MatchState.FAILED:
            self._reset()

    def on_identifier_removed(self, identifier: str) -> None:
        """Clear the match when its identifier leaves the selection."""
        if self.state is MatchState.RESOLVING:
            self._withdrawn.add(identifier)
            return
        if self.result is not None and self.result.identifier == identifier:
            self._reset()

    def on_identifier_added(self, identifier: str) -> None:
        """Forget an earlier removal once the identifier is back in the selection."""
        self._withdrawn.discard(identifier)

    def _reset(self) -> None:
        self.state = MatchState.IDLE
        self.result = None
        self.error = None
        self._withdrawn.clear()
