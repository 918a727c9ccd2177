"""Supabase storage for the favorite selection."""

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from pawmatch.domain.selection import SelectionSnapshot
from pawmatch.services.selection import SelectionStorage


@dataclass
class SupabaseSelectionStorage(SelectionStorage):
    """Supabase implementation keyed by namespace in the selections table."""

    client: Client
    namespace: str = "favorites"
    table_name: str = "selections"

    def load(self) -> Sequence[object] | None:
        """Return the stored identifiers for the namespace."""
        response = (
            self.client.table(self.table_name)
            .select("identifiers")
            .eq("namespace", self.namespace)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        identifiers = response.data[0].get("identifiers")
        if not isinstance(identifiers, list):
            return None
        return identifiers

    def save(self, snapshot: SelectionSnapshot) -> None:
        """Upsert the namespace row with the full selection."""
        self.client.table(self.table_name).upsert(
            {
                "namespace": self.namespace,
                "identifiers": list(snapshot),
                "updated_at": datetime.now(tz=UTC).isoformat(),
            },
            on_conflict="namespace",
        ).execute()
