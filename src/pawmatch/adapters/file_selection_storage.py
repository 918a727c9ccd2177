"""JSON file storage for the favorite selection."""

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from pawmatch.domain.selection import SelectionSnapshot
from pawmatch.services.selection import SelectionStorage

_logger = logging.getLogger(__name__)


@dataclass
class FileSelectionStorage(SelectionStorage):
    """Stores selections under a namespace key in a local JSON document.

    The document maps namespace keys to identifier lists, so several
    namespaces can share one file.
    """

    path: Path
    namespace: str = "favorites"

    def load(self) -> Sequence[object] | None:
        """Return stored identifiers for the namespace, or None."""
        document = self._read_document()
        value = document.get(self.namespace)
        if value is None:
            return None
        if not isinstance(value, list):
            _logger.warning("Stored selection %s is not a list", self.namespace)
            return None
        return value

    def save(self, snapshot: SelectionSnapshot) -> None:
        """Write the namespace entry, keeping other namespaces intact."""
        document = self._read_document()
        document[self.namespace] = list(snapshot)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(document), encoding="utf-8")
        tmp_path.replace(self.path)

    def _read_document(self) -> dict[str, object]:
        if not self.path.exists():
            return {}
        try:
            document = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            _logger.warning("Selection file %s is unreadable", self.path)
            return {}
        if not isinstance(document, dict):
            _logger.warning("Selection file %s is not an object", self.path)
            return {}
        return document
