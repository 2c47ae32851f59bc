"""In-memory intelligence store owned by the composition root.

Entries live for the lifetime of the process. The store hands out immutable
snapshots and accepts whole batches through ``append``; appends are
serialized so that batches arriving from concurrent requests keep their
internal order and are never dropped or interleaved.
"""

import logging
import threading
from collections.abc import Iterable
from pathlib import Path

import yaml
from pydantic import TypeAdapter

from scamwatch.models import IntelligenceEntry

logger = logging.getLogger(__name__)

SEED_PATH = Path(__file__).parent / "data" / "seed.yaml"

_entries_adapter = TypeAdapter(list[IntelligenceEntry])


# ============================================================================
# Seed Data
# ============================================================================


def load_seed_entries(path: Path = SEED_PATH) -> list[IntelligenceEntry]:
    """Load baseline entries from the bundled seed file."""
    if not path.exists():
        logger.warning(f"Seed file not found: {path}")
        return []

    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    return _entries_adapter.validate_python(raw.get("entries", []))


def load_entries_file(path: Path) -> list[IntelligenceEntry]:
    """Load entries previously exported with ``generate --output``."""
    return _entries_adapter.validate_json(path.read_text(encoding="utf-8"))


def dump_entries(entries: Iterable[IntelligenceEntry]) -> bytes:
    """Serialize entries with their wire field names."""
    return _entries_adapter.dump_json(list(entries), by_alias=True, indent=2)


# ============================================================================
# Store
# ============================================================================


class IntelligenceStore:
    """Append-only list of intelligence entries."""

    def __init__(self, entries: Iterable[IntelligenceEntry] = ()):
        self._entries: list[IntelligenceEntry] = list(entries)
        self._lock = threading.Lock()

    @classmethod
    def seeded(cls) -> "IntelligenceStore":
        """Create a store pre-populated with the bundled baseline entries."""
        return cls(load_seed_entries())

    def __len__(self) -> int:
        return len(self._entries)

    def snapshot(self) -> tuple[IntelligenceEntry, ...]:
        """Immutable view of the current entries in arrival order."""
        with self._lock:
            return tuple(self._entries)

    def append(self, entries: Iterable[IntelligenceEntry]) -> int:
        """Append a batch atomically and return the new size."""
        batch = list(entries)
        with self._lock:
            self._entries.extend(batch)
            size = len(self._entries)
        logger.info(f"Appended {len(batch)} entries (store size: {size})")
        return size

    def get(self, entry_id: str) -> IntelligenceEntry | None:
        """Return the first entry with ``entry_id``, or None."""
        for entry in self.snapshot():
            if entry.id == entry_id:
                return entry
        return None
