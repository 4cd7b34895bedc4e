"""
In-memory storage for donation entries.

``EntryStore`` keeps entries in insertion order together with the
counter used to allocate ids.  Ids start at 0, grow by one per insert
and are never reused, even after the entry holding one is deleted.

All mutations and the id counter sit behind a single lock.  Reads
return copies so callers can never alter stored entries in place.
Nothing here validates input; callers pass entries that already went
through ``services.validation``.
"""

from __future__ import annotations

import logging
from threading import RLock
from typing import List, Optional

from ..core.errors import EntryNotFoundError
from ..schemas.entry import DonationEntry, DonationEntryBase

logger = logging.getLogger(__name__)


class EntryStore:
    """Ordered collection of ``DonationEntry`` records with id allocation."""

    def __init__(self) -> None:
        self._entries: List[DonationEntry] = []
        self._next_id = 0
        self._lock = RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    @property
    def next_id(self) -> int:
        with self._lock:
            return self._next_id

    def add(self, data: DonationEntryBase) -> DonationEntry:
        """Store ``data`` under a newly allocated id and return the stored entry."""
        with self._lock:
            entry = DonationEntry(id=self._next_id, **data.model_dump())
            self._next_id += 1
            self._entries.append(entry)
            logger.info("Stored entry %s (next id %s)", entry.id, self._next_id)
            return entry.model_copy()

    def snapshot(self) -> List[DonationEntry]:
        """Return copies of all entries in insertion order."""
        with self._lock:
            return [entry.model_copy() for entry in self._entries]

    def find(self, entry_id: int) -> Optional[DonationEntry]:
        with self._lock:
            index = self._index_of(entry_id)
            if index is None:
                return None
            return self._entries[index].model_copy()

    def get(self, entry_id: int) -> DonationEntry:
        """Return the entry with ``entry_id`` or raise ``EntryNotFoundError``."""
        entry = self.find(entry_id)
        if entry is None:
            raise EntryNotFoundError()
        return entry

    def replace(self, entry_id: int, data: DonationEntryBase) -> DonationEntry:
        """Overwrite every field except the id of an existing entry."""
        with self._lock:
            index = self._index_of(entry_id)
            if index is None:
                raise EntryNotFoundError()
            entry = DonationEntry(id=entry_id, **data.model_dump())
            self._entries[index] = entry
            logger.info("Replaced entry %s", entry_id)
            return entry.model_copy()

    def remove(self, entry_id: int) -> None:
        with self._lock:
            index = self._index_of(entry_id)
            if index is None:
                raise EntryNotFoundError()
            del self._entries[index]
            logger.info("Deleted entry %s", entry_id)

    def _index_of(self, entry_id: int) -> Optional[int]:
        # Linear scan; there is no secondary index.
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return None
