"""
Business logic for the blood bank collection.

``BloodBankService`` is what the API handlers talk to.  Writes go
through ``validate_entry`` before touching the store; reads take a
snapshot of the store and hand it to the pure functions in
``query_service``.  Failures surface as ``EntryValidationError`` or
``EntryNotFoundError`` and are translated to HTTP responses by the
endpoint module.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional

from ..core.errors import EntryNotFoundError, EntryValidationError
from ..schemas.entry import DonationEntry, DonationEntryBase, DonationEntryCreate, DonationEntryUpdate
from . import query_service
from .entry_store import EntryStore
from .validation import validate_entry

logger = logging.getLogger(__name__)


class BloodBankService:
    """Сервис для управления записями о донорской крови.

    Holds a single ``EntryStore``.  ``clock`` returns the time used
    by the collection date rule and can be replaced in tests.
    """

    def __init__(self, store: Optional[EntryStore] = None, clock: Optional[Callable[[], datetime]] = None) -> None:
        self.store = store if store is not None else EntryStore()
        self.clock = clock or datetime.now

    def _validate(self, data: DonationEntryBase) -> DonationEntryBase:
        try:
            return validate_entry(data, now=self.clock())
        except EntryValidationError as exc:
            logger.info("Rejected entry: %s", exc.message)
            raise

    async def create_entry(self, data: DonationEntryCreate) -> DonationEntry:
        """Validate ``data`` and store it under a new id."""
        entry = self._validate(data)
        return self.store.add(entry)

    async def list_entries(self) -> List[DonationEntry]:
        return self.store.snapshot()

    async def get_entry(self, entry_id: int) -> DonationEntry:
        """Return a single entry or raise ``EntryNotFoundError``."""
        return self.store.get(entry_id)

    async def update_entry(self, entry_id: int, data: DonationEntryUpdate) -> DonationEntry:
        """Replace every field of an entry except its id.

        Validation runs before the lookup, so an invalid body is
        rejected even when ``entry_id`` does not exist.
        """
        entry = self._validate(data)
        try:
            return self.store.replace(entry_id, entry)
        except EntryNotFoundError:
            logger.info("Update of missing entry %s", entry_id)
            raise

    async def delete_entry(self, entry_id: int) -> None:
        try:
            self.store.remove(entry_id)
        except EntryNotFoundError:
            logger.info("Delete of missing entry %s", entry_id)
            raise

    async def paginate(self, page: int, size: int) -> List[DonationEntry]:
        return query_service.paginate(self.store.snapshot(), page, size)

    async def search_by_blood_type(self, blood_type: Optional[str]) -> List[DonationEntry]:
        return query_service.search_by_blood_type(self.store.snapshot(), blood_type or "")

    async def search_by_status(self, status: Optional[str]) -> List[DonationEntry]:
        return query_service.search_by_status(self.store.snapshot(), status or "")

    async def search_by_donor_name(self, donor_name: Optional[str]) -> List[DonationEntry]:
        return query_service.search_by_donor_name(self.store.snapshot(), donor_name or "")

    async def filter_entries(
        self,
        blood_type: Optional[str] = None,
        status: Optional[str] = None,
        donor_name: Optional[str] = None,
    ) -> List[DonationEntry]:
        """Return entries matching all given criteria (logical AND)."""
        return query_service.filter_entries(
            self.store.snapshot(), blood_type=blood_type, status=status, donor_name=donor_name
        )

    async def sort_entries(self, sort_by: Optional[str], ascending: bool = True) -> List[DonationEntry]:
        return query_service.sort_entries(self.store.snapshot(), sort_by, ascending)


# Process-wide service used by the API.  The endpoint module exposes it
# through a dependency so tests can substitute their own instance.
bloodbank_service = BloodBankService()


def get_bloodbank_service() -> BloodBankService:
    return bloodbank_service
