"""
Blood bank endpoints for API v1.

These routes expose CRUD operations on donation entries together with
pagination, search, filtering and sorting.  Handlers only translate
between HTTP and ``BloodBankService``: a rejected input becomes a 400
response and a missing entry or empty match set becomes a 404, both
carrying the service message as ``detail``.

Static paths (``/pagination``, ``/search/...``, ``/filter``, ``/sort``)
are declared before ``/{entry_id}`` so they are not captured by it.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from blood_bank_api.app.core.config import settings
from blood_bank_api.app.core.errors import EntryNotFoundError, EntryValidationError
from blood_bank_api.app.schemas.entry import DonationEntry, DonationEntryCreate, DonationEntryUpdate
from blood_bank_api.app.services.bloodbank_service import BloodBankService, get_bloodbank_service

router = APIRouter()


def _bad_request(exc: EntryValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message)


def _not_found(exc: EntryNotFoundError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message)


@router.post("", response_model=DonationEntry, status_code=status.HTTP_201_CREATED)
async def create_entry(
    entry: DonationEntryCreate,
    request: Request,
    response: Response,
    service: BloodBankService = Depends(get_bloodbank_service),
) -> DonationEntry:
    """Create a new donation entry.

    The entry is validated field by field; the first violated rule is
    returned as a 400 response.  On success the response carries a
    ``Location`` header pointing at the new entry.
    """
    try:
        created = await service.create_entry(entry)
    except EntryValidationError as e:
        raise _bad_request(e) from e
    response.headers["Location"] = str(request.url_for("get_entry", entry_id=created.id))
    return created


@router.get("", response_model=List[DonationEntry])
async def list_entries(service: BloodBankService = Depends(get_bloodbank_service)) -> List[DonationEntry]:
    """Return every entry in insertion order."""
    return await service.list_entries()


@router.get("/pagination", response_model=List[DonationEntry])
async def paginate_entries(
    page: int = Query(1),
    size: Optional[int] = Query(None),
    service: BloodBankService = Depends(get_bloodbank_service),
) -> List[DonationEntry]:
    """Return one page of entries.

    - **page** — 1‑based page number; values below 1 are rejected.
    - **size** — entries per page, defaults to the configured page size.

    A page beyond the end of the collection is an empty list, not a 404.
    """
    if size is None:
        size = settings.default_page_size
    try:
        return await service.paginate(page, size)
    except EntryValidationError as e:
        raise _bad_request(e) from e


@router.get("/search/bloodtype", response_model=List[DonationEntry])
async def search_by_blood_type(
    blood_type: Optional[str] = Query(None, alias="bloodType"),
    service: BloodBankService = Depends(get_bloodbank_service),
) -> List[DonationEntry]:
    try:
        return await service.search_by_blood_type(blood_type)
    except EntryValidationError as e:
        raise _bad_request(e) from e
    except EntryNotFoundError as e:
        raise _not_found(e) from e


@router.get("/search/status", response_model=List[DonationEntry])
async def search_by_status(
    entry_status: Optional[str] = Query(None, alias="status"),
    service: BloodBankService = Depends(get_bloodbank_service),
) -> List[DonationEntry]:
    try:
        return await service.search_by_status(entry_status)
    except EntryValidationError as e:
        raise _bad_request(e) from e
    except EntryNotFoundError as e:
        raise _not_found(e) from e


@router.get("/search/donorname", response_model=List[DonationEntry])
async def search_by_donor_name(
    donor_name: Optional[str] = Query(None, alias="donorName"),
    service: BloodBankService = Depends(get_bloodbank_service),
) -> List[DonationEntry]:
    """Search donors by first and last name (case‑insensitive substring match)."""
    try:
        return await service.search_by_donor_name(donor_name)
    except EntryValidationError as e:
        raise _bad_request(e) from e
    except EntryNotFoundError as e:
        raise _not_found(e) from e


@router.get("/filter", response_model=List[DonationEntry])
async def filter_entries(
    blood_type: Optional[str] = Query(None, alias="bloodType"),
    entry_status: Optional[str] = Query(None, alias="status"),
    donor_name: Optional[str] = Query(None, alias="donorName"),
    service: BloodBankService = Depends(get_bloodbank_service),
) -> List[DonationEntry]:
    """Return entries matching all supplied criteria.

    Each criterion is optional and validated like the matching search
    endpoint.  No match at all results in a 404.
    """
    try:
        return await service.filter_entries(blood_type=blood_type, status=entry_status, donor_name=donor_name)
    except EntryValidationError as e:
        raise _bad_request(e) from e
    except EntryNotFoundError as e:
        raise _not_found(e) from e


@router.get("/sort", response_model=List[DonationEntry])
async def sort_entries(
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    ascending: bool = Query(True),
    service: BloodBankService = Depends(get_bloodbank_service),
) -> List[DonationEntry]:
    """Return all entries sorted by ``bloodtype`` or ``collectiondate``."""
    try:
        return await service.sort_entries(sort_by, ascending)
    except EntryValidationError as e:
        raise _bad_request(e) from e
    except EntryNotFoundError as e:
        raise _not_found(e) from e


@router.get("/{entry_id}", response_model=DonationEntry)
async def get_entry(entry_id: int, service: BloodBankService = Depends(get_bloodbank_service)) -> DonationEntry:
    try:
        return await service.get_entry(entry_id)
    except EntryNotFoundError as e:
        raise _not_found(e) from e


@router.put("/{entry_id}", response_model=DonationEntry)
async def update_entry(
    entry_id: int,
    entry: DonationEntryUpdate,
    service: BloodBankService = Depends(get_bloodbank_service),
) -> DonationEntry:
    """Replace an existing entry.

    All fields are required and validated again; partial updates are
    not supported.
    """
    try:
        return await service.update_entry(entry_id, entry)
    except EntryValidationError as e:
        raise _bad_request(e) from e
    except EntryNotFoundError as e:
        raise _not_found(e) from e


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: int, service: BloodBankService = Depends(get_bloodbank_service)) -> None:
    try:
        await service.delete_entry(entry_id)
    except EntryNotFoundError as e:
        raise _not_found(e)
    return None
