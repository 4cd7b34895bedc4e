"""
Read-only queries over a sequence of donation entries.

Every function takes the entries to query (normally a snapshot of the
store) and returns a new list; the input is never modified.  Query
parameters are validated first and rejected with
``EntryValidationError``.

Empty results are reported differently depending on the query:
``paginate`` returns an empty list, while the searches, ``filter_entries``
and ``sort_entries`` raise ``EntryNotFoundError`` when nothing matches.
Text matching is case-insensitive throughout.
"""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from ..core.errors import EntryNotFoundError, EntryValidationError
from ..schemas.entry import DonationEntry
from .validation import NAME_CHARSET, VALID_BLOOD_TYPES, VALID_STATUSES, as_aware, BLOOD_TYPE_MESSAGE

INVALID_STATUS_MESSAGE = "Invalid status. Valid statuses are: {}.".format(", ".join(VALID_STATUSES))
SORT_FIELDS = ("bloodtype", "collectiondate")
# Letters first, then "-" before "+".
BLOOD_TYPE_RANK = {
    blood_type: rank for rank, blood_type in enumerate(("A-", "A+", "AB-", "AB+", "B-", "B+", "O-", "O+"))
}


def _same_text(left: Optional[str], right: str) -> bool:
    return (left or "").casefold() == right.casefold()


def paginate(entries: Sequence[DonationEntry], page: int, size: int) -> List[DonationEntry]:
    """Return page ``page`` (1-based) of ``size`` entries.

    A page past the end of the collection yields an empty list.  A
    non-positive ``size`` yields an empty list as well.
    """
    if page < 1:
        raise EntryValidationError("Page number must be greater than or equal to 1.")
    if size <= 0:
        return []
    skip = (page - 1) * size
    return list(entries[skip:skip + size])


def check_blood_type(value: str) -> str:
    """Make sure ``value`` names one of the eight blood types.

    Emptiness is checked before trimming, so a whitespace-only value
    is reported as an unknown blood type.
    """
    if not value:
        raise EntryValidationError("Blood type is required.")
    value = value.strip()
    if not any(_same_text(value, blood_type) for blood_type in VALID_BLOOD_TYPES):
        raise EntryValidationError(BLOOD_TYPE_MESSAGE)
    return value


def check_status(value: str) -> str:
    if not value:
        raise EntryValidationError("Status is required.")
    if not any(_same_text(value, status) for status in VALID_STATUSES):
        raise EntryValidationError(INVALID_STATUS_MESSAGE)
    return value


def check_donor_name(value: str) -> str:
    """Validate a donor name used as a search term.

    Search terms must be a first and last name: 2 to 100 characters of
    letters, spaces and hyphens, split into exactly two words.  The
    term is not trimmed; surrounding spaces count towards the length
    and take part in the substring match.
    """
    if not value:
        raise EntryValidationError("Donor name is required.")
    if len(value) < 2 or len(value) > 100:
        raise EntryValidationError("Donor name must be between 2 and 100 characters.")
    if NAME_CHARSET.fullmatch(value) is None:
        raise EntryValidationError("Donor name can only contain letters, spaces, and hyphens.")
    if len(value.split()) != 2:
        raise EntryValidationError("Donor name must contain exactly two words (first name and last name).")
    return value


def _blood_type_matches(value: str) -> Callable[[DonationEntry], bool]:
    return lambda entry: _same_text(entry.blood_type, value)


def _status_matches(value: str) -> Callable[[DonationEntry], bool]:
    return lambda entry: _same_text(entry.status, value)


def _donor_name_matches(value: str) -> Callable[[DonationEntry], bool]:
    needle = value.casefold()
    return lambda entry: needle in (entry.donor_name or "").casefold()


def _matching(
    entries: Sequence[DonationEntry],
    predicates: Sequence[Callable[[DonationEntry], bool]],
    not_found_message: str,
) -> List[DonationEntry]:
    result = [entry for entry in entries if all(predicate(entry) for predicate in predicates)]
    if not result:
        raise EntryNotFoundError(not_found_message)
    return result


def search_by_blood_type(entries: Sequence[DonationEntry], blood_type: str) -> List[DonationEntry]:
    blood_type = check_blood_type(blood_type)
    return _matching(
        entries, [_blood_type_matches(blood_type)], "No entries found for the specified blood type."
    )


def search_by_status(entries: Sequence[DonationEntry], status: str) -> List[DonationEntry]:
    status = check_status(status)
    return _matching(entries, [_status_matches(status)], "No entries found for the specified status.")


def search_by_donor_name(entries: Sequence[DonationEntry], donor_name: str) -> List[DonationEntry]:
    """Return entries whose donor name contains ``donor_name``."""
    donor_name = check_donor_name(donor_name)
    return _matching(entries, [_donor_name_matches(donor_name)], "No donors found with the specified name.")


def filter_entries(
    entries: Sequence[DonationEntry],
    blood_type: Optional[str] = None,
    status: Optional[str] = None,
    donor_name: Optional[str] = None,
) -> List[DonationEntry]:
    """Return entries matching every criterion that was given.

    Missing or empty criteria are ignored.  Each given criterion is
    validated like the corresponding dedicated search, in the order
    blood type, status, donor name.
    """
    predicates: List[Callable[[DonationEntry], bool]] = []
    if blood_type:
        predicates.append(_blood_type_matches(check_blood_type(blood_type)))
    if status:
        predicates.append(_status_matches(check_status(status)))
    if donor_name:
        predicates.append(_donor_name_matches(check_donor_name(donor_name)))
    return _matching(entries, predicates, "No matching entries found.")


def sort_entries(entries: Sequence[DonationEntry], sort_by: Optional[str], ascending: bool = True) -> List[DonationEntry]:
    """Return all entries ordered by blood type or collection date.

    The sort is stable in both directions: entries with equal keys keep
    their relative order.  An empty collection is reported as not found.
    """
    if not sort_by:
        raise EntryValidationError("The sortBy parameter is required.")
    sort_by = sort_by.lower()
    if sort_by not in SORT_FIELDS:
        raise EntryValidationError("Invalid sortBy value. Supported values: 'bloodtype', 'collectiondate'.")

    if sort_by == "bloodtype":
        key = lambda entry: BLOOD_TYPE_RANK.get(entry.blood_type, len(BLOOD_TYPE_RANK))  # noqa: E731
    else:
        key = lambda entry: as_aware(entry.collection_date)  # noqa: E731
    result = sorted(entries, key=key, reverse=not ascending)
    if not result:
        raise EntryNotFoundError("No entries available for sorting.")
    return result
