"""
Validation rules for donation entries.

A candidate entry is checked against an ordered list of rules.  The
first rule that fails decides the rejection message; later rules are
not evaluated.  The order is significant and must not be changed:
clients rely on receiving the message of the earliest violation.

Text fields are trimmed before any rule runs, and the trimmed values
are what gets stored.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Callable, List, NamedTuple, Optional

from ..core.errors import EntryValidationError
from ..schemas.entry import DonationEntryBase

VALID_BLOOD_TYPES = ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-")
VALID_STATUSES = ("Available", "Requested", "Expired")

# Letters, whitespace and hyphens.
NAME_CHARSET = re.compile(r"[a-zA-Z\s-]+")
# One word, or two words separated by a single whitespace character.
# Hyphens are not allowed here even though NAME_CHARSET permits them;
# both patterns have to match.
NAME_SHAPE = re.compile(r"[A-Za-z]+(?:\s[A-Za-z]+)?")
PHONE_NUMBER = re.compile(r"[0-9]{10}")

BLOOD_TYPE_MESSAGE = "BloodType must be one of the following: {}.".format(", ".join(VALID_BLOOD_TYPES))
STATUS_MESSAGE = "Status must be one of the following: {}.".format(", ".join(VALID_STATUSES))


class Rule(NamedTuple):
    """A predicate that must hold, and the message used when it does not."""

    check: Callable[[DonationEntryBase, datetime], bool]
    message: str


def as_aware(value: datetime) -> datetime:
    """Return ``value`` with a UTC offset so naive and aware dates compare.

    Naive values are taken as local time and get the current local
    offset attached.  Nothing is converted, so dates near the ends of
    the supported range never overflow.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.now().astimezone().tzinfo)
    return value


def is_unset(value: Optional[datetime]) -> bool:
    """A date is unset when missing or when its wall-clock value is the minimum date."""
    return value is None or value.replace(tzinfo=None) == datetime.min


def _collection_date_ok(entry: DonationEntryBase, now: datetime) -> bool:
    if is_unset(entry.collection_date):
        return False
    return as_aware(entry.collection_date) <= as_aware(now)


def _expiration_date_ok(entry: DonationEntryBase, now: datetime) -> bool:
    if is_unset(entry.expiration_date) or entry.collection_date is None:
        return False
    return as_aware(entry.expiration_date) > as_aware(entry.collection_date)


RULES: List[Rule] = [
    Rule(lambda e, now: bool(e.donor_name), "DonorName is required and cannot be empty."),
    Rule(
        lambda e, now: NAME_CHARSET.fullmatch(e.donor_name) is not None,
        "Donor name can only contain letters, spaces, and hyphens.",
    ),
    Rule(lambda e, now: 3 <= len(e.donor_name) <= 100, "DonorName must be between 3 and 100 characters."),
    Rule(
        lambda e, now: NAME_SHAPE.fullmatch(e.donor_name) is not None,
        "DonorName must contain one or two words (first and last name).",
    ),
    Rule(lambda e, now: 18 <= e.age <= 65, "Age must be between 18 and 65."),
    Rule(lambda e, now: e.blood_type in VALID_BLOOD_TYPES, BLOOD_TYPE_MESSAGE),
    Rule(
        lambda e, now: bool(e.contact_info) and PHONE_NUMBER.fullmatch(e.contact_info) is not None,
        "ContactInfo is required and must be a valid 10-digit phone number.",
    ),
    Rule(lambda e, now: 0 < e.quantity <= 500, "Quantity must be a positive value and not exceed 500 ml."),
    Rule(_collection_date_ok, "CollectionDate must be a valid date and cannot be in the future."),
    Rule(_expiration_date_ok, "ExpirationDate must be a valid date and later than the CollectionDate."),
    Rule(lambda e, now: e.status in VALID_STATUSES, STATUS_MESSAGE),
]


def normalize_entry(candidate: DonationEntryBase) -> DonationEntryBase:
    """Return a copy of ``candidate`` with text fields trimmed.

    Missing text (``None``) becomes the empty string.
    """
    return DonationEntryBase(
        donor_name=(candidate.donor_name or "").strip(),
        age=candidate.age,
        blood_type=(candidate.blood_type or "").strip(),
        contact_info=(candidate.contact_info or "").strip(),
        quantity=candidate.quantity,
        collection_date=candidate.collection_date,
        expiration_date=candidate.expiration_date,
        status=(candidate.status or "").strip(),
    )


def first_violation(candidate: DonationEntryBase, now: Optional[datetime] = None) -> Optional[str]:
    """Return the message of the first failing rule, or ``None``.

    ``candidate`` is expected to be normalized already.  ``now``
    defaults to the current local time and is only consulted by the
    collection date rule.
    """
    if now is None:
        now = datetime.now()
    for rule in RULES:
        if not rule.check(candidate, now):
            return rule.message
    return None


def validate_entry(candidate: DonationEntryBase, now: Optional[datetime] = None) -> DonationEntryBase:
    """Normalize and validate ``candidate``.

    Returns the trimmed entry ready to be stored.  Raises
    ``EntryValidationError`` with the message of the first violated
    rule otherwise.
    """
    entry = normalize_entry(candidate)
    message = first_violation(entry, now)
    if message is not None:
        raise EntryValidationError(message)
    return entry
