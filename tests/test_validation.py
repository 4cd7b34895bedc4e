from datetime import datetime, timedelta, timezone

import pytest

from blood_bank_api.app.core.errors import EntryValidationError
from blood_bank_api.app.services.validation import RULES, first_violation, normalize_entry, validate_entry
from tests.factories import NOW, make_candidate

NAME_REQUIRED = "DonorName is required and cannot be empty."
NAME_CHARSET = "Donor name can only contain letters, spaces, and hyphens."
NAME_LENGTH = "DonorName must be between 3 and 100 characters."
NAME_SHAPE = "DonorName must contain one or two words (first and last name)."
AGE = "Age must be between 18 and 65."
BLOOD_TYPE = "BloodType must be one of the following: A+, A-, B+, B-, AB+, AB-, O+, O-."
CONTACT = "ContactInfo is required and must be a valid 10-digit phone number."
QUANTITY = "Quantity must be a positive value and not exceed 500 ml."
COLLECTION = "CollectionDate must be a valid date and cannot be in the future."
EXPIRATION = "ExpirationDate must be a valid date and later than the CollectionDate."
STATUS = "Status must be one of the following: Available, Requested, Expired."


def rejection(**overrides) -> str:
    with pytest.raises(EntryValidationError) as exc_info:
        validate_entry(make_candidate(**overrides), now=NOW)
    return exc_info.value.message


def test_valid_entry_is_accepted():
    entry = validate_entry(make_candidate(), now=NOW)
    assert entry.donor_name == "Mary Jane"
    assert entry.blood_type == "O+"


def test_text_fields_are_trimmed():
    entry = validate_entry(
        make_candidate(donor_name="  Mary Jane ", blood_type=" AB- ", contact_info=" 5551234567 ", status=" Expired "),
        now=NOW,
    )
    assert entry.donor_name == "Mary Jane"
    assert entry.blood_type == "AB-"
    assert entry.contact_info == "5551234567"
    assert entry.status == "Expired"


def test_rules_are_ordered_and_unique():
    assert len(RULES) == 11
    assert [rule.message for rule in RULES] == [
        NAME_REQUIRED, NAME_CHARSET, NAME_LENGTH, NAME_SHAPE, AGE, BLOOD_TYPE,
        CONTACT, QUANTITY, COLLECTION, EXPIRATION, STATUS,
    ]


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"donor_name": ""}, NAME_REQUIRED),
        ({"donor_name": "   "}, NAME_REQUIRED),
        ({"donor_name": None}, NAME_REQUIRED),
        ({"donor_name": "O'Brien"}, NAME_CHARSET),
        ({"donor_name": "Mary Jane 2"}, NAME_CHARSET),
        ({"donor_name": "Al"}, NAME_LENGTH),
        ({"donor_name": "A" * 50 + " " + "B" * 50}, NAME_LENGTH),
        ({"donor_name": "Mary-Jane"}, NAME_SHAPE),
        ({"donor_name": "Anna Maria Smith"}, NAME_SHAPE),
        ({"age": 17}, AGE),
        ({"age": 66}, AGE),
        ({"blood_type": "o+"}, BLOOD_TYPE),
        ({"blood_type": "C+"}, BLOOD_TYPE),
        ({"contact_info": ""}, CONTACT),
        ({"contact_info": "555123456"}, CONTACT),
        ({"contact_info": "55512345678"}, CONTACT),
        ({"contact_info": "555-123-45"}, CONTACT),
        ({"quantity": 0}, QUANTITY),
        ({"quantity": -5}, QUANTITY),
        ({"quantity": 501}, QUANTITY),
        ({"collection_date": None}, COLLECTION),
        ({"collection_date": datetime.min}, COLLECTION),
        ({"collection_date": NOW + timedelta(seconds=1)}, COLLECTION),
        ({"expiration_date": None}, EXPIRATION),
        ({"expiration_date": NOW - timedelta(days=10)}, EXPIRATION),
        ({"expiration_date": NOW - timedelta(days=11)}, EXPIRATION),
        ({"status": "available"}, STATUS),
        ({"status": "Pending"}, STATUS),
        ({"status": ""}, STATUS),
    ],
)
def test_each_rule_reports_its_message(overrides, message):
    assert rejection(**overrides) == message


def test_first_violated_rule_wins():
    assert rejection(donor_name="", age=10, blood_type="X") == NAME_REQUIRED
    assert rejection(age=70, blood_type="X", quantity=0) == AGE
    assert rejection(quantity=0, status="Nope") == QUANTITY


@pytest.mark.parametrize(
    "name",
    ["Ann", "A B", "Bob", "Mary", "Mary Jane", "A" * 100, "A" * 50 + " " + "B" * 49],
)
def test_donor_name_boundaries_accepted(name):
    assert validate_entry(make_candidate(donor_name=name), now=NOW).donor_name == name


@pytest.mark.parametrize("age", [18, 65])
def test_age_boundaries_accepted(age):
    assert validate_entry(make_candidate(age=age), now=NOW).age == age


@pytest.mark.parametrize("quantity", [1, 500])
def test_quantity_boundaries_accepted(quantity):
    assert validate_entry(make_candidate(quantity=quantity), now=NOW).quantity == quantity


def test_collection_date_equal_to_now_is_accepted():
    validate_entry(make_candidate(collection_date=NOW), now=NOW)


def test_expiration_one_second_after_collection_is_accepted():
    collected = NOW - timedelta(days=1)
    validate_entry(
        make_candidate(collection_date=collected, expiration_date=collected + timedelta(seconds=1)),
        now=NOW,
    )


def test_expiration_equal_to_collection_is_rejected():
    collected = NOW - timedelta(days=1)
    assert rejection(collection_date=collected, expiration_date=collected) == EXPIRATION


def test_timezone_aware_dates_are_compared():
    collected = datetime(2025, 1, 1, tzinfo=timezone.utc)
    entry = validate_entry(
        make_candidate(collection_date=collected, expiration_date=collected + timedelta(days=42)),
        now=NOW,
    )
    assert entry.collection_date == collected


def test_all_blood_types_and_statuses_accepted():
    for blood_type in ("A+", "A-", "B+", "B-", "AB+", "AB-", "O+", "O-"):
        for status in ("Available", "Requested", "Expired"):
            assert first_violation(normalize_entry(make_candidate(blood_type=blood_type, status=status)), NOW) is None


def test_default_clock_rejects_future_collection():
    future = datetime.now() + timedelta(days=1)
    candidate = make_candidate(collection_date=future, expiration_date=future + timedelta(days=1))
    with pytest.raises(EntryValidationError) as exc_info:
        validate_entry(candidate)
    assert exc_info.value.message == COLLECTION


def test_normalize_does_not_modify_candidate():
    candidate = make_candidate(donor_name=" Mary Jane ")
    normalize_entry(candidate)
    assert candidate.donor_name == " Mary Jane "


def test_minimum_wall_clock_with_offset_is_unset():
    collected = datetime(1, 1, 1, tzinfo=timezone(timedelta(hours=5)))
    assert rejection(collection_date=collected) == COLLECTION


def test_expiration_at_end_of_range_with_offset_is_accepted():
    expires = datetime(9999, 12, 31, 23, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert validate_entry(make_candidate(expiration_date=expires), now=NOW).expiration_date == expires


def test_offsets_are_respected_between_aware_dates():
    collected = datetime(2025, 1, 1, 0, 0, tzinfo=timezone(timedelta(hours=14)))
    before = datetime(2024, 12, 30, 21, 0, tzinfo=timezone(timedelta(hours=-12)))
    after = datetime(2024, 12, 30, 23, 0, tzinfo=timezone(timedelta(hours=-12)))
    assert rejection(collection_date=collected, expiration_date=before) == EXPIRATION
    validate_entry(make_candidate(collection_date=collected, expiration_date=after), now=NOW)
