"""
Pydantic models for blood donation entries.

``DonationEntryBase`` holds the eight client supplied fields.  JSON
payloads use camelCase names (``donorName``, ``bloodType`` ...) and
snake_case names are accepted as well.  Every field has an "unset"
default so that an incomplete body reaches the validation rules and
is rejected with a specific message instead of a generic binding
error.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class DonationEntryBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    donor_name: Optional[str] = Field("", examples=["Mary Jane"])
    age: int = Field(0, examples=[34])
    blood_type: Optional[str] = Field("", examples=["O+"])
    contact_info: Optional[str] = Field("", examples=["5551234567"])
    quantity: int = Field(0, description="Donated volume in mL", examples=[450])
    collection_date: Optional[datetime] = Field(None, examples=["2025-09-01T10:00:00"])
    expiration_date: Optional[datetime] = Field(None, examples=["2025-10-13T10:00:00"])
    status: Optional[str] = Field("", examples=["Available"])


class DonationEntryCreate(DonationEntryBase):
    """Schema for creating an entry.  The id is assigned by the store."""
    pass


class DonationEntryUpdate(DonationEntryBase):
    """Schema for replacing an entry.

    There is no partial update: every field is validated again even
    when it did not change.
    """
    pass


class DonationEntry(DonationEntryBase):
    """A stored entry, also used as the response model."""

    id: int

    model_config = ConfigDict(from_attributes=True)
