"""Core domain models for contacts.

This module defines the records the rest of the application works with:
- Name: a validated person name that knows its constituent words
- Contact: one address book entry (name plus optional details)
"""

import re
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

NAME_CONSTRAINTS = "Person names should be spaces or alphabetic characters"

_NAME_PATTERN = re.compile(r"^[^\W\d_]+(?:\s+[^\W\d_]+)*$")
_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_TAG_PATTERN = re.compile(r"^[A-Za-z0-9]+$")


class Name(BaseModel):
    """A person's full name.

    Surrounding whitespace is stripped; the remaining text must be one or
    more alphabetic words separated by whitespace. Case is preserved exactly,
    since name search is case-sensitive.
    """

    full_name: str = Field(..., description="Full name as entered, e.g. 'Alice Tan'")

    model_config = {"frozen": True}

    @field_validator("full_name")
    @classmethod
    def validate_full_name(cls, v: str) -> str:
        """Strip whitespace and enforce the alphabetic-words constraint."""
        stripped = v.strip()
        if not stripped or not _NAME_PATTERN.match(stripped):
            raise ValueError(NAME_CONSTRAINTS)
        return stripped

    @property
    def words_in_name(self) -> List[str]:
        """Words of the name split on runs of whitespace, in written order."""
        return self.full_name.split()

    def __str__(self) -> str:
        return self.full_name


class Contact(BaseModel):
    """A single address book entry.

    Only ``name`` takes part in name search; the other fields are carried
    for display. A plain string is accepted for ``name`` and coerced into
    a Name.
    """

    name: Name = Field(..., description="The contact's name")
    phone: Optional[str] = Field(None, description="Phone number")
    email: Optional[str] = Field(None, description="Email address")
    address: Optional[str] = Field(None, description="Postal address")
    tags: List[str] = Field(default_factory=list, description="Free-form labels")

    model_config = {"frozen": True}

    @field_validator("name", mode="before")
    @classmethod
    def coerce_name(cls, v):
        """Allow ``Contact(name="Alice Tan")``."""
        if isinstance(v, str):
            return {"full_name": v}
        return v

    @field_validator("phone", "address")
    @classmethod
    def strip_optional(cls, v: Optional[str]) -> Optional[str]:
        """Strip whitespace; blank values become None."""
        if v is None:
            return None
        stripped = v.strip()
        return stripped if stripped else None

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: Optional[str]) -> Optional[str]:
        """Check the address looks like ``local@domain.tld``."""
        if v is None or not v.strip():
            return None
        stripped = v.strip()
        if not _EMAIL_PATTERN.match(stripped):
            raise ValueError(f"Invalid email address: '{stripped}'")
        return stripped

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: List[str]) -> List[str]:
        """Tags are alphanumeric; duplicates are dropped keeping first occurrence."""
        seen = []
        for tag in v:
            tag = tag.strip()
            if not _TAG_PATTERN.match(tag):
                raise ValueError(f"Tags names should be alphanumeric, got: '{tag}'")
            if tag not in seen:
                seen.append(tag)
        return seen

    def as_text(self) -> str:
        """Single-line rendering used in command listings.

        Absent fields are omitted, e.g.
        ``Alice Tan Phone: 91234567 Email: alice@example.com Tags: [friend]``
        """
        parts = [self.name.full_name]
        if self.phone:
            parts.append(f"Phone: {self.phone}")
        if self.email:
            parts.append(f"Email: {self.email}")
        if self.address:
            parts.append(f"Address: {self.address}")
        if self.tags:
            parts.append("Tags: " + "".join(f"[{tag}]" for tag in self.tags))
        return " ".join(parts)
