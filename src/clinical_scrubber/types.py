"""Core types."""

from __future__ import annotations
from dataclasses import asdict, dataclass, fields
from enum import Enum


class Category(str, Enum):
    """Redaction categories, in the order the CLI lists them."""
    EMAIL = "email"
    PHONE = "phone"
    DATE = "date"
    RELATIVE_DATE = "relative-date"
    SSN = "ssn"
    MRN = "mrn"
    ZIP = "zip"
    PERSON = "person"
    FACILITY = "facility"
    ADDRESS = "address"
    COORDINATE = "coordinate"
    # Reserved for Safe Harbor extensions; no detector yet.
    URL = "url"
    INSURANCE = "insurance"
    LICENSE = "license"
    VEHICLE = "vehicle"
    DEVICE = "device"
    IP = "ip"

    @classmethod
    def parse(cls, value: str) -> Category:
        """Look up a category by name, tolerating case and '_' vs '-'."""
        key = value.strip().lower().replace("_", "-")
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"unknown category: {value!r}") from None

    @property
    def implemented(self) -> bool:
        return self in STAT_FIELDS


# Placeholder inserted for each implemented category
TOKENS: dict[Category, str] = {
    Category.EMAIL: "[EMAIL]",
    Category.PHONE: "[PHONE]",
    Category.SSN: "[SSN]",
    Category.MRN: "[MRN]",
    Category.ZIP: "[ZIP]",
    Category.FACILITY: "[FACILITY]",
    Category.ADDRESS: "[ADDRESS]",
    Category.COORDINATE: "[COORD]",
    Category.PERSON: "[PERSON]",
    Category.DATE: "[DATE]",
    Category.RELATIVE_DATE: "[REL_DATE]",
}

# Category → ScrubStats attribute
STAT_FIELDS: dict[Category, str] = {
    Category.EMAIL: "emails",
    Category.PHONE: "phones",
    Category.DATE: "dates",
    Category.RELATIVE_DATE: "relative_dates",
    Category.SSN: "ssn",
    Category.MRN: "mrn",
    Category.ZIP: "zip_codes",
    Category.PERSON: "persons",
    Category.FACILITY: "facilities",
    Category.ADDRESS: "addresses",
    Category.COORDINATE: "coordinates",
}


@dataclass(slots=True)
class ScrubStats:
    """Redaction counts for a single scrub() call."""
    emails: int = 0
    phones: int = 0
    dates: int = 0
    relative_dates: int = 0
    ssn: int = 0
    mrn: int = 0
    zip_codes: int = 0
    persons: int = 0
    facilities: int = 0
    addresses: int = 0
    coordinates: int = 0

    @property
    def total(self) -> int:
        return sum(getattr(self, f.name) for f in fields(self))

    def add(self, category: Category, n: int) -> None:
        name = STAT_FIELDS[category]
        setattr(self, name, getattr(self, name) + n)

    def as_dict(self) -> dict[str, int]:
        return asdict(self)
