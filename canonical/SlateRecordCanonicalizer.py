# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-17
# Description: SlateRecordCanonicalizer.py
# -----------------------------------------------------------------------------
"""
Builds the text each record is embedded from.

Every builder emits "Label: value" fragments in a fixed order, one per present
attribute, joined with ". ". Absent attributes (None, empty list, blank string)
never produce a fragment, so identical attribute sets always yield
byte-identical text.
"""
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional

from records.types import (
    LocationRecord,
    OrganizationRecord,
    PersonRecord,
    ProductionRecord,
    RecordKind,
    record_type_for,
)

FRAGMENT_SEPARATOR = ". "

# Upper bound (inclusive) of employee count -> size tier
SIZE_TIERS = (
    (10, "small"),
    (50, "medium"),
    (200, "large"),
)
LARGEST_SIZE_TIER = "enterprise"


def _present(value: Optional[str]) -> bool:
    return value is not None and bool(str(value).strip())


def _joined(values: Iterable[str], sep: str = ", ") -> str:
    return sep.join(v for v in values if _present(v))


def size_tier(employees_count: int) -> str:
    for upper, label in SIZE_TIERS:
        if employees_count <= upper:
            return label
    return LARGEST_SIZE_TIER


def height_display(height_cm: int) -> str:
    """180 -> '180 cm (5\\'11")'."""
    total_inches = round(height_cm / 2.54)
    feet, inches = divmod(total_inches, 12)
    return f"{height_cm} cm ({feet}'{inches}\")"


def build_person_embedding_text(p: PersonRecord) -> str:
    parts: List[str] = [f"Name: {p.name}"]

    if _present(p.headline):
        parts.append(f"Role: {p.headline}")

    # Physical characteristics matter for casting
    if _present(p.gender):
        parts.append(f"Gender: {p.gender}")
    if p.age_range is not None:
        low, high = p.age_range
        parts.append(f"Age range: {low}-{high} years old")
    if _joined(p.ethnicity):
        parts.append(f"Ethnicity: {_joined(p.ethnicity)}")
    if p.height_cm is not None:
        parts.append(f"Height: {height_display(p.height_cm)}")
    if _present(p.body_type):
        parts.append(f"Build: {p.body_type}")
    if _present(p.hair_color):
        parts.append(f"Hair: {p.hair_color}")
    if _present(p.eye_color):
        parts.append(f"Eyes: {p.eye_color}")

    if _present(p.location):
        parts.append(f"Location: {p.location}")
    if _joined(p.skills):
        parts.append(f"Skills and abilities: {_joined(p.skills)}")
    if _joined(p.languages):
        parts.append(f"Languages: {_joined(p.languages)}")
    if _joined(p.unions):
        parts.append(f"Union membership: {_joined(p.unions)}")
    if _present(p.bio):
        parts.append(f"Background: {p.bio}")
    if _joined(p.experience):
        parts.append(f"Experience: {_joined(p.experience, FRAGMENT_SEPARATOR)}")

    return FRAGMENT_SEPARATOR.join(parts)


def build_organization_embedding_text(o: OrganizationRecord, current_year: Optional[int] = None) -> str:
    """
    current_year feeds the "Established N years ago" fragment; it defaults to
    the current UTC year, so pass it explicitly when text must be reproducible.
    """
    parts: List[str] = [
        f"Organization: {o.name}",
        f"Type: {o.org_type}",
    ]

    if _present(o.location):
        parts.append(f"Location: {o.location}")
    if _joined(o.services):
        parts.append(f"Services: {_joined(o.services)}")

    if o.founded_year is not None:
        year = current_year if current_year is not None else datetime.now(timezone.utc).year
        parts.append(f"Established {year - o.founded_year} years ago (founded {o.founded_year})")

    if o.employees_count is not None:
        parts.append(f"{size_tier(o.employees_count)} company with {o.employees_count} employees")

    if _present(o.description):
        parts.append(f"Description: {o.description}")

    return FRAGMENT_SEPARATOR.join(parts)


def build_location_embedding_text(loc: LocationRecord) -> str:
    parts: List[str] = [
        f"Location: {loc.name}",
        f"Located in {loc.city}, {loc.state}, {loc.country}",
    ]

    if _present(loc.description):
        parts.append(f"Description: {loc.description}")
    if _joined(loc.amenities):
        parts.append(f"Amenities and features: {_joined(loc.amenities)}")
    if loc.max_capacity is not None:
        parts.append(f"Maximum capacity: {loc.max_capacity} people")
    if _present(loc.parking_info):
        parts.append(f"Parking: {loc.parking_info}")
    if _joined(loc.restrictions):
        parts.append(f"Restrictions: {_joined(loc.restrictions)}")

    return FRAGMENT_SEPARATOR.join(parts)


def build_production_embedding_text(prod: ProductionRecord) -> str:
    parts: List[str] = [
        f"Production: {prod.title}",
        f"Type: {prod.production_type}",
        f"Status: {prod.status}",
    ]

    # An end date without a start date says nothing useful on its own
    if _present(prod.start_date):
        if _present(prod.end_date):
            parts.append(f"Scheduled from {prod.start_date} to {prod.end_date}")
        else:
            parts.append(f"Starts on {prod.start_date}")

    if _present(prod.location):
        parts.append(f"Filming location: {prod.location}")
    if _present(prod.description):
        parts.append(f"Description: {prod.description}")

    return FRAGMENT_SEPARATOR.join(parts)


def build_embedding_text(kind: RecordKind, record: Any, *, current_year: Optional[int] = None) -> str:
    expected = record_type_for(kind)
    if not isinstance(record, expected):
        raise TypeError(f"{kind.value} records must be {expected.__name__}, got {type(record).__name__}")

    if kind is RecordKind.PERSON:
        return build_person_embedding_text(record)
    if kind is RecordKind.ORGANIZATION:
        return build_organization_embedding_text(record, current_year=current_year)
    if kind is RecordKind.LOCATION:
        return build_location_embedding_text(record)
    return build_production_embedding_text(record)
