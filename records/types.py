# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-15
# Description: types.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple


class RecordKind(str, Enum):
    """
    The closed set of searchable record kinds.
    Values double as record-id table prefixes and default collection names.
    """
    PERSON = "person"
    ORGANIZATION = "organization"
    LOCATION = "location"
    PRODUCTION = "production"


@dataclass(frozen=True)
class PersonRecord:
    """Casting-relevant person/profile attributes used to build embedding text."""
    name: str
    headline: Optional[str] = None
    bio: Optional[str] = None
    skills: List[str] = field(default_factory=list)
    location: Optional[str] = None
    age_range: Optional[Tuple[int, int]] = None
    gender: Optional[str] = None
    ethnicity: List[str] = field(default_factory=list)
    height_cm: Optional[int] = None
    body_type: Optional[str] = None
    hair_color: Optional[str] = None
    eye_color: Optional[str] = None
    languages: List[str] = field(default_factory=list)
    unions: List[str] = field(default_factory=list)
    experience: List[str] = field(default_factory=list)  # descriptions of past work


@dataclass(frozen=True)
class OrganizationRecord:
    name: str
    org_type: str
    description: Optional[str] = None
    services: List[str] = field(default_factory=list)
    location: Optional[str] = None
    founded_year: Optional[int] = None
    employees_count: Optional[int] = None


@dataclass(frozen=True)
class LocationRecord:
    name: str
    city: str
    state: str
    country: str
    description: Optional[str] = None
    amenities: List[str] = field(default_factory=list)
    restrictions: List[str] = field(default_factory=list)
    max_capacity: Optional[int] = None
    parking_info: Optional[str] = None


@dataclass(frozen=True)
class ProductionRecord:
    title: str
    production_type: str
    status: str
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None


@dataclass(frozen=True)
class IndexableRecord:
    """
    A record queued for (re)indexing: its id, the attributes its embedding
    text is built from, and the display attributes search results project.
    """
    record_id: str
    record: Any
    display: Dict[str, Any] = field(default_factory=dict)


_RECORD_TYPES = {
    RecordKind.PERSON: PersonRecord,
    RecordKind.ORGANIZATION: OrganizationRecord,
    RecordKind.LOCATION: LocationRecord,
    RecordKind.PRODUCTION: ProductionRecord,
}


def record_type_for(kind: RecordKind) -> type:
    return _RECORD_TYPES[kind]


def record_from_dict(kind: RecordKind, data: Dict[str, Any]) -> Any:
    """Build the kind's record dataclass from plain (e.g. JSON) attributes."""
    data = dict(data)
    if kind is RecordKind.PERSON and data.get("age_range") is not None:
        low, high = data["age_range"]
        data["age_range"] = (int(low), int(high))
    return _RECORD_TYPES[kind](**data)
