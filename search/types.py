# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-18
# Description: types.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from records.types import RecordKind


@dataclass(frozen=True)
class RawMatch:
    """One candidate row from a nearest-neighbour lookup (cosine distance, 0 = identical)."""
    record_id: str
    attributes: Dict[str, Any]
    distance: float


@dataclass(frozen=True)
class ScoredMatch:
    match: RawMatch
    similarity: float
    score: int
    meets_floor: bool


@dataclass(frozen=True)
class PersonSearchResult:
    id: str
    name: str
    username: str
    headline: Optional[str]
    location: Optional[str]
    skills: Tuple[str, ...]
    avatar_url: Optional[str]
    initials: str
    score: int


@dataclass(frozen=True)
class OrganizationSearchResult:
    id: str
    name: str
    slug: str
    description: Optional[str]
    location: Optional[str]
    logo: Optional[str]
    score: int


@dataclass(frozen=True)
class LocationSearchResult:
    id: str
    name: str
    address: str
    city: str
    state: str
    description: Optional[str]
    score: int


@dataclass(frozen=True)
class ProductionSearchResult:
    id: str
    title: str
    status: str
    description: Optional[str]
    location: Optional[str]
    score: int


@dataclass(frozen=True)
class SearchResult:
    """
    Merged per-kind results for one query.

    query is None only for the empty-query state. failed_kinds lists the
    kinds whose lookup failed, i.e. whose (empty) list is unavailable rather
    than genuinely empty.
    """
    query: Optional[str]
    people: Tuple[PersonSearchResult, ...] = ()
    organizations: Tuple[OrganizationSearchResult, ...] = ()
    locations: Tuple[LocationSearchResult, ...] = ()
    productions: Tuple[ProductionSearchResult, ...] = ()
    failed_kinds: Tuple[RecordKind, ...] = field(default_factory=tuple)

    @classmethod
    def empty_query(cls) -> "SearchResult":
        return cls(query=None)

    @property
    def is_empty_query(self) -> bool:
        return self.query is None

    @property
    def total_results(self) -> int:
        return len(self.people) + len(self.organizations) + len(self.locations) + len(self.productions)

    @property
    def has_results(self) -> bool:
        return self.total_results > 0

    @property
    def is_partial(self) -> bool:
        return bool(self.failed_kinds)
