# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-28
# Description: search.py
# -----------------------------------------------------------------------------
from dataclasses import asdict
from typing import List, Optional

from pydantic import BaseModel, Field

from search.types import SearchResult


class PersonHit(BaseModel):
    id: str
    name: str
    username: str
    headline: Optional[str] = None
    location: Optional[str] = None
    skills: List[str] = Field(default_factory=list)
    avatar_url: Optional[str] = None
    initials: str
    score: int


class OrganizationHit(BaseModel):
    id: str
    name: str
    slug: str
    description: Optional[str] = None
    location: Optional[str] = None
    logo: Optional[str] = None
    score: int


class LocationHit(BaseModel):
    id: str
    name: str
    address: str
    city: str
    state: str
    description: Optional[str] = None
    score: int


class ProductionHit(BaseModel):
    id: str
    title: str
    status: str
    description: Optional[str] = None
    location: Optional[str] = None
    score: int


class SearchResponse(BaseModel):
    query: Optional[str] = None
    has_results: bool
    total_results: int
    people: List[PersonHit] = Field(default_factory=list)
    organizations: List[OrganizationHit] = Field(default_factory=list)
    locations: List[LocationHit] = Field(default_factory=list)
    productions: List[ProductionHit] = Field(default_factory=list)

    # kinds whose results are unavailable (lookup failed), not merely empty
    failed_kinds: List[str] = Field(default_factory=list)
    partial: bool = False

    @classmethod
    def from_result(cls, result: SearchResult) -> "SearchResponse":
        return cls(
            query=result.query,
            has_results=result.has_results,
            total_results=result.total_results,
            people=[PersonHit(**asdict(p)) for p in result.people],
            organizations=[OrganizationHit(**asdict(o)) for o in result.organizations],
            locations=[LocationHit(**asdict(loc)) for loc in result.locations],
            productions=[ProductionHit(**asdict(p)) for p in result.productions],
            failed_kinds=[k.value for k in result.failed_kinds],
            partial=result.is_partial,
        )
