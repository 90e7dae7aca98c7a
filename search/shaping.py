# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-19
# Description: shaping.py
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional, Tuple

from search.types import (
    LocationSearchResult,
    OrganizationSearchResult,
    PersonSearchResult,
    ProductionSearchResult,
    ScoredMatch,
)


def person_initials(name: str) -> str:
    """First letter of up to the first two words, uppercased ("john doe" -> "JD")."""
    return "".join(word[0] for word in name.split()[:2]).upper()


def _required_str(attrs: Dict[str, Any], key: str) -> str:
    value = attrs.get(key)
    if not isinstance(value, str):
        raise ValueError(f"missing or non-string attribute '{key}'")
    return value


def _optional_str(attrs: Dict[str, Any], key: str) -> Optional[str]:
    value = attrs.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"attribute '{key}' must be a string, got {type(value).__name__}")
    return value


def _str_tuple(attrs: Dict[str, Any], key: str) -> Tuple[str, ...]:
    value = attrs.get(key)
    if value is None:
        return ()
    if not isinstance(value, (list, tuple)) or not all(isinstance(v, str) for v in value):
        raise ValueError(f"attribute '{key}' must be a list of strings")
    return tuple(value)


def shape_person(scored: ScoredMatch) -> PersonSearchResult:
    attrs = scored.match.attributes
    name = _required_str(attrs, "name")
    return PersonSearchResult(
        id=scored.match.record_id,
        name=name,
        username=_required_str(attrs, "username"),
        headline=_optional_str(attrs, "headline"),
        location=_optional_str(attrs, "location"),
        skills=_str_tuple(attrs, "skills"),
        avatar_url=_optional_str(attrs, "avatar_url"),
        initials=person_initials(name),
        score=scored.score,
    )


def shape_organization(scored: ScoredMatch) -> OrganizationSearchResult:
    attrs = scored.match.attributes
    return OrganizationSearchResult(
        id=scored.match.record_id,
        name=_required_str(attrs, "name"),
        slug=_required_str(attrs, "slug"),
        description=_optional_str(attrs, "description"),
        location=_optional_str(attrs, "location"),
        logo=_optional_str(attrs, "logo"),
        score=scored.score,
    )


def shape_location(scored: ScoredMatch) -> LocationSearchResult:
    attrs = scored.match.attributes
    return LocationSearchResult(
        id=scored.match.record_id,
        name=_required_str(attrs, "name"),
        address=_required_str(attrs, "address"),
        city=_required_str(attrs, "city"),
        state=_required_str(attrs, "state"),
        description=_optional_str(attrs, "description"),
        score=scored.score,
    )


def shape_production(scored: ScoredMatch) -> ProductionSearchResult:
    attrs = scored.match.attributes
    return ProductionSearchResult(
        id=scored.match.record_id,
        title=_required_str(attrs, "title"),
        status=_required_str(attrs, "status"),
        description=_optional_str(attrs, "description"),
        location=_optional_str(attrs, "location"),
        score=scored.score,
    )
