# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-19
# Description: descriptors.py
# -----------------------------------------------------------------------------
from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

import settings
from records.types import RecordKind
from search import shaping
from search.types import RawMatch, ScoredMatch


@dataclass(frozen=True)
class KindDescriptor:
    """
    Everything that differs between the per-kind search pipelines:
    where to look, which attributes a row carries, which rows may be shown
    regardless of score, and how a kept row is shaped for display.
    """
    kind: RecordKind
    collection: str
    attributes: Tuple[str, ...]
    shape: Callable[[ScoredMatch], Any]
    post_filter: Optional[Callable[[RawMatch], bool]] = None

    def is_visible(self, match: RawMatch) -> bool:
        return self.post_filter is None or self.post_filter(match)


def is_public_location(match: RawMatch) -> bool:
    # Only an explicit True counts; missing or malformed flags stay hidden
    return match.attributes.get("is_public") is True


def build_descriptors(collections: Optional[Mapping[str, str]] = None) -> Dict[RecordKind, KindDescriptor]:
    names = dict(settings.COLLECTIONS)
    if collections:
        names.update(collections)

    return {
        RecordKind.PERSON: KindDescriptor(
            kind=RecordKind.PERSON,
            collection=names[RecordKind.PERSON.value],
            attributes=("name", "username", "headline", "location", "skills", "avatar_url"),
            shape=shaping.shape_person,
        ),
        RecordKind.ORGANIZATION: KindDescriptor(
            kind=RecordKind.ORGANIZATION,
            collection=names[RecordKind.ORGANIZATION.value],
            attributes=("name", "slug", "description", "location", "logo"),
            shape=shaping.shape_organization,
        ),
        # The store cannot combine KNN with other predicates, so visibility
        # is enforced here on the fetched candidates.
        RecordKind.LOCATION: KindDescriptor(
            kind=RecordKind.LOCATION,
            collection=names[RecordKind.LOCATION.value],
            attributes=("name", "address", "city", "state", "description", "is_public"),
            shape=shaping.shape_location,
            post_filter=is_public_location,
        ),
        RecordKind.PRODUCTION: KindDescriptor(
            kind=RecordKind.PRODUCTION,
            collection=names[RecordKind.PRODUCTION.value],
            attributes=("title", "status", "description", "location"),
            shape=shaping.shape_production,
        ),
    }
