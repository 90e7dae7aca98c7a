# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-18
# Description: scoring.py
# -----------------------------------------------------------------------------
"""
Raw store relevance -> 0..100 score.

Collections are created with cosine space, so the store reports cosine
distance in [0, 2] (0 = identical). All kinds use this one convention.
"""
import math

from search.types import RawMatch, ScoredMatch

# Nearest neighbours requested per kind
KNN_CANDIDATES = 10

# Minimum score a candidate needs to be returned
RELEVANCE_FLOOR = 50


def distance_to_similarity(distance: float) -> float:
    return max(0.0, 1.0 - float(distance))


def similarity_to_score(similarity: float) -> int:
    # half-up rather than round()'s banker's rounding
    return min(100, int(math.floor(similarity * 100.0 + 0.5)))


def meets_relevance_floor(score: int) -> bool:
    return score >= RELEVANCE_FLOOR


def score_match(match: RawMatch) -> ScoredMatch:
    similarity = distance_to_similarity(match.distance)
    score = similarity_to_score(similarity)
    return ScoredMatch(
        match=match,
        similarity=similarity,
        score=score,
        meets_floor=meets_relevance_floor(score),
    )
