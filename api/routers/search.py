# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Description: search router
# -----------------------------------------------------------------------------
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_search_service
from api.schemas.search import SearchResponse
from embedding.errors import EmbeddingInferenceError, EmbeddingNotInitializedError
from search.errors import SearchUnavailableError
from services.SlateSearchService import SlateSearchService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])

SEARCH_UNAVAILABLE = "Search is currently unavailable. Please try again later."


@router.get("", response_model=SearchResponse)
async def get_search(
    q: Optional[str] = Query(None, description="Free-text search query"),
    svc: SlateSearchService = Depends(get_search_service),
) -> SearchResponse:
    try:
        result = await svc.search(q)
    except EmbeddingNotInitializedError as e:
        logger.error("Search failed - embedding service not initialized: %s", e)
        raise HTTPException(status_code=503, detail=SEARCH_UNAVAILABLE)
    except EmbeddingInferenceError as e:
        logger.exception("Failed to generate embedding for search query: %s", e)
        raise HTTPException(status_code=503, detail=SEARCH_UNAVAILABLE)
    except SearchUnavailableError as e:
        logger.error("Search failed for every kind: %s", [str(f) for f in e.failures])
        raise HTTPException(status_code=503, detail=SEARCH_UNAVAILABLE)

    return SearchResponse.from_result(result)
