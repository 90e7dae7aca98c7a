# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-30
# Description: index router
# -----------------------------------------------------------------------------
import logging

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_index_service
from api.schemas.index import IndexRequest, IndexResponse
from embedding.errors import EmbeddingInferenceError, EmbeddingNotInitializedError
from records.types import IndexableRecord, RecordKind, record_from_dict
from services.SlateIndexService import SlateIndexService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/index", tags=["index"])


@router.post("/{kind}", response_model=IndexResponse)
def post_index(
    kind: RecordKind,
    req: IndexRequest,
    svc: SlateIndexService = Depends(get_index_service),
) -> IndexResponse:
    try:
        items = [
            IndexableRecord(
                record_id=item.record_id,
                record=record_from_dict(kind, item.attributes),
                display=item.display,
            )
            for item in req.items
        ]
    except (TypeError, ValueError) as e:
        raise HTTPException(status_code=422, detail=f"Invalid {kind.value} attributes: {e}")

    logger.info("POST /index/%s (start) items=%d", kind.value, len(items))

    try:
        indexed = svc.index_records(kind, items, current_year=req.current_year)
    except ValueError as e:
        logger.warning("Rejected %s index request: %s", kind.value, e)
        raise HTTPException(status_code=422, detail=f"Invalid {kind.value} display: {e}")
    except (EmbeddingNotInitializedError, EmbeddingInferenceError) as e:
        logger.exception("Indexing %s records failed in the embedding step: %s", kind.value, e)
        raise HTTPException(status_code=503, detail="Embedding service unavailable")
    except Exception as e:
        logger.exception("Indexing %s records failed: %s", kind.value, e)
        raise HTTPException(status_code=500, detail=f"Indexing failed: {e}")

    return IndexResponse(kind=kind.value, indexed=indexed)
