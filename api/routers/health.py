# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Description: health.py
# -----------------------------------------------------------------------------
import logging
from fastapi import APIRouter, Depends

from api.schemas.health import HealthResponse, DeepHealthResponse
from api.dependencies import get_embedder, get_health_service
from embedding.SlateEmbedder import SlateEmbedder
from services.SlateHealthService import SlateHealthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(embedder: SlateEmbedder = Depends(get_embedder)) -> HealthResponse:
    ready = embedder.is_initialized
    return HealthResponse(
        status="ok" if ready else "starting",
        message="SlateHub search API running",
        embedder_ready=ready,
    )


@router.get("/deep", response_model=DeepHealthResponse)
def deep_health_check(
    svc: SlateHealthService = Depends(get_health_service),
) -> DeepHealthResponse:
    logger.info("GET /health/deep called")
    result = svc.deep_health()
    logger.info("GET /health/deep completed: %s", result.status)
    return result
