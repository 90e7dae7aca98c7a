# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Description: dependencies.py
# -----------------------------------------------------------------------------
from api.AppContainer import get_app_container
from embedding.SlateEmbedder import SlateEmbedder
from services.SlateHealthService import SlateHealthService
from services.SlateIndexService import SlateIndexService
from services.SlateSearchService import SlateSearchService


def get_embedder() -> SlateEmbedder:
    return get_app_container().embedder

def get_health_service() -> SlateHealthService:
    # use the singleton service from the container
    return get_app_container().health_service

def get_search_service() -> SlateSearchService:
    # use the singleton service from the container
    return get_app_container().search_service

def get_index_service() -> SlateIndexService:
    return get_app_container().index_service
