# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-29
# Description: AppContainer.py
# -----------------------------------------------------------------------------
from functools import lru_cache

import settings
from config.Config import Config
from embedding.SlateEmbedder import SlateEmbedder
from health.ChromaHealth import ChromaHealth
from health.EmbeddingHealth import EmbeddingHealth
from health.TestRunner import TestRunner
from services.SlateHealthService import SlateHealthService
from services.SlateIndexService import SlateIndexService
from services.SlateSearchService import SlateSearchService
from utility.logging_utils import get_class_logger
from vectorstore.ChromaSlateVectorStore import ChromaSlateVectorStore


class AppContainer:
    """
    Owns heavy object instantiation and application wiring.
    Singleton instances are provided via FastAPI dependencies.

    The embedding model is NOT loaded here; call startup() once
    (the FastAPI lifespan does) before serving searches.
    """

    def __init__(self, cfg: Config | None = None) -> None:
        self.logger = get_class_logger(self.__class__)

        # Configuration
        self.cfg = cfg or Config.from_env()
        self.logger.info("Configuration: %s", self.cfg.summary())

        # Core infrastructure (one model per process, shared by every caller)
        self.embedder = SlateEmbedder(cfg=self.cfg)
        self.store = ChromaSlateVectorStore(cfg=self.cfg)

        self.search_service = SlateSearchService(embedder=self.embedder, store=self.store)
        self.index_service = SlateIndexService(embedder=self.embedder, store=self.store)

        # Smoke tests / health
        self.embedding_health = EmbeddingHealth(self.embedder, expected_dim=self.cfg.embed_dim)
        self.chroma_health = ChromaHealth(self.store, settings.COLLECTIONS.values())
        self.health_service = SlateHealthService(
            test_runner=TestRunner(
                checks={
                    "embedding_health": self.embedding_health.run,
                    "chroma_health": self.chroma_health.run,
                }
            )
        )

    def startup(self) -> None:
        self.embedder.initialize()

    def shutdown(self) -> None:
        self.search_service.shutdown()
        self.embedder.shutdown()


@lru_cache
def get_app_container() -> AppContainer:
    return AppContainer()
