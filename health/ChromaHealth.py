# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-26
# Description: ChromaHealth
# -----------------------------------------------------------------------------
import logging
from typing import Dict, Iterable, Optional

from utility.logging_utils import get_class_logger
from vectorstore.SlateVectorStore import SlateVectorStore


class ChromaHealth:
    """
    Healthcheck for the vector store:
      - connection/heartbeat
      - every search collection can be opened and counted
    """

    def __init__(
        self,
        store: SlateVectorStore,
        collections: Iterable[str],
        logger: Optional[logging.Logger] = None,
    ):
        self.store = store
        self.collections = list(collections)
        self.logger = logger or get_class_logger(self.__class__)

    def collection_counts(self) -> Dict[str, int]:
        counts: Dict[str, int] = {}
        for name in self.collections:
            counts[name] = self.store.count(name)
            self.logger.info("Collection '%s' holds %d record(s)", name, counts[name])
        return counts

    def run(self) -> bool:
        if not self.store.test_connection():
            self.logger.error("Chroma healthcheck FAILED: no connection")
            return False

        try:
            self.collection_counts()
        except Exception as e:
            self.logger.exception("Chroma healthcheck FAILED while counting collections: %s", e)
            return False

        self.logger.info("Chroma healthcheck PASSED.")
        return True
