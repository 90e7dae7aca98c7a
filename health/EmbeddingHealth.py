# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-26
# Description: EmbeddingHealth
# -----------------------------------------------------------------------------
import logging
import time
from typing import Optional

from embedding.SlateEmbedder import SlateEmbedder
from utility.logging_utils import get_class_logger


class EmbeddingHealth:
    """
    Smoke test for the in-process embedding model.

    Verifies:
      - the model has been initialized
      - a probe text embeds successfully
      - the vector dimension matches the expected dimension (if provided)
    """

    def __init__(
        self,
        embedder: SlateEmbedder,
        expected_dim: Optional[int] = None,
        logger: Optional[logging.Logger] = None,
    ):
        self.embedder = embedder
        self.expected_dim = expected_dim
        self.logger = logger or get_class_logger(self.__class__)

    def run(self) -> bool:
        if not self.embedder.is_initialized:
            self.logger.error("Embedding healthcheck FAILED: model not initialized")
            return False

        try:
            start = time.time()
            vec = self.embedder.embed_one("SlateHub embedding healthcheck")
            elapsed_ms = (time.time() - start) * 1000.0
        except Exception as e:
            self.logger.exception("Embedding healthcheck FAILED: %s", e)
            return False

        dim = int(vec.shape[-1])
        self.logger.info("Embedding call succeeded in %.1f ms. Returned dimension: %d", elapsed_ms, dim)

        if self.expected_dim is not None and dim != self.expected_dim:
            self.logger.warning("Dimension mismatch: expected %d, got %d.", self.expected_dim, dim)
            return False

        self.logger.info("Embedding healthcheck PASSED.")
        return True
