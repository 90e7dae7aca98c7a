# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-16
# Updated: 2026-10-05
# Description: SlateEmbedder
# -----------------------------------------------------------------------------
from __future__ import annotations

import asyncio
import threading
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Callable, List, Optional, Sequence

import numpy as np

from config.Config import Config
from embedding.errors import EmbeddingInferenceError, EmbeddingNotInitializedError
from utility.logging_utils import get_class_logger


def _load_fastembed_model(cfg: Config) -> Any:
    from fastembed import TextEmbedding

    kwargs: dict[str, Any] = {"model_name": cfg.embed_model}
    if cfg.embed_cache_dir:
        kwargs["cache_dir"] = cfg.embed_cache_dir
    if cfg.embed_threads:
        kwargs["threads"] = cfg.embed_threads
    return TextEmbedding(**kwargs)


class SlateEmbedder:
    """
    Owns the single text-embedding model instance for the process.

    - initialize() loads the model once (FastAPI lifespan, or a script's main)
    - embed_one / embed_batch are synchronous and serialised by a lock
    - embed_one_async / embed_batch_async push that work onto a dedicated
      inference pool so CPU-bound inference never runs on the event loop
    """

    def __init__(
            self,
            cfg: Config,
            *,
            model_factory: Optional[Callable[[Config], Any]] = None,
            logger=None,
    ):
        self.cfg = cfg
        self.model_name = cfg.embed_model
        self.batch_size = cfg.embed_batch_size
        self.logger = logger or get_class_logger(self.__class__)

        self._model_factory = model_factory or _load_fastembed_model
        self._model: Any = None
        self._dimension: Optional[int] = None
        self._lock = threading.Lock()
        self._executor = ThreadPoolExecutor(
            max_workers=cfg.inference_workers,
            thread_name_prefix="slate-inference",
        )

    @property
    def is_initialized(self) -> bool:
        return self._model is not None

    @property
    def dimension(self) -> Optional[int]:
        return self._dimension

    def initialize(self) -> None:
        """
        Load the embedding model. Must run before any generation call.
        A second call is a no-op.
        """
        with self._lock:
            if self._model is not None:
                self.logger.warning("Embedding service already initialized ('%s'); ignoring", self.model_name)
                return

            self.logger.info("Initializing embedding service with model '%s'", self.model_name)
            start = time.monotonic()
            try:
                model = self._model_factory(self.cfg)
                probe = list(model.embed(["embedding dimension probe"]))
            except Exception as e:
                self.logger.error("Failed to load embedding model '%s': %s", self.model_name, e, exc_info=True)
                raise EmbeddingInferenceError(f"Failed to load embedding model '{self.model_name}': {e}") from e

            self._model = model
            self._dimension = int(np.asarray(probe[0]).shape[-1]) if probe else None

        self.logger.info(
            "Embedding service initialized successfully (model=%s, dim=%s, %.2fs)",
            self.model_name,
            self._dimension,
            time.monotonic() - start,
        )

    def embed_one(self, text: str) -> np.ndarray:
        return self.embed_batch([text])[0]

    def embed_batch(self, texts: Sequence[str]) -> List[np.ndarray]:
        """
        One float32 vector per input text, in input order.
        Either every text is embedded or EmbeddingInferenceError is raised.
        """
        if self._model is None:
            raise EmbeddingNotInitializedError()

        texts = list(texts)
        if not texts:
            return []

        if len(texts) == 1:
            self.logger.debug("Generating embedding for text: %s", texts[0][:100])
        else:
            self.logger.debug("Generating %d embeddings in batch", len(texts))

        with self._lock:
            try:
                vectors = [
                    np.asarray(v, dtype=np.float32)
                    for v in self._model.embed(texts, batch_size=self.batch_size)
                ]
            except Exception as e:
                self.logger.error("Embedding inference failed for %d text(s): %s", len(texts), e, exc_info=True)
                raise EmbeddingInferenceError(f"Embedding inference failed: {e}") from e

        if len(vectors) != len(texts):
            raise EmbeddingInferenceError(
                f"Embedding count mismatch: {len(vectors)} != {len(texts)}"
            )
        return vectors

    async def embed_one_async(self, text: str) -> np.ndarray:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.embed_one, text)

    async def embed_batch_async(self, texts: Sequence[str]) -> List[np.ndarray]:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(self._executor, self.embed_batch, list(texts))

    def shutdown(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)
        self.logger.info("Inference pool shut down")
