# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-16
# Description: errors.py
# -----------------------------------------------------------------------------


class EmbeddingNotInitializedError(RuntimeError):
    """Raised when an embedding is requested before SlateEmbedder.initialize()."""

    def __init__(self, message: str = "Embedding service not initialized. Call initialize() first.") -> None:
        super().__init__(message)


class EmbeddingInferenceError(RuntimeError):
    """Raised when the model runtime fails; no partial results are returned."""
