# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-20
# Description: SlateVectorStore
# -----------------------------------------------------------------------------

from typing import Any, Dict, List, Optional, Protocol, Sequence, runtime_checkable

import numpy as np

from embedding.EmbeddingRecord import EmbeddingRecord
from search.types import RawMatch


@runtime_checkable
class SlateVectorStore(Protocol):
    def test_connection(self) -> bool:
        ...

    def query_nearest(
            self,
            collection: str,
            query_vector: np.ndarray,
            n_results: int,
            attributes: Optional[Sequence[str]] = None,
            where: Optional[Dict[str, Any]] = None,
    ) -> List[RawMatch]:
        """Up to n_results candidates, closest first, with cosine distance."""
        ...

    def upsert_embeddings(
            self,
            collection: str,
            records: Sequence[EmbeddingRecord],
            metadatas: Sequence[Dict[str, Any]],
    ) -> None:
        ...

    def count(self, collection: str) -> int:
        ...
