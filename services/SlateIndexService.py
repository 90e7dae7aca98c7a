# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-24
# Description: SlateIndexService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence

import settings
from canonical.SlateRecordCanonicalizer import build_embedding_text
from embedding.EmbeddingRecord import EmbeddingRecord
from embedding.SlateEmbedder import SlateEmbedder
from records.record_ids import format_record_id
from records.types import IndexableRecord, RecordKind
from search.descriptors import KindDescriptor, build_descriptors
from search.types import RawMatch, ScoredMatch
from utility.logging_utils import get_class_logger
from vectorstore.SlateVectorStore import SlateVectorStore

# Display attributes copied from the embedded record so the two never disagree
RECORD_DISPLAY_FIELDS: Dict[RecordKind, tuple] = {
    RecordKind.PERSON: ("name", "headline", "location", "skills"),
    RecordKind.ORGANIZATION: ("name", "description", "location"),
    RecordKind.LOCATION: ("name", "city", "state", "description"),
    RecordKind.PRODUCTION: ("title", "description", "location"),
}


class SlateIndexService:
    """
    Owns the (re)index path for searchable records:
      - canonicalize each record into embedding text
      - embed in batches (one model call per batch)
      - validate display metadata against what search needs to show a hit
      - upsert vectors + display metadata into the kind's collection
    """

    def __init__(
        self,
        *,
        embedder: SlateEmbedder,
        store: SlateVectorStore,
        collections: Optional[Mapping[str, str]] = None,
        batch_size: int = settings.INDEX_BATCH_SIZE,
        logger: logging.Logger | None = None,
    ) -> None:
        self.embedder = embedder
        self.store = store
        self.collections: Dict[str, str] = {**settings.COLLECTIONS, **(collections or {})}
        self.descriptors: Dict[RecordKind, KindDescriptor] = build_descriptors(self.collections)
        self.batch_size = batch_size
        self.logger = logger or get_class_logger(self.__class__)

    def build_embedding_records(
        self,
        kind: RecordKind,
        items: Sequence[IndexableRecord],
        *,
        current_year: Optional[int] = None,
    ) -> List[EmbeddingRecord]:
        """Canonicalize + embed; returns one EmbeddingRecord per item, in order."""
        ids = [format_record_id(kind, item.record_id) for item in items]
        texts = [build_embedding_text(kind, item.record, current_year=current_year) for item in items]

        out: List[EmbeddingRecord] = []
        for i in range(0, len(texts), self.batch_size):
            batch_texts = texts[i:i + self.batch_size]
            vectors = self.embedder.embed_batch(batch_texts)
            for record_id, text, vec in zip(ids[i:i + self.batch_size], batch_texts, vectors):
                out.append(EmbeddingRecord(record_id=record_id, kind=kind, vector=vec, text=text))
        return out

    def display_metadata(self, kind: RecordKind, item: IndexableRecord) -> Dict[str, Any]:
        """
        Merge the caller's display attributes with the record's own values and
        check the result can be shown as a search hit. Raises ValueError otherwise.
        """
        metadata: Dict[str, Any] = dict(item.display)
        for field_name in RECORD_DISPLAY_FIELDS[kind]:
            value = getattr(item.record, field_name)
            if value is None or (isinstance(value, list) and not value):
                continue
            metadata[field_name] = list(value) if isinstance(value, list) else value

        if kind is RecordKind.LOCATION and not isinstance(metadata.get("is_public"), bool):
            raise ValueError(f"{kind.value} '{item.record_id}': display attribute 'is_public' must be a boolean")

        candidate = ScoredMatch(
            match=RawMatch(record_id=item.record_id, attributes=metadata, distance=0.0),
            similarity=1.0,
            score=100,
            meets_floor=True,
        )
        try:
            self.descriptors[kind].shape(candidate)
        except ValueError as e:
            raise ValueError(f"{kind.value} '{item.record_id}': {e}") from e
        return metadata

    def index_records(
        self,
        kind: RecordKind,
        items: Sequence[IndexableRecord],
        *,
        current_year: Optional[int] = None,
    ) -> int:
        items = list(items)
        collection = self.collections[kind.value]
        self.logger.info("Indexing %d %s record(s) into '%s'", len(items), kind.value, collection)
        if not items:
            return 0

        # Rejected before any model call; one bad row would fail every later search of this kind
        metadatas = [self.display_metadata(kind, item) for item in items]

        records = self.build_embedding_records(kind, items, current_year=current_year)
        if len(records) != len(items):
            raise RuntimeError(f"Embedding count mismatch: {len(records)} != {len(items)}")

        self.store.upsert_embeddings(collection, records, metadatas)

        self.logger.info("Successfully indexed %d %s record(s)", len(records), kind.value)
        return len(records)
