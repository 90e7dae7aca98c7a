# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-15
# Updated: 2026-10-09
# Description: conftest.py
# -----------------------------------------------------------------------------

import hashlib
import sys
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import numpy as np
import pytest

# add project root to sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from config.Config import Config  # noqa: E402
from embedding.SlateEmbedder import SlateEmbedder  # noqa: E402
from search.types import RawMatch  # noqa: E402

FAKE_DIM = 16


class FakeTextEmbedding:
    """Stands in for fastembed.TextEmbedding: deterministic hash vectors, no download."""

    def __init__(self, dim: int = FAKE_DIM, fail_on: Optional[str] = None, drop_last: bool = False):
        self.dim = dim
        self.fail_on = fail_on
        self.drop_last = drop_last
        self.calls: List[List[str]] = []

    def _vector(self, text: str) -> np.ndarray:
        vec = np.zeros(self.dim, dtype=np.float32)
        for i, tok in enumerate(text.lower().split()):
            h = int(hashlib.md5(tok.encode()).hexdigest(), 16)
            vec[h % self.dim] += 1.0 / (i + 1)
        norm = np.linalg.norm(vec)
        return vec / norm if norm > 0 else vec

    def embed(self, documents, batch_size: int = 256, **kwargs):
        docs = list(documents)
        self.calls.append(docs)
        if self.fail_on is not None and self.fail_on in docs:
            raise RuntimeError("onnxruntime exploded")
        if self.drop_last:
            docs = docs[:-1]
        for text in docs:
            yield self._vector(text)


class FakeVectorStore:
    """
    In-memory SlateVectorStore: per-collection canned candidates,
    an exception to raise, or a delay to simulate a stuck lookup.
    """

    def __init__(self):
        self.matches: Dict[str, List[RawMatch]] = {}
        self.errors: Dict[str, Exception] = {}
        self.delays: Dict[str, float] = {}
        self.queries: List[Dict[str, Any]] = []
        self.upserts: List[Dict[str, Any]] = []
        self.connected = True

    def test_connection(self) -> bool:
        return self.connected

    def count(self, collection: str) -> int:
        return len(self.matches.get(collection, []))

    def query_nearest(self, collection, query_vector, n_results, attributes=None, where=None):
        self.queries.append(
            {"collection": collection, "n_results": n_results, "attributes": attributes, "where": where}
        )
        if collection in self.delays:
            time.sleep(self.delays[collection])
        if collection in self.errors:
            raise self.errors[collection]
        return list(self.matches.get(collection, []))[:n_results]

    def upsert_embeddings(self, collection: str, records: Sequence[Any], metadatas: Sequence[Dict[str, Any]]):
        self.upserts.append({"collection": collection, "records": list(records), "metadatas": list(metadatas)})


@pytest.fixture
def fake_model() -> FakeTextEmbedding:
    return FakeTextEmbedding()


@pytest.fixture
def embedder(fake_model) -> SlateEmbedder:
    emb = SlateEmbedder(Config(), model_factory=lambda cfg: fake_model)
    emb.initialize()
    yield emb
    emb.shutdown()


@pytest.fixture
def store() -> FakeVectorStore:
    return FakeVectorStore()


def person_row(record_id: str, distance: float, name: str = "John Doe", **attrs) -> RawMatch:
    base = {
        "name": name,
        "username": name.lower().replace(" ", ""),
        "headline": "Actor",
        "location": "Los Angeles, CA",
        "skills": ["acting", "singing"],
        "avatar_url": None,
    }
    base.update(attrs)
    return RawMatch(record_id=record_id, attributes=base, distance=distance)


def organization_row(record_id: str, distance: float, **attrs) -> RawMatch:
    base = {"name": "Acme Casting", "slug": "acme-casting", "description": None, "location": "NYC", "logo": None}
    base.update(attrs)
    return RawMatch(record_id=record_id, attributes=base, distance=distance)


def location_row(record_id: str, distance: float, is_public=True, **attrs) -> RawMatch:
    base = {
        "name": "Modern Office Space",
        "address": "1 Main St",
        "city": "Los Angeles",
        "state": "CA",
        "description": "Bright office",
        "is_public": is_public,
    }
    base.update(attrs)
    return RawMatch(record_id=record_id, attributes=base, distance=distance)


def production_row(record_id: str, distance: float, **attrs) -> RawMatch:
    base = {"title": "Night Shift", "status": "casting", "description": None, "location": "Atlanta"}
    base.update(attrs)
    return RawMatch(record_id=record_id, attributes=base, distance=distance)
