# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-20
# Updated: 2026-10-06
# Description: ChromaSlateVectorStore
# -----------------------------------------------------------------------------
import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence

import chromadb
import numpy as np
from chromadb import ClientAPI
from chromadb.api.models.Collection import Collection

from config.Config import Config
from embedding.EmbeddingRecord import EmbeddingRecord
from search.types import RawMatch
from utility.logging_utils import get_class_logger
from vectorstore.SlateVectorStore import SlateVectorStore

# Chroma metadata values must be scalars; list attributes are stored as JSON
# strings and this key records which ones to decode on the way out.
LIST_FIELDS_KEY = "_list_fields"

COLLECTION_METADATA = {"hnsw:space": "cosine"}


def encode_metadata(metadata: Dict[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    list_fields: List[str] = []
    for key, value in metadata.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            out[key] = json.dumps(list(value))
            list_fields.append(key)
        elif isinstance(value, (str, int, float, bool)):
            out[key] = value
        else:
            raise TypeError(f"metadata '{key}' has unsupported type {type(value).__name__}")
    if list_fields:
        out[LIST_FIELDS_KEY] = ",".join(sorted(list_fields))
    return out


def decode_metadata(metadata: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    if not metadata:
        return {}
    out = dict(metadata)
    list_fields = out.pop(LIST_FIELDS_KEY, "") or ""
    for key in filter(None, list_fields.split(",")):
        if key in out:
            out[key] = json.loads(out[key])
    return out


@dataclass
class ChromaSlateVectorStore(SlateVectorStore):
    cfg: Config
    client: Optional[ClientAPI] = None
    logger: Any = None
    _collections: Dict[str, Collection] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self.logger = self.logger or get_class_logger(self.__class__)

        if self.client is None:
            self.client = self._build_client()

    def _build_client(self) -> ClientAPI:
        mode = self.cfg.chroma_mode
        self.logger.info("Initialising Chroma client (mode=%s)", mode)

        if mode == "cloud":
            return chromadb.CloudClient(
                tenant=self.cfg.chroma_tenant,
                database=self.cfg.chroma_database,
                api_key=self.cfg.chroma_api_key,
            )
        if mode == "http":
            return chromadb.HttpClient(host=self.cfg.chroma_host, port=self.cfg.chroma_port)
        return chromadb.PersistentClient(path=self.cfg.chroma_path)

    def _collection(self, name: str) -> Collection:
        coll = self._collections.get(name)
        if coll is None:
            coll = self.client.get_or_create_collection(name=name, metadata=COLLECTION_METADATA)
            self._collections[name] = coll
            self.logger.info("Chroma collection ready: '%s'", name)
        return coll

    def test_connection(self) -> bool:
        """
        Simple health check: can we talk to Chroma at all?
        """
        try:
            self.client.heartbeat()
            return True
        except Exception as e:
            self.logger.error("Chroma connection failed: %s", e)
            return False

    def count(self, collection: str) -> int:
        return self._collection(collection).count()

    def upsert_embeddings(
            self,
            collection: str,
            records: Sequence[EmbeddingRecord],
            metadatas: Sequence[Dict[str, Any]],
    ) -> None:
        if len(records) != len(metadatas):
            raise ValueError(
                f"records ({len(records)}) and metadatas ({len(metadatas)}) length mismatch"
            )
        if not records:
            return

        ids: List[str] = []
        documents: List[str] = []
        embeddings: List[List[float]] = []
        encoded: List[Dict[str, Any]] = []

        for rec, meta in zip(records, metadatas):
            vec = rec.vector
            if hasattr(vec, "tolist"):
                vec = vec.tolist()

            ids.append(rec.record_id)
            documents.append(rec.text)
            embeddings.append(vec)
            encoded.append(encode_metadata({**meta, "kind": rec.kind.value}))

        self._collection(collection).upsert(
            ids=ids,
            documents=documents,
            embeddings=embeddings,
            metadatas=encoded,
        )
        self.logger.info("Upserted %d records into Chroma collection '%s'", len(ids), collection)

    def query_nearest(
            self,
            collection: str,
            query_vector: np.ndarray,
            n_results: int,
            attributes: Optional[Sequence[str]] = None,
            where: Optional[Dict[str, Any]] = None,
    ) -> List[RawMatch]:
        self.logger.debug(
            "KNN query on '%s' (n_results=%d, where=%s)", collection, n_results, where
        )

        vec = query_vector.tolist() if hasattr(query_vector, "tolist") else list(query_vector)
        query_kwargs: Dict[str, Any] = {
            "query_embeddings": [vec],
            "n_results": n_results,
            "include": ["metadatas", "distances"],
        }
        if where is not None:
            query_kwargs["where"] = where

        res = self._collection(collection).query(**query_kwargs)

        ids0 = (res.get("ids") or [[]])[0] or []
        metas0 = (res.get("metadatas") or [[]])[0] or []
        dists0 = (res.get("distances") or [[]])[0] or []
        if not (len(ids0) == len(metas0) == len(dists0)):
            raise ValueError(
                f"Malformed Chroma response for '{collection}': "
                f"{len(ids0)} ids, {len(metas0)} metadatas, {len(dists0)} distances"
            )

        matches: List[RawMatch] = []
        for record_id, meta, dist in zip(ids0, metas0, dists0):
            attrs = decode_metadata(meta)
            if attributes is not None:
                attrs = {k: attrs.get(k) for k in attributes}
            matches.append(RawMatch(record_id=record_id, attributes=attrs, distance=float(dist)))

        # Chroma already orders by distance; keep that explicit
        matches.sort(key=lambda m: m.distance)

        self.logger.debug("Chroma search on '%s' returned %d candidates", collection, len(matches))
        return matches
