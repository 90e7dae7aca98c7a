# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-22
# Updated: 2026-10-08
# Description: SlateSearchService.py
# -----------------------------------------------------------------------------
from __future__ import annotations

import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, List, Mapping, Optional, Tuple

import numpy as np

import settings
from embedding.SlateEmbedder import SlateEmbedder
from records.types import RecordKind
from search.descriptors import KindDescriptor, build_descriptors
from search.errors import SearchBackendError, SearchUnavailableError
from search.scoring import KNN_CANDIDATES, score_match
from search.types import SearchResult
from utility.logging_utils import get_class_logger
from vectorstore.SlateVectorStore import SlateVectorStore


class SlateSearchService:
    """
    Semantic search across people, organizations, locations and productions.

    One query embedding is fanned out to four independent KNN lookups
    (run concurrently, each with its own timeout). Each lookup's candidates
    are scored, filtered by the relevance floor (and, for locations, by
    visibility), shaped and merged into a single SearchResult.

    A failed kind is reported in SearchResult.failed_kinds; only when every
    kind fails is SearchUnavailableError raised.
    """

    def __init__(
        self,
        *,
        embedder: SlateEmbedder,
        store: SlateVectorStore,
        descriptors: Optional[Mapping[RecordKind, KindDescriptor]] = None,
        lookup_timeout: float = settings.LOOKUP_TIMEOUT_SECONDS,
        io_workers: int = settings.SEARCH_IO_WORKERS,
        logger: logging.Logger | None = None,
    ) -> None:
        self.embedder = embedder
        self.store = store
        self.descriptors: Dict[RecordKind, KindDescriptor] = dict(descriptors or build_descriptors())
        self.lookup_timeout = lookup_timeout
        self.logger = logger or get_class_logger(self.__class__)

        # One pool per kind: a timed-out lookup keeps its thread, and only that kind may starve
        self._io_executors: Dict[RecordKind, ThreadPoolExecutor] = {
            kind: ThreadPoolExecutor(max_workers=io_workers, thread_name_prefix=f"slate-search-{kind.value}")
            for kind in self.descriptors
        }

    async def search(self, query_text: Optional[str]) -> SearchResult:
        query = (query_text or "").strip()
        if not query:
            self.logger.debug("Empty search query; skipping embedding")
            return SearchResult.empty_query()

        self.logger.info("Search query: %r", query)

        # Fatal to the request: no kind can be searched without the vector
        query_embedding = await self.embedder.embed_one_async(query)

        kinds = list(self.descriptors.keys())
        outcomes = await asyncio.gather(
            *(self._search_kind(self.descriptors[kind], query_embedding) for kind in kinds),
            return_exceptions=True,
        )

        results: Dict[RecordKind, Tuple[Any, ...]] = {}
        failures: List[SearchBackendError] = []
        for kind, outcome in zip(kinds, outcomes):
            if isinstance(outcome, SearchBackendError):
                failures.append(outcome)
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                results[kind] = outcome

        if failures and len(failures) == len(kinds):
            self.logger.error("All %d kind lookups failed for query %r", len(kinds), query)
            raise SearchUnavailableError(failures)

        result = SearchResult(
            query=query,
            people=results.get(RecordKind.PERSON, ()),
            organizations=results.get(RecordKind.ORGANIZATION, ()),
            locations=results.get(RecordKind.LOCATION, ()),
            productions=results.get(RecordKind.PRODUCTION, ()),
            failed_kinds=tuple(f.kind for f in failures),
        )

        if failures:
            self.logger.warning(
                "Search for %r returned partial results; failed kinds: %s",
                query,
                [k.value for k in result.failed_kinds],
            )
        self.logger.info(
            "Search for %r complete: %d results (people=%d, organizations=%d, locations=%d, productions=%d)",
            query,
            result.total_results,
            len(result.people),
            len(result.organizations),
            len(result.locations),
            len(result.productions),
        )
        return result

    async def _search_kind(self, descriptor: KindDescriptor, query_embedding: np.ndarray) -> Tuple[Any, ...]:
        kind = descriptor.kind
        loop = asyncio.get_running_loop()

        try:
            raw_matches = await asyncio.wait_for(
                loop.run_in_executor(
                    self._io_executors[kind],
                    lambda: self.store.query_nearest(
                        descriptor.collection,
                        query_embedding,
                        KNN_CANDIDATES,
                        attributes=descriptor.attributes,
                    ),
                ),
                timeout=self.lookup_timeout,
            )
        except asyncio.TimeoutError as e:
            self.logger.error(
                "Vector search on '%s' timed out after %.1fs", descriptor.collection, self.lookup_timeout
            )
            raise SearchBackendError(kind, f"lookup timed out after {self.lookup_timeout}s") from e
        except Exception as e:
            self.logger.error(
                "Database error during vector search on '%s': %s", descriptor.collection, e, exc_info=True
            )
            raise SearchBackendError(kind, str(e)) from e

        try:
            scored = [score_match(m) for m in raw_matches if descriptor.is_visible(m)]
            kept = sorted((s for s in scored if s.meets_floor), key=lambda s: s.score, reverse=True)
            shaped = tuple(descriptor.shape(s) for s in kept)
        except (ValueError, TypeError) as e:
            self.logger.error(
                "Failed to deserialize search results from '%s': %s", descriptor.collection, e, exc_info=True
            )
            raise SearchBackendError(kind, f"bad result row: {e}") from e

        self.logger.debug(
            "%s: %d candidates, %d kept (floor/visibility)", kind.value, len(raw_matches), len(shaped)
        )
        return shaped

    def shutdown(self) -> None:
        for executor in self._io_executors.values():
            executor.shutdown(wait=False, cancel_futures=True)
