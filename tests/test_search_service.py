# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-09-22
# Description: test_search_service.py
# -----------------------------------------------------------------------------
import asyncio

import pytest

from config.Config import Config
from embedding.SlateEmbedder import SlateEmbedder
from embedding.errors import EmbeddingInferenceError
from records.types import RecordKind
from search.errors import SearchUnavailableError
from search.scoring import KNN_CANDIDATES
from services.SlateSearchService import SlateSearchService

from conftest import (
    FakeTextEmbedding,
    location_row,
    organization_row,
    person_row,
    production_row,
)


@pytest.fixture
def service(embedder, store):
    svc = SlateSearchService(embedder=embedder, store=store, lookup_timeout=2.0, io_workers=4)
    yield svc
    svc.shutdown()


def _search(svc, query):
    return asyncio.run(svc.search(query))


@pytest.mark.parametrize("query", ["", "   ", "\t\n", None])
def test_empty_query_skips_embedding(query, store):
    model = FakeTextEmbedding()
    emb = SlateEmbedder(Config(), model_factory=lambda cfg: model)
    emb.initialize()
    calls_before = len(model.calls)
    svc = SlateSearchService(embedder=emb, store=store)

    result = _search(svc, query)

    assert result.is_empty_query
    assert result.has_results is False
    assert result.total_results == 0
    assert result.people == result.organizations == result.locations == result.productions == ()
    assert len(model.calls) == calls_before
    assert store.queries == []
    svc.shutdown()
    emb.shutdown()


def test_search_scores_filters_and_merges(service, store):
    store.matches["person"] = [person_row("person:jdoe", 0.3), person_row("person:far", 1.6, name="Far Away")]
    store.matches["organization"] = [organization_row("organization:acme", 0.45)]
    store.matches["location"] = [location_row("location:office", 0.1)]
    store.matches["production"] = [production_row("production:ns", 0.55)]

    result = _search(service, "  actor in los angeles ")

    assert result.query == "actor in los angeles"
    assert [p.id for p in result.people] == ["person:jdoe"]
    assert result.people[0].score == 70
    assert result.people[0].initials == "JD"
    assert [o.score for o in result.organizations] == [55]
    assert [loc.score for loc in result.locations] == [90]
    assert result.productions == ()  # 45 < floor
    assert result.total_results == 3
    assert result.has_results
    assert result.failed_kinds == ()


def test_each_kind_queried_once_with_k_candidates(service, store):
    _search(service, "stunt coordinator")

    assert sorted(q["collection"] for q in store.queries) == ["location", "organization", "person", "production"]
    assert all(q["n_results"] == KNN_CANDIDATES for q in store.queries)
    assert all(q["where"] is None for q in store.queries)


def test_private_locations_never_returned(service, store):
    store.matches["location"] = [
        location_row("location:secret", 0.0, is_public=False),
        location_row("location:open", 0.4, is_public=True),
    ]

    result = _search(service, "warehouse")

    assert [loc.id for loc in result.locations] == ["location:open"]


def test_results_sorted_by_score(service, store):
    store.matches["person"] = [
        person_row("person:b", 0.4, name="Bea Two"),
        person_row("person:a", 0.1, name="Al One"),
        person_row("person:c", 0.2, name="Cy Three"),
    ]

    result = _search(service, "singer")

    assert [p.score for p in result.people] == [90, 80, 60]


def test_one_kind_failure_gives_partial_result(service, store):
    store.matches["person"] = [person_row("person:jdoe", 0.3)]
    store.matches["organization"] = [organization_row("organization:acme", 0.2)]
    store.matches["location"] = [location_row("location:office", 0.2)]
    store.errors["production"] = ConnectionError("store unreachable")

    result = _search(service, "drama")

    assert result.failed_kinds == (RecordKind.PRODUCTION,)
    assert result.is_partial
    assert result.productions == ()
    assert result.total_results == 3


def test_bad_row_fails_only_its_kind(service, store):
    store.matches["person"] = [person_row("person:jdoe", 0.3)]
    broken = organization_row("organization:broken", 0.1)
    broken.attributes.pop("slug")
    store.matches["organization"] = [broken]

    result = _search(service, "agency")

    assert result.failed_kinds == (RecordKind.ORGANIZATION,)
    assert len(result.people) == 1


def test_slow_lookup_times_out_for_that_kind_only(embedder, store):
    svc = SlateSearchService(embedder=embedder, store=store, lookup_timeout=0.05, io_workers=4)
    store.matches["person"] = [person_row("person:jdoe", 0.3)]
    store.delays["location"] = 0.5

    result = _search(svc, "rooftop")

    assert result.failed_kinds == (RecordKind.LOCATION,)
    assert len(result.people) == 1
    svc.shutdown()


def test_stuck_kind_does_not_starve_other_kinds(embedder, store):
    svc = SlateSearchService(embedder=embedder, store=store, lookup_timeout=0.1, io_workers=2)
    store.matches["person"] = [person_row("person:jdoe", 0.3)]
    store.matches["production"] = [production_row("production:night", 0.2)]
    store.delays["location"] = 1.0

    # more requests than the location pool has threads, while its lookups are still stuck
    results = [_search(svc, f"rooftop {i}") for i in range(3)]

    for result in results:
        assert result.failed_kinds == (RecordKind.LOCATION,)
        assert len(result.people) == 1
        assert len(result.productions) == 1
    svc.shutdown()



def test_all_kinds_failing_raises_unavailable(service, store):
    for name in ("person", "organization", "location", "production"):
        store.errors[name] = RuntimeError("db down")

    with pytest.raises(SearchUnavailableError) as exc_info:
        _search(service, "anything")

    assert {f.kind for f in exc_info.value.failures} == set(RecordKind)


def test_embedding_failure_is_fatal(service, store, fake_model):
    fake_model.fail_on = "explode"

    with pytest.raises(EmbeddingInferenceError):
        _search(service, "explode")

    assert store.queries == []
