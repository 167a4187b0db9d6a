"""Unit tests for the path-bound search service."""

from __future__ import annotations

import pytest

from generic_search import (
    CategoryLabels,
    ConfigurationError,
    DedupPolicy,
    GenericSearch,
    PathSearchService,
    SearchResult,
    SearchService,
)
from tests.fixtures.catalog import CATEGORY, NAME, STORE_NAME


@pytest.fixture
def service(product_paths) -> PathSearchService:
    return PathSearchService(product_paths)


@pytest.mark.unit
class TestPathSearchService:
    def test_requires_paths(self):
        with pytest.raises(ConfigurationError):
            PathSearchService([])

    def test_satisfies_search_service_protocol(self, service):
        assert isinstance(service, SearchService)

    def test_search_uses_bound_paths(self, service, catalog):
        results = service.search(catalog, "acme")

        assert [r.matched_text for r in results] == ["Acme", "Acme"]
        assert all(r.path == STORE_NAME for r in results)

    def test_search_calls_completion_once(self, service, catalog):
        calls: list[list[SearchResult]] = []

        results = service.search(catalog, "chair", calls.append)

        assert calls == [results]

    def test_default_engine_follows_settings(self, monkeypatch, product_paths, catalog):
        monkeypatch.setenv("GENERIC_SEARCH_DEDUP_POLICY", "value")

        service = PathSearchService(product_paths)

        assert len(service.search(catalog, "acme")) == 1

    def test_with_labels(self, catalog):
        labels = CategoryLabels({NAME: "Product", CATEGORY: "Category", STORE_NAME: "Store"})

        service = PathSearchService.with_labels(labels, engine=GenericSearch(dedup=DedupPolicy.VALUE))
        results = service.search(catalog, "toys")

        assert service.paths == (NAME, CATEGORY, STORE_NAME)
        assert [(r.matched_text, r.category_label) for r in results] == [
            ("Toys", "Category"),
            ("Toys", "Store"),
        ]

    def test_filter(self, service, catalog):
        acme = service.search(catalog, "acme")[0]

        assert [p.name for p in service.filter(acme, catalog)] == ["Lamp", "Table lamp"]

    def test_refine_keeps_records_matching_any_result(self, service, catalog):
        refined = service.refine(catalog, "lamp")

        assert [p.name for p in refined] == ["Lamp", "Table lamp"]

    def test_refine_without_matches(self, service, catalog):
        assert service.refine(catalog, "sofa") == []
        assert service.refine(catalog, "") == []

    async def test_search_async(self, service, catalog):
        results = await service.search_async(catalog, "bolt")

        assert [r.matched_text for r in results] == ["Bolt"]
