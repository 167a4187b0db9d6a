"""Exact-match filtering driven by a previously found search result."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
import logging
from typing import Any, Literal, TypeVar

from generic_search.domain.path import CollectionValue, SearchPath, TextValue
from generic_search.domain.result import SearchResult
from generic_search.errors import ConfigurationError
from generic_search.observability.metrics import SEARCH_LATENCY, SEARCH_REQUESTS, SEARCH_RESULTS, track_latency
from generic_search.observability.tracing import create_span


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


def path_equals(path: SearchPath, value_lowercased: str, item: Any) -> bool:
    """True if ``item`` has ``value_lowercased`` (case-insensitively) at ``path``.

    Collection levels are existential: one matching element is enough.
    """
    resolved = path.resolve(item)

    if path.next is None:
        return isinstance(resolved, TextValue) and resolved.text.lower() == value_lowercased

    if not isinstance(resolved, CollectionValue):
        return False
    return any(path_equals(path.next, value_lowercased, element) for element in resolved.items)


class TextFilter:
    """Narrow records to those whose value at a result's path equals its text."""

    def matches(self, filter_result: SearchResult, record: Any) -> bool:
        return path_equals(filter_result.path, filter_result.matched_text.lower(), record)

    def apply(self, filter_result: SearchResult, records: Iterable[RecordT]) -> list[RecordT]:
        """Return the records matching ``filter_result``, in their original order."""
        records = list(records)
        value_lowercased = filter_result.matched_text.lower()

        with create_span(
            "generic_search.filter",
            attributes={"filter.record_count": len(records), "filter.path": str(filter_result.path)},
        ) as span, track_latency(SEARCH_LATENCY, operation="filter"):
            kept = [record for record in records if path_equals(filter_result.path, value_lowercased, record)]
            span.set_attribute("filter.kept_count", len(kept))

        SEARCH_REQUESTS.labels(operation="filter", outcome="matched" if kept else "no_match").inc()
        SEARCH_RESULTS.labels(operation="filter").inc(len(kept))
        logger.debug("Filter on %s kept %d of %d record(s)", filter_result.path, len(kept), len(records))
        return kept

    def apply_all(
        self,
        filters: Sequence[SearchResult],
        records: Iterable[RecordT],
        *,
        mode: Literal["all", "any"] = "all",
    ) -> list[RecordT]:
        """Combine several filters; ``all`` requires every one, ``any`` at least one.

        With no filters every record is kept.
        """
        if mode not in ("all", "any"):
            raise ConfigurationError(f"mode must be 'all' or 'any', got {mode!r}")
        records = list(records)
        if not filters:
            return records
        combine = all if mode == "all" else any
        return [record for record in records if combine(self.matches(f, record) for f in filters)]
