"""Substring search over arbitrary records.

``GenericSearch`` walks every top-level ``SearchPath`` against every record,
collects a result for each leaf whose text contains the query
(case-insensitively), collapses duplicates with the active dedup policy and
orders the survivors by where the query first occurs in the matched text.

Records of mixed or partial shapes are fine: a path that does not apply to a
record is a non-match, never an error.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable, Sequence
import logging
import sys
from typing import Any

from generic_search.config import Settings, get_settings
from generic_search.domain.path import CollectionValue, SearchPath, TextValue
from generic_search.domain.result import ResultFactory, SearchResult
from generic_search.errors import ConfigurationError
from generic_search.observability.metrics import SEARCH_LATENCY, SEARCH_REQUESTS, SEARCH_RESULTS, track_latency
from generic_search.observability.tracing import create_span
from generic_search.search.dedup import DedupKey, DedupPolicy, ResultSet, resolve_dedup_key


logger = logging.getLogger(__name__)

Completion = Callable[[list[SearchResult]], None]


def rank(results: Iterable[SearchResult], query_lowercased: str) -> list[SearchResult]:
    """Stable sort by first-match offset, earliest first.

    Results whose text no longer contains the query sort after every other
    result and keep their relative order.
    """

    def offset(result: SearchResult) -> int:
        position = result.match_offset(query_lowercased)
        return position if position >= 0 else sys.maxsize

    return sorted(results, key=offset)


class GenericSearch:
    """Case-insensitive substring search engine.

    Args:
        dedup: Default dedup policy (``DedupPolicy``, its name, or a key function)
        max_results: Optional cap applied after ranking
    """

    def __init__(
        self,
        *,
        dedup: DedupPolicy | str | DedupKey = DedupPolicy.IDENTITY,
        max_results: int | None = None,
    ) -> None:
        if max_results is not None and max_results < 1:
            raise ConfigurationError(f"max_results must be >= 1, got {max_results}")
        self._dedup_key = resolve_dedup_key(dedup)
        self.max_results = max_results

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> GenericSearch:
        settings = settings or get_settings()
        return cls(dedup=settings.dedup_policy, max_results=settings.max_results)

    def search(
        self,
        records: Iterable[Any],
        query: str,
        paths: Sequence[SearchPath],
        result_factory: ResultFactory = SearchResult,
        completion: Completion | None = None,
        *,
        dedup: DedupPolicy | str | DedupKey | None = None,
    ) -> list[SearchResult]:
        """Find every record field along ``paths`` containing ``query``.

        The ranked results are returned and, when ``completion`` is given,
        also passed to it exactly once before returning. An empty query
        yields no results.
        """
        if not query:
            logger.debug("Empty query, nothing to match")
            SEARCH_REQUESTS.labels(operation="search", outcome="empty_query").inc()
            return self._deliver([], completion)

        records = list(records)
        paths = tuple(paths)
        key = self._dedup_key if dedup is None else resolve_dedup_key(dedup)
        attributes = {
            "search.record_count": len(records),
            "search.path_count": len(paths),
            "search.query_length": len(query),
        }

        try:
            with create_span("generic_search.search", attributes=attributes) as span, track_latency(
                SEARCH_LATENCY, operation="search"
            ):
                query_lowercased = query.lower()
                found = ResultSet(key)
                for record in records:
                    for path in paths:
                        self._collect(record, query, query_lowercased, path, path, result_factory, found)

                results = rank(found, query_lowercased)
                if self.max_results is not None:
                    results = results[: self.max_results]
                span.set_attribute("search.result_count", len(results))
        except Exception:
            SEARCH_REQUESTS.labels(operation="search", outcome="error").inc()
            raise

        SEARCH_REQUESTS.labels(operation="search", outcome="matched" if results else "no_match").inc()
        SEARCH_RESULTS.labels(operation="search").inc(len(results))
        logger.debug(
            "Search matched %d result(s) across %d record(s) and %d path(s)",
            len(results),
            len(records),
            len(paths),
        )
        return self._deliver(results, completion)

    async def search_async(
        self,
        records: Iterable[Any],
        query: str,
        paths: Sequence[SearchPath],
        result_factory: ResultFactory = SearchResult,
        completion: Completion | None = None,
        *,
        dedup: DedupPolicy | str | DedupKey | None = None,
    ) -> list[SearchResult]:
        """Run ``search`` in a worker thread; ``completion`` fires on the caller's loop."""
        results = await asyncio.to_thread(
            self.search,
            list(records),
            query,
            paths,
            result_factory,
            dedup=dedup,
        )
        return self._deliver(results, completion)

    def _collect(
        self,
        item: Any,
        query: str,
        query_lowercased: str,
        root: SearchPath,
        path: SearchPath,
        result_factory: ResultFactory,
        found: ResultSet,
    ) -> None:
        value = path.resolve(item)

        if path.next is None:
            if isinstance(value, TextValue) and query_lowercased in value.text.lower():
                found.add(result_factory(query, value.text, root))
            return

        if isinstance(value, CollectionValue):
            for element in value.items:
                self._collect(element, query, query_lowercased, root, path.next, result_factory, found)

    @staticmethod
    def _deliver(results: list[SearchResult], completion: Completion | None) -> list[SearchResult]:
        if completion is not None:
            try:
                completion(results)
            except Exception:
                logger.exception("Search completion callback raised")
                raise
        return results
