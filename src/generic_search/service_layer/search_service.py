"""Search service bound to one record type.

Callers usually build the search paths for a record type once and reuse them
for every query. ``PathSearchService`` holds those paths together with the
result factory, so UI code only supplies records and a query.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
import logging
from typing import Any, TypeVar

from generic_search.domain.path import SearchPath
from generic_search.domain.result import CategoryLabels, ResultFactory, SearchResult, labelled_factory
from generic_search.errors import ConfigurationError
from generic_search.search.engine import GenericSearch
from generic_search.search.filter import TextFilter


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT")


class PathSearchService:
    """Search, filter and refine one kind of record.

    Args:
        paths: Top-level search paths for the record type
        result_factory: Builds a result for each match
        engine: Search engine (defaults to one built from settings)
        text_filter: Filter engine used by ``filter`` and ``refine``
    """

    def __init__(
        self,
        paths: Sequence[SearchPath],
        result_factory: ResultFactory = SearchResult,
        engine: GenericSearch | None = None,
        text_filter: TextFilter | None = None,
    ) -> None:
        if not paths:
            raise ConfigurationError("PathSearchService needs at least one search path")
        self.paths: tuple[SearchPath, ...] = tuple(paths)
        self.result_factory = result_factory
        self.engine = engine or GenericSearch.from_settings()
        self.text_filter = text_filter or TextFilter()

    @classmethod
    def with_labels(
        cls,
        labels: CategoryLabels | dict[SearchPath, str],
        *,
        result_type: type[SearchResult] = SearchResult,
        engine: GenericSearch | None = None,
    ) -> PathSearchService:
        """Build a service whose paths and category labels come from one mapping."""
        category_labels = labels if isinstance(labels, CategoryLabels) else CategoryLabels(labels)
        return cls(
            category_labels.paths,
            result_factory=labelled_factory(category_labels, result_type),
            engine=engine,
        )

    def search(
        self,
        records: Iterable[Any],
        query: str,
        completion: Callable[[list[SearchResult]], None] | None = None,
    ) -> list[SearchResult]:
        return self.engine.search(records, query, self.paths, self.result_factory, completion)

    async def search_async(
        self,
        records: Iterable[Any],
        query: str,
        completion: Callable[[list[SearchResult]], None] | None = None,
    ) -> list[SearchResult]:
        return await self.engine.search_async(records, query, self.paths, self.result_factory, completion)

    def filter(self, filter_result: SearchResult, records: Iterable[RecordT]) -> list[RecordT]:
        return self.text_filter.apply(filter_result, records)

    def refine(self, records: Iterable[RecordT], query: str) -> list[RecordT]:
        """Keep the records that exactly match at least one result for ``query``.

        Each distinct (path, text) match becomes a filter; the union of what
        those filters keep is returned in the original order.
        """
        records = list(records)
        results = self.search(records, query)

        distinct: dict[tuple[SearchPath, str], SearchResult] = {}
        for result in results:
            distinct.setdefault((result.path, result.matched_text.lower()), result)

        refined = self.text_filter.apply_all(list(distinct.values()), records, mode="any") if distinct else []
        logger.debug("Refined %d record(s) to %d using %d filter(s)", len(records), len(refined), len(distinct))
        return refined
