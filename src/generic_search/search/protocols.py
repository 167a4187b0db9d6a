"""Interfaces shared by engines, filters and bound search services."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Protocol, TypeVar, runtime_checkable

from generic_search.domain.path import SearchPath
from generic_search.domain.result import ResultFactory, SearchResult


RecordT = TypeVar("RecordT")


@runtime_checkable
class SearchDefinition(Protocol):
    """An engine that searches arbitrary records along caller-supplied paths."""

    def search(  # pragma: no cover - Protocol only
        self,
        records: Iterable[Any],
        query: str,
        paths: Sequence[SearchPath],
        result_factory: ResultFactory = ...,
        completion: Callable[[list[SearchResult]], None] | None = None,
    ) -> list[SearchResult]:
        """Return ranked results and pass them to ``completion`` once."""


@runtime_checkable
class FilterService(Protocol):
    """Narrows records using a previously found result as an exact-match filter."""

    def apply(self, filter_result: SearchResult, records: Iterable[RecordT]) -> list[RecordT]:  # pragma: no cover
        """Return the matching records in their original order."""


@runtime_checkable
class SearchService(Protocol):
    """A search already bound to one record type's paths and result factory."""

    def search(  # pragma: no cover - Protocol only
        self,
        records: Iterable[Any],
        query: str,
        completion: Callable[[list[SearchResult]], None] | None = None,
    ) -> list[SearchResult]:
        """Return ranked results and pass them to ``completion`` once."""
