"""Deduplication policies for search results.

The engine collapses results whose dedup keys are equal. Which key is used is a
caller choice: identity keeps every result, value collapses results that share
a top-level path and matched text.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterator
from enum import Enum

from generic_search.domain.result import SearchResult
from generic_search.errors import ConfigurationError


DedupKey = Callable[[SearchResult], Hashable]


class DedupPolicy(str, Enum):
    """Built-in dedup strategies."""

    IDENTITY = "identity"
    VALUE = "value"

    @property
    def key(self) -> DedupKey:
        if self is DedupPolicy.VALUE:
            return value_key
        return identity_key


def identity_key(result: SearchResult) -> Hashable:
    return id(result)


def value_key(result: SearchResult) -> Hashable:
    return (result.path, result.matched_text)


def resolve_dedup_key(policy: DedupPolicy | str | DedupKey) -> DedupKey:
    """Turn a policy, its name, or a custom key function into a key function."""
    if isinstance(policy, DedupPolicy):
        return policy.key
    if isinstance(policy, str):
        try:
            return DedupPolicy(policy.lower()).key
        except ValueError as exc:
            choices = ", ".join(p.value for p in DedupPolicy)
            raise ConfigurationError(f"Unknown dedup policy {policy!r} (expected one of: {choices})") from exc
    if callable(policy):
        return policy
    raise ConfigurationError(f"Dedup policy must be a DedupPolicy, a name or a callable, got {type(policy).__name__}")


class ResultSet:
    """Insertion-ordered set of results keyed by a dedup key.

    The first result inserted for a key wins.
    """

    def __init__(self, key: DedupKey) -> None:
        self._key = key
        self._results: dict[Hashable, SearchResult] = {}

    def add(self, result: SearchResult) -> bool:
        """Insert ``result``; return False when an equal result is already present."""
        key = self._key(result)
        if key in self._results:
            return False
        self._results[key] = result
        return True

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[SearchResult]:
        return iter(self._results.values())
