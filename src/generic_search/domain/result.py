"""Match records produced by a search and the factories that build them."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from generic_search.domain.path import SearchPath


@dataclass(eq=False)
class SearchResult:
    """One matched leaf value.

    ``path`` is always the top-level path that produced the match, never a
    nested tail, so the result can be re-applied as a filter later.

    Equality is identity. Deduplication of logically equal results is a choice
    made by the engine's dedup policy, not by this type.
    """

    query_text: str
    matched_text: str
    path: SearchPath
    category_label: str = ""

    def match_offset(self, query_lowercased: str | None = None) -> int:
        """Index of the query in the lowercased matched text, or -1."""
        needle = query_lowercased if query_lowercased is not None else self.query_text.lower()
        return self.matched_text.lower().find(needle)

    def to_dict(self) -> dict[str, Any]:
        return {
            "query_text": self.query_text,
            "matched_text": self.matched_text,
            "path": str(self.path),
            "category_label": self.category_label,
        }


ResultFactory = Callable[[str, str, SearchPath], SearchResult]


class CategoryLabels:
    """Display labels keyed by top-level search path.

    Unknown paths get an empty label rather than an error.
    """

    def __init__(self, labels: Mapping[SearchPath, str] | Iterable[tuple[SearchPath, str]] = ()) -> None:
        self._labels: dict[SearchPath, str] = dict(labels)

    def label_for(self, path: SearchPath) -> str:
        return self._labels.get(path, "")

    def __contains__(self, path: object) -> bool:
        return path in self._labels

    def __len__(self) -> int:
        return len(self._labels)

    @property
    def paths(self) -> list[SearchPath]:
        return list(self._labels)


def labelled_factory(
    labels: CategoryLabels | Mapping[SearchPath, str],
    result_type: type[SearchResult] = SearchResult,
) -> ResultFactory:
    """Return a result factory that fills ``category_label`` from ``labels``."""
    category_labels = labels if isinstance(labels, CategoryLabels) else CategoryLabels(labels)

    def factory(query_text: str, matched_text: str, path: SearchPath) -> SearchResult:
        return result_type(
            query_text=query_text,
            matched_text=matched_text,
            path=path,
            category_label=category_labels.label_for(path),
        )

    return factory
