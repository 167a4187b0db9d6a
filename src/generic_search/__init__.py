"""Schema-agnostic, in-memory text search and filtering over arbitrary records."""

from generic_search.bootstrap import configure
from generic_search.config import Settings, get_settings
from generic_search.domain.path import (
    NO_VALUE,
    Attribute,
    CollectionValue,
    Field,
    FieldChain,
    FieldValue,
    Itself,
    Key,
    NoValue,
    SearchPath,
    TextValue,
    resolve,
    resolve_text,
)
from generic_search.domain.result import CategoryLabels, ResultFactory, SearchResult, labelled_factory
from generic_search.errors import ConfigurationError, GenericSearchError, PathConstructionError
from generic_search.search.dedup import DedupPolicy
from generic_search.search.engine import GenericSearch
from generic_search.search.filter import TextFilter
from generic_search.search.protocols import FilterService, SearchDefinition, SearchService
from generic_search.service_layer.search_service import PathSearchService


__version__ = "0.1.0"

__all__ = [
    "NO_VALUE",
    "Attribute",
    "CategoryLabels",
    "CollectionValue",
    "ConfigurationError",
    "DedupPolicy",
    "Field",
    "FieldChain",
    "FieldValue",
    "FilterService",
    "GenericSearch",
    "GenericSearchError",
    "Itself",
    "Key",
    "NoValue",
    "PathConstructionError",
    "PathSearchService",
    "ResultFactory",
    "SearchDefinition",
    "SearchPath",
    "SearchResult",
    "SearchService",
    "Settings",
    "TextFilter",
    "TextValue",
    "configure",
    "get_settings",
    "labelled_factory",
    "resolve",
    "resolve_text",
]
