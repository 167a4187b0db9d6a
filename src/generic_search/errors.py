"""Exception hierarchy for generic-search.

Shape mismatches found while walking a record are never raised; they are
silent non-matches. Only configuration mistakes surface as exceptions, and
they surface when the path or engine is built.
"""


class GenericSearchError(Exception):
    """Base class for all generic-search errors."""


class PathConstructionError(GenericSearchError, ValueError):
    """Raised when a search path cannot be built from the given parts."""


class ConfigurationError(GenericSearchError, ValueError):
    """Raised when an engine option is invalid."""
