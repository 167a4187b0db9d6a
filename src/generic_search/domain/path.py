"""Path descriptors and runtime field resolution.

A ``SearchPath`` describes how to reach a leaf text field inside a record,
optionally descending into every element of one or more sub-collections on
the way. Paths are pure configuration: built once per record type, shared
across searches and never mutated.

The engine does not know the declared type of any field. Each accessor is
applied at search time and the value it returns is classified into a
``FieldValue`` variant (text, collection or nothing) which callers dispatch on.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from generic_search.errors import PathConstructionError


Accessor = Callable[[Any], Any]

# Errors an accessor raises when it does not apply to a record's runtime shape.
INAPPLICABLE_ERRORS: tuple[type[Exception], ...] = (AttributeError, KeyError, IndexError, TypeError)


@dataclass(frozen=True)
class Field:
    """Read ``name`` as a mapping key for mappings, as an attribute otherwise.

    Covers plain objects, dataclasses, pydantic models and dicts with a single
    accessor so one path can walk records of mixed shapes.
    """

    name: str

    def __call__(self, record: Any) -> Any:
        if isinstance(record, Mapping):
            return record[self.name]
        return getattr(record, self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class FieldChain:
    """Read ``names`` one after another through nested single objects.

    ``FieldChain(("address", "city"))`` reads ``record.address.city`` (or the
    mapping equivalent) as one accessor, with no collection level in between.
    """

    names: tuple[str, ...]

    def __call__(self, record: Any) -> Any:
        value = record
        for name in self.names:
            value = Field(name)(value)
        return value

    def __str__(self) -> str:
        return ".".join(self.names)


@dataclass(frozen=True)
class Attribute:
    """Read ``name`` as an attribute only."""

    name: str

    def __call__(self, record: Any) -> Any:
        return getattr(record, self.name)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Key:
    """Read ``key`` by subscription only (mappings and sequences)."""

    key: Hashable

    def __call__(self, record: Any) -> Any:
        return record[self.key]

    def __str__(self) -> str:
        return f"[{self.key!r}]"


@dataclass(frozen=True)
class Itself:
    """Return the record unchanged; the leaf for collections of plain strings."""

    def __call__(self, record: Any) -> Any:
        return record

    def __str__(self) -> str:
        return "[]"


@dataclass(frozen=True)
class TextValue:
    """The accessor produced text."""

    text: str


@dataclass(frozen=True)
class CollectionValue:
    """The accessor produced a collection whose elements can be descended into."""

    items: tuple[Any, ...]


@dataclass(frozen=True)
class NoValue:
    """The accessor did not apply, or produced neither text nor a collection."""


NO_VALUE = NoValue()

FieldValue = TextValue | CollectionValue | NoValue


def classify(value: Any) -> FieldValue:
    """Classify a raw field value into a ``FieldValue`` variant.

    Strings are text. Any other iterable except bytes and mappings is a
    collection; it is materialised so generators can be walked safely.
    """
    if isinstance(value, str):
        return TextValue(value)
    if isinstance(value, (bytes, bytearray, Mapping)) or not isinstance(value, Iterable):
        return NO_VALUE
    return CollectionValue(tuple(value))


def resolve(accessor: Accessor, record: Any) -> FieldValue:
    """Apply ``accessor`` to ``record`` and classify the result.

    An accessor that raises one of ``INAPPLICABLE_ERRORS`` simply does not
    apply to this record; that is reported as ``NO_VALUE``. Anything else the
    accessor raises propagates.
    """
    try:
        value = accessor(record)
    except INAPPLICABLE_ERRORS:
        return NO_VALUE
    return classify(value)


def resolve_text(accessor: Accessor, record: Any) -> TextValue | NoValue:
    """Like ``resolve`` but for leaves: only text counts, nothing is iterated."""
    try:
        value = accessor(record)
    except INAPPLICABLE_ERRORS:
        return NO_VALUE
    if isinstance(value, str):
        return TextValue(value)
    return NO_VALUE


def describe_accessor(accessor: Accessor) -> str:
    if isinstance(accessor, (Field, FieldChain, Attribute, Key, Itself)):
        return str(accessor)
    return getattr(accessor, "__name__", repr(accessor))


def _names_accessor(names: list[str]) -> Accessor:
    if len(names) == 1:
        return Field(names[0])
    return FieldChain(tuple(names))


@dataclass(frozen=True)
class SearchPath:
    """Immutable, recursive description of how to reach a leaf text field.

    ``next`` is present iff ``accessor`` yields a collection whose elements are
    walked with ``next``. Equality and hashing are structural over the whole
    accessor chain.
    """

    accessor: Accessor
    next: SearchPath | None = None

    def __post_init__(self) -> None:
        if not callable(self.accessor):
            raise PathConstructionError(f"Accessor must be callable, got {type(self.accessor).__name__}")
        try:
            hash(self.accessor)
        except TypeError as exc:
            raise PathConstructionError(f"Accessor must be hashable: {self.accessor!r}") from exc
        if self.next is not None and not isinstance(self.next, SearchPath):
            raise PathConstructionError(f"Nested level must be a SearchPath, got {type(self.next).__name__}")

    @classmethod
    def chain(cls, *accessors: Accessor) -> SearchPath:
        """Build a path from outermost to innermost accessor.

        ``SearchPath.chain(Field("stores"), Field("name"))`` descends into each
        element of ``stores`` and reads ``name`` off it.
        """
        if not accessors:
            raise PathConstructionError("A search path needs at least one accessor")
        path = cls(accessors[-1])
        for accessor in reversed(accessors[:-1]):
            path = cls(accessor, path)
        return path

    @classmethod
    def parse(cls, dotted: str) -> SearchPath:
        """Build a path from a dotted string such as ``"stores[].name"``.

        A trailing ``[]`` is the only collection marker: the segment's value is
        descended into element by element. Plain dotted segments between
        markers read through single nested objects (``"address.city"`` is one
        leaf). A marker on the last segment means the elements themselves are
        the text (``"tags[]"`` searches a list of strings).
        """
        if not isinstance(dotted, str) or not dotted.strip():
            raise PathConstructionError("Dotted path must be a non-empty string")

        accessors: list[Accessor] = []
        pending: list[str] = []
        segments = [segment.strip() for segment in dotted.split(".")]
        for segment in segments:
            name = segment.removesuffix("[]")
            if not name:
                raise PathConstructionError(f"Dotted path has an empty segment: {dotted!r}")
            if "[" in name or "]" in name:
                raise PathConstructionError(f"Misplaced collection marker in {segment!r} of {dotted!r}")
            pending.append(name)
            if segment.endswith("[]"):
                accessors.append(_names_accessor(pending))
                pending = []

        if pending:
            accessors.append(_names_accessor(pending))
        else:
            accessors.append(Itself())
        return cls.chain(*accessors)

    def levels(self) -> Iterator[SearchPath]:
        """Yield this node followed by every nested level."""
        node: SearchPath | None = self
        while node is not None:
            yield node
            node = node.next

    @property
    def is_leaf(self) -> bool:
        return self.next is None

    @property
    def depth(self) -> int:
        return sum(1 for _ in self.levels())

    @property
    def leaf(self) -> SearchPath:
        *_, last = self.levels()
        return last

    @property
    def segments(self) -> tuple[str, ...]:
        return tuple(describe_accessor(level.accessor) for level in self.levels())

    def resolve(self, record: Any) -> FieldValue:
        """Resolve this level's accessor against ``record``.

        A leaf only ever yields text or ``NO_VALUE``; collections found at a
        leaf are not iterated.
        """
        if self.next is None:
            return resolve_text(self.accessor, record)
        return resolve(self.accessor, record)

    def __str__(self) -> str:
        # Rendered in ``parse`` syntax: every collection level carries ``[]``.
        parts = [describe_accessor(level.accessor) + "[]" for level in self.levels() if not level.is_leaf]
        if not isinstance(self.leaf.accessor, Itself):
            parts.append(describe_accessor(self.leaf.accessor))
        return ".".join(parts)
