"""Deterministic SOQL assembler.

Converts an `Intent` into a single query string with a fixed clause order:
`SELECT ... FROM ... [WHERE ...] [ORDER BY ...] LIMIT 1000`. Objects and projected fields are
allowlisted through the schema catalog; default filters and sort order always come from the catalog
entry, never from the caller.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from src.catalog.schema import SchemaCatalog, SchemaEntry
from src.intent.schema import Intent

# Result-size ceiling, independent of anything the caller asks for.
QUERY_LIMIT = 1000

_MINIMAL_FIELDS: tuple[str, ...] = ("Id", "Name")


class UnsupportedObjectError(ValueError):
    """Raised when the Intent names an object missing from the schema catalog."""

    def __init__(self, object_name: str) -> None:
        super().__init__(f"Unsupported object: {object_name}")
        self.object_name = object_name


@dataclass(frozen=True)
class AssembledQuery:
    """A complete query plus the metadata echoed back to the caller."""

    text: str
    fields: tuple[str, ...]
    object_name: str
    conditions: tuple[str, ...]


def _unique(values: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for value in values:
        if value in seen:
            continue
        seen.add(value)
        result.append(value)
    return result


def _select_fields(intent: Intent, entry: SchemaEntry, catalog: SchemaCatalog) -> list[str]:
    requested = [f.strip() for f in intent.fields if f and f.strip()]
    if not requested:
        requested = list(entry.default_fields)

    # Id is always projected, exactly once, first.
    fields = ["Id", *(f for f in requested if f != "Id")]
    valid = [f for f in _unique(fields) if catalog.is_valid_field(f, entry.object_name)]
    return valid or list(_MINIMAL_FIELDS)


def _where_predicates(intent: Intent, entry: SchemaEntry) -> list[str]:
    predicates = (p.strip() for p in [*intent.conditions, *entry.default_filters] if p)
    return _unique(p for p in predicates if p)


def _where_and(predicates: list[str]) -> str:
    if not predicates:
        return ""
    return "WHERE " + " AND ".join(predicates)


def _order_by(entry: SchemaEntry) -> str:
    if not entry.default_sort:
        return ""
    return "ORDER BY " + ", ".join(entry.default_sort)


def assemble(intent: Intent, *, catalog: SchemaCatalog) -> AssembledQuery:
    """Build the query text for a validated Intent.

    Raises:
        UnsupportedObjectError: If `intent.object_name` has no catalog entry.
    """

    entry = catalog.lookup(intent.object_name)
    if entry is None:
        raise UnsupportedObjectError(intent.object_name)

    fields = _select_fields(intent, entry, catalog)
    predicates = _where_predicates(intent, entry)

    clauses = [
        f"SELECT {', '.join(fields)}",
        f"FROM {entry.object_name}",
        _where_and(predicates),
        _order_by(entry),
        f"LIMIT {QUERY_LIMIT}",
    ]
    text = " ".join(c for c in clauses if c).strip()

    return AssembledQuery(
        text=text,
        fields=tuple(fields),
        object_name=entry.object_name,
        conditions=tuple(predicates),
    )
