"""Schema catalog (Pydantic models).

The catalog is the allowlist consulted by the query assembler: which objects may be queried, which
fields they may project, and the default fields, filters and sort order applied to every query.
It is built once at startup and never mutated afterwards.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from src.catalog.objects import BUILTIN_OBJECTS, SOFT_DELETE_FILTER

UNIVERSAL_FIELDS: frozenset[str] = frozenset({"Id", "Name", "CreatedDate", "LastModifiedDate"})
FALLBACK_FIELDS: tuple[str, ...] = ("Id", "Name", "CreatedDate")
FALLBACK_SORT: tuple[str, ...] = ("CreatedDate DESC",)

# Org-defined custom fields cannot be enumerated ahead of time; trust the `__c` suffix.
_CUSTOM_FIELD_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_]*__c$")
_SORT_ITEM_RE = re.compile(r"^[A-Za-z][A-Za-z0-9_.]*(?: (?:ASC|DESC))?$")


class SchemaCatalogError(ValueError):
    """Raised when a schema catalog definition is invalid."""


class SchemaEntry(BaseModel):
    """Queryable metadata for a single Salesforce object."""

    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    object_name: str = Field(min_length=1, alias="objectName")
    label: str = ""
    valid_fields: frozenset[str] = Field(alias="fields")
    relationships: frozenset[str] = frozenset()
    default_fields: tuple[str, ...] = Field(default=FALLBACK_FIELDS, alias="defaultFields")
    default_filters: tuple[str, ...] = Field(
        default=(SOFT_DELETE_FILTER,), alias="defaultFilters"
    )
    default_sort: tuple[str, ...] = Field(default=FALLBACK_SORT, alias="defaultSort")

    @model_validator(mode="before")
    @classmethod
    def default_label(cls, data: Any) -> Any:
        """Use the object name as the display label when none is given."""

        if isinstance(data, dict) and not data.get("label"):
            name = data.get("object_name") or data.get("objectName")
            if name:
                data = {**data, "label": name}
        return data

    @field_validator("default_sort")
    @classmethod
    def validate_sort(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        """Validate that every sort item reads `Field [ASC|DESC]`."""

        for item in value:
            if not _SORT_ITEM_RE.match(item):
                raise ValueError(f"invalid sort item: {item!r}")
        return value

    @model_validator(mode="after")
    def validate_default_fields(self) -> SchemaEntry:
        """Default fields must be projectable without relying on the custom-field suffix rule."""

        allowed = self.valid_fields | UNIVERSAL_FIELDS
        unknown = [f for f in self.default_fields if f not in allowed]
        if unknown:
            raise ValueError(
                f"default_fields of {self.object_name} are not valid fields: {', '.join(unknown)}"
            )
        return self


class SchemaCatalog:
    """Read-only lookup over `SchemaEntry` objects keyed by object name."""

    def __init__(self, entries: Iterable[SchemaEntry]) -> None:
        by_name: dict[str, SchemaEntry] = {}
        for entry in entries:
            if entry.object_name in by_name:
                raise SchemaCatalogError(f"duplicate object in catalog: {entry.object_name}")
            by_name[entry.object_name] = entry
        self._entries: Mapping[str, SchemaEntry] = MappingProxyType(by_name)

    def __contains__(self, object_name: object) -> bool:
        return object_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, object_name: str) -> SchemaEntry | None:
        """Return the entry for `object_name`, or `None` if the object is not supported."""

        return self._entries.get(object_name)

    def object_names(self) -> list[str]:
        return list(self._entries)

    def relationships(self, object_name: str) -> frozenset[str]:
        entry = self.lookup(object_name)
        return entry.relationships if entry is not None else frozenset()

    def is_valid_field(self, field: str, object_name: str) -> bool:
        """Whether `field` may be projected from `object_name`.

        A field is valid if the object lists it, if it is one of the universally available
        standard fields, or if it is shaped like a custom field (`Something__c`).
        """

        entry = self.lookup(object_name)
        if entry is None:
            return False
        return (
                field in entry.valid_fields
                or field in UNIVERSAL_FIELDS
                or _CUSTOM_FIELD_RE.match(field) is not None
        )

    def to_dict(self) -> dict[str, Any]:
        """Export the catalog in the `{"objects": {...}}` shape served by the schema endpoint."""

        return {
            "objects": {
                name: {
                    "label": entry.label,
                    "fields": sorted(entry.valid_fields),
                    "relationships": sorted(entry.relationships),
                    "defaultFields": list(entry.default_fields),
                    "defaultFilters": list(entry.default_filters),
                    "defaultSort": list(entry.default_sort),
                }
                for name, entry in self._entries.items()
            }
        }


def catalog_from_obj(obj: Mapping[str, Any]) -> SchemaCatalog:
    """Build a catalog from a mapping of object name to entry attributes.

    Raises:
        SchemaCatalogError: If any entry fails validation.
    """

    try:
        entries = [
            SchemaEntry.model_validate({"object_name": name, **dict(attrs)})
            for name, attrs in obj.items()
        ]
    except ValidationError as exc:
        raise SchemaCatalogError(f"invalid schema catalog: {exc}") from exc
    return SchemaCatalog(entries)


def load_catalog(path: Path) -> SchemaCatalog:
    """Load a catalog from a JSON file shaped like `{"objects": {"Account": {...}, ...}}`."""

    try:
        decoded = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise SchemaCatalogError(f"cannot read schema catalog {path}: {exc}") from exc

    objects = decoded.get("objects") if isinstance(decoded, dict) else None
    if not isinstance(objects, dict) or not objects:
        raise SchemaCatalogError(f"schema catalog {path} has no objects")
    return catalog_from_obj(objects)


def default_catalog() -> SchemaCatalog:
    """Build the catalog of built-in Salesforce objects."""

    return catalog_from_obj(BUILTIN_OBJECTS)
