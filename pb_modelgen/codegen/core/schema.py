"""
Core schema representation for model generation.

Converts the collection payloads returned by the PocketBase API into a
normalized, immutable format that generators can work with consistently.
Both the legacy (``schema`` + ``options``) and the current (``fields``)
payload shapes are accepted.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple


# Fields every record carries; the generated model declares them itself.
SYSTEM_FIELD_NAMES = ("id", "created", "updated")


class FieldType(Enum):
    """Field type tags understood by the generator."""

    TEXT = "text"
    NUMBER = "number"
    BOOL = "bool"
    DATE = "date"
    SELECT = "select"
    OTHER = "other"  # Any tag the generator has no dedicated mapping for

    @classmethod
    def from_tag(cls, tag: Optional[str]) -> "FieldType":
        """Map a backend type tag to a FieldType; unknown tags become OTHER."""
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


def _freeze(options: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Return a read-only copy of an options mapping."""
    return MappingProxyType(dict(options or {}))


@dataclass(frozen=True)
class SchemaField:
    """A single field of a collection schema."""

    name: str
    type: FieldType
    required: bool = False
    options: Mapping[str, Any] = field(default_factory=dict)
    raw_type: Optional[str] = None  # Backend tag as received

    def __post_init__(self):
        """Normalize the type tag and freeze the options."""
        if not isinstance(self.type, FieldType):
            object.__setattr__(self, "raw_type", self.raw_type or self.type)
            object.__setattr__(self, "type", FieldType.from_tag(self.type))
        elif self.raw_type is None:
            object.__setattr__(self, "raw_type", self.type.value)
        object.__setattr__(self, "options", _freeze(self.options))

    @property
    def is_select(self) -> bool:
        return self.type == FieldType.SELECT

    @property
    def select_values(self) -> Tuple[Any, ...]:
        """Declared option values of a select field, in declaration order."""
        values = self.options.get("values")
        if values is None:
            return ()
        if isinstance(values, (str, bytes)) or not isinstance(values, (list, tuple)):
            # Malformed; returned as-is so validation can report it
            return (values,)
        return tuple(values)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SchemaField":
        """
        Build a field from an API payload entry.

        Legacy payloads keep type-specific settings under ``options``;
        newer ones put them on the field itself (``values``, ``maxSelect``...).
        """
        options = dict(data.get("options") or {})
        if "values" in data and "values" not in options:
            options["values"] = data["values"]
        for key in ("maxSelect", "min", "max", "pattern"):
            if key in data and key not in options:
                options[key] = data[key]

        tag = data.get("type")
        return cls(
            name=data["name"],
            type=FieldType.from_tag(tag),
            required=bool(data.get("required", False)),
            options=options,
            raw_type=tag,
        )


@dataclass(frozen=True)
class CollectionSchema:
    """The schema of one remote collection."""

    name: str
    fields: Tuple[SchemaField, ...] = ()
    id: Optional[str] = None
    type: str = "base"  # base, auth or view
    system: bool = False

    def __post_init__(self):
        object.__setattr__(self, "fields", tuple(self.fields))

    def get_field(self, name: str) -> Optional[SchemaField]:
        """Get field by its wire name."""
        for schema_field in self.fields:
            if schema_field.name == name:
                return schema_field
        return None

    @property
    def select_fields(self) -> List[SchemaField]:
        return [f for f in self.fields if f.is_select]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CollectionSchema":
        """
        Build a collection from an API payload.

        Args:
            data: One entry of the ``/api/collections`` response

        Returns:
            CollectionSchema with its user-defined fields in declaration order
        """
        if "schema" in data:
            raw_fields = data.get("schema") or []
        else:
            # Newer servers list the system fields explicitly; skip them
            raw_fields = [
                f
                for f in data.get("fields") or []
                if f.get("name") not in SYSTEM_FIELD_NAMES and not f.get("hidden")
            ]

        return cls(
            name=data["name"],
            fields=tuple(SchemaField.from_dict(f) for f in raw_fields),
            id=data.get("id"),
            type=data.get("type", "base"),
            system=bool(data.get("system", False)),
        )


@dataclass(frozen=True)
class GeneratedModel:
    """Generated source for one collection."""

    collection_name: str
    source_text: str
    file_extension: str = ".dart"

    @property
    def file_name(self) -> str:
        return f"{self.collection_name}{self.file_extension}"


def parse_collections(payload: Any) -> List[CollectionSchema]:
    """
    Parse a list of collections from an API page, a plain list, or an
    exported ``{"items": [...]}`` document.
    """
    if isinstance(payload, dict):
        payload = payload.get("items", [])
    if not isinstance(payload, list):
        raise ValueError("Expected a list of collections or an object with 'items'")
    return [CollectionSchema.from_dict(item) for item in payload]
