"""
Dart type system for model generation.

Maps a schema field to an abstract type descriptor; the generator decides
how to spell it.
"""

from dataclasses import dataclass, field
from typing import Dict

from ...core.naming import to_type_name
from ...core.schema import FieldType, SchemaField


UNTYPED = "dynamic"

ENUM_SUFFIX = "Enum"


@dataclass(frozen=True)
class TypeDescriptor:
    """Base Dart type plus nullability."""

    base_type: str
    nullable: bool = False

    @property
    def is_untyped(self) -> bool:
        return self.base_type == UNTYPED

    def render(self) -> str:
        """Spell the type: ``T`` or ``T?``. ``dynamic`` is already nullable."""
        if self.nullable and not self.is_untyped:
            return f"{self.base_type}?"
        return self.base_type

    def __str__(self) -> str:
        return self.render()


def enum_type_name(field_name: str) -> str:
    """Name of the enum generated for a select field."""
    return f"{to_type_name(field_name)}{ENUM_SUFFIX}"


@dataclass
class DartTypeMapper:
    """Maps field type tags to Dart base types."""

    type_map: Dict[FieldType, str] = field(
        default_factory=lambda: {
            FieldType.TEXT: "String",
            FieldType.NUMBER: "num",
            FieldType.BOOL: "bool",
            FieldType.DATE: "DateTime",
        }
    )

    def base_type(self, schema_field: SchemaField) -> str:
        if schema_field.type == FieldType.SELECT:
            return enum_type_name(schema_field.name)
        return self.type_map.get(schema_field.type, UNTYPED)

    def map_field(self, schema_field: SchemaField) -> TypeDescriptor:
        """Map a field to its type; optional fields become nullable."""
        return TypeDescriptor(
            base_type=self.base_type(schema_field),
            nullable=not schema_field.required,
        )
