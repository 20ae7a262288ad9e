"""
Model code generation.

Turns PocketBase collection schemas into Dart model source.
"""

from .core.generator import (
    CodeGenerator,
    GenerationResult,
    GeneratorError,
    SchemaInconsistencyError,
    generate_all,
    generate_code,
)
from .core.schema import (
    CollectionSchema,
    FieldType,
    GeneratedModel,
    SchemaField,
    parse_collections,
)
from .core.config import ConfigError, GeneratorConfig
from .core.naming import to_member_name, to_type_name
from .languages.dart import DartGenerator, DartTypeMapper, TypeDescriptor


def emit(collection: CollectionSchema, config: GeneratorConfig = None) -> str:
    """Generate the Dart source for a single collection."""
    return DartGenerator(config).emit(collection).source_text


def map_type(field: SchemaField) -> TypeDescriptor:
    """Map a schema field to its Dart type descriptor."""
    return DartTypeMapper().map_field(field)


__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "SchemaInconsistencyError",
    "generate_all",
    "generate_code",
    "CollectionSchema",
    "FieldType",
    "GeneratedModel",
    "SchemaField",
    "parse_collections",
    "ConfigError",
    "GeneratorConfig",
    "to_member_name",
    "to_type_name",
    "DartGenerator",
    "DartTypeMapper",
    "TypeDescriptor",
    "emit",
    "map_type",
]
