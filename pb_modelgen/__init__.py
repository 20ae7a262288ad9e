"""
pb_modelgen - generate Dart models from PocketBase collection schemas.
"""

__version__ = "0.1.0"

from .codegen import (  # noqa: E402
    CollectionSchema,
    FieldType,
    GeneratorConfig,
    SchemaField,
    SchemaInconsistencyError,
    emit,
    generate_all,
    map_type,
    to_member_name,
    to_type_name,
)

__all__ = [
    "__version__",
    "CollectionSchema",
    "FieldType",
    "GeneratorConfig",
    "SchemaField",
    "SchemaInconsistencyError",
    "emit",
    "generate_all",
    "map_type",
    "to_member_name",
    "to_type_name",
]
