"""
Core code generation components.

Provides the schema model, naming rules, template engine and the base
generator used by the Dart generator.
"""

from .generator import (
    CodeGenerator,
    GeneratorError,
    GenerationResult,
    SchemaInconsistencyError,
    generate_all,
    generate_code,
)
from .schema import (
    CollectionSchema,
    FieldType,
    GeneratedModel,
    SchemaField,
    parse_collections,
)
from .naming import NameScope, NamingCase, to_member_name, to_type_name
from .config import ConfigError, GeneratorConfig
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GeneratorError",
    "GenerationResult",
    "SchemaInconsistencyError",
    "generate_all",
    "generate_code",
    # Schema system
    "CollectionSchema",
    "FieldType",
    "GeneratedModel",
    "SchemaField",
    "parse_collections",
    # Naming
    "NameScope",
    "NamingCase",
    "to_member_name",
    "to_type_name",
    # Configuration
    "ConfigError",
    "GeneratorConfig",
    # Templates
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
