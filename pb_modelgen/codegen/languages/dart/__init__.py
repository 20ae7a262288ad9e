"""
Dart model generator module.

Generates null-safe Dart model classes for PocketBase collections.
"""

from .generator import DartGenerator, FIXED_FIELDS
from .naming import (
    DART_BUILTIN_TYPES,
    DART_RESERVED_WORDS,
    identifier_problem,
    is_valid_identifier,
)
from .types import DartTypeMapper, TypeDescriptor, enum_type_name

__all__ = [
    "DartGenerator",
    "FIXED_FIELDS",
    "DART_BUILTIN_TYPES",
    "DART_RESERVED_WORDS",
    "identifier_problem",
    "is_valid_identifier",
    "DartTypeMapper",
    "TypeDescriptor",
    "enum_type_name",
]
