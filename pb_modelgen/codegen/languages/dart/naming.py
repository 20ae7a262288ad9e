"""
Dart-specific naming rules.

The generator does not rename anything behind the user's back: a name
that Dart would reject is reported as a schema problem instead.
"""

import re


# Reserved words can never be identifiers. Built-in identifiers such as
# `required` or `get` are fine as member names, and generated type names
# always carry a suffix; only `Function` can clash with a constant name.
DART_RESERVED_WORDS = {
    "assert",
    "break",
    "case",
    "catch",
    "class",
    "const",
    "continue",
    "default",
    "do",
    "else",
    "enum",
    "extends",
    "false",
    "final",
    "finally",
    "for",
    "Function",
    "if",
    "in",
    "is",
    "new",
    "null",
    "rethrow",
    "return",
    "super",
    "switch",
    "this",
    "throw",
    "true",
    "try",
    "var",
    "void",
    "while",
    "with",
}

# Members every generated model class already has
MODEL_RESERVED_MEMBERS = {
    "fromModel",
    "toMap",
    "hashCode",
    "runtimeType",
    "toString",
    "noSuchMethod",
}

# Types the generated class body refers to. A field or constant of the same
# name would shadow them inside the class.
DART_BUILTIN_TYPES = {"String", "DateTime", "Map", "num", "bool", "dynamic", "Object"}

# Members every Dart enum already has. `name` is an extension getter and may
# be redeclared.
ENUM_RESERVED_MEMBERS = {"values", "index", "hashCode", "runtimeType"}

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def is_valid_identifier(name: str) -> bool:
    """Check that ``name`` is a legal, non-reserved Dart identifier."""
    return bool(_IDENTIFIER_RE.match(name)) and name not in DART_RESERVED_WORDS


def identifier_problem(name: str) -> str:
    """Describe why ``name`` is not a usable Dart identifier ("" if it is)."""
    if not name:
        return "name is empty"
    if name in DART_RESERVED_WORDS:
        return f"'{name}' is a Dart reserved word"
    if not _IDENTIFIER_RE.match(name):
        return f"'{name}' is not a valid Dart identifier"
    return ""
