"""
Naming utilities for model generation.

Converts backend field and collection names (snake_case or arbitrary
strings) into member names (camelCase) and type names (PascalCase), and
tracks the names claimed inside one generated scope so that collisions
are reported instead of silently producing broken code.
"""

from enum import Enum
from typing import Dict, Optional


SEGMENT_DELIMITER = "_"

# Raw tokens that would otherwise produce the name of the built-in
# DateTime type. Compared case-insensitively.
RESERVED_TYPE_TOKENS = {"date_time", "datetime"}
RESERVED_TYPE_REPLACEMENT = "DateTimez"


class NamingCase(Enum):
    """Naming case styles produced by the transformer."""

    CAMEL_CASE = "camel"  # firstName
    PASCAL_CASE = "pascal"  # FirstName


def _capitalize(part: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return part[:1].upper() + part[1:]


def to_member_name(raw: str) -> str:
    """
    Convert a raw name to a camelCase member name.

    The first segment starts lower-case and every following segment gets its
    first character upper-cased: ``first_name`` and ``First_name`` both give
    ``firstName``. Only first characters change, so ``userID`` stays as-is.
    """
    first, *rest = raw.split(SEGMENT_DELIMITER)
    return first[:1].lower() + first[1:] + "".join(_capitalize(part) for part in rest)


def to_type_name(raw: str) -> str:
    """
    Convert a raw name to a PascalCase type name.

    ``date_time``, ``datetime`` and ``dateTime`` map to ``DateTimez`` so the
    result never shadows the DateTime type.
    """
    if raw.lower() in RESERVED_TYPE_TOKENS:
        return RESERVED_TYPE_REPLACEMENT
    return "".join(_capitalize(part) for part in raw.split(SEGMENT_DELIMITER))


def convert_case(raw: str, target_case: NamingCase) -> str:
    """Convert ``raw`` to the requested case style."""
    if target_case == NamingCase.CAMEL_CASE:
        return to_member_name(raw)
    elif target_case == NamingCase.PASCAL_CASE:
        return to_type_name(raw)
    raise ValueError(f"Unsupported naming case: {target_case}")


class NameScope:
    """
    Tracks identifiers claimed within one generated scope (a class body,
    an enum, the top level of a file).

    ``claim`` returns the name of the previous owner on a clash, or None
    when the identifier was free.
    """

    def __init__(self, label: str, reserved: Optional[Dict[str, str]] = None):
        """
        Initialize a scope.

        Args:
            label: Human readable scope name used in error messages
            reserved: Identifiers taken up front, mapped to their owner
        """
        self.label = label
        self._owners: Dict[str, str] = dict(reserved or {})

    def claim(self, identifier: str, owner: str) -> Optional[str]:
        """Claim ``identifier`` for ``owner``; return the clashing owner if any."""
        previous = self._owners.get(identifier)
        if previous is not None:
            return previous
        self._owners[identifier] = owner
        return None

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._owners
