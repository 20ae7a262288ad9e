"""
Configuration for model generation.

Holds the settings that change the emitted source, with defaults that
match the PocketBase Dart SDK.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings for the model generator."""

    # Header comment block at the top of each file
    add_comments: bool = True

    # Library providing the record type consumed by the factory
    record_import: str = "package:pocketbase/pocketbase.dart"
    record_type: str = "RecordModel"

    # Model class name is <PascalCase collection name><class_suffix>
    class_suffix: str = "Model"

    file_extension: str = ".dart"

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GeneratorConfig":
        """
        Build a configuration from a mapping (e.g. the ``generator`` section
        of the YAML config file).

        Raises:
            ConfigError: On unknown keys or wrongly typed values
        """
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("Generator configuration must be a mapping")

        known_fields = {f.name: f for f in fields(cls)}
        unknown = sorted(set(data) - set(known_fields))
        if unknown:
            raise ConfigError(f"Unknown generator settings: {', '.join(unknown)}")

        for key, value in data.items():
            expected = bool if known_fields[key].type in (bool, "bool") else str
            if not isinstance(value, expected):
                raise ConfigError(
                    f"Generator setting '{key}' must be a {expected.__name__}"
                )

        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}
