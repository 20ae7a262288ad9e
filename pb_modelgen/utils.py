"""Utility functions for loading collection schemas from disk.

Lets the generator run against an exported schema (for example the JSON
produced by the PocketBase dashboard's "Export collections") instead of a
live server.
"""

import json
from pathlib import Path

from .codegen.core.schema import CollectionSchema, parse_collections
from .logging_config import get_logger

logger = get_logger(__name__)


class SchemaFileError(Exception):
    """Raised when a schema file cannot be read or parsed."""

    pass


def load_collections_file(file_path: str | Path) -> list[CollectionSchema]:
    """Load collection schemas from a local JSON file.

    Args:
        file_path: Path to a JSON list of collections, or an object whose
            ``items`` key holds that list.

    Returns:
        Parsed collection schemas in file order.

    Raises:
        FileNotFoundError: If file doesn't exist.
        SchemaFileError: If the file cannot be read or is not a collection export.
    """
    file_path = Path(file_path)
    logger.debug(f"Attempting to load collections from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    if file_path.suffix.lower() != ".json":
        logger.warning(f"File does not have .json extension: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in file {file_path}: {e}")
        raise SchemaFileError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error(f"Error reading file {file_path}: {e}")
        raise SchemaFileError(f"Error reading file {file_path}: {e}") from e

    try:
        collections = parse_collections(data)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise SchemaFileError(f"Not a collection export {file_path}: {e}") from e

    logger.info(f"Loaded {len(collections)} collections from {file_path}")
    return collections
