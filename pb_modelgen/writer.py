"""Output helpers: write generated models and run the Dart formatter."""

import shutil
import subprocess
from pathlib import Path
from typing import Iterable, Sequence

from .codegen.core.schema import GeneratedModel
from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_FORMAT_COMMAND = ("dart", "format")


class WriterError(Exception):
    """Raised when generated files cannot be written."""

    pass


def ensure_output_directory(path: str | Path) -> Path:
    """Create the output directory (and parents) if needed."""
    directory = Path(path)
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriterError(f"Cannot create output directory {directory}: {e}") from e
    return directory


def write_models(models: Iterable[GeneratedModel], output_directory: str | Path) -> list[Path]:
    """Write each model to ``<output_directory>/<collection><ext>``.

    Returns:
        Paths written, in model order.
    """
    directory = ensure_output_directory(output_directory)
    written = []
    for model in models:
        path = directory / model.file_name
        try:
            path.write_text(model.source_text, encoding="utf-8")
        except OSError as e:
            raise WriterError(f"Failed to write {path}: {e}") from e
        logger.debug("Wrote %s", path)
        written.append(path)
    return written


def format_models(
    output_directory: str | Path,
    command: Sequence[str] = DEFAULT_FORMAT_COMMAND,
) -> bool:
    """Run the source formatter over the output directory.

    Formatting only changes whitespace, so failures are logged and reported
    through the return value rather than raised.

    Returns:
        True if the formatter ran and exited cleanly.
    """
    if shutil.which(command[0]) is None:
        logger.warning("Formatter '%s' not found, skipping formatting", command[0])
        return False

    try:
        completed = subprocess.run(
            [*command, str(output_directory)],
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        logger.warning("Could not run formatter: %s", e)
        return False

    if completed.returncode != 0:
        logger.warning(
            "Formatter exited with %d: %s",
            completed.returncode,
            completed.stderr.strip(),
        )
        return False
    return True
