"""
Base generator interface and generation driver.

Defines the contract model generators implement, the errors raised while
generating, and the functions that run a generator over every collection.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from ...logging_config import get_logger
from .config import GeneratorConfig
from .schema import CollectionSchema, FieldType, GeneratedModel
from .templates import TemplateEngine, create_template_engine

logger = get_logger(__name__)


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class SchemaInconsistencyError(GeneratorError):
    """
    Raised when a collection cannot be turned into valid code: colliding
    identifiers, malformed names, or a select field without usable values.
    """

    def __init__(self, message: str, collection: str, field: Optional[str] = None):
        self.collection = collection
        self.field = field
        location = f"{collection}.{field}" if field else collection
        super().__init__(f"{location}: {message}")


class CodeGenerator(ABC):
    """Abstract base class for model generators."""

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize generator with optional configuration."""
        self.config = config or GeneratorConfig()
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this generator."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language."""
        pass

    @property
    def file_extension(self) -> str:
        """Return the file extension for generated files."""
        return self.config.file_extension

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this generator.

        Return None to use in-memory templates only.
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this generator."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def generate_single_schema(self, collection: CollectionSchema) -> str:
        """
        Generate the complete source unit for one collection.

        Raises:
            SchemaInconsistencyError: If the collection cannot produce valid code
        """
        pass

    def validate_schema(self, collection: CollectionSchema) -> List[str]:
        """
        Return non-fatal warnings for a collection.

        Language generators can extend this with their own checks.
        """
        warnings = []
        for schema_field in collection.fields:
            if schema_field.type == FieldType.OTHER:
                warnings.append(
                    f"{collection.name}.{schema_field.name}: type "
                    f"'{schema_field.raw_type}' has no dedicated mapping, "
                    f"generated as untyped"
                )
        return warnings

    def format_code(self, code: str) -> str:
        """
        Basic cleanup: strip trailing whitespace, allow at most one blank
        line in a row, end with a single newline.
        """
        formatted_lines = []
        blank_count = 0

        for line in code.split("\n"):
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 1:
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    def emit(self, collection: CollectionSchema) -> GeneratedModel:
        """Generate and format one collection."""
        code = self.format_code(self.generate_single_schema(collection))
        return GeneratedModel(collection.name, code, self.file_extension)

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template with context."""
        return self.template_engine.render_template(template_name, context)

    def template_exists(self, template_name: str) -> bool:
        """Check if a template exists."""
        return self.template_engine.template_exists(template_name)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        models: Dict[str, GeneratedModel] = None,
        errors: Dict[str, GeneratorError] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            models: Generated models keyed by collection name, in input order
            errors: Failures keyed by collection name
            warnings: Non-fatal notes
            metadata: Additional metadata about generation
        """
        self.models = models or {}
        self.errors = errors or {}
        self.warnings = warnings or []
        self.metadata = metadata or {}

    @property
    def success(self) -> bool:
        return not self.errors

    @property
    def sources(self) -> Dict[str, str]:
        """Generated source text keyed by collection name."""
        return {name: model.source_text for name, model in self.models.items()}


def _default_generator() -> CodeGenerator:
    from ..languages.dart import DartGenerator

    return DartGenerator()


def _check_unique_names(collections: List[CollectionSchema]):
    seen = set()
    for collection in collections:
        if collection.name in seen:
            raise SchemaInconsistencyError(
                "collection name appears more than once", collection.name
            )
        seen.add(collection.name)


def generate_all(
    collections: Iterable[CollectionSchema],
    generator: Optional[CodeGenerator] = None,
) -> Dict[str, str]:
    """
    Generate source for every collection.

    Args:
        collections: Collection schemas in the order they should be emitted
        generator: Generator to use (Dart by default)

    Returns:
        Mapping of collection name to source text, in input order

    Raises:
        SchemaInconsistencyError: On the first collection that fails
    """
    generator = generator or _default_generator()
    collections = list(collections)
    _check_unique_names(collections)

    sources = {}
    for collection in collections:
        sources[collection.name] = generator.emit(collection).source_text
    return sources


def generate_code(
    generator: CodeGenerator, collections: Iterable[CollectionSchema]
) -> GenerationResult:
    """
    Generate every collection independently, collecting failures instead of
    stopping at the first one.

    Args:
        generator: Code generator instance
        collections: Collection schemas to generate

    Returns:
        GenerationResult with models, per-collection errors, warnings and metadata
    """
    collections = list(collections)
    result = GenerationResult()
    seen = set()

    for collection in collections:
        if collection.name in seen:
            result.errors[collection.name] = SchemaInconsistencyError(
                "collection name appears more than once", collection.name
            )
            result.models.pop(collection.name, None)
            continue
        seen.add(collection.name)

        try:
            result.warnings.extend(generator.validate_schema(collection))
            result.models[collection.name] = generator.emit(collection)
            logger.debug("Generated model for collection %s", collection.name)
        except GeneratorError as e:
            logger.error("Generation failed for %s: %s", collection.name, e)
            result.errors[collection.name] = e

    result.metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "collection_count": len(collections),
        "generated_count": len(result.models),
        "failed_count": len(result.errors),
        "enum_count": sum(
            len(c.select_fields) for c in collections if c.name in result.models
        ),
    }
    return result
