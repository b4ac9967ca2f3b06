"""
Base generator interface for all model generation targets.

Defines the contract language generators implement and drives the
pipeline: read schema, build bundles, render into a staging directory,
format, promote.
"""

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, Dict, List, Any, Optional

from sqlalchemy.engine import Engine

from .config import GeneratorConfig
from .exceptions import GeneratorError, RenderError
from .formatter import SourceFormatter
from .promoter import promote, staging_directory
from .reader import SchemaReader
from .schema import ArtifactBundle, ModelField, build_bundles
from .templates import TemplateEngine, TemplateError, create_template_engine
from ...logging_config import get_logger

logger = get_logger(__name__)


class CodeGenerator(ABC):
    """Abstract base class for all code generators."""

    def __init__(self, config: GeneratorConfig):
        """Initialize generator with configuration."""
        self.config = config
        self._template_engine = None
        self.formatted = False

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'go')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.go')."""
        pass

    @abstractmethod
    def map_column_type(self, db_type: str) -> str:
        """Map a database column type to a target language type."""
        pass

    @abstractmethod
    def template_helpers(self) -> Dict[str, Callable]:
        """Return the named helper functions exposed to templates."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing built-in templates for this generator.

        Returns:
            Path to template directory or None
        """
        return None

    def get_formatter(self) -> SourceFormatter:
        """Return the post-processor for generated files."""
        return SourceFormatter(self.config.formatter)

    @property
    def template_engine(self) -> TemplateEngine:
        """Template engine; the working directory overrides built-in templates."""
        if self._template_engine is None:
            search_path = [Path(self.config.work_dir)]
            builtin = self.get_template_directory()
            if builtin:
                search_path.append(builtin)
            self._template_engine = create_template_engine(*search_path)
        return self._template_engine

    def build_bundles(self, reader: SchemaReader) -> List[ArtifactBundle]:
        """Read the configured schema and build one bundle per table."""
        return build_bundles(
            reader,
            self.config.table_schema,
            self.config.package_name,
            self.map_column_type,
        )

    def render_bundle(self, bundle: ArtifactBundle, staging_dir: Path) -> Path:
        """Render one bundle to ``<staging>/<origin table name><ext>``."""
        code = self.template_engine.render_template(
            self.config.model_template,
            bundle.to_context(),
            self.template_helpers(),
        )
        target = staging_dir / f"{bundle.origin_table_name}{self.file_extension}"
        with open(target, "w", encoding="utf-8") as f:
            f.write(code)
        logger.debug("Rendered %s", target.name)
        return target

    def render_all(self, bundles: List[ArtifactBundle], staging_dir: Path) -> List[Path]:
        """
        Render every bundle concurrently and wait for all of them.

        Raises:
            RenderError: If any unit failed; no partial result is returned
        """
        # Compile once up front so a bad template fails before fan-out
        try:
            self.template_engine.load(self.config.model_template)
        except TemplateError as e:
            raise RenderError(str(e)) from e

        with ThreadPoolExecutor(max_workers=max(1, self.config.max_workers)) as pool:
            futures = {
                bundle.origin_table_name: pool.submit(self.render_bundle, bundle, staging_dir)
                for bundle in bundles
            }

        paths = []
        failures = []
        for table_name, future in futures.items():
            error = future.exception()
            if error is not None:
                logger.error("Rendering %s failed: %s", table_name, error)
                failures.append(f"{table_name}: {error}")
            else:
                paths.append(future.result())

        if failures:
            raise RenderError(
                f"{len(failures)} of {len(bundles)} models failed to render: " + "; ".join(failures)
            )
        return paths

    def generate(self, engine: Engine) -> List[Path]:
        """
        Run the whole pipeline against an open engine.

        Returns:
            Paths of the files written to the output directory

        Raises:
            GeneratorError: From any stage except formatting
        """
        bundles = self.build_bundles(SchemaReader(engine))

        with staging_directory(self.config.work_dir, self.config.package_name) as staging_dir:
            rendered = self.render_all(bundles, staging_dir)
            logger.info("Rendered %d models into staging", len(rendered))

            self.formatted = self.get_formatter().format_directory(staging_dir)
            return promote(staging_dir, self.config.abs_path)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        files: List[Path],
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            files: Files written to the output directory
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.files = files
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message = None
        self.exception = None

    @classmethod
    def error(cls, message: str, exception: Exception = None) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(files=[])
        result.success = False
        result.error_message = message
        result.exception = exception
        return result


def generate_code(generator: CodeGenerator, engine: Engine) -> GenerationResult:
    """
    Generate models using the specified generator with error handling.

    Args:
        generator: Code generator instance
        engine: Open catalog engine

    Returns:
        GenerationResult with files, warnings, and metadata
    """
    try:
        files = generator.generate(engine)
    except GeneratorError as e:
        logger.error("Generation failed: %s", e)
        return GenerationResult.error(f"Code generation failed: {str(e)}", exception=e)

    warnings = []
    if not files:
        warnings.append(f"Schema '{generator.config.table_schema}' has no tables")
    if not generator.formatted:
        warnings.append("Generated files were not formatted")

    metadata = {
        "language": generator.language_name,
        "file_extension": generator.file_extension,
        "table_count": len(files),
        "table_schema": generator.config.table_schema,
        "output_dir": generator.config.abs_path,
        "formatted": generator.formatted,
    }
    return GenerationResult(files, warnings, metadata)


def has_field_type(fields: List[ModelField], type_name: str) -> bool:
    """Check whether any field has the given target type."""
    return any(f.type == type_name for f in fields)
