"""
Core code generation components.

Provides the pipeline stages and base classes used by language generators.
"""

from .generator import CodeGenerator, GenerationResult, generate_code
from .exceptions import (
    GeneratorError,
    DatabaseConnectionError,
    SchemaReadError,
    TypeMappingError,
    RenderError,
    PromotionError,
)
from .schema import (
    TableInfo,
    Field,
    ModelTable,
    ModelField,
    ArtifactBundle,
    build_bundle,
    build_bundles,
)
from .naming import normalize_identifier, normalize_tag_name
from .config import GeneratorConfig, ConfigManager, ConfigError, load_config
from .reader import SchemaReader, connect_database
from .templates import TemplateEngine, TemplateError, create_template_engine
from .formatter import SourceFormatter
from .promoter import promote, staging_directory

__all__ = [
    # Base generator interface
    "CodeGenerator",
    "GenerationResult",
    "generate_code",
    # Error kinds
    "GeneratorError",
    "DatabaseConnectionError",
    "SchemaReadError",
    "TypeMappingError",
    "RenderError",
    "PromotionError",
    # Schema records
    "TableInfo",
    "Field",
    "ModelTable",
    "ModelField",
    "ArtifactBundle",
    "build_bundle",
    "build_bundles",
    # Naming utilities
    "normalize_identifier",
    "normalize_tag_name",
    # Configuration system
    "GeneratorConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Catalog access
    "SchemaReader",
    "connect_database",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
    # Post-processing and promotion
    "SourceFormatter",
    "promote",
    "staging_directory",
]
