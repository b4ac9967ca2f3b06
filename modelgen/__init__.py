"""modelgen: generate Go model structs from a MySQL schema."""

from .codegen import (
    GeneratorConfig,
    GenerationResult,
    GoModelGenerator,
    generate_models,
    load_config,
)

__version__ = "0.1.0"

__all__ = [
    "GeneratorConfig",
    "GenerationResult",
    "GoModelGenerator",
    "generate_models",
    "load_config",
    "__version__",
]
