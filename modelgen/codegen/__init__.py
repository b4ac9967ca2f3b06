"""
Model Generation Module

Generates Go model files from a database schema.
"""

from .core.generator import CodeGenerator, GenerationResult, generate_code
from .core.exceptions import GeneratorError
from .core.config import GeneratorConfig, ConfigManager, load_config
from .core.reader import connect_database
from .languages.go import GoModelGenerator


def generate_models(config: GeneratorConfig) -> GenerationResult:
    """
    Connect to the configured catalog and generate one model per table.

    Args:
        config: Complete generator configuration

    Returns:
        GenerationResult with the promoted files

    Raises:
        DatabaseConnectionError: If the catalog cannot be reached
    """
    engine = connect_database(config)
    try:
        return generate_code(GoModelGenerator(config), engine)
    finally:
        engine.dispose()


__all__ = [
    "CodeGenerator",
    "GenerationResult",
    "GeneratorError",
    "GeneratorConfig",
    "ConfigManager",
    "GoModelGenerator",
    "connect_database",
    "generate_code",
    "generate_models",
    "load_config",
]
