"""
Exception classes for model generation stages.
"""


class GeneratorError(Exception):
    """Base exception for code generation errors."""

    pass


class DatabaseConnectionError(GeneratorError):
    """Exception raised when the catalog cannot be opened or pinged."""

    pass


class SchemaReadError(GeneratorError):
    """Exception raised when a metadata query or row decode fails."""

    pass


class TypeMappingError(GeneratorError):
    """Exception raised for a column type with no target type."""

    pass


class RenderError(GeneratorError):
    """Exception raised when one or more model files fail to render."""

    pass


class PromotionError(GeneratorError):
    """Exception raised when generated files cannot be moved into place."""

    pass
