"""
Naming utilities for model generation.

Converts snake_case database identifiers into exported Go identifiers
and camelCase serialization keys.
"""

# Identifiers that are rendered fully upper-case instead of title-cased
UPPERCASE_IDENTIFIERS = {"id"}


def _upper_first(segment: str) -> str:
    """Upcase the first letter of a segment, leaving the rest untouched."""
    return segment[:1].upper() + segment[1:]


def normalize_identifier(raw: str) -> str:
    """
    Convert a database identifier into an exported identifier.

    ``user_name`` becomes ``UserName``; ``id`` (in any casing) becomes ``ID``.

    Args:
        raw: Raw column or table name

    Returns:
        PascalCase identifier with underscores removed
    """
    if raw.lower() in UPPERCASE_IDENTIFIERS:
        return raw.upper()

    return "".join(_upper_first(segment) for segment in raw.split("_"))


def normalize_tag_name(raw: str) -> str:
    """
    Convert a database identifier into a camelCase tag key.

    Must be called with the raw column name: ``create_time`` -> ``createTime``.
    """
    first, *rest = raw.split("_")
    return first.lower() + "".join(_upper_first(segment) for segment in rest)
