"""
Go model generator module.

Generates gorm-annotated Go structs from database table metadata.
"""

from .generator import GoModelGenerator, AUTO_CREATE_TIME, AUTO_UPDATE_TIME
from .types import GO_TIME_TYPE, GO_TYPE_MAP, map_column_type

__all__ = [
    "GoModelGenerator",
    "AUTO_CREATE_TIME",
    "AUTO_UPDATE_TIME",
    "GO_TIME_TYPE",
    "GO_TYPE_MAP",
    "map_column_type",
]
