"""
Go model generator implementation.

Generates one gorm-annotated Go struct per table, with JSON tags.
"""

from typing import Callable, Dict, List
from pathlib import Path

from ...core.generator import CodeGenerator, has_field_type
from ...core.formatter import SourceFormatter
from ...core.schema import ModelField
from .types import GO_TIME_TYPE, map_column_type

AUTO_UPDATE_TIME = "autoUpdateTime"
AUTO_CREATE_TIME = "autoCreateTime"


class GoModelGenerator(CodeGenerator):
    """Code generator for Go structs from database tables."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "go"

    @property
    def file_extension(self) -> str:
        """Return Go file extension."""
        return ".go"

    def get_template_directory(self) -> Path:
        """Return the Go templates directory."""
        return Path(__file__).parent / "templates"

    def map_column_type(self, db_type: str) -> str:
        return map_column_type(db_type)

    def get_formatter(self) -> SourceFormatter:
        return SourceFormatter(
            self.config.formatter,
            probable_cause="the generated sources may contain syntax errors from a custom template",
        )

    def template_helpers(self) -> Dict[str, Callable]:
        return {
            "is_import_time": self.is_import_time,
            "auto_time": self.auto_time,
        }

    def is_import_time(self, fields: List[ModelField]) -> bool:
        """True if the struct needs the ``time`` package."""
        return has_field_type(fields, GO_TIME_TYPE)

    def auto_time(self, field_name: str) -> str:
        """gorm time-tracking option for the configured marker fields."""
        if field_name == self.config.update_time:
            return AUTO_UPDATE_TIME
        if field_name == self.config.create_time:
            return AUTO_CREATE_TIME
        return ""
