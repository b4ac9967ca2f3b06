"""
Configuration management for model generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
import os
from pathlib import Path
from typing import Dict, Any, Optional, Union
from dataclasses import dataclass, field, fields


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass
class GeneratorConfig:
    """Settings for a single generation run."""

    # Filesystem layout
    work_dir: str = field(default_factory=os.getcwd)
    path: str = ""  # defaults to work_dir
    package_name: str = "model"

    # Database settings
    table_schema: str = ""
    dsn: str = ""
    driver_name: str = "mysql+pymysql"

    # Rendering
    model_template: str = "model.tpl"
    create_time: str = "CreateTime"
    update_time: str = "UpdateTime"
    max_workers: int = 8

    # Post-processing; empty disables the formatter
    formatter: str = "gofmt -w"

    def __post_init__(self):
        if not self.path:
            self.path = self.work_dir

    @property
    def abs_path(self) -> str:
        """Final output directory: path joined with package name."""
        return os.path.normpath(os.path.join(self.path, self.package_name))

    def set_path(self, path: Union[str, Path]):
        self.path = str(path)

    def set_package_name(self, package_name: str):
        self.package_name = package_name

    def set_database(self, database: str):
        self.table_schema = database

    def set_dsn(self, dsn: str):
        self.dsn = dsn

    def set_driver_name(self, driver_name: str):
        self.driver_name = driver_name

    def set_template(self, template_name: str):
        self.model_template = template_name

    def set_create_time(self, field_name: str):
        self.create_time = field_name

    def set_update_time(self, field_name: str):
        self.update_time = field_name

    def to_dict(self) -> Dict[str, Any]:
        """Return the settable fields as a plain dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


class ConfigManager:
    """Manages configuration loading and merging."""

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Build a configuration from defaults, a JSON file and overrides.

        Args:
            custom_config: Explicit overrides (highest priority)
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config: Dict[str, Any] = {}

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            # None means "not given" for CLI-sourced overrides
            base_config.update(
                {key: value for key, value in custom_config.items() if value is not None}
            )

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {str(e)}")
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {str(e)}")

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}
        unknown = sorted(set(config_dict) - known_fields)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        return GeneratorConfig(**config_dict)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {str(e)}")

    def validate_config(self, config: GeneratorConfig) -> list[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        if not config.table_schema:
            warnings.append("No database schema configured")
        if not config.dsn:
            warnings.append("No connection string configured")
        if not config.package_name.isidentifier():
            warnings.append(f"Invalid Go package name: {config.package_name}")
        if config.max_workers < 1:
            warnings.append(f"Invalid max_workers: {config.max_workers}")

        return warnings

    def require_complete(self, config: GeneratorConfig):
        """Raise ConfigError if settings needed to connect are missing."""
        missing = []
        if not config.table_schema:
            missing.append("table_schema")
        if not config.dsn:
            missing.append("dsn")
        if missing:
            raise ConfigError(f"Missing required settings: {', '.join(missing)}")


# Global configuration manager instance
_config_manager = None


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return get_config_manager().get_config(custom_config, config_file)
