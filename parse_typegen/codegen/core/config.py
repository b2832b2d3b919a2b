"""
Configuration management for code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for generator settings.
"""

import json
from dataclasses import dataclass, field, fields, asdict
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from .errors import ConfigError
from .naming import NameResolver, ReferenceStyle

# Parse SDK entry point for each runtime environment.
ENVIRONMENT_MODULES: Dict[str, str] = {
    "node": "parse/node",
    "browser": "parse",
    "react-native": "parse/react-native",
}

ARTIFACT_NAMES = ("attributes", "classes", "declarations", "jsdoc")


@dataclass
class GeneratorConfig:
    """Configuration shared by all artifact generators."""

    # Built-in class overrides: {"_User": "CustomUser", "_Role": True}
    overrides: Dict[str, Union[bool, str, None]] = field(default_factory=dict)

    # Target runtime, selects the Parse import
    environment: str = "node"

    # How Pointer/Relation fields reference other classes
    reference_style: str = ReferenceStyle.BASE_CLASS.value

    # Output locations
    attributes_file: str = "types/parse-class-attributes.d.ts"
    classes_file: str = "types/parse-classes.ts"
    declarations_file: str = "types/parse-declarations.d.ts"
    jsdoc_file: str = "types/parse-classes.js"

    # Which artifacts write_artifacts produces
    artifacts: List[str] = field(default_factory=lambda: ["attributes", "classes"])

    # Header comment in generated files
    add_comments: bool = True

    # Custom settings
    custom: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if isinstance(self.reference_style, ReferenceStyle):
            self.reference_style = self.reference_style.value
        validate_config(self)

    @property
    def parse_module(self) -> str:
        """Module specifier the generated code imports Parse from."""
        return ENVIRONMENT_MODULES[self.environment]

    @property
    def style(self) -> ReferenceStyle:
        return ReferenceStyle(self.reference_style)

    def output_path(self, artifact: str) -> str:
        """Configured output file for an artifact name."""
        if artifact not in ARTIFACT_NAMES:
            raise ConfigError(f"Unknown artifact: {artifact}")
        return getattr(self, f"{artifact}_file")


def validate_config(config: GeneratorConfig) -> None:
    """
    Validate a configuration.

    Raises:
        ConfigError: On the first invalid setting
    """
    if config.environment not in ENVIRONMENT_MODULES:
        raise ConfigError(
            f"Invalid environment: {config.environment}. "
            f"Valid: {', '.join(ENVIRONMENT_MODULES)}"
        )

    valid_styles = {s.value for s in ReferenceStyle}
    if config.reference_style not in valid_styles:
        raise ConfigError(
            f"Invalid reference_style: {config.reference_style}. "
            f"Valid: {', '.join(sorted(valid_styles))}"
        )

    for artifact in config.artifacts:
        if artifact not in ARTIFACT_NAMES:
            raise ConfigError(
                f"Unknown artifact: {artifact}. Valid: {', '.join(ARTIFACT_NAMES)}"
            )

    # Rejects non built-in keys and non bool/str values
    NameResolver(config.overrides)


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = {}

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged and validated configuration
        """
        base_config = dict(self._defaults)

        if config_file:
            base_config.update(self._load_config_file(config_file))

        if custom_config:
            merged_overrides = dict(base_config.get("overrides") or {})
            merged_overrides.update(custom_config.get("overrides") or {})
            base_config.update(custom_config)
            if merged_overrides:
                base_config["overrides"] = merged_overrides

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
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Failed to load configuration file {path}: {e}") from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> GeneratorConfig:
        """Convert dictionary to GeneratorConfig instance."""
        known_fields = {f.name for f in fields(GeneratorConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        # Unknown keys land in custom
        if custom_args:
            existing_custom = dict(config_args.get("custom") or {})
            existing_custom.update(custom_args)
            config_args["custom"] = existing_custom

        return GeneratorConfig(**config_args)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e


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
    manager = get_config_manager()
    return manager.get_config(custom_config, config_file)


# Example configuration file for reference
EXAMPLE_CONFIG = {
    "overrides": {"_User": "CustomUser", "_Role": True, "_Session": False},
    "environment": "browser",
    "reference_style": "base_class",
    "attributes_file": "types/parse-class-attributes.d.ts",
    "classes_file": "types/parse-classes.ts",
    "artifacts": ["attributes", "classes", "declarations", "jsdoc"],
}
