"""
Generator registry system for managing available artifact generators.

Provides dynamic registration and instantiation of artifact generators.
"""

from typing import Dict, Type, Optional, Any, List, Union
from pathlib import Path

from .core.generator import CodeGenerator
from .core.config import GeneratorConfig, load_config, validate_config
from .core.errors import RegistryError

ARTIFACT_ALIASES: Dict[str, List[str]] = {
    "attributes": ["attrs"],
    "classes": ["ts"],
    "declarations": ["dts"],
    "jsdoc": ["js"],
}


class GeneratorRegistry:
    """Registry for managing available artifact generators."""

    def __init__(self):
        """Initialize empty registry."""
        self._generators: Dict[str, Type[CodeGenerator]] = {}
        self._aliases: Dict[str, str] = {}

    def register(
        self,
        artifact: str,
        generator_class: Type[CodeGenerator],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a generator for an artifact.

        Args:
            artifact: Primary artifact name (e.g., 'attributes', 'classes')
            generator_class: Generator class implementing CodeGenerator
            aliases: Alternative names for this artifact
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If generator class is invalid or conflicts exist
        """
        if not isinstance(generator_class, type) or not issubclass(
            generator_class, CodeGenerator
        ):
            raise RegistryError("Generator class must inherit from CodeGenerator")

        artifact_key = artifact.lower()

        if artifact_key in self._generators and not replace:
            return

        self._generators[artifact_key] = generator_class

        for alias in aliases or []:
            alias_key = alias.lower()

            if alias_key == artifact_key:
                continue

            if not replace:
                if alias_key in self._generators:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing primary artifact"
                    )
                if (
                    alias_key in self._aliases
                    and self._aliases[alias_key] != artifact_key
                ):
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )

            self._aliases[alias_key] = artifact_key

    def unregister(self, artifact: str):
        """
        Unregister a generator and its aliases.

        Args:
            artifact: Artifact name to unregister
        """
        artifact_key = artifact.lower()
        self._generators.pop(artifact_key, None)

        aliases_to_remove = [
            alias for alias, target in self._aliases.items() if target == artifact_key
        ]
        for alias in aliases_to_remove:
            del self._aliases[alias]

    def resolve(self, artifact: str) -> str:
        """
        Resolve an artifact name or alias to its primary name.

        Raises:
            RegistryError: If artifact not found
        """
        artifact_key = artifact.lower()

        if artifact_key in self._generators:
            return artifact_key

        if artifact_key in self._aliases:
            return self._aliases[artifact_key]

        available = self.list_artifacts()
        raise RegistryError(
            f"No generator registered for artifact: {artifact}. "
            f"Available: {', '.join(available)}"
        )

    def get_generator_class(self, artifact: str) -> Type[CodeGenerator]:
        """Get generator class for an artifact name or alias."""
        return self._generators[self.resolve(artifact)]

    def create_generator(
        self,
        artifact: str,
        config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
    ) -> CodeGenerator:
        """
        Create generator instance for an artifact.

        Args:
            artifact: Artifact name
            config: Configuration as GeneratorConfig, dict, or file path

        Returns:
            Configured generator instance

        Raises:
            RegistryError: If the artifact is unknown or the config type is invalid
            ConfigError: If the configuration is invalid
        """
        generator_class = self.get_generator_class(artifact)

        if isinstance(config, GeneratorConfig):
            validate_config(config)
            final_config = config
        elif isinstance(config, (str, Path)):
            final_config = load_config(config_file=config)
        elif isinstance(config, dict):
            final_config = load_config(custom_config=config)
        elif config is None:
            final_config = load_config()
        else:
            raise RegistryError(f"Invalid config type: {type(config)}")

        return generator_class(final_config)

    def list_artifacts(self) -> List[str]:
        """Get list of registered primary artifact names."""
        return sorted(self._generators.keys())

    def get_aliases_for_artifact(self, artifact: str) -> List[str]:
        """Get all aliases for a specific artifact."""
        artifact_key = artifact.lower()
        return sorted(
            alias for alias, target in self._aliases.items() if target == artifact_key
        )

    def is_supported(self, artifact: str) -> bool:
        """Check if an artifact name or alias is registered."""
        artifact_key = artifact.lower()
        return artifact_key in self._generators or artifact_key in self._aliases

    def get_artifact_info(self, artifact: str) -> Dict[str, Any]:
        """
        Get information about a registered artifact.

        Raises:
            RegistryError: If artifact not found
        """
        artifact_key = self.resolve(artifact)
        generator = self.create_generator(artifact_key, GeneratorConfig())

        return {
            "name": generator.artifact_name,
            "class": type(generator).__name__,
            "file_extension": generator.file_extension,
            "default_path": generator.default_output_path,
            "aliases": self.get_aliases_for_artifact(artifact_key),
            "description": (type(generator).__doc__ or "").strip(),
        }


# Global registry instance - created once
_global_registry: Optional[GeneratorRegistry] = None


def get_registry() -> GeneratorRegistry:
    """Get the global generator registry, initializing if needed."""
    global _global_registry
    if _global_registry is None:
        _global_registry = GeneratorRegistry()
        _auto_register_generators(_global_registry)
    return _global_registry


def _auto_register_generators(registry: GeneratorRegistry):
    """Register the built-in artifact generators with their aliases."""
    from .languages.typescript import GENERATORS

    for artifact, generator_class in GENERATORS.items():
        registry.register(artifact, generator_class, aliases=ARTIFACT_ALIASES.get(artifact))


# Public API functions using the global registry


def get_generator(
    artifact: str,
    config: Optional[Union[GeneratorConfig, Dict[str, Any], str, Path]] = None,
) -> CodeGenerator:
    """Get generator instance from global registry."""
    return get_registry().create_generator(artifact, config)


def list_supported_artifacts() -> List[str]:
    """List all supported artifacts from global registry."""
    return get_registry().list_artifacts()


def is_artifact_supported(artifact: str) -> bool:
    """Check if artifact is supported by global registry."""
    return get_registry().is_supported(artifact)


def get_artifact_info(artifact: str) -> Dict[str, Any]:
    """Get information about a supported artifact."""
    return get_registry().get_artifact_info(artifact)


def list_all_artifact_info() -> Dict[str, Dict[str, Any]]:
    """Get information about all supported artifacts."""
    return {
        artifact: get_artifact_info(artifact) for artifact in list_supported_artifacts()
    }
