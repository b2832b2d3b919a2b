"""Tests for the artifact generator registry."""

import pytest

from parse_typegen.codegen import GeneratorConfig
from parse_typegen.codegen.core.errors import RegistryError
from parse_typegen.codegen.languages.typescript import (
    ClassesGenerator,
    DeclarationsGenerator,
)
from parse_typegen.codegen.registry import (
    GeneratorRegistry,
    get_artifact_info,
    get_generator,
    is_artifact_supported,
    list_all_artifact_info,
    list_supported_artifacts,
)


def test_builtin_artifacts_registered():
    assert list_supported_artifacts() == ["attributes", "classes", "declarations", "jsdoc"]


@pytest.mark.parametrize(
    "alias, artifact",
    [("attrs", "attributes"), ("ts", "classes"), ("DTS", "declarations"), ("js", "jsdoc")],
)
def test_aliases_resolve(alias, artifact):
    assert is_artifact_supported(alias)
    assert get_generator(alias).artifact_name == artifact


def test_unknown_artifact():
    assert not is_artifact_supported("python")
    with pytest.raises(RegistryError, match="Available: attributes, classes"):
        get_generator("python")


def test_create_generator_with_dict_config():
    generator = get_generator("classes", {"environment": "browser"})

    assert isinstance(generator, ClassesGenerator)
    assert generator.config.parse_module == "parse"


def test_invalid_config_type():
    with pytest.raises(RegistryError, match="Invalid config type"):
        get_generator("classes", 42)


def test_artifact_info():
    info = get_artifact_info("ts")

    assert info["name"] == "classes"
    assert info["class"] == "ClassesGenerator"
    assert info["file_extension"] == ".ts"
    assert info["default_path"] == "types/parse-classes.ts"
    assert info["aliases"] == ["ts"]
    assert set(list_all_artifact_info()) == {"attributes", "classes", "declarations", "jsdoc"}


def test_register_rejects_non_generators():
    registry = GeneratorRegistry()

    with pytest.raises(RegistryError, match="inherit from CodeGenerator"):
        registry.register("bogus", dict)


def test_register_alias_conflicts():
    registry = GeneratorRegistry()
    registry.register("classes", ClassesGenerator, aliases=["ts"])

    with pytest.raises(RegistryError, match="already points to"):
        registry.register("declarations", DeclarationsGenerator, aliases=["ts"])
    with pytest.raises(RegistryError, match="conflicts with existing primary"):
        registry.register("dts", DeclarationsGenerator, aliases=["classes"])


def test_register_without_replace_keeps_existing():
    registry = GeneratorRegistry()
    registry.register("classes", ClassesGenerator)
    registry.register("classes", DeclarationsGenerator)

    assert registry.get_generator_class("classes") is ClassesGenerator

    registry.register("classes", DeclarationsGenerator, replace=True)
    assert registry.get_generator_class("classes") is DeclarationsGenerator


def test_unregister_removes_aliases():
    registry = GeneratorRegistry()
    registry.register("classes", ClassesGenerator, aliases=["ts"])
    registry.unregister("classes")

    assert registry.list_artifacts() == []
    assert not registry.is_supported("ts")
    assert registry.get_aliases_for_artifact("classes") == []


def test_create_generator_keeps_config_instance():
    registry = GeneratorRegistry()
    registry.register("classes", ClassesGenerator)
    config = GeneratorConfig(add_comments=False)

    assert registry.create_generator("classes", config).config is config
