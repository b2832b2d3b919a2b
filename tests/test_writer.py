"""Tests for writing artifacts to disk."""

import pytest

from parse_typegen.codegen import ParseClassGenerator, save_to_file
from parse_typegen.codegen.core.errors import RegistryError, TranslationError


def test_save_to_file_creates_parents(tmp_path):
    path = tmp_path / "a" / "b" / "out.ts"

    written = save_to_file(path, "export {};\n")

    assert written == path
    assert path.read_text(encoding="utf-8") == "export {};\n"


def test_write_artifacts(schema, out_config):
    generator = ParseClassGenerator(out_config)

    results = generator.write_artifacts(schema)

    assert list(results) == ["attributes", "classes"]
    attributes = (out_config.attributes_file, "export interface PostAttributes {")
    classes = (out_config.classes_file, 'from "./parse-class-attributes";')
    for path, expected in (attributes, classes):
        with open(path, encoding="utf-8") as f:
            assert expected in f.read()
    assert results["classes"].metadata["output_path"] == out_config.classes_file


def test_write_every_artifact_with_aliases(schema, out_config):
    generator = ParseClassGenerator(out_config)

    results = generator.write_artifacts(schema, ["attrs", "ts", "dts", "js"])

    assert list(results) == ["attributes", "classes", "declarations", "jsdoc"]
    with open(out_config.jsdoc_file, encoding="utf-8") as f:
        assert 'import("./parse-class-attributes").PostAttributes' in f.read()


def test_write_artifacts_collects_translation_warnings(out_config):
    schema = [{"className": "Post", "fields": {"blob": {"type": "Bytes"}}}]

    results = ParseClassGenerator(out_config).write_artifacts(schema, ["classes"])

    assert "Unknown type 'Bytes' for Post.blob, using any" in results["classes"].warnings


def test_write_artifacts_is_idempotent(schema, out_config):
    generator = ParseClassGenerator(out_config)

    generator.write_artifacts(schema)
    with open(out_config.classes_file, encoding="utf-8") as f:
        first = f.read()
    ParseClassGenerator(out_config).write_artifacts(schema)
    with open(out_config.classes_file, encoding="utf-8") as f:
        assert f.read() == first


def test_translation_failure_writes_nothing(tmp_path, out_config):
    schema = [{"className": "Post", "fields": {"owner": {"type": "Pointer"}}}]

    with pytest.raises(TranslationError):
        ParseClassGenerator(out_config).write_artifacts(schema)

    assert not (tmp_path / "types").exists()


def test_unknown_artifact(schema, out_config):
    with pytest.raises(RegistryError):
        ParseClassGenerator(out_config).write_artifacts(schema, ["python"])


def test_repeated_writes_report_each_warning_once(out_config):
    schema = [{"className": "Loose", "fields": {"blob": {"type": "Bytes"}}}]
    generator = ParseClassGenerator(out_config)

    first = generator.write_artifacts(schema, ["attributes"])["attributes"]
    second = generator.write_artifacts(schema, ["attributes"])["attributes"]

    unknown = "Unknown type 'Bytes' for Loose.blob, using any"
    assert first.warnings.count(unknown) == 1
    assert second.warnings == first.warnings
    assert generator.warnings == [unknown]
