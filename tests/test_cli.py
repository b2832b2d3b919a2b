"""Tests for the parse-typegen command line interface."""

import json
from unittest.mock import patch

import pytest
from rich.console import Console

from parse_typegen import cli
from parse_typegen.cli import build_config, build_parser, main, parse_override


@pytest.fixture
def schema_file(tmp_path, schema):
    path = tmp_path / "schema.json"
    path.write_text(json.dumps(schema), encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def no_parse_env(monkeypatch):
    for name in ("PARSE_SERVER_URL", "PARSE_APP_ID", "PARSE_MASTER_KEY"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def wide_console(monkeypatch):
    # Messages must not be wrapped for substring checks
    monkeypatch.setattr(cli, "console", Console(width=200))


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("TRUE", True), ("false", False), ("CustomUser", "CustomUser")],
)
def test_parse_override(value, expected):
    assert parse_override(value) == expected


def test_build_config_from_arguments(tmp_path):
    args = build_parser().parse_args(
        [
            "--schema-file", "schema.json",
            "--out-dir", str(tmp_path / "out"),
            "--classes-file", "src/classes.ts",
            "--user", "CustomUser",
            "--session", "true",
            "--env", "browser",
            "--reference-style", "class_name",
            "--artifacts", "attributes", "classes", "jsdoc",
            "--no-comments",
        ]
    )

    config = build_config(args)

    assert config.overrides == {"_User": "CustomUser", "_Session": True}
    assert config.environment == "browser"
    assert config.reference_style == "class_name"
    assert config.artifacts == ["attributes", "classes", "jsdoc"]
    assert config.add_comments is False
    assert config.classes_file == "src/classes.ts"
    assert config.attributes_file == str(tmp_path / "out" / "parse-class-attributes.d.ts")


def test_writes_artifacts(tmp_path, schema_file):
    out_dir = tmp_path / "types"

    exit_code = main(
        ["--schema-file", str(schema_file), "--out-dir", str(out_dir), "--user", "CustomUser"]
    )

    assert exit_code == 0
    classes = (out_dir / "parse-classes.ts").read_text(encoding="utf-8")
    assert "class CustomUser extends Parse.User<CustomUserAttributes> {" in classes
    assert (out_dir / "parse-class-attributes.d.ts").exists()
    assert not (out_dir / "parse-declarations.d.ts").exists()


def test_print_artifact(tmp_path, schema_file, capsys):
    exit_code = main(["--schema-file", str(schema_file), "--print", "dts"])

    assert exit_code == 0
    assert "export interface Post extends" in capsys.readouterr().out
    assert not (tmp_path / "types").exists()


def test_list_artifacts(capsys):
    assert main(["--list-artifacts"]) == 0

    output = capsys.readouterr().out
    for artifact in ("attributes", "classes", "declarations", "jsdoc"):
        assert artifact in output


def test_requires_input(capsys):
    assert main([]) == 1
    assert "Input source required" in capsys.readouterr().out


def test_missing_schema_file(tmp_path, capsys):
    assert main(["--schema-file", str(tmp_path / "missing.json")]) == 1
    assert "Failed to load schemas" in capsys.readouterr().out


def test_server_requires_credentials(capsys):
    with patch("parse_typegen.utils.requests.get") as mock_get:
        exit_code = main(["--server-url", "https://example.com/parse"])

    assert exit_code == 1
    mock_get.assert_not_called()
    assert "Missing required parameters" in capsys.readouterr().out


def test_missing_config_file(schema_file, capsys):
    exit_code = main(["--schema-file", str(schema_file), "--env", "node", "--config", "nope.json"])

    assert exit_code == 1
    assert "Configuration file not found" in capsys.readouterr().out


def test_translation_error_exit_code(tmp_path, capsys):
    path = tmp_path / "schema.json"
    path.write_text(
        json.dumps([{"className": "Post", "fields": {"owner": {"type": "Pointer"}}}]),
        encoding="utf-8",
    )

    assert main(["--schema-file", str(path), "--out-dir", str(tmp_path / "out")]) == 1
    assert "Target kind required" in capsys.readouterr().out
