"""Shared fixtures: a small Parse schema with a user-defined pair of classes
and two built-ins."""

import copy

import pytest

from parse_typegen.codegen import GeneratorConfig

TEST_SCHEMA = [
    {
        "className": "Post",
        "fields": {
            "title": {"type": "String"},
            "content": {"type": "String"},
            "author": {"type": "Pointer", "targetClass": "_User"},
            "tags": {"type": "Array"},
            "publishDate": {"type": "Date"},
            "editors": {"type": "Relation", "targetClass": "_User"},
        },
        "classLevelPermissions": {},
    },
    {
        "className": "Comment",
        "fields": {
            "text": {"type": "String", "required": True},
            "post": {"type": "Pointer", "targetClass": "Post", "required": True},
            "author": {"type": "Pointer", "targetClass": "_User"},
            "details": {"type": "Object"},
        },
        "classLevelPermissions": {},
    },
    {
        "className": "_User",
        "fields": {
            "username": {"type": "String"},
            "email": {"type": "String"},
            "emailVerified": {"type": "Boolean"},
            "age": {"type": "Number"},
        },
        "classLevelPermissions": {},
    },
    {
        "className": "_Session",
        "fields": {},
        "classLevelPermissions": {},
    },
]


@pytest.fixture
def schema():
    """A fresh copy of the test schema for each test."""
    return copy.deepcopy(TEST_SCHEMA)


@pytest.fixture
def out_config(tmp_path):
    """Configuration writing every artifact below tmp_path/types."""
    types_dir = tmp_path / "types"
    return GeneratorConfig(
        attributes_file=str(types_dir / "parse-class-attributes.d.ts"),
        classes_file=str(types_dir / "parse-classes.ts"),
        declarations_file=str(types_dir / "parse-declarations.d.ts"),
        jsdoc_file=str(types_dir / "parse-classes.js"),
    )
