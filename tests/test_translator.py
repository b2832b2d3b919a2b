"""Tests for translating schema entries into class descriptors."""

import pytest

from parse_typegen.codegen.core.errors import ConfigError, TargetKindError, TranslationError
from parse_typegen.codegen.core.naming import NameResolver, ReferenceStyle
from parse_typegen.codegen.core.schema import (
    ConstructorShape,
    convert_schema_entry,
    convert_schemas,
)
from parse_typegen.codegen.languages.typescript import RecordTranslator, create_translator


def _entry(schema, kind):
    return convert_schema_entry(next(raw for raw in schema if raw["className"] == kind))


def test_builtins_without_override_translate_to_none(schema):
    translator = RecordTranslator()

    assert translator.translate(_entry(schema, "_User")) is None
    assert translator.translate(_entry(schema, "_Session")) is None


def test_post_translation(schema):
    post = RecordTranslator().translate(_entry(schema, "Post"))

    assert post.name == "Post"
    assert post.base_class == "Parse.Object"
    assert post.attributes_name == "PostAttributes"
    assert post.heritage == "Parse.Object<PostAttributes>"
    assert post.attribute_lines == [
        "title?: string;",
        "content?: string;",
        "author?: Parse.User | null;",
        "tags?: SerializableArray;",
        "publishDate?: Date;",
        "editors?: Parse.Relation<Parse.Object<PostAttributes>, Parse.User> | null;",
    ]
    assert post.default_value_entries == []
    assert post.constructor.shape is ConstructorShape.GENERIC


def test_required_title_and_optional_author():
    entry = convert_schema_entry(
        {
            "className": "Post",
            "fields": {
                "title": {"type": "String", "required": True},
                "author": {"type": "Pointer", "targetClass": "_User"},
            },
        }
    )
    post = RecordTranslator().translate(entry)

    assert post.attribute_lines == ["title: string;", "author?: Parse.User | null;"]
    assert post.default_value_entries == ['title: ""']


def test_comment_post_pointer_class_name_style(schema):
    translator = create_translator(reference_style=ReferenceStyle.CLASS_NAME)
    comment = translator.translate(_entry(schema, "Comment"))

    assert "post: Post;" in comment.attribute_lines
    assert "post: null" in comment.default_value_entries


def test_comment_post_pointer_default_style(schema):
    comment = RecordTranslator().translate(_entry(schema, "Comment"))

    assert comment.attribute_lines == [
        "text: string;",
        "post: Parse.Object<PostAttributes>;",
        "author?: Parse.User | null;",
        "details?: SerializableObject;",
    ]
    assert comment.default_value_entries == ['text: ""', "post: null"]


def test_required_fields_never_nullable(schema):
    for raw in schema:
        for details in raw["fields"].values():
            details["required"] = True

    translator = create_translator({"_User": True, "_Session": True})
    for descriptor in translator.translate_all(convert_schemas(schema)):
        for attribute in descriptor.attributes:
            assert not attribute.optional
            assert "| null" not in attribute.type_expr


def test_session_with_true_override(schema):
    translator = create_translator({"_Session": True})
    session = translator.translate(_entry(schema, "_Session"))

    assert session.name == "_Session"
    assert session.base_class == "Parse.Session"
    assert session.attributes == ()
    assert session.constructor.shape is ConstructorShape.SESSION


def test_renamed_user(schema):
    translator = create_translator({"_User": "CustomUser"})
    user = translator.translate(_entry(schema, "_User"))

    assert user.name == "CustomUser"
    assert user.attributes_name == "CustomUserAttributes"
    assert user.heritage == "Parse.User<CustomUserAttributes>"
    assert user.constructor.shape is ConstructorShape.ACCOUNT


def test_renamed_user_propagates_to_references(schema):
    translator = create_translator({"_User": "CustomUser"})
    post = translator.translate(_entry(schema, "Post"))

    assert "author?: Parse.User<CustomUserAttributes> | null;" in post.attribute_lines


def test_role_constructor_shape():
    translator = create_translator({"_Role": True})
    role = translator.translate(convert_schema_entry({"className": "_Role", "fields": {}}))

    assert role.constructor.shape is ConstructorShape.ROLE


def test_implicit_fields_are_skipped():
    entry = convert_schema_entry(
        {
            "className": "Post",
            "fields": {
                "objectId": {"type": "String"},
                "createdAt": {"type": "Date"},
                "updatedAt": {"type": "Date"},
                "ACL": {"type": "ACL"},
                "title": {"type": "String"},
            },
        }
    )
    post = RecordTranslator().translate(entry)

    assert [a.name for a in post.attributes] == ["objectId", "title"]


def test_missing_target_raises_and_produces_no_descriptor():
    entry = convert_schema_entry(
        {"className": "Post", "fields": {"owner": {"type": "Pointer"}}}
    )

    with pytest.raises(TargetKindError):
        RecordTranslator().translate(entry)


def test_translate_all_wraps_errors():
    entries = convert_schemas(
        [
            {"className": "Post", "fields": {"title": {"type": "String"}}},
            {"className": "Broken", "fields": {"tags": {"type": "Relation"}}},
        ]
    )

    with pytest.raises(TranslationError) as excinfo:
        RecordTranslator().translate_all(entries)

    assert excinfo.value.kind == "Broken"
    assert isinstance(excinfo.value.__cause__, TargetKindError)


def test_translation_errors_are_config_errors():
    entries = convert_schemas([{"className": "Post", "fields": {"owner": {"type": "Pointer"}}}])

    with pytest.raises(ConfigError, match="Failed to translate 'Post'"):
        RecordTranslator().translate_all(entries)


def test_translate_all_keeps_order_and_drops_builtins(schema):
    descriptors = RecordTranslator().translate_all(convert_schemas(schema))

    assert [d.name for d in descriptors] == ["Post", "Comment"]


def test_unknown_kinds_collected_as_warnings():
    translator = RecordTranslator(NameResolver())
    translator.translate(
        convert_schema_entry({"className": "Post", "fields": {"blob": {"type": "Bytes"}}})
    )

    assert translator.warnings == ["Unknown type 'Bytes' for Post.blob, using any"]


@pytest.mark.parametrize(
    "raw",
    [
        {"fields": {}},
        {"className": "", "fields": {}},
        {"className": "Post", "fields": []},
        {"className": "Post", "fields": ""},
        {"className": "Post", "fields": 0},
        {"className": "Post", "fields": {"title": "String"}},
        "Post",
    ],
)
def test_malformed_entries_rejected(raw):
    with pytest.raises(ValueError):
        convert_schema_entry(raw)
