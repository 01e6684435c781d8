"""Tests for the JSONSchema tree and its well-formedness checks."""

from __future__ import annotations

import dataclasses

import pytest

from codec_schema.models.json_schema import (
    AnySchema,
    ArraySchema,
    BoolSchema,
    ChoiceSchema,
    CommentSchema,
    ConstSchema,
    KeyRequirement,
    NullSchema,
    NumberSchema,
    ObjectField,
    ObjectSchema,
    StringSchema,
    is_well_formed,
    object_schema,
    schema_issues,
    with_comment,
)


@pytest.mark.parametrize(
    "schema",
    [
        AnySchema(),
        NullSchema(),
        BoolSchema(),
        StringSchema(),
        NumberSchema(),
        ConstSchema({"a": [1, 2]}),
        ArraySchema(ChoiceSchema((StringSchema(), NullSchema()))),
        object_schema(
            ("a", KeyRequirement.REQUIRED, StringSchema()),
            ("b", KeyRequirement.OPTIONAL, CommentSchema("b", NumberSchema())),
        ),
        CommentSchema("top", ChoiceSchema((CommentSchema("x", StringSchema()), NumberSchema()))),
    ],
)
def test_well_formed_schemas_have_no_issues(schema) -> None:
    assert schema_issues(schema) == []
    assert is_well_formed(schema)


def test_nested_comment_is_reported() -> None:
    schema = CommentSchema("a", CommentSchema("b", StringSchema()))

    issues = schema_issues(schema)

    assert [i.message for i in issues] == ["Comment directly wraps another comment"]
    assert not is_well_formed(schema)


def test_comment_separated_by_another_node_is_fine() -> None:
    schema = CommentSchema("a", ArraySchema(CommentSchema("b", StringSchema())))
    assert is_well_formed(schema)


def test_duplicate_object_key_is_reported_with_path() -> None:
    schema = ArraySchema(
        object_schema(
            ("a", KeyRequirement.REQUIRED, StringSchema()),
            ("a", KeyRequirement.OPTIONAL, NumberSchema()),
        )
    )

    issues = schema_issues(schema)

    assert len(issues) == 1
    assert "Duplicate key 'a'" in issues[0].message
    assert issues[0].path == "/items/a"


@pytest.mark.parametrize("alternatives", [(), (StringSchema(),)])
def test_choice_with_fewer_than_two_alternatives_is_reported(alternatives) -> None:
    issues = schema_issues(ChoiceSchema(alternatives))
    assert len(issues) == 1
    assert "expected at least 2" in issues[0].message


def test_issues_are_found_deep_in_the_tree() -> None:
    schema = ChoiceSchema((StringSchema(), ArraySchema(ChoiceSchema((NullSchema(),)))))

    issues = schema_issues(schema)

    assert [i.path for i in issues] == ["/1/items"]


def test_constructors_do_not_enforce_invariants() -> None:
    # Only the oracle complains; building the tree never raises.
    CommentSchema("a", CommentSchema("b", AnySchema()))
    ChoiceSchema(())


def test_schemas_are_immutable_and_comparable() -> None:
    schema = ArraySchema(StringSchema())
    with pytest.raises(dataclasses.FrozenInstanceError):
        schema.element = NumberSchema()  # type: ignore[misc]
    assert schema == ArraySchema(StringSchema())
    assert hash(schema) == hash(ArraySchema(StringSchema()))


def test_object_schema_lookup_keeps_declared_order() -> None:
    schema = object_schema(
        ("z", KeyRequirement.OPTIONAL, StringSchema()),
        ("a", KeyRequirement.REQUIRED, NumberSchema()),
    )

    assert schema.keys == ("z", "a")
    assert schema.field_for("a") == ObjectField("a", KeyRequirement.REQUIRED, NumberSchema())
    assert schema.field_for("a").required
    assert not schema.field_for("z").required
    assert schema.field_for("missing") is None


def test_empty_object_schema() -> None:
    assert ObjectSchema() == ObjectSchema(())
    assert ObjectSchema().keys == ()


def test_with_comment_folds_into_existing_comment() -> None:
    assert with_comment(None, StringSchema()) == StringSchema()
    assert with_comment("a", StringSchema()) == CommentSchema("a", StringSchema())
    assert with_comment("a", CommentSchema("b", StringSchema())) == CommentSchema("a\nb", StringSchema())
    assert with_comment("a", CommentSchema("b", StringSchema()), separator=" / ") == CommentSchema(
        "a / b", StringSchema()
    )


def test_unknown_schema_variant_raises_type_error() -> None:
    with pytest.raises(TypeError, match="Unknown schema variant"):
        schema_issues("string")  # type: ignore[arg-type]
