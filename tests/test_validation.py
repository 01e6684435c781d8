"""Tests for validating JSON values against a JSONSchema."""

from __future__ import annotations

import pytest
from jsonschema import Draft202012Validator

from codec_schema.file_io.json_schema_document import to_json_document
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
    ObjectSchema,
    StringSchema,
    object_schema,
)
from codec_schema.validation import collect_issues, validate_according_to


A_REQUIRED_B_OPTIONAL = object_schema(
    ("a", KeyRequirement.REQUIRED, StringSchema()),
    ("b", KeyRequirement.OPTIONAL, NumberSchema()),
)


def test_string_scenario() -> None:
    assert validate_according_to("x", StringSchema())
    assert not validate_according_to(1, StringSchema())


@pytest.mark.parametrize(
    "schema,accepted,rejected",
    [
        (NullSchema(), [None], [0, False, "", [], {}]),
        (BoolSchema(), [True, False], [0, 1, "true", None]),
        (StringSchema(), ["", "x"], [1, None, ["x"]]),
        (NumberSchema(), [0, -1, 2.5], [True, False, "1", None]),
    ],
)
def test_primitives_match_their_kind_only(schema, accepted, rejected) -> None:
    for value in accepted:
        assert validate_according_to(value, schema), value
    for value in rejected:
        assert not validate_according_to(value, schema), value


@pytest.mark.parametrize("value", [None, True, 1, "x", [1, "a"], {"k": {}}])
def test_any_accepts_everything(value) -> None:
    assert validate_according_to(value, AnySchema())


def test_array_elements_must_all_match() -> None:
    schema = ArraySchema(NumberSchema())

    assert validate_according_to([], schema)
    assert validate_according_to([1, 2.5], schema)
    assert not validate_according_to([1, "2"], schema)
    assert not validate_according_to({"0": 1}, schema)
    assert not validate_according_to("12", schema)


def test_closed_object_rejects_undeclared_keys() -> None:
    schema = object_schema(("a", KeyRequirement.REQUIRED, StringSchema()))
    assert not validate_according_to({"a": "x", "b": 1}, schema)


def test_optional_field_may_be_omitted() -> None:
    assert validate_according_to({"a": "x"}, A_REQUIRED_B_OPTIONAL)


def test_optional_field_must_match_when_present() -> None:
    assert validate_according_to({"a": "x", "b": 2}, A_REQUIRED_B_OPTIONAL)
    assert not validate_according_to({"a": "x", "b": "2"}, A_REQUIRED_B_OPTIONAL)


def test_required_field_must_be_present() -> None:
    assert not validate_according_to({"b": 2}, A_REQUIRED_B_OPTIONAL)
    assert not validate_according_to({}, A_REQUIRED_B_OPTIONAL)


def test_key_declared_twice_must_match_every_declaration() -> None:
    # Not well-formed; validation still checks both entries.
    schema = object_schema(
        ("a", KeyRequirement.REQUIRED, StringSchema()),
        ("a", KeyRequirement.REQUIRED, NumberSchema()),
    )

    assert not validate_according_to({"a": "x"}, schema)
    assert not validate_according_to({"a": 1}, schema)
    assert [i.path for i in collect_issues({"a": "x"}, schema)] == ["/a"]


def test_empty_object_schema_accepts_only_empty_objects() -> None:
    assert validate_according_to({}, ObjectSchema(()))
    assert not validate_according_to({"a": 1}, ObjectSchema(()))
    assert not validate_according_to([], ObjectSchema(()))


def test_const_uses_structural_equality() -> None:
    assert validate_according_to(1.0, ConstSchema(1))
    assert not validate_according_to(True, ConstSchema(1))
    assert validate_according_to({"b": [1, None], "a": "x"}, ConstSchema({"a": "x", "b": [1, None]}))
    assert not validate_according_to({"a": "x"}, ConstSchema({"a": "x", "b": [1, None]}))
    assert validate_according_to(None, ConstSchema(None))


def test_choice_needs_one_matching_alternative() -> None:
    schema = ChoiceSchema((ConstSchema("circle"), ConstSchema("square"), NumberSchema()))

    assert validate_according_to("square", schema)
    assert validate_according_to(3, schema)
    assert not validate_according_to("triangle", schema)


def test_comment_delegates_to_inner_schema() -> None:
    schema = CommentSchema("ids", ArraySchema(NumberSchema()))
    assert validate_according_to([1], schema)
    assert not validate_according_to(["1"], schema)


def test_person(person_schema) -> None:
    assert validate_according_to({"name": "Ada", "tags": []}, person_schema)
    assert validate_according_to({"name": "Ada", "age": 36, "tags": ["x"]}, person_schema)
    assert not validate_according_to({"name": "Ada", "age": None, "tags": []}, person_schema)
    assert not validate_according_to({"name": "Ada", "tags": [1]}, person_schema)


class TestCollectIssues:
    def test_no_issues_for_valid_values(self) -> None:
        assert collect_issues({"a": "x"}, A_REQUIRED_B_OPTIONAL) == []

    def test_issue_paths_point_into_the_value(self) -> None:
        schema = ArraySchema(A_REQUIRED_B_OPTIONAL)

        issues = collect_issues([{"a": "x"}, {"a": 1, "c": True}, {}], schema)

        assert [(i.path, i.message) for i in issues] == [
            ("/1/c", "Unknown field 'c'"),
            ("/1/a", "Invalid type: expected string, got number"),
            ("/2/a", "Missing required field 'a'"),
        ]

    def test_keys_are_escaped_in_paths(self) -> None:
        issues = collect_issues({"x/y": 1}, ObjectSchema(()))
        assert issues[0].path == "/x~1y"

    def test_choice_reports_one_issue(self) -> None:
        issues = collect_issues(True, ChoiceSchema((StringSchema(), NumberSchema())))
        assert [i.message for i in issues] == ["Value does not match any allowed schema"]

    def test_root_issue_has_empty_path(self) -> None:
        issues = collect_issues("x", NumberSchema())
        assert issues[0].path == ""
        assert "expected number, got string" in issues[0].message

    def test_unknown_schema_variant_raises_type_error(self) -> None:
        with pytest.raises(TypeError, match="Unknown schema variant"):
            collect_issues(1, object())  # type: ignore[arg-type]


@pytest.mark.parametrize(
    "schema,value",
    [
        (StringSchema(), "x"),
        (StringSchema(), 1),
        (NumberSchema(), True),
        (ArraySchema(NumberSchema()), [1, 2.5]),
        (ArraySchema(NumberSchema()), [1, "a"]),
        (A_REQUIRED_B_OPTIONAL, {"a": "x"}),
        (A_REQUIRED_B_OPTIONAL, {"b": 1}),
        (A_REQUIRED_B_OPTIONAL, {"a": "x", "b": "y"}),
        (ChoiceSchema((StringSchema(), NullSchema())), None),
        (ChoiceSchema((StringSchema(), NullSchema())), 0),
        (ConstSchema("circle"), "square"),
        (CommentSchema("c", ConstSchema([1, {"a": None}])), [1, {"a": None}]),
    ],
)
def test_agrees_with_jsonschema_when_no_undeclared_keys(schema, value) -> None:
    # The emitted documents do not say additionalProperties: false, so only
    # values without undeclared keys are comparable.
    expected = Draft202012Validator(to_json_document(schema)).is_valid(value)
    assert validate_according_to(value, schema) == expected
