from __future__ import annotations

import pytest

from codec_schema.utils.json_value import join_pointer, json_equal, json_kind


@pytest.mark.parametrize(
    "value,kind",
    [
        (None, "null"),
        (True, "boolean"),
        (False, "boolean"),
        (0, "number"),
        (1.5, "number"),
        ("x", "string"),
        ([], "array"),
        ({}, "object"),
        (object(), None),
    ],
)
def test_json_kind(value, kind) -> None:
    assert json_kind(value) == kind


def test_json_equal_distinguishes_booleans_from_numbers() -> None:
    assert not json_equal(True, 1)
    assert not json_equal(0, False)
    assert not json_equal([1], [True])
    assert json_equal(True, True)


def test_json_equal_compares_numbers_by_value() -> None:
    assert json_equal(1, 1.0)
    assert not json_equal(1, 2)


def test_json_equal_is_structural() -> None:
    assert json_equal({"a": [1, {"b": None}], "c": "x"}, {"c": "x", "a": [1, {"b": None}]})
    assert not json_equal({"a": 1}, {"a": 1, "b": 2})
    assert not json_equal([1, 2], [2, 1])
    assert not json_equal([1], [1, 1])


def test_join_pointer_escapes_tokens() -> None:
    assert join_pointer("", "a") == "/a"
    assert join_pointer("/a", 0) == "/a/0"
    assert join_pointer("/a", "x/y~z") == "/a/x~1y~0z"
