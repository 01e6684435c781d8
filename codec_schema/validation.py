# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Check JSON values against a JSONSchema.

Objects are closed: a key the schema does not declare makes the value invalid.
An optional key may be absent, but when present its value must match.
"""

from __future__ import annotations

from typing import Any, List

from .models.json_schema import (
    AnySchema,
    ArraySchema,
    BoolSchema,
    ChoiceSchema,
    CommentSchema,
    ConstSchema,
    JSONSchema,
    JsonPointer,
    NullSchema,
    NumberSchema,
    ObjectSchema,
    SchemaIssue,
    StringSchema,
)
from .utils.json_value import (
    JSON_ARRAY,
    JSON_BOOLEAN,
    JSON_NULL,
    JSON_NUMBER,
    JSON_OBJECT,
    JSON_STRING,
    join_pointer,
    json_equal,
    json_kind,
)

_PRIMITIVE_KINDS = {
    NullSchema: JSON_NULL,
    BoolSchema: JSON_BOOLEAN,
    StringSchema: JSON_STRING,
    NumberSchema: JSON_NUMBER,
}


def validate_according_to(value: Any, schema: JSONSchema) -> bool:
    """Return True if *value* is accepted by *schema*."""
    return not collect_issues(value, schema)


def collect_issues(value: Any, schema: JSONSchema, *, path: JsonPointer = "") -> List[SchemaIssue]:
    """Return the reasons *value* is rejected by *schema*; empty if it is accepted."""
    if isinstance(schema, AnySchema):
        return []

    if type(schema) in _PRIMITIVE_KINDS:
        expected = _PRIMITIVE_KINDS[type(schema)]
        if json_kind(value) != expected:
            return [SchemaIssue(message=f"Invalid type: expected {expected}, got {_describe(value)}", path=path)]
        return []

    if isinstance(schema, ArraySchema):
        if json_kind(value) != JSON_ARRAY:
            return [SchemaIssue(message=f"Invalid type: expected array, got {_describe(value)}", path=path)]
        issues: List[SchemaIssue] = []
        for idx, item in enumerate(value):
            issues.extend(collect_issues(item, schema.element, path=join_pointer(path, idx)))
        return issues

    if isinstance(schema, ObjectSchema):
        return _collect_object_issues(value, schema, path=path)

    if isinstance(schema, ConstSchema):
        if not json_equal(value, schema.value):
            return [SchemaIssue(message=f"Value does not equal constant {schema.value!r}", path=path)]
        return []

    if isinstance(schema, ChoiceSchema):
        for alternative in schema.alternatives:
            if not collect_issues(value, alternative, path=path):
                return []
        return [SchemaIssue(message="Value does not match any allowed schema", path=path)]

    if isinstance(schema, CommentSchema):
        return collect_issues(value, schema.schema, path=path)

    raise TypeError(f"Unknown schema variant: {type(schema).__name__}")


def _collect_object_issues(value: Any, schema: ObjectSchema, *, path: JsonPointer) -> List[SchemaIssue]:
    if json_kind(value) != JSON_OBJECT:
        return [SchemaIssue(message=f"Invalid type: expected object, got {_describe(value)}", path=path)]

    issues: List[SchemaIssue] = []
    declared = set(schema.keys)
    for key in value:
        if key not in declared:
            issues.append(SchemaIssue(message=f"Unknown field '{key}'", path=join_pointer(path, key)))

    # Every declared entry is checked, so a key declared twice must satisfy both schemas.
    for object_field in schema.fields:
        if object_field.key in value:
            issues.extend(
                collect_issues(value[object_field.key], object_field.schema, path=join_pointer(path, object_field.key))
            )
        elif object_field.required:
            issues.append(
                SchemaIssue(
                    message=f"Missing required field '{object_field.key}'",
                    path=join_pointer(path, object_field.key),
                )
            )
    return issues


def _describe(value: Any) -> str:
    return json_kind(value) or type(value).__name__
