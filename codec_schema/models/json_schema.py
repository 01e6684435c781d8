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

"""The JSONSchema tree.

A schema is an immutable tree of frozen dataclasses. Every node owns its
children exclusively; no sub-schema is shared between two parents.

Three invariants hold for every schema built by derivation or parsed from a
document:

* a ``CommentSchema`` never directly wraps another ``CommentSchema``;
* keys within one ``ObjectSchema`` are unique;
* every ``ChoiceSchema`` has at least two alternatives.

They are not enforced by the constructors. :func:`schema_issues` and
:func:`is_well_formed` check them after the fact.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Tuple, Union

from ..utils.json_value import join_pointer


JsonPointer = str


class KeyRequirement(Enum):
    REQUIRED = "required"
    OPTIONAL = "optional"


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    path: Optional[JsonPointer] = None


@dataclass(frozen=True)
class AnySchema:
    pass


@dataclass(frozen=True)
class NullSchema:
    pass


@dataclass(frozen=True)
class BoolSchema:
    pass


@dataclass(frozen=True)
class StringSchema:
    pass


@dataclass(frozen=True)
class NumberSchema:
    pass


@dataclass(frozen=True)
class ArraySchema:
    element: "JSONSchema"


@dataclass(frozen=True)
class ObjectField:
    key: str
    requirement: KeyRequirement
    schema: "JSONSchema"

    @property
    def required(self) -> bool:
        return self.requirement is KeyRequirement.REQUIRED


@dataclass(frozen=True)
class ObjectSchema:
    # A tuple rather than a mapping: field order is kept for documentation.
    fields: Tuple[ObjectField, ...] = ()

    def field_for(self, key: str) -> Optional[ObjectField]:
        for object_field in self.fields:
            if object_field.key == key:
                return object_field
        return None

    @property
    def keys(self) -> Tuple[str, ...]:
        return tuple(f.key for f in self.fields)


@dataclass(frozen=True)
class ConstSchema:
    value: Any


@dataclass(frozen=True)
class ChoiceSchema:
    alternatives: Tuple["JSONSchema", ...]


@dataclass(frozen=True)
class CommentSchema:
    comment: str
    schema: "JSONSchema"


JSONSchema = Union[
    AnySchema,
    NullSchema,
    BoolSchema,
    StringSchema,
    NumberSchema,
    ArraySchema,
    ObjectSchema,
    ConstSchema,
    ChoiceSchema,
    CommentSchema,
]

PRIMITIVE_SCHEMAS = (AnySchema, NullSchema, BoolSchema, StringSchema, NumberSchema, ConstSchema)


def object_schema(*fields: Tuple[str, KeyRequirement, JSONSchema]) -> ObjectSchema:
    """Build an ``ObjectSchema`` from ``(key, requirement, schema)`` triples."""
    return ObjectSchema(tuple(ObjectField(key, requirement, schema) for key, requirement, schema in fields))


def schema_issues(schema: JSONSchema, *, path: JsonPointer = "") -> List[SchemaIssue]:
    """Return every invariant violation found anywhere in *schema*."""
    if isinstance(schema, PRIMITIVE_SCHEMAS):
        return []

    if isinstance(schema, ArraySchema):
        return schema_issues(schema.element, path=join_pointer(path, "items"))

    if isinstance(schema, ObjectSchema):
        issues: List[SchemaIssue] = []
        seen = set()
        for object_field in schema.fields:
            if object_field.key in seen:
                issues.append(
                    SchemaIssue(
                        message=f"Duplicate key '{object_field.key}' in object schema",
                        path=join_pointer(path, object_field.key),
                    )
                )
            seen.add(object_field.key)
            issues.extend(schema_issues(object_field.schema, path=join_pointer(path, object_field.key)))
        return issues

    if isinstance(schema, ChoiceSchema):
        issues = []
        if len(schema.alternatives) < 2:
            issues.append(
                SchemaIssue(
                    message=f"Choice has {len(schema.alternatives)} alternative(s), expected at least 2",
                    path=path,
                )
            )
        for idx, alternative in enumerate(schema.alternatives):
            issues.extend(schema_issues(alternative, path=join_pointer(path, idx)))
        return issues

    if isinstance(schema, CommentSchema):
        issues = []
        if isinstance(schema.schema, CommentSchema):
            issues.append(SchemaIssue(message="Comment directly wraps another comment", path=path))
        issues.extend(schema_issues(schema.schema, path=path))
        return issues

    raise TypeError(f"Unknown schema variant: {type(schema).__name__}")


def is_well_formed(schema: JSONSchema) -> bool:
    return not schema_issues(schema)


def with_comment(text: Optional[str], schema: JSONSchema, *, separator: str = "\n") -> JSONSchema:
    """Wrap *schema* in a comment, folding into an existing top-level comment.

    ``with_comment("a", CommentSchema("b", s))`` gives ``CommentSchema("a<sep>b", s)``
    so that comments never nest.
    """
    if text is None:
        return schema
    if isinstance(schema, CommentSchema):
        return CommentSchema(f"{text}{separator}{schema.comment}", schema.schema)
    return CommentSchema(text, schema)
