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

"""JSON Schema wire format for JSONSchema trees.

Only the keywords this package emits are understood: ``type``, ``items``,
``properties``, ``required``, ``const``, ``anyOf`` and ``$comment``. Any
other keyword is ignored when reading a document.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from jsonschema import Draft202012Validator

from ..config import schema_config
from ..exceptions import DocumentLoadError, SchemaParseError
from ..models.json_schema import (
    AnySchema,
    ArraySchema,
    BoolSchema,
    ChoiceSchema,
    CommentSchema,
    ConstSchema,
    JSONSchema,
    KeyRequirement,
    NullSchema,
    NumberSchema,
    ObjectField,
    ObjectSchema,
    SchemaIssue,
    StringSchema,
    with_comment,
)
from ..utils.json_value import join_pointer, json_kind

logger = logging.getLogger(__name__)

JsonDocument = Dict[str, Any]

_PRIMITIVE_TYPES = {
    NullSchema: "null",
    BoolSchema: "boolean",
    StringSchema: "string",
    NumberSchema: "number",
}

_PRIMITIVE_SCHEMAS = {name: schema_type for schema_type, name in _PRIMITIVE_TYPES.items()}

YAML_SUFFIXES = (".yaml", ".yml")


# ---- serialize --------------------------------------------------------------


def to_json_document(schema: JSONSchema) -> JsonDocument:
    """Serialize *schema* to a JSON Schema document. Never fails."""
    if isinstance(schema, AnySchema):
        return {}

    if type(schema) in _PRIMITIVE_TYPES:
        return {"type": _PRIMITIVE_TYPES[type(schema)]}

    if isinstance(schema, ArraySchema):
        return {"type": "array", "items": to_json_document(schema.element)}

    if isinstance(schema, ObjectSchema):
        if not schema.fields:
            return {"type": "object"}
        document: JsonDocument = {
            "type": "object",
            "properties": {f.key: to_json_document(f.schema) for f in schema.fields},
        }
        required = [f.key for f in schema.fields if f.required]
        if required:
            document["required"] = required
        return document

    if isinstance(schema, ConstSchema):
        return {"const": copy.deepcopy(schema.value)}

    if isinstance(schema, ChoiceSchema):
        return {"anyOf": [to_json_document(alternative) for alternative in schema.alternatives]}

    if isinstance(schema, CommentSchema):
        # Every inner document is a JSON object, so the comment key merges into it.
        return {"$comment": schema.comment, **to_json_document(schema.schema)}

    raise TypeError(f"Unknown schema variant: {type(schema).__name__}")


# ---- parse ------------------------------------------------------------------


def from_json_document(document: Any) -> JSONSchema:
    """Read a JSON Schema document back into a schema.

    Raises:
        SchemaParseError: If the document uses a ``type`` or a shape this
            package does not emit.
    """
    logger.debug(f"Parsing JSON Schema document of kind {json_kind(document)}")
    return _parse(document, path="")


def _parse(document: Any, *, path: str) -> JSONSchema:
    if not isinstance(document, dict):
        raise SchemaParseError(
            f"JSON Schema document must be an object, got {json_kind(document) or type(document).__name__}"
            f" at '{path or '/'}'"
        )

    comment = document.get("$comment")
    if comment is None:
        return _parse_body(document, path=path)
    if not isinstance(comment, str):
        raise SchemaParseError(f"'$comment' must be a string at '{join_pointer(path, '$comment')}'")
    return with_comment(comment, _parse_body(document, path=path), separator=schema_config.comment_separator)


def _parse_body(document: JsonDocument, *, path: str) -> JSONSchema:
    schema_type = document.get("type")

    if schema_type is None:
        if document.get("anyOf") is not None:
            return _parse_any_of(document["anyOf"], path=join_pointer(path, "anyOf"))
        if "const" in document:
            return ConstSchema(document["const"])
        return AnySchema()

    if isinstance(schema_type, str) and schema_type in _PRIMITIVE_SCHEMAS:
        return _PRIMITIVE_SCHEMAS[schema_type]()

    if schema_type == "array":
        items = document.get("items")
        if items is None:
            return ArraySchema(AnySchema())
        return ArraySchema(_parse(items, path=join_pointer(path, "items")))

    if schema_type == "object":
        return _parse_object(document, path=path)

    raise SchemaParseError(f"Unknown schema type: {schema_type!r} at '{join_pointer(path, 'type')}'")


def _parse_object(document: JsonDocument, *, path: str) -> ObjectSchema:
    properties = document.get("properties")
    if properties is None:
        return ObjectSchema(())
    properties_path = join_pointer(path, "properties")
    if not isinstance(properties, dict):
        raise SchemaParseError(f"'properties' must be an object at '{properties_path}'")

    required = document.get("required")
    if required is None:
        required = []
    if not isinstance(required, list) or not all(isinstance(key, str) for key in required):
        raise SchemaParseError(f"'required' must be a list of strings at '{join_pointer(path, 'required')}'")

    required_keys = set(required)
    fields: List[ObjectField] = []
    for key, property_document in properties.items():
        requirement = KeyRequirement.REQUIRED if key in required_keys else KeyRequirement.OPTIONAL
        fields.append(ObjectField(key, requirement, _parse(property_document, path=join_pointer(properties_path, key))))
    return ObjectSchema(tuple(fields))


def _parse_any_of(alternatives: Any, *, path: str) -> JSONSchema:
    if not isinstance(alternatives, list):
        raise SchemaParseError(f"'anyOf' must be a list at '{path}'")
    if not alternatives:
        raise SchemaParseError(f"'anyOf' must not be empty at '{path}'")

    parsed = [_parse(alternative, path=join_pointer(path, idx)) for idx, alternative in enumerate(alternatives)]
    if len(parsed) == 1:
        # A one-way choice is the alternative itself.
        return parsed[0]
    return ChoiceSchema(tuple(parsed))


# ---- text and files ---------------------------------------------------------


def dumps_json_schema(schema: JSONSchema, indent: Optional[int] = None) -> str:
    """Serialize *schema* to JSON Schema text."""
    if indent is None:
        indent = schema_config.json_indent
    return json.dumps(to_json_document(schema), indent=indent, ensure_ascii=False)


def loads_json_schema(text: str) -> JSONSchema:
    """Parse JSON Schema text into a schema."""
    try:
        document = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaParseError(f"Invalid JSON in schema document: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc
    return from_json_document(document)


def load_document(file_path: Union[str, Path]) -> Any:
    """Load a JSON or YAML document from disk.

    Files ending in ``.yaml``/``.yml`` are read with PyYAML's ``safe_load``;
    everything else is read as JSON.
    """
    path = Path(file_path)
    if not path.is_file():
        raise DocumentLoadError(f"Document not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DocumentLoadError(f"Failed to read document {path}: {exc}") from exc

    logger.debug(f"Loading document: {path}")
    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Failed to parse YAML file {path}: {exc}") from exc

    try:
        return json.loads(content)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"Invalid JSON in {path}: {exc.msg} (line {exc.lineno}, column {exc.colno})") from exc


def load_json_schema_file(file_path: Union[str, Path]) -> JSONSchema:
    """Load a JSON Schema document from disk and parse it into a schema."""
    try:
        return from_json_document(load_document(file_path))
    except SchemaParseError as exc:
        raise SchemaParseError(f"{file_path}: {exc}") from exc


def save_json_schema_file(file_path: Union[str, Path], schema: JSONSchema) -> None:
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_json_schema(schema) + "\n", encoding="utf-8")
    logger.info(f"Wrote JSON Schema to {path}")


def check_document(document: JsonDocument) -> List[SchemaIssue]:
    """Check a document against the JSON Schema (draft 2020-12) metaschema."""
    meta_validator = Draft202012Validator(Draft202012Validator.META_SCHEMA)
    issues: List[SchemaIssue] = []
    for error in meta_validator.iter_errors(document):
        path = "/" + "/".join(str(p) for p in error.absolute_path) if error.absolute_path else ""
        issues.append(SchemaIssue(message=error.message, path=path))
    return sorted(issues, key=lambda issue: issue.path or "")
