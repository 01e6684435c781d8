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

"""Derive a JSONSchema from a codec description."""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Tuple, Type

from .codec.codec import (
    ApObjectCodec,
    ArrayCodec,
    BimapCodec,
    BimapObjectCodec,
    BoolCodec,
    Codec,
    CommentCodec,
    EitherCodec,
    EqCodec,
    ExtraParserCodec,
    HasCodec,
    NullCodec,
    NumberCodec,
    ObjectCodec,
    ObjectCodecSpec,
    OptionalKeyCodec,
    PureObjectCodec,
    RequiredKeyCodec,
    StringCodec,
    ValueCodec,
)
from .codec.encode import to_json_via
from .config import schema_config
from .models.json_schema import (
    AnySchema,
    ArraySchema,
    BoolSchema,
    ChoiceSchema,
    ConstSchema,
    JSONSchema,
    KeyRequirement,
    NullSchema,
    NumberSchema,
    ObjectField,
    ObjectSchema,
    StringSchema,
    with_comment,
)

logger = logging.getLogger(__name__)


def json_schema_via_codec(codec_type: Type[HasCodec]) -> JSONSchema:
    """Derive the schema of a type that provides a ``codec()`` classmethod."""
    logger.debug(f"Deriving JSON Schema for {codec_type.__name__}")
    return _json_schema_via(codec_type.codec())


def json_schema_via(codec: Codec) -> JSONSchema:
    """Derive the schema described by *codec*."""
    logger.debug(f"Deriving JSON Schema from {type(codec).__name__}")
    return _json_schema_via(codec)


def _json_schema_via(codec: Codec) -> JSONSchema:
    if isinstance(codec, ValueCodec):
        return AnySchema()
    if isinstance(codec, NullCodec):
        return NullSchema()
    if isinstance(codec, BoolCodec):
        return BoolSchema()
    if isinstance(codec, StringCodec):
        return StringSchema()
    if isinstance(codec, NumberCodec):
        return NumberSchema()

    if isinstance(codec, ArrayCodec):
        return _with_comment(codec.name, ArraySchema(_json_schema_via(codec.element)))

    if isinstance(codec, ObjectCodec):
        return _with_comment(codec.name, ObjectSchema(tuple(_object_fields_via(codec.object_codec))))

    if isinstance(codec, EqCodec):
        return ConstSchema(to_json_via(codec.codec, codec.value))

    if isinstance(codec, (BimapCodec, ExtraParserCodec)):
        return _json_schema_via(codec.codec)

    if isinstance(codec, EitherCodec):
        return ChoiceSchema(flatten_choices([_json_schema_via(codec.left), _json_schema_via(codec.right)]))

    if isinstance(codec, CommentCodec):
        return _with_comment(codec.comment, _json_schema_via(codec.codec))

    raise TypeError(f"Unknown codec variant: {type(codec).__name__}")


def flatten_choices(alternatives: Iterable[JSONSchema]) -> Tuple[JSONSchema, ...]:
    """Splice nested ``ChoiceSchema`` alternatives into one flat tuple, keeping order.

    This is the only place where associativity of alternation is normalised.
    """
    flat: List[JSONSchema] = []
    for alternative in alternatives:
        if isinstance(alternative, ChoiceSchema):
            flat.extend(flatten_choices(alternative.alternatives))
        else:
            flat.append(alternative)
    return tuple(flat)


def _with_comment(text: Optional[str], schema: JSONSchema) -> JSONSchema:
    return with_comment(text, schema, separator=schema_config.comment_separator)


def _object_fields_via(object_codec: ObjectCodecSpec) -> List[ObjectField]:
    if isinstance(object_codec, RequiredKeyCodec):
        return [ObjectField(object_codec.key, KeyRequirement.REQUIRED, _json_schema_via(object_codec.codec))]

    if isinstance(object_codec, OptionalKeyCodec):
        return [ObjectField(object_codec.key, KeyRequirement.OPTIONAL, _json_schema_via(object_codec.codec))]

    if isinstance(object_codec, BimapObjectCodec):
        return _object_fields_via(object_codec.object_codec)

    if isinstance(object_codec, PureObjectCodec):
        return []

    if isinstance(object_codec, ApObjectCodec):
        # Duplicate keys across the two sides are a caller error and are not checked.
        return _object_fields_via(object_codec.left) + _object_fields_via(object_codec.right)

    raise TypeError(f"Unknown object codec variant: {type(object_codec).__name__}")
