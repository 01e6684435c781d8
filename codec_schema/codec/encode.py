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

"""Encoding direction of codecs: Python value -> JSON value."""

from __future__ import annotations

import math
from typing import Any, Dict

from ..exceptions import CodecEncodeError
from ..utils.json_value import JSON_ARRAY, JSON_BOOLEAN, JSON_NULL, JSON_NUMBER, JSON_STRING, json_kind
from .codec import (
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
    Left,
    NullCodec,
    NumberCodec,
    ObjectCodec,
    ObjectCodecSpec,
    OptionalKeyCodec,
    PureObjectCodec,
    RequiredKeyCodec,
    Right,
    StringCodec,
    ValueCodec,
)


def _expect(value: Any, kind: str, codec: Codec) -> None:
    actual = json_kind(value)
    if actual != kind:
        raise CodecEncodeError(
            f"{type(codec).__name__} cannot encode {type(value).__name__} value {value!r}: expected {kind}"
        )


def to_json_via(codec: Codec, value: Any) -> Any:
    """Encode *value* with *codec* and return the resulting JSON value."""
    if isinstance(codec, ValueCodec):
        if json_kind(value) is None:
            raise CodecEncodeError(f"ValueCodec cannot encode non-JSON value {value!r}")
        return value

    if isinstance(codec, NullCodec):
        _expect(value, JSON_NULL, codec)
        return None

    if isinstance(codec, BoolCodec):
        _expect(value, JSON_BOOLEAN, codec)
        return value

    if isinstance(codec, StringCodec):
        _expect(value, JSON_STRING, codec)
        return value

    if isinstance(codec, NumberCodec):
        _expect(value, JSON_NUMBER, codec)
        if isinstance(value, float) and not math.isfinite(value):
            raise CodecEncodeError(f"NumberCodec cannot encode non-finite number {value!r}")
        return value

    if isinstance(codec, ArrayCodec):
        _expect(value, JSON_ARRAY, codec)
        return [to_json_via(codec.element, item) for item in value]

    if isinstance(codec, ObjectCodec):
        return _object_to_json_via(codec.object_codec, value)

    if isinstance(codec, EqCodec):
        return to_json_via(codec.codec, codec.value)

    if isinstance(codec, (BimapCodec, ExtraParserCodec)):
        return to_json_via(codec.codec, codec.encode(value))

    if isinstance(codec, EitherCodec):
        if isinstance(value, Left):
            return to_json_via(codec.left, value.value)
        if isinstance(value, Right):
            return to_json_via(codec.right, value.value)
        raise CodecEncodeError(f"EitherCodec expects Left or Right, got {type(value).__name__}")

    if isinstance(codec, CommentCodec):
        return to_json_via(codec.codec, value)

    raise TypeError(f"Unknown codec variant: {type(codec).__name__}")


def _object_to_json_via(object_codec: ObjectCodecSpec, value: Any) -> Dict[str, Any]:
    if isinstance(object_codec, RequiredKeyCodec):
        return {object_codec.key: to_json_via(object_codec.codec, value)}

    if isinstance(object_codec, OptionalKeyCodec):
        if value is None:
            return {}
        return {object_codec.key: to_json_via(object_codec.codec, value)}

    if isinstance(object_codec, BimapObjectCodec):
        return _object_to_json_via(object_codec.object_codec, object_codec.encode(value))

    if isinstance(object_codec, PureObjectCodec):
        return {}

    if isinstance(object_codec, ApObjectCodec):
        encoded = _object_to_json_via(object_codec.left, value)
        encoded.update(_object_to_json_via(object_codec.right, value))
        return encoded

    raise TypeError(f"Unknown object codec variant: {type(object_codec).__name__}")
