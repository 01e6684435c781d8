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

"""Codec descriptions and their encoding direction."""

from .codec import (
    ApObjectCodec,
    ArrayCodec,
    BimapCodec,
    BimapObjectCodec,
    BoolCodec,
    Codec,
    CommentCodec,
    Either,
    EitherCodec,
    EqCodec,
    ExtraParserCodec,
    HasCodec,
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
    array_of,
    bimap,
    comment,
    either,
    literal,
    object_of,
    one_of,
    optional_field,
    required_field,
)
from .encode import to_json_via
