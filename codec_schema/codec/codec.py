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

"""Codec descriptions.

A codec describes, once, how a Python value is turned into JSON and read back.
The tree is built by library authors and then consumed by schema derivation
(:mod:`codec_schema.derivation`) and by the encoder
(:mod:`codec_schema.codec.encode`). Decoding is not implemented here; the
``decode`` callables of ``BimapCodec`` and friends are carried opaquely.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar, Union


A = TypeVar("A")
B = TypeVar("B")


@dataclass(frozen=True)
class Left(Generic[A]):
    value: A


@dataclass(frozen=True)
class Right(Generic[B]):
    value: B


Either = Union[Left, Right]


# ---- value codecs -----------------------------------------------------------


@dataclass(frozen=True)
class ValueCodec:
    """Any JSON value, passed through untouched."""


@dataclass(frozen=True)
class NullCodec:
    pass


@dataclass(frozen=True)
class BoolCodec:
    pass


@dataclass(frozen=True)
class StringCodec:
    pass


@dataclass(frozen=True)
class NumberCodec:
    pass


@dataclass(frozen=True)
class ArrayCodec:
    element: "Codec"
    name: Optional[str] = None


@dataclass(frozen=True)
class ObjectCodec:
    object_codec: "ObjectCodecSpec"
    name: Optional[str] = None


@dataclass(frozen=True)
class EqCodec:
    """Exactly one value, encoded through ``codec``."""

    value: Any
    codec: "Codec"


@dataclass(frozen=True)
class BimapCodec:
    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]
    codec: "Codec"


@dataclass(frozen=True)
class EitherCodec:
    """Encodes ``Left`` through ``left`` and ``Right`` through ``right``."""

    left: "Codec"
    right: "Codec"


@dataclass(frozen=True)
class ExtraParserCodec:
    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]
    codec: "Codec"


@dataclass(frozen=True)
class CommentCodec:
    comment: str
    codec: "Codec"


Codec = Union[
    ValueCodec,
    NullCodec,
    BoolCodec,
    StringCodec,
    NumberCodec,
    ArrayCodec,
    ObjectCodec,
    EqCodec,
    BimapCodec,
    EitherCodec,
    ExtraParserCodec,
    CommentCodec,
]


# ---- object codecs ----------------------------------------------------------


@dataclass(frozen=True)
class RequiredKeyCodec:
    key: str
    codec: Codec


@dataclass(frozen=True)
class OptionalKeyCodec:
    """A key that may be absent; ``None`` encodes as absence."""

    key: str
    codec: Codec


@dataclass(frozen=True)
class BimapObjectCodec:
    decode: Callable[[Any], Any]
    encode: Callable[[Any], Any]
    object_codec: "ObjectCodecSpec"


@dataclass(frozen=True)
class PureObjectCodec:
    """Consumes and produces no keys."""

    value: Any = None


@dataclass(frozen=True)
class ApObjectCodec:
    """Two object codecs applied to the same input, left keys first."""

    left: "ObjectCodecSpec"
    right: "ObjectCodecSpec"


ObjectCodecSpec = Union[RequiredKeyCodec, OptionalKeyCodec, BimapObjectCodec, PureObjectCodec, ApObjectCodec]


def _identity(value: Any) -> Any:
    return value


# ---- combinators ------------------------------------------------------------


def bimap(codec: Codec, decode: Callable[[Any], Any], encode: Callable[[Any], Any]) -> BimapCodec:
    return BimapCodec(decode=decode, encode=encode, codec=codec)


def comment(text: str, codec: Codec) -> CommentCodec:
    return CommentCodec(comment=text, codec=codec)


def array_of(codec: Codec, name: Optional[str] = None) -> ArrayCodec:
    return ArrayCodec(element=codec, name=name)


def literal(value: Any, codec: Codec) -> EqCodec:
    return EqCodec(value=value, codec=codec)


def either(left: Codec, right: Codec) -> EitherCodec:
    return EitherCodec(left=left, right=right)


def one_of(first: Codec, second: Codec, *rest: Codec) -> EitherCodec:
    """Right-associated alternation of two or more codecs.

    Encoding input is nested accordingly: the third alternative of
    ``one_of(a, b, c)`` is ``Right(Right(value))``.
    """
    codecs = (first, second) + rest
    return reduce(lambda acc, codec: EitherCodec(codec, acc), reversed(codecs[:-2]), EitherCodec(codecs[-2], codecs[-1]))


def required_field(key: str, codec: Codec, getter: Callable[[Any], Any] = _identity) -> BimapObjectCodec:
    """A required key whose value is read from the encoded object with *getter*."""
    return BimapObjectCodec(decode=_identity, encode=getter, object_codec=RequiredKeyCodec(key, codec))


def optional_field(key: str, codec: Codec, getter: Callable[[Any], Any] = _identity) -> BimapObjectCodec:
    return BimapObjectCodec(decode=_identity, encode=getter, object_codec=OptionalKeyCodec(key, codec))


def object_of(name: Optional[str], *fields: ObjectCodecSpec) -> ObjectCodec:
    """An object codec made of *fields*, combined left to right."""
    if not fields:
        return ObjectCodec(PureObjectCodec(), name=name)
    return ObjectCodec(reduce(ApObjectCodec, fields), name=name)


class HasCodec(Protocol):
    """A type that knows its own codec."""

    @classmethod
    def codec(cls) -> Codec:
        ...
