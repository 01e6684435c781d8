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

"""Helpers for the plain-Python JSON value model.

JSON values are represented the way :mod:`json` produces them: ``None``,
``bool``, ``int``/``float``, ``str``, ``list`` and ``dict``. Python treats
``True == 1``, so kind checks and equality must special-case ``bool``.
"""

from __future__ import annotations

from typing import Any, Optional

JSON_NULL = "null"
JSON_BOOLEAN = "boolean"
JSON_NUMBER = "number"
JSON_STRING = "string"
JSON_ARRAY = "array"
JSON_OBJECT = "object"


def json_kind(value: Any) -> Optional[str]:
    """Return the JSON kind name of *value*, or None if it is not a JSON value."""
    if value is None:
        return JSON_NULL
    if isinstance(value, bool):
        return JSON_BOOLEAN
    if isinstance(value, (int, float)):
        return JSON_NUMBER
    if isinstance(value, str):
        return JSON_STRING
    if isinstance(value, (list, tuple)):
        return JSON_ARRAY
    if isinstance(value, dict):
        return JSON_OBJECT
    return None


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality of two JSON values.

    Numbers compare by value (``1 == 1.0``), booleans never equal numbers,
    and object key order is irrelevant.
    """
    kind = json_kind(left)
    if kind != json_kind(right):
        return False

    if kind == JSON_ARRAY:
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    if kind == JSON_OBJECT:
        if left.keys() != right.keys():
            return False
        return all(json_equal(v, right[k]) for k, v in left.items())

    return left == right


def escape_pointer_token(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def join_pointer(base: Optional[str], token: Any) -> str:
    if not base:
        return f"/{escape_pointer_token(str(token))}"
    return f"{base}/{escape_pointer_token(str(token))}"
