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

"""Derive JSON Schemas from codec descriptions, read and write them, and
validate JSON values against them."""

__version__ = "0.1.0"

from .codec import HasCodec, to_json_via
from .derivation import flatten_choices, json_schema_via, json_schema_via_codec
from .exceptions import CodecEncodeError, CodecSchemaError, DocumentLoadError, SchemaParseError
from .file_io import (
    dumps_json_schema,
    from_json_document,
    load_json_schema_file,
    loads_json_schema,
    to_json_document,
)
from .models import (
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
    is_well_formed,
    schema_issues,
)
from .validation import collect_issues, validate_according_to
