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

"""Custom exceptions for the codec_schema package."""


class CodecSchemaError(Exception):
    """Base exception for codec_schema related errors."""
    pass


class SchemaParseError(CodecSchemaError):
    """Exception raised when a JSON Schema document cannot be read back into a schema."""
    pass


class CodecEncodeError(CodecSchemaError):
    """Exception raised when a value does not fit the codec used to encode it."""
    pass


class DocumentLoadError(CodecSchemaError):
    """Exception raised when a JSON or YAML document cannot be read from disk."""
    pass
