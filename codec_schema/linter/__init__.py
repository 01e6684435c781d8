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

"""Checks behind the codec-schema CLI."""

import importlib
import logging
import os
import sys
from pathlib import Path
from typing import Any, List

from ..derivation import json_schema_via, json_schema_via_codec
from ..exceptions import CodecSchemaError
from ..file_io.json_schema_document import check_document, from_json_document, load_document
from ..models.json_schema import JSONSchema, schema_issues
from ..utils.json_value import join_pointer
from ..validation import collect_issues
from .report import LintResult

__all__ = ['check_schema_files', 'validate_data_files', 'derive_schema', 'LintResult']

logger = logging.getLogger(__name__)


def check_schema_files(file_paths: List[Path], *, metaschema: bool = False) -> List[LintResult]:
    """Parse each schema document and report anything wrong with it.
    
    Args:
        file_paths: JSON or YAML schema documents
        metaschema: Also check each document against the JSON Schema metaschema
        
    Returns:
        List of LintResult objects, one per file
    """
    results = []

    for file_path in file_paths:
        result = LintResult(file_path)
        results.append(result)

        try:
            document = load_document(file_path)
        except CodecSchemaError as e:
            result.add_error(str(e))
            continue

        if metaschema:
            for issue in check_document(document):
                result.add_error(f"Metaschema: {issue.message}", path=issue.path)

        try:
            schema = from_json_document(document)
        except CodecSchemaError as e:
            result.add_error(str(e))
            continue

        for issue in schema_issues(schema):
            result.add_error(issue.message, path=issue.path)

        _warn_unused_keywords(document, result)

    return results


_KNOWN_KEYWORDS = frozenset(["type", "items", "properties", "required", "const", "anyOf", "$comment", "$schema"])


def _warn_unused_keywords(document: Any, result: LintResult, path: str = "") -> None:
    if not isinstance(document, dict):
        return
    for key in document:
        if key not in _KNOWN_KEYWORDS:
            result.add_warning(f"Keyword '{key}' is ignored", path=join_pointer(path, key))
    items = document.get("items")
    if isinstance(items, dict):
        _warn_unused_keywords(items, result, join_pointer(path, "items"))
    properties = document.get("properties")
    if isinstance(properties, dict):
        for key, value in properties.items():
            _warn_unused_keywords(value, result, join_pointer(join_pointer(path, "properties"), key))
    alternatives = document.get("anyOf")
    if isinstance(alternatives, list):
        for idx, value in enumerate(alternatives):
            _warn_unused_keywords(value, result, join_pointer(join_pointer(path, "anyOf"), idx))


def validate_data_files(schema: JSONSchema, file_paths: List[Path]) -> List[LintResult]:
    """Validate each JSON or YAML data file against *schema*."""
    results = []

    for file_path in file_paths:
        result = LintResult(file_path)
        results.append(result)

        try:
            data = load_document(file_path)
        except CodecSchemaError as e:
            result.add_error(str(e))
            continue

        for issue in collect_issues(data, schema):
            result.add_error(issue.message, path=issue.path)
        logger.debug(f"Validated {file_path}: {len(result.errors)} issue(s)")

    return results


def derive_schema(target: str) -> JSONSchema:
    """Derive the schema of ``module.path:attribute``.

    The attribute is either a codec or a type with a ``codec()`` classmethod.
    """
    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        raise CodecSchemaError(f"Invalid target '{target}'. Expected format: 'module.path:attribute'")

    # Console scripts do not put the working directory on sys.path.
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise CodecSchemaError(f"Cannot import module '{module_name}': {e}") from e

    obj = module
    for part in attribute.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise CodecSchemaError(f"Module '{module_name}' has no attribute '{attribute}'") from e

    if isinstance(obj, type) and callable(getattr(obj, "codec", None)):
        return json_schema_via_codec(obj)
    try:
        return json_schema_via(obj)
    except TypeError as e:
        raise CodecSchemaError(f"'{target}' is neither a codec nor a type with a codec() classmethod") from e
