#!/usr/bin/env python3
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

"""CLI entry point for checking schemas and validating data against them."""

import argparse
import json
import sys
from dataclasses import replace
from pathlib import Path
from typing import List

from ..config import schema_config
from ..exceptions import CodecSchemaError
from ..file_io.json_schema_document import dumps_json_schema, load_json_schema_file, save_json_schema_file
from . import LintResult, check_schema_files, derive_schema, validate_data_files

DOCUMENT_SUFFIXES = ('.json', '.yaml', '.yml')


def find_documents(paths: List[str]) -> List[Path]:
    """Find all JSON/YAML documents in given paths."""
    documents = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            documents.append(path)
        elif path.is_dir():
            for ext in DOCUMENT_SUFFIXES:
                documents.extend(path.rglob(f'*{ext}'))
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(set(documents))


def print_results(results: List[LintResult], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [r.to_dict() for r in results],
        }
        print(json.dumps(output, indent=schema_config.json_indent))
    elif output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(f"::error file={result.file_path}::{_with_path(error)}")
            for warning in result.warnings:
                print(f"::warning file={result.file_path}::{_with_path(warning)}")
    else:  # human-readable
        for result in results:
            if result.errors or result.warnings:
                print(f"\n{result.file_path}:")
                for error in result.errors:
                    print(f"  ERROR: {_with_path(error)}")
                for warning in result.warnings:
                    print(f"  WARNING: {_with_path(warning)}")


def _with_path(entry) -> str:
    if 'path' in entry:
        return f"{entry['message']} (at {entry['path']})"
    return entry['message']


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='codec-schema',
        description='Check JSON Schema documents and validate JSON/YAML data against them',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument('--log-level', default=None, help='Logging level (default: $CODEC_SCHEMA_LOG_LEVEL or WARNING)')
    subparsers = parser.add_subparsers(dest='command', required=True)

    check_parser = subparsers.add_parser('check', help='Parse schema documents and report problems')
    check_parser.add_argument('paths', nargs='+', help='Schema files or directories')
    check_parser.add_argument(
        '--metaschema',
        action='store_true',
        help='Also check documents against the JSON Schema 2020-12 metaschema',
    )

    validate_parser = subparsers.add_parser('validate', help='Validate data documents against a schema')
    validate_parser.add_argument('--schema', required=True, help='Schema document (JSON or YAML)')
    validate_parser.add_argument('paths', nargs='+', help='Data files or directories')

    derive_parser = subparsers.add_parser('derive', help='Print the JSON Schema of a codec')
    derive_parser.add_argument(
        'target', help="Codec or HasCodec type as 'module.path:attribute' (importable from the current directory)"
    )
    derive_parser.add_argument('--output', '-o', default=None, help='Write the schema to this file instead of stdout')

    return parser


def main(argv: List[str] | None = None) -> None:
    """Main entry point for the codec-schema CLI."""
    args = build_parser().parse_args(argv)

    config = replace(schema_config, log_level=args.log_level) if args.log_level else schema_config
    config.set_logging()

    if args.command == 'derive':
        try:
            schema = derive_schema(args.target)
        except CodecSchemaError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        if args.output:
            save_json_schema_file(args.output, schema)
        else:
            print(dumps_json_schema(schema))
        sys.exit(0)

    if args.command == 'validate':
        try:
            schema = load_json_schema_file(args.schema)
        except CodecSchemaError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    documents = find_documents(args.paths)
    if not documents:
        print("No JSON or YAML documents found.", file=sys.stderr)
        sys.exit(1)

    if args.command == 'check':
        results = check_schema_files(documents, metaschema=args.metaschema)
    else:
        results = validate_data_files(schema, documents)

    print_results(results, args.format)

    # Exit with error code if any errors found
    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print(f"Checked {len(results)} file(s) with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
