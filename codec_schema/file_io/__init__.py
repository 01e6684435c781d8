"""File I/O related utilities.

This package groups the JSON Schema wire format together with the helpers
that read and write schema and data documents.
"""

from .json_schema_document import (
    check_document,
    dumps_json_schema,
    from_json_document,
    load_document,
    load_json_schema_file,
    loads_json_schema,
    save_json_schema_file,
    to_json_document,
)

__all__ = [
    "check_document",
    "dumps_json_schema",
    "from_json_document",
    "load_document",
    "load_json_schema_file",
    "loads_json_schema",
    "save_json_schema_file",
    "to_json_document",
]
