from __future__ import annotations

import pytest

from codec_schema.models.json_schema import (
    ArraySchema,
    CommentSchema,
    KeyRequirement,
    NumberSchema,
    StringSchema,
    object_schema,
)


@pytest.fixture
def person_schema():
    return CommentSchema(
        "Person",
        object_schema(
            ("name", KeyRequirement.REQUIRED, CommentSchema("full name", StringSchema())),
            ("age", KeyRequirement.OPTIONAL, NumberSchema()),
            ("tags", KeyRequirement.REQUIRED, ArraySchema(StringSchema())),
        ),
    )
