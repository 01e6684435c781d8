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

"""Configuration management for codec_schema."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import DEFAULT_LOG_FORMAT, configure_split_stream_logging, resolve_level

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        logger.warning(f"Ignoring {name}={value!r}: not an integer, using {default}")
        return default


@dataclass
class SchemaToolConfig:
    """Configuration class for schema derivation and the codec-schema CLI."""
    log_level: str = "WARNING"
    print_level: str = "ERROR"
    # joins the texts of two comments that would otherwise nest
    comment_separator: str = "\n"
    json_indent: int = 2

    @classmethod
    def from_env(cls) -> 'SchemaToolConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('CODEC_SCHEMA_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('CODEC_SCHEMA_PRINT_LEVEL', 'ERROR'),
            comment_separator=os.getenv('CODEC_SCHEMA_COMMENT_SEPARATOR', '\n'),
            json_indent=_env_int('CODEC_SCHEMA_JSON_INDENT', 2),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = resolve_level(self.log_level, logging.WARNING)
        stderr_level = resolve_level(self.print_level, logging.ERROR)

        formatter = logging.Formatter(DEFAULT_LOG_FORMAT)
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('codec_schema')


# Global configuration instance
schema_config = SchemaToolConfig.from_env()
