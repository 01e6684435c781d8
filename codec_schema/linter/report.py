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

"""Error reporting for the codec-schema CLI."""

from pathlib import Path
from typing import List, Dict, Any, Optional


class LintResult:
    """Container for check results for a single file."""
    
    def __init__(self, file_path: Path):
        self.file_path = file_path
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @staticmethod
    def _entry(message: str, path: Optional[str]) -> Dict[str, Any]:
        entry = {'message': message}
        if path:
            entry['path'] = path
        return entry

    def add_error(self, message: str, path: Optional[str] = None):
        """Add an error message.
        
        Args:
            message: Error message
            path: Optional JSON pointer into the checked document
        """
        self.errors.append(self._entry(message, path))

    def add_warning(self, message: str, path: Optional[str] = None):
        self.warnings.append(self._entry(message, path))

    @property
    def ok(self) -> bool:
        return not self.errors

    def to_dict(self) -> Dict[str, Any]:
        return {
            'file': str(self.file_path),
            'errors': self.errors,
            'warnings': self.warnings,
        }
