# Copyright 2025 Vijaykumar Singh <singhvjd@gmail.com>
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

"""In-memory employee directory keyed by person name."""

from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from roster.directory.parser import scan_add_command

logger = logging.getLogger(__name__)


class DirectoryStore:
    """Mapping from person name to department.

    Each name has exactly one current department; adding an existing name
    again replaces its department. Nothing is persisted.
    """

    def __init__(self) -> None:
        self._departments: Dict[str, str] = {}

    def add(self, raw_text: str) -> Tuple[str, str]:
        """Parse an ``Add <name> to <department>`` line and store the pair.

        The line is read with the forgiving token scan, so malformed text is
        stored with empty name and/or department rather than rejected.

        Args:
            raw_text: Free text typed by the user

        Returns:
            The ``(name, department)`` pair that was stored
        """
        command = scan_add_command(raw_text)
        if not command.ok:
            logger.debug("Lenient add of %r: %s", raw_text, command.error)
        return self.add_entry(command.name, command.department)

    def add_entry(self, name: str, department: str) -> Tuple[str, str]:
        """Store ``department`` for ``name``, replacing any previous one."""
        previous = self._departments.get(name)
        self._departments[name] = department

        if previous is not None and previous != department:
            logger.info("Moved %r from %r to %r", name, previous, department)
        else:
            logger.debug("Added %r to %r", name, department)
        return name, department

    def list_by_department(self, department: str) -> List[str]:
        """Names whose current department equals ``department``, unordered."""
        return [name for name, dept in self._departments.items() if dept == department]

    def list_all(self) -> List[str]:
        """All names in ascending lexicographic order."""
        return sorted(self._departments)

    def department_of(self, name: str) -> Optional[str]:
        return self._departments.get(name)

    def snapshot(self) -> Dict[str, str]:
        """Copy of the whole mapping."""
        return dict(self._departments)

    def __len__(self) -> int:
        return len(self._departments)

    def __contains__(self, name: object) -> bool:
        return name in self._departments

    def __iter__(self) -> Iterator[str]:
        return iter(self._departments)

    def __repr__(self) -> str:
        return f"DirectoryStore({self._departments!r})"
