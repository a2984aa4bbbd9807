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

"""Grammar for the directory's add command.

The accepted sentence is ``Add <name> to <department>``: two fixed
keywords and two single-token identifier slots. Two readers are provided:

- ``parse_add_command`` applies the grammar strictly and reports what is
  wrong with a line instead of guessing.
- ``scan_add_command`` is the forgiving token scan the directory store has
  always used: keywords may appear in any order, the first unrecognized
  token ends the scan, and missing slots are left empty.

Neither function raises for malformed text; call ``AddCommand.require()``
to turn a failed parse into a ``CommandParseError``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from roster.core.errors import CommandParseError

ADD_KEYWORD = "Add"
TO_KEYWORD = "to"

ADD_COMMAND_EXAMPLE = "Add Sally to Engineering"


@dataclass(frozen=True)
class AddCommand:
    """Result of reading an add-command line.

    Attributes:
        name: Person name, empty if the line did not provide one
        department: Department name, empty if the line did not provide one
        error: Why the line did not match the grammar, None on success
        text: The raw line that was parsed
    """

    name: str = ""
    department: str = ""
    error: Optional[str] = None
    text: str = ""

    @property
    def ok(self) -> bool:
        return self.error is None

    def as_pair(self) -> Tuple[str, str]:
        return self.name, self.department

    def require(self) -> Tuple[str, str]:
        """Return ``(name, department)`` or raise if the parse failed.

        Raises:
            CommandParseError: If the line did not match the grammar
        """
        if self.error is not None:
            raise CommandParseError(self.error, text=self.text)
        return self.as_pair()


def parse_add_command(text: str) -> AddCommand:
    """Parse ``text`` against the strict ``Add <name> to <department>`` grammar."""
    tokens = text.split()

    if not tokens:
        return AddCommand(error="Empty add command", text=text)
    if tokens[0] != ADD_KEYWORD:
        return AddCommand(
            error=f"Expected '{ADD_KEYWORD}' at the start, got '{tokens[0]}'",
            text=text,
        )
    if len(tokens) < 2 or tokens[1] == TO_KEYWORD:
        return AddCommand(error=f"Missing name after '{ADD_KEYWORD}'", text=text)

    name = tokens[1]
    if len(tokens) < 3:
        return AddCommand(
            name=name, error=f"Missing '{TO_KEYWORD} <department>' after name", text=text
        )
    if tokens[2] != TO_KEYWORD:
        return AddCommand(
            name=name,
            error=f"Expected '{TO_KEYWORD}' after name '{name}', got '{tokens[2]}'",
            text=text,
        )
    if len(tokens) < 4:
        return AddCommand(name=name, error=f"Missing department after '{TO_KEYWORD}'", text=text)

    department = tokens[3]
    if len(tokens) > 4:
        extra = " ".join(tokens[4:])
        return AddCommand(
            name=name,
            department=department,
            error=f"Unexpected text after department: '{extra}'",
            text=text,
        )

    return AddCommand(name=name, department=department, text=text)


def scan_add_command(text: str) -> AddCommand:
    """Scan ``text`` for the add keywords, tolerating anything malformed.

    ``Add`` captures the next token as the name and ``to`` captures the
    next token as the department. Any other token stops the scan. The
    result always carries both slots (possibly empty); ``error`` lists the
    slots that were not found.
    """
    tokens = iter(text.split())
    name = ""
    department = ""

    for word in tokens:
        if word == ADD_KEYWORD:
            name = next(tokens, "")
        elif word == TO_KEYWORD:
            department = next(tokens, "")
        else:
            break

    missing: List[str] = []
    if not name:
        missing.append("name")
    if not department:
        missing.append("department")
    error = f"Missing {' and '.join(missing)}" if missing else None

    return AddCommand(name=name, department=department, error=error, text=text)
