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

"""Menu command definitions for the directory session.

Each command is reached by a numeric selector typed at the menu prompt,
optionally through an alias. The registry classifies a selector line and
dispatches it to the handler registered for the command.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from roster.core.errors import SelectorError

WRONG_SELECTOR_MESSAGE = "Wrong input. Please re-type."


class CommandAction(str, Enum):
    """What a menu command does to the directory."""

    ADD = "add"
    LIST_DEPARTMENT = "list_department"
    LIST_ALL = "list_all"
    QUIT = "quit"


@dataclass
class MenuCommand:
    """Definition of a numbered menu command."""

    selector: str
    action: CommandAction
    description: str
    aliases: List[str] = field(default_factory=list)
    prompt: Optional[str] = None
    hidden: bool = False

    @property
    def name(self) -> str:
        return self.action.value

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "selector": self.selector,
            "name": self.name,
            "description": self.description,
            "aliases": self.aliases,
            "prompt": self.prompt,
            "hidden": self.hidden,
        }


@dataclass(frozen=True)
class SelectorResult:
    """Outcome of classifying one selector line."""

    text: str
    command: Optional[MenuCommand] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.command is not None

    def require(self) -> MenuCommand:
        """Return the command or raise ``SelectorError``."""
        if self.command is None:
            raise SelectorError(self.error or WRONG_SELECTOR_MESSAGE, selector=self.text)
        return self.command


# Built-in menu
DIRECTORY_COMMANDS: List[MenuCommand] = [
    MenuCommand(
        selector="1",
        action=CommandAction.ADD,
        description="Add employee.",
        aliases=["add"],
        prompt="Please input information. (e.g. Add Sally to Engineering)",
    ),
    MenuCommand(
        selector="2",
        action=CommandAction.LIST_DEPARTMENT,
        description="List of all people in a department.",
        aliases=["dept", "department"],
        prompt="What department?",
    ),
    MenuCommand(
        selector="3",
        action=CommandAction.LIST_ALL,
        description="List of all people in the company.",
        aliases=["all", "list"],
    ),
    MenuCommand(
        selector="4",
        action=CommandAction.QUIT,
        description="Quit.",
        aliases=["q", "quit", "exit"],
    ),
]


class CommandRegistry:
    """Registry for managing menu commands.

    Provides lookup, selector classification, and execution of commands.
    """

    def __init__(self, commands: Optional[List[MenuCommand]] = None):
        """Initialize registry with the given commands (built-in menu by default)."""
        self._commands: Dict[str, MenuCommand] = {}
        self._aliases: Dict[str, str] = {}
        self._handlers: Dict[CommandAction, Callable[[MenuCommand], Any]] = {}

        for cmd in DIRECTORY_COMMANDS if commands is None else commands:
            self.register(cmd)

    def register(self, command: MenuCommand) -> None:
        """Register a command definition."""
        self._commands[command.selector] = command
        for alias in command.aliases:
            self._aliases[alias.lower()] = command.selector

    def unregister(self, selector: str) -> None:
        """Unregister a command."""
        if selector in self._commands:
            cmd = self._commands.pop(selector)
            for alias in cmd.aliases:
                self._aliases.pop(alias.lower(), None)

    def register_handler(
        self,
        action: CommandAction,
        handler: Callable[[MenuCommand], Any],
    ) -> None:
        """Register an execution handler for a command action."""
        self._handlers[action] = handler

    def get(self, key: str) -> Optional[MenuCommand]:
        """Get a command by selector or alias."""
        key = key.strip()
        if key in self._commands:
            return self._commands[key]
        alias = self._aliases.get(key.lower())
        if alias is not None:
            return self._commands[alias]
        return None

    def list_commands(self, include_hidden: bool = False) -> List[MenuCommand]:
        """List commands in menu order."""
        commands = list(self._commands.values())
        if not include_hidden:
            commands = [c for c in commands if not c.hidden]
        return sorted(commands, key=lambda c: (len(c.selector), c.selector))

    def parse_selector(self, text: str) -> SelectorResult:
        """Classify a selector line.

        Known selectors and aliases resolve to their command. Numbers that
        name no command and non-numeric text both produce a result with an
        error message so the caller can re-prompt.
        """
        selector = text.strip()
        command = self.get(selector)
        if command is not None:
            return SelectorResult(text=selector, command=command)

        try:
            number = int(selector)
        except ValueError:
            if not selector:
                return SelectorResult(text=selector, error="Please select a menu number.")
            return SelectorResult(
                text=selector,
                error=f"'{selector}' is not a menu number. Please re-type.",
            )

        # "01" and "+1" name the same command as "1"
        command = self._commands.get(str(number))
        if command is not None:
            return SelectorResult(text=selector, command=command)
        return SelectorResult(text=selector, error=WRONG_SELECTOR_MESSAGE)

    def execute(self, command: MenuCommand) -> Any:
        """Execute a command with the registered handler."""
        handler = self._handlers.get(command.action)
        if not handler:
            raise ValueError(f"No handler registered for command: {command.name}")
        return handler(command)

    def to_dict(self) -> Dict[str, Any]:
        """Export all commands as a dictionary."""
        return {
            "commands": [cmd.to_dict() for cmd in self.list_commands(include_hidden=True)],
            "aliases": dict(self._aliases),
        }
