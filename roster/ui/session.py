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

"""Interactive directory session.

Reads a menu selector, dispatches it to the matching command, prints the
result and, when enabled, a dump of the whole directory. The loop stops on
the quit command, end of input, or Ctrl+C.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from rich.console import Console
from rich.markup import escape

from roster.commands import CommandAction, CommandRegistry, MenuCommand
from roster.config.settings import Settings
from roster.core.errors import CommandParseError, SelectorError
from roster.directory import DirectoryStore, parse_add_command

logger = logging.getLogger(__name__)

InputFunc = Callable[[str], str]


class DirectorySession:
    """Menu loop over a ``DirectoryStore``."""

    def __init__(
        self,
        store: Optional[DirectoryStore] = None,
        console: Optional[Console] = None,
        settings: Optional[Settings] = None,
        registry: Optional[CommandRegistry] = None,
        input_func: Optional[InputFunc] = None,
    ):
        self.store = store if store is not None else DirectoryStore()
        self.console = console or Console()
        self.settings = settings or Settings()
        self.registry = registry or CommandRegistry()
        self._input = input_func or self.console.input
        self._running = False

        self.registry.register_handler(CommandAction.ADD, self._handle_add)
        self.registry.register_handler(CommandAction.LIST_DEPARTMENT, self._handle_list_department)
        self.registry.register_handler(CommandAction.LIST_ALL, self._handle_list_all)
        self.registry.register_handler(CommandAction.QUIT, self._handle_quit)

    @property
    def running(self) -> bool:
        return self._running

    def show_menu(self) -> None:
        self.console.print("Select menu:")
        for cmd in self.registry.list_commands():
            self.console.print(f"{cmd.selector}. {cmd.description}", markup=False)

    def handle_selector(self, text: str) -> bool:
        """Process one selector line.

        Returns:
            True if a command was executed, False if the line was rejected
        """
        result = self.registry.parse_selector(text)
        try:
            command = result.require()
        except SelectorError as e:
            logger.debug("Rejected selector %r: %s", e.selector, e.message)
            self.console.print(f"[yellow]{escape(e.message)}[/]", emoji=False)
            self._dump()
            return False

        logger.debug("Selector %r -> %s", result.text, command.name)
        self.registry.execute(command)
        if command.action is not CommandAction.QUIT:
            self._dump()
        return True

    def run(self) -> int:
        """Run the menu loop until quit or end of input.

        Returns:
            Number of commands executed, not counting the quit command
        """
        self._running = True
        executed = 0

        while self._running:
            self.show_menu()
            try:
                selector = self._input("")
                if self.handle_selector(selector) and self._running:
                    executed += 1
            except EOFError:
                logger.debug("End of input, stopping session")
                self._running = False
            except KeyboardInterrupt:
                self.console.print("\n[dim]Interrupted[/]")
                self._running = False

        return executed

    def _read_line(self, prompt: Optional[str]) -> str:
        if prompt:
            self.console.print(prompt, markup=False)
        return self._input("")

    def _dump(self) -> None:
        if self.settings.show_directory_dump:
            self.console.print(self.store.snapshot())

    def _print_names(self, names: List[str]) -> None:
        for name in names:
            self.console.print(name, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def _handle_add(self, command: MenuCommand) -> None:
        line = self._read_line(command.prompt)

        if not self.settings.strict_add_parsing:
            self.store.add(line)
            return

        try:
            name, department = parse_add_command(line).require()
        except CommandParseError as e:
            logger.info("Add command rejected: %s", e.message)
            self.console.print(f"[yellow]{escape(e.message)}[/]", emoji=False)
            if e.recovery_hint:
                self.console.print(f"[dim]{escape(e.recovery_hint)}[/]", emoji=False)
            return

        self.store.add_entry(name, department)

    def _handle_list_department(self, command: MenuCommand) -> None:
        department = self._read_line(command.prompt).strip()
        self._print_names(self.store.list_by_department(department))

    def _handle_list_all(self, command: MenuCommand) -> None:
        self._print_names(self.store.list_all())

    def _handle_quit(self, command: MenuCommand) -> None:
        self.console.print("[dim]Goodbye![/]")
        self._running = False
