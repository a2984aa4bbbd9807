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

"""Command-line interface for Roster."""

import logging
import sys
from typing import IO, List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from roster import __version__
from roster.config.settings import DEFAULT_CONFIG_YAML, Settings, load_settings
from roster.core.errors import RosterError, ValidationError
from roster.exercises import (
    Rectangle,
    convert_text,
    describe_area,
    frequencies,
    median,
    mode,
    parse_integers,
    tuple_area,
)
from roster.ui.session import DirectorySession

app = typer.Typer(
    name="roster",
    help="Console exercises: employee directory, integer statistics, pig latin, rectangles",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _configure_logging(
    log_level: str,
    stream: Optional[IO[str]] = None,
    log_file: Optional[str] = None,
) -> None:
    """Configure root logging; unknown level names fall back to WARNING."""
    level = getattr(logging, log_level.upper(), logging.WARNING)
    if not isinstance(level, int):
        level = logging.WARNING

    handlers: List[logging.Handler] = [logging.StreamHandler(stream or sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def _print_error(error: RosterError) -> None:
    console.print(f"[bold red]Error:[/] {escape(error.message)}")
    if error.recovery_hint:
        console.print(f"[dim]{escape(error.recovery_hint)}[/]")


def _settings_from(ctx: typer.Context) -> Settings:
    if isinstance(ctx.obj, Settings):
        return ctx.obj
    return load_settings()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"Roster v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(
        None,
        "--config",
        "-c",
        help="YAML config file (default: ~/.roster/config.yaml)",
    ),
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        "-l",
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Roster - small interactive console exercises.

    Examples:
        # Employee directory menu
        roster directory

        # Median and mode
        roster stats 3 1 4 1 5

        # Pig latin
        roster pig-latin "first apple"
    """
    try:
        settings = load_settings(config, log_level=log_level)
    except RosterError as e:
        _print_error(e)
        raise typer.Exit(1)

    _configure_logging(settings.log_level, log_file=settings.log_file)
    logger.debug("Settings loaded: %s", settings.model_dump())
    ctx.obj = settings


@app.command()
def directory(
    ctx: typer.Context,
    lenient: bool = typer.Option(
        False,
        "--lenient",
        help="Accept malformed add lines, storing empty names/departments",
    ),
    dump: Optional[bool] = typer.Option(
        None,
        "--dump/--no-dump",
        help="Print the whole directory after every command",
    ),
) -> None:
    """Run the interactive employee directory menu."""
    settings = _settings_from(ctx)
    updates = {}
    if lenient:
        updates["strict_add_parsing"] = False
    if dump is not None:
        updates["show_directory_dump"] = dump
    if updates:
        settings = settings.model_copy(update=updates)

    session = DirectorySession(console=console, settings=settings)
    executed = session.run()
    logger.info("Directory session ended after %d command(s)", executed)


@app.command()
def stats(
    numbers: Optional[List[str]] = typer.Argument(
        None,
        help="Integers to summarize (prompted for when omitted)",
    ),
) -> None:
    """Show the median and mode of a list of integers."""
    if numbers:
        try:
            values = parse_integers(" ".join(numbers))
        except ValidationError as e:
            _print_error(e)
            raise typer.Exit(1)
    else:
        values = _prompt_integers()

    table = Table(title="Frequencies")
    table.add_column("Value", style="cyan", justify="right")
    table.add_column("Count", style="green", justify="right")
    for value, count in frequencies(values).items():
        table.add_row(str(value), str(count))
    console.print(table)

    mode_value, mode_count = mode(values)
    console.print(f"Median: {median(values)}")
    console.print(f"Mode: {mode_value} (x{mode_count})")


def _prompt_integers() -> List[int]:
    console.print("Input Integers!")
    while True:
        try:
            line = console.input("")
        except EOFError:
            console.print("[bold red]Error:[/] no integers given")
            raise typer.Exit(1)
        try:
            return parse_integers(line)
        except ValidationError as e:
            logger.debug("Rejected integer input %r: %s", line, e.message)
            console.print("[yellow]There is not integer in your inputs. Please re-type.[/]")


@app.command("pig-latin")
def pig_latin(
    text: Optional[str] = typer.Argument(None, help="Text to convert (prompted for when omitted)"),
) -> None:
    """Convert text to Pig Latin."""
    if text is None:
        console.print("Input Text.")
        try:
            text = console.input("")
        except EOFError:
            text = ""

    try:
        result = convert_text(text)
    except ValidationError as e:
        _print_error(e)
        raise typer.Exit(1)

    console.print(f"Result: {escape(result)}")


@app.command()
def rectangle(
    width: int = typer.Option(30, "--width", "-w", help="Width in pixels"),
    height: int = typer.Option(50, "--height", "-h", help="Height in pixels"),
    scale: int = typer.Option(1, "--scale", "-s", help="Multiply the width by this factor"),
) -> None:
    """Compute the area of a rectangle."""
    try:
        rect = Rectangle(width=width, height=height)
        if scale != 1:
            rect = rect.scaled(scale)
    except ValidationError as e:
        _print_error(e)
        raise typer.Exit(1)

    console.print(repr(rect), markup=False)
    console.print(describe_area(tuple_area((rect.width, rect.height))))


@app.command()
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config file"),
) -> None:
    """Initialize configuration files."""
    config_file = Settings.default_config_file()
    config_file.parent.mkdir(parents=True, exist_ok=True)

    if config_file.exists() and not force:
        console.print("[yellow]Configuration already exists[/]")
    else:
        console.print(f"Creating default configuration at {config_file}")
        config_file.write_text(DEFAULT_CONFIG_YAML, encoding="utf-8")
        console.print("[green]✓[/] Configuration created successfully!")

    console.print(f"\nConfiguration file: {config_file}")


if __name__ == "__main__":
    app()
