"""
framecode.cli - Typer CLI entry point.

Formats, parses and does arithmetic on SMPTE timecodes from the shell.
"""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from framecode import __version__
from framecode.config import (
    CONFIG_FILENAME,
    FramecodeConfig,
    create_default_config,
    find_config,
    load_config,
    write_config,
)
from framecode.exceptions import ConfigError, FramecodeError
from framecode.logging import configure_logging, get_logger
from framecode.rates import FPS_2997, is_drop_frame_fps, parse_rate
from framecode.timecode import Timecode

app = typer.Typer(
    name="framecode",
    help="SMPTE timecode toolkit.\n\n"
    "Converts between frame counts and HH:MM:SS:FF / HH:MM:SS;FF timecodes, "
    "including 29.97 drop-frame, and adds or subtracts timecodes.",
    add_completion=False,
)
console = Console()
logger = get_logger(__name__)

FPS_HELP = "Frame rate: number, fraction (30000/1001) or name (ntsc, film, pal)"
DROP_FRAME_HELP = "Use 29.97 drop-frame timecode (default: from config or ';' in input)"


def version_callback(value: bool) -> None:
    if value:
        console.print(f"framecode {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
) -> None:
    """framecode - SMPTE timecode toolkit."""
    configure_logging(verbose)


def resolve_rate(
    fps: str | None, drop_frame: bool | None, *timecodes: str
) -> tuple[float, bool]:
    """Work out the frame rate and drop-frame flag for a command.

    An explicit --fps wins; otherwise the nearest framecode.yaml is used,
    falling back to the defaults. Drop-frame is switched on for NTSC when
    any input timecode uses ';'.
    """
    if fps is None:
        config_file = find_config()
        config = load_config(config_file) if config_file else FramecodeConfig()
        rate, default_drop_frame = config.fps, config.drop_frame
    else:
        rate, default_drop_frame = parse_rate(fps), False

    if drop_frame is None:
        drop_frame = default_drop_frame or (
            is_drop_frame_fps(rate) and any(";" in tc for tc in timecodes)
        )
    if drop_frame:
        if not is_drop_frame_fps(rate):
            raise ConfigError(f"drop-frame timecode requires 29.97 fps, got {rate:g}")
        rate = FPS_2997

    logger.debug("Using %s fps, drop_frame=%s", rate, drop_frame)
    return rate, drop_frame


def parse_timecode(text: str, fps: float, drop_frame: bool) -> Timecode:
    tc = Timecode(fps, drop_frame=drop_frame)
    tc.parse(text)
    return tc


def fail(error: Exception) -> NoReturn:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    raise typer.Exit(1)


@app.command("format")
def format_frame(
    frame: int = typer.Argument(..., help="Zero-based frame number"),
    fps: str | None = typer.Option(None, "--fps", "-r", help=FPS_HELP),
    drop_frame: bool | None = typer.Option(
        None, "--drop-frame/--non-drop-frame", "-d/-n", help=DROP_FRAME_HELP
    ),
) -> None:
    """Print the timecode of a frame number."""
    try:
        rate, df = resolve_rate(fps, drop_frame)
        console.print(Timecode(rate, frame, df).to_string())
    except FramecodeError as e:
        fail(e)


@app.command("parse")
def parse_command(
    timecode: str = typer.Argument(..., help="Timecode, HH:MM:SS:FF or HH:MM:SS;FF"),
    fps: str | None = typer.Option(None, "--fps", "-r", help=FPS_HELP),
    drop_frame: bool | None = typer.Option(
        None, "--drop-frame/--non-drop-frame", "-d/-n", help=DROP_FRAME_HELP
    ),
) -> None:
    """Print the frame number of a timecode."""
    try:
        rate, df = resolve_rate(fps, drop_frame, timecode)
        console.print(str(parse_timecode(timecode, rate, df).frame))
    except FramecodeError as e:
        fail(e)


@app.command("add")
def add_command(
    first: str = typer.Argument(..., help="Timecode"),
    second: str = typer.Argument(..., help="Timecode to add"),
    fps: str | None = typer.Option(None, "--fps", "-r", help=FPS_HELP),
    drop_frame: bool | None = typer.Option(
        None, "--drop-frame/--non-drop-frame", "-d/-n", help=DROP_FRAME_HELP
    ),
) -> None:
    """Add two timecodes, wrapping at 24 hours."""
    try:
        rate, df = resolve_rate(fps, drop_frame, first, second)
        result = parse_timecode(first, rate, df) + parse_timecode(second, rate, df)
        console.print(result.to_string())
    except FramecodeError as e:
        fail(e)


@app.command("subtract")
def subtract_command(
    first: str = typer.Argument(..., help="Timecode"),
    second: str = typer.Argument(..., help="Timecode to subtract"),
    fps: str | None = typer.Option(None, "--fps", "-r", help=FPS_HELP),
    drop_frame: bool | None = typer.Option(
        None, "--drop-frame/--non-drop-frame", "-d/-n", help=DROP_FRAME_HELP
    ),
) -> None:
    """Subtract the second timecode from the first, wrapping at 24 hours."""
    try:
        rate, df = resolve_rate(fps, drop_frame, first, second)
        result = parse_timecode(first, rate, df) - parse_timecode(second, rate, df)
        console.print(result.to_string())
    except FramecodeError as e:
        fail(e)


@app.command("ms")
def milliseconds_command(
    timecode: str = typer.Argument(..., help="Timecode, HH:MM:SS:FF or HH:MM:SS;FF"),
    fps: str | None = typer.Option(None, "--fps", "-r", help=FPS_HELP),
    drop_frame: bool | None = typer.Option(
        None, "--drop-frame/--non-drop-frame", "-d/-n", help=DROP_FRAME_HELP
    ),
) -> None:
    """Show the wall-clock time at the start of a timecode's frame."""
    try:
        rate, df = resolve_rate(fps, drop_frame, timecode)
        tc = parse_timecode(timecode, rate, df)
    except FramecodeError as e:
        fail(e)

    table = Table(title=f"{timecode} @ {rate:.3f} fps{' DF' if df else ''}")
    table.add_column("Frame", style="cyan", justify="right")
    table.add_column("Time", style="green")
    table.add_column("Milliseconds", style="yellow", justify="right")
    table.add_row(str(tc.frame), tc.as_milliseconds(), str(tc.milliseconds()))
    console.print(table)


@app.command("init")
def init_config(
    profile: str = typer.Option(
        "pal",
        "--profile",
        "-p",
        help="Rate profile: pal, film, film-ntsc, ntsc or ntsc-df",
    ),
    path: str = typer.Option(".", "--path", help="Directory to write framecode.yaml in"),
) -> None:
    """Write a framecode.yaml with the given rate profile."""
    config_path = Path(path) / CONFIG_FILENAME

    if config_path.exists():
        console.print(f"[red]Error: '{config_path}' already exists[/red]")
        raise typer.Exit(1)

    try:
        write_config(create_default_config(profile), config_path)
    except FramecodeError as e:
        fail(e)

    console.print(f"[green]✓[/green] Created {CONFIG_FILENAME} with profile '{profile}'")
    console.print(f"[dim]  {config_path}[/dim]")
