"""Click CLI definitions."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

import click
from rich.progress import BarColumn, Progress, TextColumn, TimeElapsedColumn

from subdemux import __version__
from subdemux.core.demux import CueBlock
from subdemux.core.errors import SubtitleError
from subdemux.core.registry import FORMATS, format_names
from subdemux.services.subtitle_service import SubtitleTrack, open_file
from subdemux.utils.config import build_config
from subdemux.utils.file_utils import is_subtitle_file
from subdemux.utils.logger import setup_logging
from subdemux.utils.timecode import format_timestamp

# Deadline later than any cue, used to drain a timeline.
END_OF_TIME = 2**63 - 1


def _collect_files(input_path: Path, recursive: bool = False) -> list[Path]:
    """Collect subtitle files from a path (file or directory)."""
    if input_path.is_file():
        return [input_path]
    if input_path.is_dir():
        pattern = "**/*" if recursive else "*"
        files = sorted(
            f for f in input_path.glob(pattern)
            if f.is_file() and is_subtitle_file(f)
        )
        return files
    return []


def _format_block(block: CueBlock) -> str:
    start = format_timestamp(block.pts)
    stop = format_timestamp(block.pts + block.length) if block.length is not None else "--:--:--.---"
    text = block.payload.decode("utf-8").rstrip("\n").replace("\n", "\n    ")
    return f"[{start} --> {stop}] {text}"


def track_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Options shared by every command that opens a subtitle file."""

    @click.option("--type", "sub_type", type=click.Choice(format_names()), default=None,
                  help="Force the subtitle format (default: auto)")
    @click.option("--fps", type=float, default=None, help="Override the frames per second of frame-based formats")
    @click.option("--original-fps", type=float, default=None, help="Frame rate of the movie")
    @click.option("--delay", type=int, default=None, help="Delay all subtitles (in 1/10s, eg 100 means 10s)")
    @click.option("--sort", is_flag=True, default=None, help="Sort cues by start time")
    @click.option("-v", "--verbose", is_flag=True, default=False, help="Verbose output")
    @click.option("--debug", is_flag=True, default=False, help="Debug logging with source locations")
    @click.option("-q", "--quiet", is_flag=True, default=False, help="Only log warnings and errors")
    @functools.wraps(func)
    def wrapper(
        sub_type: str | None,
        fps: float | None,
        original_fps: float | None,
        delay: int | None,
        sort: bool | None,
        verbose: bool,
        debug: bool,
        quiet: bool,
        **kwargs: Any,
    ) -> Any:
        setup_logging(verbose=verbose, debug=debug, quiet=quiet)
        cli_args = {
            "type": sub_type,
            "fps": fps,
            "original_fps": original_fps,
            "delay": delay,
            "sort": sort or None,
            "verbose": verbose,
        }
        # Remove None values so they don't override config
        cli_args = {k: v for k, v in cli_args.items() if v is not None}
        return func(config=build_config(cli_args=cli_args), **kwargs)

    return wrapper


def _open(path: Path, config: dict[str, Any]) -> SubtitleTrack:
    try:
        return open_file(path, config)
    except (SubtitleError, OSError) as e:
        raise click.ClickException(f"{path.name}: {e}")


@click.group()
@click.version_option(version=__version__, prog_name="subdemux")
def cli() -> None:
    """SubDemux - Read text subtitle files into timed cues."""


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, path_type=Path))
@click.option("-r", "--recursive", is_flag=True, default=False, help="Recursively scan subdirectories")
@track_options
def info(input_path: Path, recursive: bool, config: dict[str, Any]) -> None:
    """Show the detected format and cue statistics of a file or directory."""
    files = _collect_files(input_path, recursive=recursive)
    if not files:
        raise click.ClickException(f"No subtitle files found in: {input_path}")

    for file in files:
        try:
            track = _open(file, config)
        except click.ClickException as e:
            if len(files) == 1:
                raise
            click.echo(f"Error reading {e.message}", err=True)
            continue

        click.echo(f"{file}")
        click.echo(f"  format:   {track.format.name} ({track.format.id.value})")
        click.echo(f"  codec:    {track.codec}")
        click.echo(f"  cues:     {len(track.timeline)}")
        click.echo(f"  duration: {format_timestamp(track.duration)}")
        if track.header is not None:
            click.echo(f"  header:   {len(track.header)} bytes")


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@track_options
def dump(input_path: Path, config: dict[str, Any]) -> None:
    """Print every cue the player would show, in order."""
    track = _open(input_path, config)
    track.demux(END_OF_TIME, lambda block: click.echo(_format_block(block)))


@cli.command()
@click.argument("input_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--speed", type=float, default=1.0, show_default=True, help="Playback speed factor")
@click.option("--tick", type=float, default=0.05, show_default=True, help="Clock resolution in seconds")
@track_options
def play(input_path: Path, speed: float, tick: float, config: dict[str, Any]) -> None:
    """Show cues in real time as a player clock would release them."""
    if speed <= 0:
        raise click.BadParameter("must be positive", param_hint="--speed")

    track = _open(input_path, config)
    total = max(track.duration + track.delay_us, 1)

    progress = Progress(
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        TextColumn("{task.fields[position]}"),
        TimeElapsedColumn(),
    )

    with progress:
        task = progress.add_task(input_path.name, total=total, position=format_timestamp(0))

        def emit(block: CueBlock) -> None:
            progress.console.print(_format_block(block), markup=False, highlight=False)

        started = time.monotonic()
        more = True
        while more:
            now = int((time.monotonic() - started) * 1_000_000 * speed)
            if now > track.delay_us:
                more = track.demux(now, emit)
            progress.update(task, completed=min(now, total), position=format_timestamp(now))
            if more:
                time.sleep(tick)


@cli.command("formats")
def list_formats() -> None:
    """List supported subtitle formats."""
    click.echo("Supported formats:")
    for descriptor in FORMATS:
        if descriptor.parser is not None:
            click.echo(f"  {descriptor.id.value:<12} {descriptor.name}")


@cli.command()
def config() -> None:
    """Show current configuration."""
    cfg = build_config()
    for key, val in sorted(cfg.items()):
        click.echo(f"  {key}: {val}")
