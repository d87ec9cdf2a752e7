"""Open a subtitle input: load, detect, parse and build the cue timeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, BinaryIO

from subdemux.core.demux import CueSink, demux
from subdemux.core.errors import UnrecognizedFormatError
from subdemux.core.formats import SSA_FORMATS, FormatId
from subdemux.core.line_store import LineStore
from subdemux.core.registry import FormatDescriptor, find_format, get_format
from subdemux.core.session import ParseSession
from subdemux.core.sniffer import detect
from subdemux.core.timeline import CueTimeline
from subdemux.utils.config import DEFAULTS, delay_microseconds, frame_duration
from subdemux.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class SubtitleTrack:
    """A parsed subtitle input ready to be played."""

    format: FormatDescriptor
    timeline: CueTimeline
    header: str | None = None
    delay_us: int = 0
    fps: float | None = None

    @property
    def codec(self) -> str:
        return self.format.codec

    @property
    def duration(self) -> int:
        return self.timeline.duration

    def demux(self, deadline: int, sink: CueSink) -> bool:
        return demux(self.timeline, deadline, sink, delay=self.delay_us)


def resolve_format(config: dict[str, Any]) -> FormatDescriptor | None:
    """Return the forced format from config, or None to auto-detect."""
    type_name = config.get("type") or "auto"
    descriptor = find_format(type_name)
    if descriptor is None and type_name != "auto":
        logger.warning("Unknown subtitle type '%s', falling back to autodetection", type_name)
    return descriptor


def parse_lines(
    lines: LineStore,
    descriptor: FormatDescriptor,
    microsec_per_frame: int,
    fps_overridden: bool = False,
) -> tuple[CueTimeline, ParseSession]:
    """Run the format's parser over ``lines`` until it reports end of input."""
    if descriptor.parser is None:
        raise UnrecognizedFormatError(f"no parser for format: {descriptor.name}")

    session = ParseSession(
        lines=lines,
        format_id=descriptor.id,
        microsec_per_frame=microsec_per_frame,
        fps_overridden=fps_overridden,
    )
    timeline = CueTimeline()

    logger.debug("loading all subtitles...")
    index = 0
    while True:
        cue = descriptor.parser(session, index)
        if cue is None:
            break
        timeline.append(cue)
        index += 1

    logger.info("loaded %d subtitles", len(timeline))
    return timeline, session


def open_lines(lines: LineStore, config: dict[str, Any] | None = None) -> SubtitleTrack:
    """Detect (unless forced) and parse an already loaded input."""
    config = {**DEFAULTS, **(config or {})}

    microsec_per_frame = frame_duration(config)
    fps_overridden = float(config.get("fps") or 0.0) >= 1.0
    if fps_overridden:
        logger.debug("Override subtitle fps %f", config["fps"])

    descriptor = resolve_format(config)
    if descriptor is None:
        format_id = detect(lines)
        if format_id == FormatId.UNKNOWN:
            logger.error("failed to recognize subtitle type")
            raise UnrecognizedFormatError("failed to recognize subtitle type")
        descriptor = get_format(format_id)
    logger.debug("detected %s format", descriptor.name)

    timeline, session = parse_lines(lines, descriptor, microsec_per_frame, fps_overridden)
    timeline.finalize(sort=bool(config.get("sort")))

    return SubtitleTrack(
        format=descriptor,
        timeline=timeline,
        header=session.header if descriptor.id in SSA_FORMATS else None,
        delay_us=delay_microseconds(config),
        fps=session.fps or None,
    )


def open_subtitles(stream: BinaryIO, config: dict[str, Any] | None = None) -> SubtitleTrack:
    """Open a subtitle byte stream.

    Raises EmptyInputError for an input without lines and
    UnrecognizedFormatError when the format cannot be identified.
    """
    return open_lines(LineStore.load(stream), config)


def open_file(path: Path, config: dict[str, Any] | None = None) -> SubtitleTrack:
    logger.info("Opening subtitles: %s", path)
    with open(path, "rb") as f:
        return open_subtitles(f, config)
