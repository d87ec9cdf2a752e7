"""MPSub: relative timing lines, each cue starting where the previous one ended.

::

    FORMAT=TIME
    1.5 2.0
    First line

    0.5 3.0
    Second line

Each timing line holds the gap since the previous stop and the duration.
``FORMAT=TIME`` counts seconds; ``FORMAT=<fps>`` counts frames.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import leading_float, read_text_block
from subdemux.utils.logger import get_logger

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

logger = get_logger(__name__)

_FLOAT = r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
_FORMAT_TIME = re.compile(r"FORMAT=TIME")
_FORMAT = re.compile(r"FORMAT=(.+)")
# a number is never split in two to fill both fields
_TIMING = re.compile(_FLOAT + r"(?![\d.])" + _FLOAT)


def parse_mpsub(session: ParseSession, index: int) -> Cue | None:
    while True:
        line = session.lines.next_line()
        if line is None:
            return None

        if _FORMAT_TIME.match(line):
            session.mpsub_factor = 100.0
            continue

        match = _FORMAT.match(line)
        if match:
            fps = leading_float(match.group(1))
            if fps > 0.0 and not session.fps_overridden:
                session.fps = fps
                logger.debug("MPSub frame rate %f", fps)
            session.mpsub_factor = 1.0
            continue

        match = _TIMING.match(line)
        if match:
            gap, duration = float(match.group(1)), float(match.group(2))
            session.mpsub_total += gap * session.mpsub_factor
            start = int(10000.0 * session.mpsub_total)
            session.mpsub_total += duration * session.mpsub_factor
            stop = int(10000.0 * session.mpsub_total)
            break

    text = read_text_block(session, lambda s: s == "")
    if text is None:
        return None
    return Cue(start=start, stop=stop, text=text)
