"""MicroDVD: ``{start}{stop}Line1|Line2`` with frame-number timing."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import INT, leading_float
from subdemux.utils.logger import get_logger

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

logger = get_logger(__name__)

# {n1}{n2}text, n2 may be empty
_CUE_LINE = re.compile(r"\{" + INT + r"\}\{(?:" + INT + r")?\}(.+)")


def parse_microdvd(session: ParseSession, index: int) -> Cue | None:
    while True:
        line = session.lines.next_line()
        if line is None:
            return None

        match = _CUE_LINE.match(line)
        if not match:
            continue

        start = int(match.group(1))
        stop = int(match.group(2)) if match.group(2) is not None else 0
        text = match.group(3)
        if start != 1 or stop != 1:
            break

        # {1}{1}23.976 declares the frame rate of the cues that follow
        fps = leading_float(text)
        if fps > 0.0 and not session.fps_overridden:
            session.microsec_per_frame = round(1_000_000 / fps)
            logger.debug("Using in-stream frame rate %f", fps)

    return Cue(
        start=start * session.microsec_per_frame,
        stop=stop * session.microsec_per_frame,
        text=text.replace("|", "\n"),
    )
