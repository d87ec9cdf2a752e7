"""VPlayer: ``h:m:s:Line1|Line2`` or ``h:m:s Line1|Line2``, start time only."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import INT
from subdemux.utils.timecode import hms_to_microseconds

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

# one separator character of any kind after the full seconds field, then the text
_CUE_LINE = re.compile(INT + ":" + INT + ":" + INT + r"(?!\d).(.+)")


def parse_vplayer(session: ParseSession, index: int) -> Cue | None:
    while True:
        line = session.lines.next_line()
        if line is None:
            return None
        match = _CUE_LINE.match(line)
        if match:
            break

    hours, minutes, seconds = (int(g) for g in match.groups()[:3])
    return Cue(
        start=hms_to_microseconds(hours, minutes, seconds),
        stop=0,
        text=match.group(4).replace("|", "\n"),
    )
