"""DVDSubtitle: ``{T h:m:s:cs`` opens a block that a lone ``}`` closes."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import INT, read_text_block
from subdemux.utils.timecode import hms_to_microseconds

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

_BLOCK_START = re.compile(r"\{T" + INT + ":" + INT + ":" + INT + ":" + INT)


def parse_dvdsubtitle(session: ParseSession, index: int) -> Cue | None:
    # TODO: read the optional "{ HEAD ... }" block for its LANG and CODEPAGE entries
    while True:
        line = session.lines.next_line()
        if line is None:
            return None
        match = _BLOCK_START.match(line)
        if match:
            hours, minutes, seconds, centis = (int(g) for g in match.groups())
            break

    text = read_text_block(session, lambda s: s == "}")
    if text is None:
        return None
    return Cue(
        start=hms_to_microseconds(hours, minutes, seconds, centis * 10),
        stop=0,
        text=text,
    )
