"""SubRip and SubViewer 2: a timing header followed by a blank-terminated block.

SubRip::

    1
    00:00:01,000 --> 00:00:04,000
    Line1
    Line2

SubViewer::

    00:00:01.00,00:00:04.00
    Line1[br]Line2

The SubRip counter line is ignored.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import INT, read_text_block
from subdemux.utils.timecode import hms_to_microseconds

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

_SUBRIP_TIMING = re.compile(
    INT + ":" + INT + ":" + INT + "," + INT + r"\s*-->" + INT + ":" + INT + ":" + INT + "," + INT
)
_SUBVIEWER_TIMING = re.compile(
    INT + ":" + INT + ":" + INT + r"\." + INT + "," + INT + ":" + INT + ":" + INT + r"\." + INT
)


def _parse_timed_block(
    session: ParseSession, timing: re.Pattern[str], replace_br: bool
) -> Cue | None:
    while True:
        line = session.lines.next_line()
        if line is None:
            return None
        match = timing.match(line)
        if match:
            h1, m1, s1, d1, h2, m2, s2, d2 = (int(g) for g in match.groups())
            break

    text = read_text_block(session, lambda s: s == "")
    if text is None:
        return None
    if replace_br:
        text = text.replace("[br]", "\n")

    return Cue(
        start=hms_to_microseconds(h1, m1, s1, d1),
        stop=hms_to_microseconds(h2, m2, s2, d2),
        text=text,
    )


def parse_subrip(session: ParseSession, index: int) -> Cue | None:
    return _parse_timed_block(session, _SUBRIP_TIMING, replace_br=False)


def parse_subviewer(session: ParseSession, index: int) -> Cue | None:
    # The fractional field counts milliseconds.
    return _parse_timed_block(session, _SUBVIEWER_TIMING, replace_br=True)
