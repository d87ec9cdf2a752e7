"""SubStation Alpha (v1, v2-4) and Advanced SubStation Alpha.

SSA 2-4::

    Format: Marked, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
    Dialogue: Marked=0,0:02:40.65,0:02:41.79,Wolf main,Cher,0000,0000,0000,,Text

ASS::

    Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
    Dialogue: 0,0:02:40.65,0:02:41.79,Wolf main,Cher,0000,0000,0000,,Text

SSA 1 has one field fewer before the text.

The decoder downstream expects ``ReadOrder,Layer,Style,Name,MarginL,MarginR,
MarginV,Effect,Text``, so the cue text is rebuilt in that shape. Every other
line (script info, styles, section headers) goes to the session header.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.formats import FormatId
from subdemux.core.parsers.base import INT, leading_int
from subdemux.utils.timecode import hms_to_microseconds

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

_DIALOGUE = re.compile(
    r"Dialogue:\s*([^,]{1,15}),"
    + INT + ":" + INT + ":" + INT + r"\." + INT + ","
    + INT + ":" + INT + ":" + INT + r"\." + INT + ","
    + r"(.+)"
)


def parse_ssa(session: ParseSession, index: int) -> Cue | None:
    while True:
        line = session.lines.next_line()
        if line is None:
            return None

        match = _DIALOGUE.match(line)
        if not match:
            session.append_header(line)
            continue

        first_field = match.group(1)
        h1, m1, s1, c1, h2, m2, s2, c2 = (int(g) for g in match.groups()[1:9])
        rest = match.group(10)

        if session.format_id == FormatId.SSA1:
            text = f",{rest}"
        else:
            layer = leading_int(first_field) if session.format_id == FormatId.ASS else 0
            text = f"{index},{layer},{rest}"

        return Cue(
            start=hms_to_microseconds(h1, m1, s1, c1 * 10),
            stop=hms_to_microseconds(h2, m2, s2, c2 * 10),
            text=text,
        )
