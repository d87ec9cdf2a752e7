"""AQTitle: a ``-->> frame`` marker followed by free text up to the next marker."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import INT

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

_MARKER = re.compile(r"-->>" + INT)


def parse_aqt(session: ParseSession, index: int) -> Cue | None:
    start: int | None = None
    parts: list[str] = []

    while True:
        line = session.lines.next_line()
        if line is None:
            if start is None or not parts:
                return None
            break

        match = _MARKER.match(line)
        if match:
            if start is not None:
                # the next cue begins here
                session.lines.push_back_one()
                break
            # frame count kept as is, no frame rate applied
            start = int(match.group(1))
        elif start is not None:
            parts.append(f"{line}\n")

    return Cue(start=start, stop=0, text="".join(parts))
