"""MPL2: ``[start][stop] Line1|/Line2`` with times in tenths of a second.

A leading ``/`` on a line marks italics and is removed.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import INT

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

_CUE_LINE = re.compile(r"\[" + INT + r"\]\[(?:" + INT + r")?\]\s*(.+)")


def parse_mpl2(session: ParseSession, index: int) -> Cue | None:
    while True:
        line = session.lines.next_line()
        if line is None:
            return None
        match = _CUE_LINE.match(line)
        if match:
            break

    start = int(match.group(1))
    stop = int(match.group(2)) if match.group(2) is not None else 0
    lines = match.group(3).replace("|", "\n").split("\n")
    return Cue(
        start=start * 100_000,
        stop=stop * 100_000,
        text="\n".join(part.lstrip("/") for part in lines),
    )
