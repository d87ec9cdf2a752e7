"""SAMI: SGML-like markup where each ``<SYNC Start=ms>`` opens a caption.

Text is everything after the ``<P ...>`` tag up to the next ``Start=``;
``<br>`` becomes a newline, ``&nbsp;`` and tabs become spaces, other tags are
dropped.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import INT

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

_NUMBER = re.compile(INT)
_START = re.compile(r"Start=", re.IGNORECASE)
_PARAGRAPH = re.compile(r"<P", re.IGNORECASE)
_TAG_END = re.compile(r">")


def _search(session: ParseSession, current: str | None, pattern: re.Pattern[str]) -> str | None:
    """Return what follows ``pattern``, looking in ``current`` and then in later lines."""
    if current is not None:
        match = pattern.search(current)
        if match:
            return current[match.end():]

    while True:
        line = session.lines.next_line()
        if line is None:
            return None
        match = pattern.search(line)
        if match:
            return line[match.end():]


def parse_sami(session: ParseSession, index: int) -> Cue | None:
    carry, session.sami_carry = session.sami_carry, None

    s = _search(session, carry, _START)
    if s is None:
        return None

    match = _NUMBER.match(s)
    start_ms = 0
    if match:
        start_ms = int(match.group(1))
        s = s[match.end():]

    s = _search(session, s, _PARAGRAPH)
    if s is None:
        return None
    s = _search(session, s, _TAG_END)
    if s is None:
        return None

    chars: list[str] = []
    fresh = False
    while True:
        while s == "":
            s = session.lines.next_line()
            fresh = True
        if s is None:
            break

        if s[0] == "<":
            if s[:3].lower() == "<br":
                chars.append("\n")
            elif _START.search(s):
                if fresh:
                    session.lines.push_back_one()
                else:
                    session.sami_carry = s
                break
            s = _search(session, s, _TAG_END)
        elif s.startswith("&nbsp;"):
            chars.append(" ")
            s = s[6:]
        elif s[0] == "\t":
            chars.append(" ")
            s = s[1:]
        else:
            chars.append(s[0])
            s = s[1:]
        fresh = False

    return Cue(start=start_ms * 1000, stop=0, text="".join(chars))
