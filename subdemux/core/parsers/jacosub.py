"""JACOsub.

Cue lines come in two shapes, both counting frames at the current time
resolution (30 per second unless ``#TIMERES`` says otherwise)::

    0:00:01.00 0:00:03.15 D Text of the caption
    @30 @105 D Text of the caption

Lines starting with ``#`` are directives; ``#S``/``#SHIFT`` and
``#T``/``#TIMERES`` change how the following cues are timed. The word after
the times is a directive too and is skipped. Inside the text, ``{...}`` is a
comment, ``~`` is a hard space, ``\\n`` a line break, style escapes such as
``\\B`` or ``\\I`` are dropped and a trailing backslash continues the text on
the next line.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import INT

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

# the frame field must not run into the next clock
_CLOCK = INT + ":" + INT + ":" + INT + r"\." + INT + r"(?!\d)"
_HMS_CUE = re.compile(_CLOCK + _CLOCK + r"\s*(\S.*)")
_FRAME_CUE = re.compile(r"@" + INT + r"\s*@" + INT + r"\s*(\S.*)")
_NUMBER = re.compile(INT)
_SHIFT = re.compile(r"\s*([+-]?)(\d+)(?::(\d+))?(?::(\d+))?(?:\.(\d+))?")

_STYLE_ESCAPES = frozenset("BbIiUuDN")
_LITERAL_ESCAPES = frozenset("~{\\")


def _parse_shift(text: str, resolution: int) -> int | None:
    """Shift in frames for ``[-]S[.F]``, ``[-]M:S[.F]`` or ``[-]H:M:S[.F]``."""
    match = _SHIFT.match(text)
    if not match:
        return None
    sign, first, second, third, frames = match.groups()
    fields = [int(v) for v in (first, second, third) if v is not None]
    while len(fields) < 3:
        fields.insert(0, 0)
    hours, minutes, seconds = fields
    total = (hours * 3600 + minutes * 60 + seconds) * resolution + int(frames or 0)
    return -total if sign == "-" else total


def _apply_directive(session: ParseSession, line: str) -> None:
    kind = line[1:2].upper()
    if kind == "S":
        offset = 6 if line[2:3].isalpha() else 2
        shift = _parse_shift(line[offset:], session.jss_time_resolution)
        if shift is not None:
            session.jss_time_shift = shift
    elif kind == "T":
        offset = 8 if line[2:3].isalpha() else 2
        match = _NUMBER.match(line[offset:])
        if match and int(match.group(1)) > 0:
            session.jss_time_resolution = int(match.group(1))


def _frames_to_microseconds(session: ParseSession, frames: int) -> int:
    return int((frames + session.jss_time_shift) * 1_000_000 / session.jss_time_resolution)


def _clean_text(session: ParseSession, text: str) -> str:
    text = text.lstrip(" \t")
    if text and (text[0].isalpha() or text[0] == "["):
        cut = text.find(" ")
        text = text[cut:] if cut >= 0 else ""
    text = text.lstrip(" \t")

    out: list[str] = []
    i = 0
    while i < len(text):
        c = text[i]
        nxt = text[i + 1] if i + 1 < len(text) else ""
        visible = session.jss_comment_depth == 0

        if c == "{":
            session.jss_comment_depth += 1
        elif c == "}":
            if session.jss_comment_depth:
                session.jss_comment_depth = 0
                if nxt == " ":
                    i += 1
        elif c == "~":
            if visible:
                out.append(" ")
        elif c in (" ", "\t"):
            if nxt not in (" ", "\t") and visible:
                out.append(" ")
        elif c == "\\":
            if nxt == "n":
                if visible:
                    out.append("\n")
                i += 1
            elif nxt in ("C", "c", "F", "f"):
                # colour/font escapes carry a one-character argument
                i += 2
            elif nxt and nxt in _STYLE_ESCAPES:
                i += 1
            elif nxt and nxt in _LITERAL_ESCAPES:
                if visible:
                    out.append(nxt)
                i += 1
            elif nxt == "":
                continuation = session.lines.next_line()
                if continuation is None:
                    break
                text = continuation.lstrip(" ")
                i = 0
                continue
            elif visible:
                out.append(c)
        elif visible:
            out.append(c)
        i += 1

    return "".join(out)


def parse_jacosub(session: ParseSession, index: int) -> Cue | None:
    while True:
        line = session.lines.next_line()
        if line is None:
            return None

        match = _HMS_CUE.match(line)
        if match:
            h1, m1, s1, f1, h2, m2, s2, f2 = (int(g) for g in match.groups()[:8])
            start = (h1 * 3600 + m1 * 60 + s1) * 1_000_000 + _frames_to_microseconds(session, f1)
            stop = (h2 * 3600 + m2 * 60 + s2) * 1_000_000 + _frames_to_microseconds(session, f2)
            raw = match.group(9)
            break

        match = _FRAME_CUE.match(line)
        if match:
            start = _frames_to_microseconds(session, int(match.group(1)))
            stop = _frames_to_microseconds(session, int(match.group(2)))
            raw = match.group(3)
            break

        if line.startswith("#"):
            _apply_directive(session, line)

    return Cue(start=start, stop=stop, text=_clean_text(session, raw))
