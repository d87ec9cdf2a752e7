"""Shared pieces of the per-format cue parsers."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

# A parser consumes lines from the session and returns the next cue, or None
# once no further cue can be formed.
Parser = Callable[["ParseSession", int], "Cue | None"]

# Integer field as scanf's %d reads it: optional blanks, optional sign.
INT = r"\s*([+-]?\d+)"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_FLOAT = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def leading_int(text: str) -> int:
    """Integer prefix of ``text``, or 0 when there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def leading_float(text: str) -> float:
    """Float prefix of ``text``, or 0.0 when there is none."""
    match = _LEADING_FLOAT.match(text)
    return float(match.group(1)) if match else 0.0


def read_text_block(session: ParseSession, is_end: Callable[[str], bool]) -> str | None:
    """Collect lines up to (and consuming) the first line where ``is_end`` holds.

    Each collected line keeps a trailing newline. Running out of input ends the
    block too, but an empty block at end of input yields None.
    """
    parts: list[str] = []
    while True:
        line = session.lines.next_line()
        if line is None:
            if not parts:
                return None
            break
        if is_end(line):
            break
        parts.append(f"{line}\n")
    return "".join(parts)
