"""Phoenix Japanimation Society: ``start,stop,"text"`` on a single line."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from subdemux.core.cue import Cue
from subdemux.core.parsers.base import INT
from subdemux.utils.logger import get_logger

if TYPE_CHECKING:
    from subdemux.core.session import ParseSession

logger = get_logger(__name__)

_CUE_LINE = re.compile(INT + "," + INT + r',"(.+)')


def parse_pjs(session: ParseSession, index: int) -> Cue | None:
    while True:
        line = session.lines.next_line()
        if line is None:
            return None
        match = _CUE_LINE.match(line)
        if match:
            break

    text = match.group(3)
    if text.endswith('"'):
        text = text[:-1]
    logger.debug("%s", text)
    return Cue(
        start=int(match.group(1)) * 10,
        stop=int(match.group(2)) * 10,
        text=text,
    )
