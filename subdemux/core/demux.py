"""Release cues to a sink as the presentation clock reaches them."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from subdemux.core.timeline import CueTimeline


@dataclass(frozen=True)
class CueBlock:
    pts: int  # microseconds
    length: int | None  # microseconds, None when the cue has no end time
    payload: bytes


CueSink = Callable[[CueBlock], None]


def demux(
    timeline: CueTimeline,
    deadline: int,
    sink: CueSink,
    delay: int = 0,
) -> bool:
    """Send every cue starting before ``deadline`` (microseconds) to ``sink``.

    ``delay`` shifts cue times later. Cues with an empty text or a start at or
    before 0 are skipped. Returns False once the timeline is exhausted.
    """
    if timeline.exhausted:
        return False

    max_date = deadline - delay
    if max_date <= 0:
        max_date = timeline.cues[timeline.index].start + 1

    while not timeline.exhausted and timeline.cues[timeline.index].start < max_date:
        cue = timeline.cues[timeline.index]
        timeline.index += 1

        if not cue.text or cue.start <= 0:
            continue

        length = cue.stop - cue.start if cue.stop > 0 else None
        sink(CueBlock(pts=cue.start + delay, length=length, payload=cue.text.encode("utf-8")))

    return not timeline.exhausted
