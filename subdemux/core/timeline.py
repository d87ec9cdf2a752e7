"""Ordered cue collection with a playback cursor."""

from __future__ import annotations

from subdemux.core.cue import Cue


class CueTimeline:
    """Cues in parse order plus the index of the next cue to play.

    Cues are not re-sorted unless ``finalize(sort=True)`` is asked for, so
    seeking assumes start times that do not decrease.
    """

    def __init__(self) -> None:
        self.cues: list[Cue] = []
        self.index = 0
        self.duration = 0

    def __len__(self) -> int:
        return len(self.cues)

    def append(self, cue: Cue) -> None:
        self.cues.append(cue)

    def finalize(self, sort: bool = False) -> int:
        """Reset the cursor and compute the total duration in microseconds.

        The duration is the stop time of the last cue, or its start + 1 when
        that stop is unset, so it is never 0 once a cue with a positive start
        exists.
        """
        if sort:
            self.cues.sort(key=lambda cue: cue.start)
        self.index = 0
        self.duration = 0
        if self.cues:
            last = self.cues[-1]
            self.duration = last.stop
            if self.duration <= 0:
                self.duration = last.start + 1
        return self.duration

    @property
    def exhausted(self) -> bool:
        return self.index >= len(self.cues)

    @property
    def current(self) -> Cue | None:
        if self.exhausted:
            return None
        return self.cues[self.index]

    def seek_to_time(self, time_us: int) -> int | None:
        """Move to the first cue starting at or after ``time_us``.

        Returns the new index, or None (cursor left at the end) when every cue
        starts earlier.
        """
        self.index = 0
        while self.index < len(self.cues) and self.cues[self.index].start < time_us:
            self.index += 1
        if self.exhausted:
            return None
        return self.index

    def seek_to_fraction(self, fraction: float) -> int | None:
        return self.seek_to_time(int(fraction * self.duration))

    def current_start_time(self) -> int | None:
        cue = self.current
        return cue.start if cue is not None else None

    def current_fraction(self) -> float:
        if self.exhausted:
            return 1.0
        if self.duration <= 0:
            return 0.0
        return self.cues[self.index].start / self.duration
