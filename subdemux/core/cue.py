"""Timed caption record produced by the parsers."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Cue:
    start: int  # microseconds
    stop: int  # microseconds, 0 when the format gives no end time
    text: str
