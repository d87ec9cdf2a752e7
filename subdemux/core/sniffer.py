"""Guess the subtitle format from the first lines of the input."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from subdemux.core.formats import FormatId
from subdemux.core.line_store import LineSource
from subdemux.core.parsers.base import INT
from subdemux.utils.logger import get_logger

logger = get_logger(__name__)

MAX_PROBE_LINES = 256

_MICRODVD = re.compile(r"\{" + INT + r"\}\{(?:" + INT + r")?\}")
_SUBRIP = re.compile(
    INT + ":" + INT + ":" + INT + "," + INT + r"\s*-->" + INT + ":" + INT + ":" + INT + "," + INT
)
_JACOSUB = re.compile(
    INT + ":" + INT + ":" + INT + r"\." + INT + r"(?!\d)" + INT + ":" + INT + ":" + INT
    + r"|@" + INT + r"\s*@" + INT
)
_VPLAYER = re.compile(INT + ":" + INT + ":" + INT + r"(?::|\s)")
_DVDSUBTITLE = re.compile(r"\{T\s*" + INT + ":" + INT + ":" + INT + ":" + INT)
_MPL2 = re.compile(r"\[" + INT + r"\]\[(?:" + INT + r")?\]")
_MPSUB = re.compile(r"FORMAT=(?:" + INT + "|TIME)")
_AQT = re.compile(r"-->>" + INT)
_PJS = re.compile(INT + "," + INT + ",")


def _contains(needle: str) -> Callable[[str], bool]:
    needle = needle.lower()
    return lambda line: needle in line.lower()


def _starts_with(prefix: str) -> Callable[[str], bool]:
    prefix = prefix.lower()
    return lambda line: line[: len(prefix)].lower() == prefix


def _matches(pattern: re.Pattern[str]) -> Callable[[str], bool]:
    return lambda line: pattern.match(line) is not None


@dataclass(frozen=True)
class DetectionRule:
    format_id: FormatId
    matches: Callable[[str], bool]
    # A weak rule records its guess but lets later lines override it.
    stops: bool = True


# Order is precedence: on a given line the first matching rule wins.
RULES: tuple[DetectionRule, ...] = (
    DetectionRule(FormatId.SAMI, _contains("<SAMI>")),
    DetectionRule(FormatId.MICRODVD, _matches(_MICRODVD)),
    DetectionRule(FormatId.SUBRIP, _matches(_SUBRIP)),
    DetectionRule(FormatId.SSA1, _starts_with("!: This is a Sub Station Alpha v1")),
    DetectionRule(FormatId.ASS, _starts_with("ScriptType: v4.00+")),
    DetectionRule(FormatId.SSA2_4, _starts_with("ScriptType: v4.00")),
    DetectionRule(FormatId.SSA2_4, _starts_with("Dialogue: Marked")),
    DetectionRule(FormatId.ASS, _starts_with("Dialogue:")),
    DetectionRule(FormatId.SUBVIEWER, _contains("[INFORMATION]")),
    DetectionRule(FormatId.JACOSUB, _matches(_JACOSUB), stops=False),
    DetectionRule(FormatId.VPLAYER, _matches(_VPLAYER)),
    DetectionRule(FormatId.DVDSUBTITLE, _matches(_DVDSUBTITLE)),
    DetectionRule(FormatId.MPL2, _matches(_MPL2)),
    DetectionRule(FormatId.MPSUB, _matches(_MPSUB), stops=False),
    DetectionRule(FormatId.AQT, _matches(_AQT), stops=False),
    DetectionRule(FormatId.PJS, _matches(_PJS), stops=False),
)


def match_line(line: str) -> DetectionRule | None:
    """Return the first rule matching a single line."""
    for rule in RULES:
        if rule.matches(line):
            return rule
    return None


def detect(source: LineSource, max_lines: int = MAX_PROBE_LINES) -> FormatId:
    """Identify the format of ``source`` and rewind it to the start.

    Returns FormatId.UNKNOWN when no rule matched within ``max_lines`` lines.
    """
    logger.debug("autodetecting subtitle format")
    detected = FormatId.UNKNOWN

    for _ in range(max_lines):
        line = source.next_line()
        if line is None:
            break
        rule = match_line(line)
        if rule is None:
            continue
        detected = rule.format_id
        if rule.stops:
            break

    try:
        source.rewind()
    except OSError as e:
        logger.warning("failed to rewind: %s", e)

    return detected
