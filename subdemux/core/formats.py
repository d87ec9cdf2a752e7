"""Identifiers of the supported subtitle grammars."""

from __future__ import annotations

from enum import Enum


class FormatId(str, Enum):
    MICRODVD = "microdvd"
    SUBRIP = "subrip"
    SUBVIEWER = "subviewer"
    SSA1 = "ssa1"
    SSA2_4 = "ssa2-4"
    ASS = "ass"
    VPLAYER = "vplayer"
    SAMI = "sami"
    DVDSUBTITLE = "dvdsubtitle"
    MPL2 = "mpl2"
    AQT = "aqt"
    PJS = "pjs"
    MPSUB = "mpsub"
    JACOSUB = "jacosub"
    UNKNOWN = "unknown"


SSA_FORMATS = frozenset({FormatId.SSA1, FormatId.SSA2_4, FormatId.ASS})
