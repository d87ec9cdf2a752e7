"""Fixed table of supported formats and their parsers."""

from __future__ import annotations

from dataclasses import dataclass

from subdemux.core.formats import SSA_FORMATS, FormatId
from subdemux.core.parsers.aqt import parse_aqt
from subdemux.core.parsers.base import Parser
from subdemux.core.parsers.dvdsubtitle import parse_dvdsubtitle
from subdemux.core.parsers.jacosub import parse_jacosub
from subdemux.core.parsers.microdvd import parse_microdvd
from subdemux.core.parsers.mpl2 import parse_mpl2
from subdemux.core.parsers.mpsub import parse_mpsub
from subdemux.core.parsers.pjs import parse_pjs
from subdemux.core.parsers.sami import parse_sami
from subdemux.core.parsers.ssa import parse_ssa
from subdemux.core.parsers.subrip import parse_subrip, parse_subviewer
from subdemux.core.parsers.vplayer import parse_vplayer

AUTO = "auto"


@dataclass(frozen=True)
class FormatDescriptor:
    id: FormatId
    name: str
    parser: Parser | None

    @property
    def codec(self) -> str:
        """Codec tag announced to the decoder."""
        return "ssa" if self.id in SSA_FORMATS else "subt"


FORMATS: tuple[FormatDescriptor, ...] = (
    FormatDescriptor(FormatId.MICRODVD, "MicroDVD", parse_microdvd),
    FormatDescriptor(FormatId.SUBRIP, "SubRIP", parse_subrip),
    FormatDescriptor(FormatId.SUBVIEWER, "SubViewer", parse_subviewer),
    FormatDescriptor(FormatId.SSA1, "SSA-1", parse_ssa),
    FormatDescriptor(FormatId.SSA2_4, "SSA-2/3/4", parse_ssa),
    FormatDescriptor(FormatId.ASS, "SSA/ASS", parse_ssa),
    FormatDescriptor(FormatId.VPLAYER, "VPlayer", parse_vplayer),
    FormatDescriptor(FormatId.SAMI, "SAMI", parse_sami),
    FormatDescriptor(FormatId.DVDSUBTITLE, "DVDSubtitle", parse_dvdsubtitle),
    FormatDescriptor(FormatId.MPL2, "MPL2", parse_mpl2),
    FormatDescriptor(FormatId.AQT, "AQTitle", parse_aqt),
    FormatDescriptor(FormatId.PJS, "PhoenixSub", parse_pjs),
    FormatDescriptor(FormatId.MPSUB, "MPSub", parse_mpsub),
    FormatDescriptor(FormatId.JACOSUB, "JacoSub", parse_jacosub),
    FormatDescriptor(FormatId.UNKNOWN, "Unknown", None),
)

_BY_ID: dict[FormatId, FormatDescriptor] = {d.id: d for d in FORMATS}


def get_format(format_id: FormatId) -> FormatDescriptor:
    return _BY_ID[format_id]


def find_format(type_name: str | None) -> FormatDescriptor | None:
    """Look up a user-selectable format by its short name.

    Returns None for "auto", empty and unknown names, as well as for the
    "unknown" sentinel, meaning the format has to be detected.
    """
    if not type_name or type_name == AUTO:
        return None
    for descriptor in FORMATS:
        if descriptor.parser is not None and descriptor.id.value == type_name:
            return descriptor
    return None


def format_names() -> list[str]:
    """Short names accepted for a forced format, "auto" first."""
    return [AUTO] + [d.id.value for d in FORMATS if d.parser is not None]
