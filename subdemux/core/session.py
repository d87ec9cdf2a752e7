"""Per-open parsing context shared by successive parser calls."""

from __future__ import annotations

from dataclasses import dataclass, field

from subdemux.core.formats import FormatId
from subdemux.core.line_store import LineStore
from subdemux.utils.config import DEFAULT_MICROSEC_PER_FRAME


@dataclass
class ParseSession:
    """State threaded through every ``parse_one`` call of one open.

    Nothing here outlives the session, so independent inputs can be parsed
    side by side.
    """

    lines: LineStore
    format_id: FormatId
    microsec_per_frame: int = DEFAULT_MICROSEC_PER_FRAME
    # True when the user forced a frame rate; in-stream rates are then ignored.
    fps_overridden: bool = False
    # MPSub stream frame rate from a numeric FORMAT= header.
    fps: float = 0.0
    header_lines: list[str] = field(default_factory=list)

    # MPSub running clock
    mpsub_total: float = 0.0
    mpsub_factor: float = 1.0

    # JacoSub directives
    jss_time_shift: int = 0
    jss_time_resolution: int = 30
    jss_comment_depth: int = 0

    # SAMI: rest of a line that already holds the next Start= tag
    sami_carry: str | None = None

    def append_header(self, line: str) -> None:
        self.header_lines.append(line)

    @property
    def header(self) -> str | None:
        if not self.header_lines:
            return None
        return "".join(f"{line}\n" for line in self.header_lines)
