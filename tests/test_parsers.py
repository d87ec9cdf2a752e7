"""Tests for the per-format cue parsers."""

from subdemux.core.cue import Cue
from subdemux.core.formats import FormatId
from subdemux.core.line_store import LineStore
from subdemux.core.registry import get_format
from subdemux.core.session import ParseSession


def _session(format_id: FormatId, text: str, **kwargs) -> ParseSession:
    return ParseSession(lines=LineStore.from_text(text), format_id=format_id, **kwargs)


def _parse_all(session: ParseSession) -> list[Cue]:
    parser = get_format(session.format_id).parser
    cues = []
    while True:
        cue = parser(session, len(cues))
        if cue is None:
            return cues
        cues.append(cue)


def _parse(format_id: FormatId, text: str, **kwargs) -> list[Cue]:
    return _parse_all(_session(format_id, text, **kwargs))


class TestMicroDvd:
    def test_frames_scaled_by_default_rate(self):
        cues = _parse(FormatId.MICRODVD, "{25}{50}Hello|World\n")
        assert cues == [Cue(start=1_000_000, stop=2_000_000, text="Hello\nWorld")]

    def test_empty_stop(self):
        cues = _parse(FormatId.MICRODVD, "{25}{}Hello\n")
        assert cues[0].stop == 0

    def test_frame_rate_sentinel(self):
        cues = _parse(FormatId.MICRODVD, "{1}{1}23.976\n{0}{100}Hello\n")
        assert len(cues) == 1
        assert cues[0].start == 0
        assert cues[0].stop == 100 * round(1e6 / 23.976)

    def test_sentinel_ignored_when_fps_overridden(self):
        cues = _parse(
            FormatId.MICRODVD,
            "{1}{1}23.976\n{10}{20}Hello\n",
            microsec_per_frame=50_000,
            fps_overridden=True,
        )
        assert cues[0].start == 500_000

    def test_sentinel_applies_to_later_cues_only(self):
        cues = _parse(FormatId.MICRODVD, "{25}{50}Before\n{1}{1}50\n{25}{50}After\n")
        assert cues[0].start == 25 * 40_000
        assert cues[1].start == 25 * 20_000

    def test_malformed_lines_skipped(self):
        cues = _parse(FormatId.MICRODVD, "garbage\n{25}{50}\n{25}{50}Text\n")
        assert [c.text for c in cues] == ["Text"]


class TestSubRip:
    def test_basic_block(self):
        text = "1\n00:01:02,500 --> 00:01:05,000\nHello\nWorld\n\n"
        cues = _parse(FormatId.SUBRIP, text)
        assert cues == [Cue(start=62_500_000, stop=65_000_000, text="Hello\nWorld\n")]

    def test_last_block_without_blank_line(self):
        text = "1\n00:00:01,000 --> 00:00:02,000\nOne\n\n2\n00:00:03,000 --> 00:00:04,000\nTwo"
        cues = _parse(FormatId.SUBRIP, text)
        assert [c.text for c in cues] == ["One\n", "Two\n"]

    def test_header_at_end_of_input(self):
        cues = _parse(FormatId.SUBRIP, "1\n00:00:01,000 --> 00:00:02,000\n")
        assert cues == []

    def test_br_kept_literally(self):
        cues = _parse(FormatId.SUBRIP, "00:00:01,000 --> 00:00:02,000\na[br]b\n\n")
        assert cues[0].text == "a[br]b\n"


class TestSubViewer:
    def test_br_replaced(self):
        cues = _parse(FormatId.SUBVIEWER, "00:00:01.00,00:00:03.00\nFirst[br]line\n\n")
        assert cues == [Cue(start=1_000_000, stop=3_000_000, text="First\nline\n")]

    def test_fraction_counts_milliseconds(self):
        cues = _parse(FormatId.SUBVIEWER, "00:00:04.50,00:00:06.00\nSecond\n\n")
        assert cues[0].start == 4_050_000


class TestSsa:
    DIALOGUE_ASS = "Dialogue: 2,0:02:40.65,0:02:41.79,Wolf main,Cher,0000,0000,0000,,Et les ondes ?"

    def test_ass_layer_and_read_order(self):
        session = _session(FormatId.ASS, "[Events]\n" + self.DIALOGUE_ASS + "\n")
        cues = _parse_all(session)
        assert cues[0].start == 160_650_000
        assert cues[0].stop == 161_790_000
        assert cues[0].text == "0,2,Wolf main,Cher,0000,0000,0000,,Et les ondes ?"

    def test_ssa2_4_layer_is_zero(self):
        line = "Dialogue: Marked=0,0:00:01.00,0:00:02.00,Default,,0000,0000,0000,,Hi"
        cues = _parse(FormatId.SSA2_4, f"{line}\n{line}\n")
        assert cues[0].text == "0,0,Default,,0000,0000,0000,,Hi"
        assert cues[1].text == "1,0,Default,,0000,0000,0000,,Hi"

    def test_ssa1_gets_leading_comma(self):
        line = "Dialogue: Marked=0,0:00:01.00,0:00:02.00,Default,,0000,0000,0000,Hi"
        cues = _parse(FormatId.SSA1, line)
        assert cues[0].text == ",Default,,0000,0000,0000,Hi"

    def test_other_lines_go_to_header(self):
        session = _session(FormatId.ASS, "[Script Info]\nTitle: x\n\n" + self.DIALOGUE_ASS)
        _parse_all(session)
        assert session.header == "[Script Info]\nTitle: x\n\n"

    def test_no_header_without_extra_lines(self):
        session = _session(FormatId.ASS, self.DIALOGUE_ASS)
        _parse_all(session)
        assert session.header is None


class TestVplayer:
    def test_colon_and_space_separators(self):
        cues = _parse(FormatId.VPLAYER, "00:00:01:Hello|World\n01:00:05 Second\n")
        assert cues == [
            Cue(start=1_000_000, stop=0, text="Hello\nWorld"),
            Cue(start=3_605_000_000, stop=0, text="Second"),
        ]

    def test_seconds_field_not_split(self):
        cues = _parse(FormatId.VPLAYER, "0:0:123\n00:00:02:ok\n")
        assert cues == [Cue(start=2_000_000, stop=0, text="ok")]


class TestSami:
    def test_multi_line_document(self):
        text = (
            "<SAMI><BODY>\n"
            "<SYNC Start=1000><P Class=ENCC>Hello<br>World\n"
            "<SYNC Start=3000><P Class=ENCC>&nbsp;\n"
            "<SYNC Start=5000><P>Last\tline</P>\n"
            "</BODY></SAMI>\n"
        )
        cues = _parse(FormatId.SAMI, text)
        assert cues == [
            Cue(start=1_000_000, stop=0, text="Hello\nWorld"),
            Cue(start=3_000_000, stop=0, text=" "),
            Cue(start=5_000_000, stop=0, text="Last line"),
        ]

    def test_text_spanning_lines(self):
        text = "<SYNC Start=200><P>\nOne\nTwo\n<SYNC Start=900><P>x\n"
        cues = _parse(FormatId.SAMI, text)
        assert cues[0].text == "OneTwo"
        assert cues[1].start == 900_000

    def test_several_syncs_on_one_line(self):
        text = "<SYNC Start=1000><P>One<SYNC Start=2000><P>Two\n"
        cues = _parse(FormatId.SAMI, text)
        assert [(c.start, c.text) for c in cues] == [(1_000_000, "One"), (2_000_000, "Two")]

    def test_tags_match_any_case(self):
        cues = _parse(FormatId.SAMI, "<sync start=1500><p class=x>lower<BR>case\n")
        assert cues == [Cue(start=1_500_000, stop=0, text="lower\ncase")]


class TestDvdSubtitle:
    def test_block(self):
        cues = _parse(FormatId.DVDSUBTITLE, "{HEAD\nLANG=English\n}\n{T 00:00:01:50\nHello\nWorld\n}\n")
        assert cues == [Cue(start=1_500_000, stop=0, text="Hello\nWorld\n")]

    def test_marker_without_blank(self):
        cues = _parse(FormatId.DVDSUBTITLE, "{T00:00:01:50\nHello\n}\n")
        assert cues == [Cue(start=1_500_000, stop=0, text="Hello\n")]


class TestMpl2:
    def test_tenths_and_italics(self):
        cues = _parse(FormatId.MPL2, "[10][25] Hello|/World\n[30][] //Italic\n")
        assert cues == [
            Cue(start=1_000_000, stop=2_500_000, text="Hello\nWorld"),
            Cue(start=3_000_000, stop=0, text="Italic"),
        ]


class TestAqt:
    def test_blocks_split_on_marker(self):
        cues = _parse(FormatId.AQT, "-->> 000100\nFirst\nSecond\n-->> 000200\nNext\n")
        assert cues == [
            Cue(start=100, stop=0, text="First\nSecond\n"),
            Cue(start=200, stop=0, text="Next\n"),
        ]

    def test_marker_at_end_without_text(self):
        cues = _parse(FormatId.AQT, "-->> 000100\nFirst\n-->> 000200\n")
        assert len(cues) == 1


class TestPjs:
    def test_quotes_stripped(self):
        cues = _parse(FormatId.PJS, '1200,1500,"Hello, world"\n')
        assert cues == [Cue(start=12_000, stop=15_000, text="Hello, world")]


class TestMpSub:
    def test_time_format_accumulates(self):
        text = "FORMAT=TIME\n\n1.5 2.0\nFirst\n\n0.5 3.0\nSecond\n\n"
        session = _session(FormatId.MPSUB, text)
        cues = _parse_all(session)
        assert cues == [
            Cue(start=1_500_000, stop=3_500_000, text="First\n"),
            Cue(start=4_000_000, stop=7_000_000, text="Second\n"),
        ]
        assert session.mpsub_factor == 100.0

    def test_numeric_format_sets_fps(self):
        session = _session(FormatId.MPSUB, "FORMAT=25\n10 20\nText\n")
        cues = _parse_all(session)
        assert session.fps == 25.0
        assert cues[0].start == 100_000
        assert cues[0].stop == 300_000

    def test_lone_number_is_not_a_timing_line(self):
        session = _session(FormatId.MPSUB, "FORMAT=TIME\n\n1.5\nx\n\n1 1\nA\n\n")
        cues = _parse_all(session)
        assert cues == [Cue(start=1_000_000, stop=2_000_000, text="A\n")]

    def test_state_is_per_session(self):
        text = "FORMAT=TIME\n1 1\nA\n\n"
        first = _parse(FormatId.MPSUB, text)
        second = _parse(FormatId.MPSUB, text)
        assert first == second


class TestJacoSub:
    def test_clock_and_frame_lines(self):
        text = (
            "#TIMERES 30\n"
            "0:00:01.00 0:00:03.15 D Hello~there\n"
            "@120 @150 VL {a comment} Second\\nline\n"
        )
        cues = _parse(FormatId.JACOSUB, text)
        assert cues == [
            Cue(start=1_000_000, stop=3_500_000, text="Hello there"),
            Cue(start=4_000_000, stop=5_000_000, text="Second\nline"),
        ]

    def test_shift_directive(self):
        cues = _parse(FormatId.JACOSUB, "#SHIFT 30\n0:00:05.00 0:00:06.00 D Shifted\n")
        assert cues[0].start == 35_000_000

    def test_negative_short_shift(self):
        cues = _parse(FormatId.JACOSUB, "#S -1.15\n@60 @90 D x\n")
        assert cues[0].start == 500_000
        assert cues[0].stop == 1_500_000

    def test_time_resolution(self):
        cues = _parse(FormatId.JACOSUB, "#T 25\n@50 @75 D x\n")
        assert cues[0].start == 2_000_000
        assert cues[0].stop == 3_000_000

    def test_style_escapes_removed(self):
        cues = _parse(FormatId.JACOSUB, "@30 @60 D \\BBold\\b and \\C1colour\n")
        assert cues[0].text == "Bold and colour"

    def test_blank_runs_collapsed(self):
        cues = _parse(FormatId.JACOSUB, "@30 @60 D a   b\n")
        assert cues[0].text == "a b"

    def test_line_continuation(self):
        cues = _parse(FormatId.JACOSUB, "@30 @60 D first \\\n   second\n")
        assert cues[0].text == "first second"

    def test_frame_field_not_split(self):
        cues = _parse(FormatId.JACOSUB, "0:00:01.100:00:02.00 D x\n@30 @60 D ok\n")
        assert [c.text for c in cues] == ["ok"]

    def test_unknown_lines_skipped(self):
        cues = _parse(FormatId.JACOSUB, "# comment\nrandom\n@30 @60 D ok\n")
        assert [c.text for c in cues] == ["ok"]
