"""File path and text decoding helpers."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO

SUBTITLE_EXTENSIONS = {
    ".sub", ".srt", ".ssa", ".ass", ".smi", ".sami", ".txt",
    ".jss", ".js", ".aqt", ".pjs", ".mpl", ".mpsub",
}

DEFAULT_ENCODING = "utf-8-sig"
FALLBACK_ENCODING = "latin-1"


def is_subtitle_file(path: Path) -> bool:
    return path.suffix.lower() in SUBTITLE_EXTENSIONS


def decode_text(data: bytes) -> str:
    """Decode subtitle bytes as UTF-8 (BOM stripped), falling back to Latin-1.

    Latin-1 maps every byte, so the fallback never fails.
    """
    try:
        return data.decode(DEFAULT_ENCODING)
    except UnicodeDecodeError:
        return data.decode(FALLBACK_ENCODING)


def split_lines(text: str) -> list[str]:
    """Split text into lines without their terminators.

    Only ``\\n`` separates lines; a trailing ``\\r`` is dropped from each one.
    A final newline does not produce an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def read_lines(stream: BinaryIO) -> list[str]:
    """Read a binary stream to exhaustion and return its decoded lines."""
    return split_lines(decode_text(stream.read()))
