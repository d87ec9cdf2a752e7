"""Fully loaded, cursor-addressed sequence of text lines."""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO, Protocol

from subdemux.core.errors import EmptyInputError
from subdemux.utils.file_utils import read_lines, split_lines


class LineSource(Protocol):
    """Anything that yields text lines one at a time and can start over."""

    def next_line(self) -> str | None: ...

    def rewind(self) -> None: ...


class LineStore:
    """Lines of a subtitle file with a forward cursor.

    The only backward move is :meth:`push_back_one`, which undoes the most
    recent :meth:`next_line`.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: list[str] = list(lines)
        self._cursor = 0

    @classmethod
    def load(cls, stream: BinaryIO) -> LineStore:
        """Read a byte stream to exhaustion.

        Raises EmptyInputError if no line could be read.
        """
        return cls.from_lines(read_lines(stream))

    @classmethod
    def from_text(cls, text: str) -> LineStore:
        return cls.from_lines(split_lines(text))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> LineStore:
        store = cls(lines)
        if not store._lines:
            raise EmptyInputError("subtitle input is empty")
        return store

    def __len__(self) -> int:
        return len(self._lines)

    @property
    def position(self) -> int:
        return self._cursor

    @property
    def exhausted(self) -> bool:
        return self._cursor >= len(self._lines)

    def next_line(self) -> str | None:
        if self._cursor >= len(self._lines):
            return None
        line = self._lines[self._cursor]
        self._cursor += 1
        return line

    def push_back_one(self) -> None:
        if self._cursor > 0:
            self._cursor -= 1

    def rewind(self) -> None:
        self._cursor = 0
