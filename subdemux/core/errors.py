"""Exceptions raised while opening a subtitle track."""

from __future__ import annotations


class SubtitleError(Exception):
    """Base class for fatal subtitle open failures."""


class EmptyInputError(SubtitleError):
    """Raised when the input holds no lines at all."""


class UnrecognizedFormatError(SubtitleError):
    """Raised when no detection rule matched the input."""
