"""Tests for the line store."""

import io

import pytest

from subdemux.core.errors import EmptyInputError
from subdemux.core.line_store import LineStore
from subdemux.utils.file_utils import decode_text, split_lines


def test_next_line_until_exhausted():
    store = LineStore.from_text("one\ntwo\n")
    assert store.next_line() == "one"
    assert store.next_line() == "two"
    assert store.next_line() is None
    assert store.exhausted


def test_push_back_one():
    store = LineStore.from_text("one\ntwo")
    assert store.next_line() == "one"
    store.push_back_one()
    assert store.next_line() == "one"
    assert store.position == 1


def test_push_back_at_start_is_noop():
    store = LineStore.from_text("one")
    store.push_back_one()
    assert store.position == 0
    assert store.next_line() == "one"


def test_rewind():
    store = LineStore.from_text("a\nb\nc")
    store.next_line()
    store.next_line()
    store.rewind()
    assert store.next_line() == "a"


def test_load_strips_crlf():
    store = LineStore.load(io.BytesIO(b"first\r\nsecond\r\n"))
    assert len(store) == 2
    assert store.next_line() == "first"
    assert store.next_line() == "second"


def test_load_keeps_blank_lines():
    store = LineStore.from_text("a\n\nb\n")
    assert [store.next_line() for _ in range(3)] == ["a", "", "b"]


def test_load_empty_raises():
    with pytest.raises(EmptyInputError):
        LineStore.load(io.BytesIO(b""))


def test_single_newline_is_one_blank_line():
    assert split_lines("\n") == [""]


def test_decode_utf8_bom():
    assert decode_text("﻿Héllo".encode("utf-8")) == "Héllo"


def test_decode_latin1_fallback():
    assert decode_text(b"caf\xe9") == "café"
