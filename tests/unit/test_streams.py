"""Unit tests for stream decoding helpers."""

from __future__ import annotations

import io

import pytest

from prooftext.errors import StreamDecodeError
from prooftext.io.streams import read_stream, reader_to_string, stream_to_string


class _FailingRawStream(io.RawIOBase):
    """Raw stream whose reads always fail."""

    def readable(self) -> bool:
        return True

    def readinto(self, buffer: bytearray) -> int:
        raise OSError("Mocked read failure")


def test_read_stream_decodes_utf8_and_terminates_lines() -> None:
    """Every line ends with a newline, including the last one."""

    stream = io.BytesIO("one\ntwo\nöäüß\nșțîâăȘȚÎÂĂ".encode("utf-8"))

    assert read_stream(stream, "utf-8") == "one\ntwo\nöäüß\nșțîâăȘȚÎÂĂ\n"


def test_read_stream_defaults_to_utf8() -> None:
    """A missing encoding means UTF-8."""

    assert read_stream(io.BytesIO(b"Test Stream"), None) == "Test Stream\n"


def test_read_stream_of_empty_stream() -> None:
    """Empty input gives empty text without a newline."""

    assert read_stream(io.BytesIO(b""), None) == ""


def test_read_stream_with_multiple_lines() -> None:
    """Existing newlines are kept and a final one is added."""

    stream = io.BytesIO(b"Line 1\nLine 2\nLine 3")

    assert read_stream(stream, "UTF-8") == "Line 1\nLine 2\nLine 3\n"


def test_read_stream_leaves_stream_open() -> None:
    """The caller keeps ownership of the stream."""

    stream = io.BytesIO(b"abc")
    read_stream(stream)

    assert not stream.closed


def test_read_stream_propagates_read_failures() -> None:
    """IO failures surface as `OSError`."""

    with pytest.raises(OSError, match="Mocked read failure"):
        read_stream(io.BufferedReader(_FailingRawStream()), None)


def test_read_stream_rejects_undecodable_bytes() -> None:
    """Invalid bytes for the encoding raise `StreamDecodeError`."""

    with pytest.raises(StreamDecodeError):
        read_stream(io.BytesIO(b"\xff\xfe\xfa"), "utf-8")


def test_stream_to_string_keeps_content_unchanged() -> None:
    """Full decoding keeps text exactly, without adding a newline."""

    data = "Hello, World!".encode("utf-8")

    assert stream_to_string(io.BytesIO(data), "utf-8") == "Hello, World!"
    assert stream_to_string(io.BytesIO(b""), "utf-8") == ""


def test_stream_to_string_with_unknown_charset() -> None:
    """Unknown encodings raise `StreamDecodeError`, an `OSError`."""

    with pytest.raises(StreamDecodeError, match="Unknown encoding `UnknownCharset`") as exc_info:
        stream_to_string(io.BytesIO(b"Test String"), "UnknownCharset")

    assert isinstance(exc_info.value, OSError)
    assert exc_info.value.encoding == "UnknownCharset"


def test_stream_to_string_with_latin1() -> None:
    """Named encodings other than UTF-8 are honored."""

    assert stream_to_string(io.BytesIO("öäü".encode("latin-1")), "latin-1") == "öäü"


@pytest.mark.parametrize(
    "text",
    ["bla\nöäü", "", "特殊字符测试", "A" * 4000, "x" * 40000 + "1234567"],
    ids=["umlauts", "empty", "cjk", "boundary", "long"],
)
def test_reader_to_string(text: str) -> None:
    """Text readers are consumed completely."""

    assert reader_to_string(io.StringIO(text)) == text


@pytest.mark.parametrize("encoding", ["hex", "base64", "rot13"])
def test_read_stream_rejects_non_text_codecs(encoding: str) -> None:
    """Bytes-to-bytes codecs are reported like unknown encodings."""

    with pytest.raises(StreamDecodeError, match="is not a text encoding") as exc_info:
        read_stream(io.BytesIO(b"abc"), encoding)

    assert exc_info.value.encoding == encoding


def test_stream_to_string_rejects_non_text_codecs() -> None:
    """Full decoding applies the same text-codec check."""

    with pytest.raises(StreamDecodeError, match="`rot13` is not a text encoding"):
        stream_to_string(io.BytesIO(b"abc"), "rot13")
