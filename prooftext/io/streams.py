"""Stream decoding helpers.

Responsibilities:
- Decode binary streams into text with a named encoding, defaulting to UTF-8.
- Read text streams fully.

Streams are owned by the caller and are never closed here. Read failures
propagate as `OSError`; unknown encodings and undecodable bytes raise
`StreamDecodeError`.
"""

from __future__ import annotations

import codecs
import io
from typing import BinaryIO, TextIO

from loguru import logger

from ..errors import StreamDecodeError


DEFAULT_ENCODING = "utf-8"
_READ_CHUNK_CHARS = 4096


def _resolve_encoding(encoding: str | None) -> str:
    """Return the canonical text codec name for `encoding`, defaulting to UTF-8.

    Bytes-to-bytes codecs such as `hex` or `rot13` are rejected like unknown names.
    """

    name = encoding or DEFAULT_ENCODING
    try:
        codec = codecs.lookup(name)
    except LookupError as exc:
        raise StreamDecodeError(encoding=name, detail=f"Unknown encoding `{name}`.") from exc
    if not getattr(codec, "_is_text_encoding", True):
        raise StreamDecodeError(encoding=name, detail=f"`{name}` is not a text encoding.")
    return codec.name


def read_stream(stream: BinaryIO, encoding: str | None = None) -> str:
    """Decode `stream` line by line, terminating every line with `\\n`.

    An empty stream yields `""`; a non-empty one always ends with a newline.
    """

    codec_name = _resolve_encoding(encoding)
    wrapper = io.TextIOWrapper(stream, encoding=codec_name, newline=None)
    lines: list[str] = []
    try:
        for line in wrapper:
            lines.append(line.rstrip("\n") + "\n")
    except UnicodeDecodeError as exc:
        raise StreamDecodeError(
            encoding=codec_name, detail=f"Failed to decode stream as `{codec_name}`: {exc}"
        ) from exc
    finally:
        wrapper.detach()
    logger.debug("Decoded {} line(s) with encoding {}", len(lines), codec_name)
    return "".join(lines)


def stream_to_string(stream: BinaryIO, encoding: str | None) -> str:
    """Decode the full content of `stream` without altering line endings."""

    codec_name = _resolve_encoding(encoding)
    data = stream.read()
    try:
        return data.decode(codec_name)
    except UnicodeDecodeError as exc:
        raise StreamDecodeError(
            encoding=codec_name, detail=f"Failed to decode stream as `{codec_name}`: {exc}"
        ) from exc


def reader_to_string(reader: TextIO) -> str:
    """Read `reader` to its end and return the collected text."""

    chunks: list[str] = []
    while True:
        chunk = reader.read(_READ_CHUNK_CHARS)
        if not chunk:
            break
        chunks.append(chunk)
    return "".join(chunks)
