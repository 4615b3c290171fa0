"""Input helpers for decoding byte and character streams into text."""

from .streams import read_stream, reader_to_string, stream_to_string

__all__ = ["read_stream", "reader_to_string", "stream_to_string"]
