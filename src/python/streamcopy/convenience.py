# streamcopy/convenience.py
"""
High-level entry points that pick the right conversion for their arguments.

These cover the common case where the caller just has "something readable"
and "something writable". When an object is ambiguous (a custom stream that
does not derive from `io.IOBase` and has no `encoding` attribute is assumed
to be binary), call the explicit function in `streamcopy.conversions`.
"""
from typing import Any, Optional

from . import conversions
from .config import DEFAULT_BUFFER_SIZE
from .types import Kind
from ._internal import kind_selector, validation


def _reject_encoding(encoding: Optional[str], source: Kind, target: str) -> None:
    if encoding is not None:
        raise ValueError(
            f"encoding can only be provided when converting between bytes and "
            f"characters, not for {source.value} -> {target}."
        )


def copy(
    source: Any,
    sink: Any,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """
    Copies the content of `source` into `sink`, converting between bytes and
    characters as needed.

    Args:
        source: A string, a byte buffer, a byte stream or a char stream.
        sink: A byte stream or a char stream. It is not closed; it is flushed
              only when characters are encoded onto a byte stream.
        encoding: Name of the encoding used when bytes are decoded or
                  characters are encoded. Defaults to `config.DEFAULT_ENCODING`.
        buffer_size: Size of the scratch buffer.

    Returns:
        The number of elements copied: bytes when reading bytes into a byte
        stream, characters whenever characters are involved.

    Raises:
        TypeError: If an argument cannot be classified or `sink` is not a stream.
        ValueError: If `encoding` is given for a copy that needs no conversion.
        UnsupportedEncodingError: If the encoding name is unknown.
    """
    source_kind = kind_selector.classify(source)
    sink_kind = kind_selector.classify_sink(sink)

    match (source_kind, sink_kind):
        case (Kind.BYTE_STREAM, Kind.BYTE_STREAM):
            _reject_encoding(encoding, source_kind, sink_kind.value)
            return conversions.copy_stream(source, sink, buffer_size)
        case (Kind.BYTE_STREAM, Kind.CHAR_STREAM):
            return conversions.decode_stream(source, sink, encoding, buffer_size)
        case (Kind.CHAR_STREAM, Kind.BYTE_STREAM):
            return conversions.encode_text(source, sink, encoding, buffer_size)
        case (Kind.CHAR_STREAM, Kind.CHAR_STREAM):
            _reject_encoding(encoding, source_kind, sink_kind.value)
            return conversions.copy_text(source, sink, buffer_size)
        case (Kind.STRING, Kind.BYTE_STREAM):
            return conversions.string_to_stream(source, sink, encoding, buffer_size)
        case (Kind.STRING, Kind.CHAR_STREAM):
            _reject_encoding(encoding, source_kind, sink_kind.value)
            validation.validate_buffer_size(buffer_size)
            return conversions.string_to_writer(source, sink)
        case (Kind.BYTES, Kind.CHAR_STREAM):
            return conversions.bytes_to_writer(source, sink, encoding, buffer_size)
        case (Kind.BYTES, Kind.BYTE_STREAM):
            _reject_encoding(encoding, source_kind, sink_kind.value)
            validation.validate_buffer_size(buffer_size)
            return conversions.bytes_to_stream(source, sink)


def to_string(
    source: Any,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> str:
    """
    Returns the full content of `source` as a string.

    Byte streams and byte buffers are decoded with `encoding`; char streams
    and strings are returned as-is and must not be given an encoding.
    """
    match kind_selector.classify(source):
        case Kind.BYTE_STREAM:
            return conversions.stream_to_string(source, encoding, buffer_size)
        case Kind.BYTES:
            return conversions.bytes_to_string(source, encoding, buffer_size)
        case Kind.CHAR_STREAM:
            _reject_encoding(encoding, Kind.CHAR_STREAM, "string")
            return conversions.text_to_string(source, buffer_size)
        case Kind.STRING:
            _reject_encoding(encoding, Kind.STRING, "string")
            validation.validate_buffer_size(buffer_size)
            return source


def to_byte_array(
    source: Any,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> bytes:
    """
    Returns the full content of `source` as an immutable `bytes` object.

    Char streams and strings are encoded with `encoding`; byte streams and
    byte buffers are returned unchanged and must not be given an encoding.
    """
    match kind_selector.classify(source):
        case Kind.BYTE_STREAM:
            _reject_encoding(encoding, Kind.BYTE_STREAM, "bytes")
            return conversions.stream_to_bytes(source, buffer_size)
        case Kind.CHAR_STREAM:
            return conversions.text_to_bytes(source, encoding, buffer_size)
        case Kind.STRING:
            return conversions.string_to_bytes(source, encoding, buffer_size)
        case Kind.BYTES:
            _reject_encoding(encoding, Kind.BYTES, "bytes")
            validation.validate_buffer_size(buffer_size)
            return validation.as_byte_view(source).tobytes()
