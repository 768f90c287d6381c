# streamcopy/conversions.py
"""
One function per source/destination pair.

Only `lowlevel.copy_bytes` and `lowlevel.copy_chars` move data in a loop.
Every function here either calls one of them directly, wraps its arguments
in an adapter or in-memory buffer and calls another function from this
module, or (for data that is already fully in memory) issues a single write.

    Function          Input        Output       Built from
    --------          -----        ------       ----------
    copy_stream       byte stream  byte stream  copy_bytes
    copy_text         char stream  char stream  copy_chars
    decode_stream     byte stream  char stream  copy_chars + DecodingReader
    stream_to_string  byte stream  str          decode_stream
    stream_to_bytes   byte stream  bytes        copy_bytes
    encode_text       char stream  byte stream  copy_chars + EncodingWriter
    text_to_string    char stream  str          copy_chars
    text_to_bytes     char stream  bytes        encode_text
    string_to_stream  str          byte stream  encode_text
    string_to_writer  str          char stream  (single write)
    string_to_bytes   str          bytes        string_to_stream
    bytes_to_writer   bytes        char stream  decode_stream
    bytes_to_string   bytes        str          bytes_to_writer
    bytes_to_stream   bytes        byte stream  (single write)

Functions that take an `encoding` fall back to `config.DEFAULT_ENCODING`
when it is None.
"""
import io
from typing import Any, Optional

from . import lowlevel
from .adapters import DecodingReader, EncodingWriter
from .config import DEFAULT_BUFFER_SIZE
from .types import ByteSink, ByteSource, CharSink, CharSource
from ._internal import validation

# =============================================================================
# byte stream -> *
# =============================================================================

def copy_stream(
    source: ByteSource,
    sink: ByteSink,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """Copies bytes from a byte stream to a byte stream. Returns the byte count."""
    return lowlevel.copy_bytes(source, sink, buffer_size)


def decode_stream(
    source: ByteSource,
    sink: CharSink,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """
    Decodes bytes from a byte stream and writes the characters to a char stream.

    Args:
        source: The byte stream to read from.
        sink: The char stream to write to.
        encoding: Name of the encoding used to decode `source`.
        buffer_size: Size of the scratch buffer.

    Returns:
        The number of characters written.

    Raises:
        UnsupportedEncodingError: If `encoding` is unknown. Nothing is read
            from `source` in that case.
    """
    reader = DecodingReader(source, encoding)
    return lowlevel.copy_chars(reader, sink, buffer_size)


def stream_to_string(
    source: ByteSource,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> str:
    """Reads a byte stream to exhaustion and returns its decoded content."""
    out = io.StringIO()
    decode_stream(source, out, encoding, buffer_size)
    return out.getvalue()


def stream_to_bytes(
    source: ByteSource,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> bytes:
    """Reads a byte stream to exhaustion and returns its content."""
    out = io.BytesIO()
    lowlevel.copy_bytes(source, out, buffer_size)
    return out.getvalue()

# =============================================================================
# char stream -> *
# =============================================================================

def copy_text(
    source: CharSource,
    sink: CharSink,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """Copies characters from a char stream to a char stream. Returns the character count."""
    return lowlevel.copy_chars(source, sink, buffer_size)


def encode_text(
    source: CharSource,
    sink: ByteSink,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """
    Encodes characters from a char stream onto a byte stream, then flushes the byte stream.

    The encoding adapter holds encoded bytes back until it is flushed, so the
    flush is part of the operation. If the copy fails, the pending tail is
    not written and `sink` is not flushed.

    Returns:
        The number of characters read from `source`.
    """
    with EncodingWriter(sink, encoding, buffer_size=buffer_size) as writer:
        count = lowlevel.copy_chars(source, writer, buffer_size)
    return count


def text_to_string(
    source: CharSource,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> str:
    """Reads a char stream to exhaustion and returns its content."""
    out = io.StringIO()
    lowlevel.copy_chars(source, out, buffer_size)
    return out.getvalue()


def text_to_bytes(
    source: CharSource,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> bytes:
    """Reads a char stream to exhaustion and returns its content encoded."""
    out = io.BytesIO()
    encode_text(source, out, encoding, buffer_size)
    return out.getvalue()

# =============================================================================
# str -> *
# =============================================================================

def string_to_stream(
    text: str,
    sink: ByteSink,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """Encodes a string onto a byte stream, then flushes the byte stream."""
    return encode_text(io.StringIO(text), sink, encoding, buffer_size)


def string_to_writer(text: str, sink: CharSink) -> int:
    # already in memory, no buffering needed
    sink.write(text)
    return len(text)


def string_to_bytes(
    text: str,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> bytes:
    """Returns the encoded form of a string."""
    out = io.BytesIO()
    string_to_stream(text, out, encoding, buffer_size)
    return out.getvalue()

# =============================================================================
# bytes -> *
# =============================================================================

def bytes_to_writer(
    data: Any,
    sink: CharSink,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """
    Decodes a byte buffer and writes the characters to a char stream.

    Args:
        data: Any C-contiguous buffer-protocol object.
        sink: The char stream to write to.
        encoding: Name of the encoding used to decode `data`.
        buffer_size: Size of the scratch buffer.

    Returns:
        The number of characters written.
    """
    view = validation.as_byte_view(data)
    return decode_stream(io.BytesIO(view), sink, encoding, buffer_size)


def bytes_to_string(
    data: Any,
    encoding: Optional[str] = None,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> str:
    """Returns the decoded form of a byte buffer."""
    out = io.StringIO()
    bytes_to_writer(data, out, encoding, buffer_size)
    return out.getvalue()


def bytes_to_stream(data: Any, sink: ByteSink) -> int:
    """Writes a byte buffer to a byte stream in one call. Returns the byte count."""
    view = validation.as_byte_view(data)
    sink.write(view)
    return view.nbytes
