# streamcopy/lowlevel.py
"""
The two primitive copy loops and the stream helpers built directly on them.

Every conversion in the library funnels through `copy_bytes` or
`copy_chars`; nothing else in the package reads from a stream in a loop.

Neither primitive closes or flushes the streams it is given. Each call
allocates exactly one scratch buffer of `buffer_size` elements, so wrapping
the arguments in an extra buffering layer (e.g. `io.BufferedReader`) before
copying only adds a second buffer without making the copy faster.
"""

import contextlib
from typing import Optional

from .config import DEFAULT_BUFFER_SIZE
from .types import ByteSink, ByteSource, CharSink, CharSource, Closeable
from ._internal import validation


def copy_bytes(
    source: ByteSource,
    sink: ByteSink,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """
    Copies bytes from a byte source to a byte sink until the source is exhausted.

    Sources that implement `readinto` (BytesIO, buffered and raw files) are
    read straight into the scratch buffer; others are read with
    `read(buffer_size)`.

    Args:
        source: The byte source to read from.
        sink: The byte sink to write to.
        buffer_size: Size of the scratch buffer.

    Returns:
        The number of bytes copied.

    Raises:
        Any exception raised by `source` or `sink`, unchanged. Bytes written
        before the failure stay written.
    """
    validation.validate_buffer_size(buffer_size)
    readinto = getattr(source, "readinto", None)
    if readinto is None:
        return _copy_by_read(source, sink, buffer_size, b"")

    buffer = bytearray(buffer_size)
    view = memoryview(buffer)
    count = 0
    while True:
        n = readinto(view)
        if not n:
            break
        # sinks may keep the object they are given
        sink.write(bytes(view[:n]))
        count += n
    return count


def copy_chars(
    source: CharSource,
    sink: CharSink,
    buffer_size: int = DEFAULT_BUFFER_SIZE
) -> int:
    """
    Copies characters from a char source to a char sink until the source is exhausted.

    Args:
        source: The char source to read from.
        sink: The char sink to write to.
        buffer_size: Maximum number of characters requested per read.

    Returns:
        The number of characters copied.
    """
    validation.validate_buffer_size(buffer_size)
    return _copy_by_read(source, sink, buffer_size, "")


def _copy_by_read(source, sink, buffer_size: int, eof) -> int:
    count = 0
    while True:
        chunk = source.read(buffer_size)
        if chunk == eof:
            break
        sink.write(chunk)
        count += len(chunk)
    return count


def content_equals(source_a: ByteSource, source_b: ByteSource) -> bool:
    """
    Compares two byte sources for identical content and length.

    The sources are read one byte at a time in lockstep and the comparison
    stops at the first difference, so at most one byte past the divergence
    point is consumed from either source. Neither source is closed.

    Returns:
        True if both sources yield the same bytes and end together (two
        empty sources are equal), False otherwise.
    """
    while True:
        a = source_a.read(1)
        b = source_b.read(1)
        if a != b:
            return False
        if not a:
            return True


def close_quietly(resource: Optional[Closeable]) -> None:
    """
    Closes a resource, ignoring any error raised while closing it.

    Intended for cleanup paths only, where a close failure must not replace
    an error that is already propagating. `None` is accepted and ignored.
    """
    if resource is None:
        return
    with contextlib.suppress(Exception):
        resource.close()
