# streamcopy/adapters.py
"""
Adapters that present a byte stream as a character stream.

`DecodingReader` turns a byte source into a char source and `EncodingWriter`
turns a byte sink into a char sink. Both use the incremental codecs from the
`codecs` registry, so multi-byte sequences split across reads or writes are
handled correctly.
"""
import codecs
from typing import Optional

from . import config
from .abc import StreamAdapter
from .config import DEFAULT_BUFFER_SIZE
from .exceptions import StreamConfigError
from .types import ByteSink, ByteSource
from ._internal import validation


def _lookup_text_codec(encoding: Optional[str]) -> codecs.CodecInfo:
    info = config.resolve_encoding(encoding)
    if info.incrementaldecoder is None or info.incrementalencoder is None:
        raise StreamConfigError(
            f"Encoding '{info.name}' does not provide incremental codecs."
        )
    return info


class DecodingReader(StreamAdapter):
    """
    Reads characters decoded from an underlying byte source.

    Usage:
        with open("data.txt", "rb") as f:
            reader = DecodingReader(f, "latin-1")
            text = reader.read()
    """
    def __init__(
            self,
            source: ByteSource,
            encoding: Optional[str] = None,
            errors: str = "strict",
    ):
        """
        Args:
            source: The byte source to decode.
            encoding: Name of the encoding. Defaults to `config.DEFAULT_ENCODING`.
            errors: The codec error handler ("strict", "replace", ...).

        Raises:
            UnsupportedEncodingError: If the encoding name is unknown.
        """
        info = _lookup_text_codec(encoding)
        self.encoding = info.name
        self.errors = errors
        self._source = source
        self._decoder = info.incrementaldecoder(errors)
        self._pending = ""
        self._eof = False
        self._closed = False

    def read(self, size: int = -1) -> str:
        """
        Reads up to `size` characters, or everything remaining if `size` is negative.

        Returns an empty string only once the byte source is exhausted.
        """
        self._check_open()
        if size == 0:
            return ""
        if size is None or size < 0:
            parts = [self._pending]
            self._pending = ""
            while not self._eof:
                parts.append(self._decode_next(DEFAULT_BUFFER_SIZE))
            return "".join(parts)

        while not self._pending and not self._eof:
            self._pending = self._decode_next(size)
        text, self._pending = self._pending[:size], self._pending[size:]
        return text

    def _decode_next(self, size: int) -> str:
        data = self._source.read(size)
        if not data:
            self._eof = True
            # final=True reports a truncated trailing sequence instead of dropping it
            return self._decoder.decode(b"", True)
        return self._decoder.decode(data)

    def readable(self) -> bool:
        return True

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed


class EncodingWriter(StreamAdapter):
    """
    Writes characters encoded onto an underlying byte sink.

    Encoded bytes are held in an internal buffer and only reach the sink once
    `buffer_size` bytes have accumulated, or on `flush()`/`close()`. Callers
    must flush or close the writer when done; leaving the `with` block
    normally does this.
    """
    def __init__(
            self,
            sink: ByteSink,
            encoding: Optional[str] = None,
            errors: str = "strict",
            buffer_size: int = DEFAULT_BUFFER_SIZE,
    ):
        validation.validate_buffer_size(buffer_size)
        info = _lookup_text_codec(encoding)
        self.encoding = info.name
        self.errors = errors
        self._sink = sink
        self._encoder = info.incrementalencoder(errors)
        self._buffer_size = buffer_size
        self._pending = bytearray()
        self._closed = False

    def write(self, text: str) -> int:
        """Encodes `text` and returns the number of characters accepted."""
        self._check_open()
        self._pending += self._encoder.encode(text)
        if len(self._pending) >= self._buffer_size:
            self._drain()
        return len(text)

    def _drain(self) -> None:
        if self._pending:
            self._sink.write(bytes(self._pending))
            self._pending.clear()

    def flush(self) -> None:
        """Writes all pending bytes to the sink, then flushes the sink if it can be flushed."""
        self._check_open()
        self._drain()
        flush = getattr(self._sink, "flush", None)
        if flush is not None:
            flush()

    def writable(self) -> bool:
        return True

    def close(self) -> None:
        """Finalizes the encoder and flushes. The sink itself is left open."""
        if self._closed:
            return
        try:
            self._pending += self._encoder.encode("", True)
            self.flush()
        finally:
            self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.close()
        else:
            # pending output is discarded when the block raises
            self._closed = True
