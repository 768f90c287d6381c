# streamcopy/types.py

"""
Structural types and enumerations for the streamcopy library.
"""
from enum import Enum
from typing import Protocol


class Kind(Enum):
    """
    The four shapes of argument the conversion helpers understand.

    Sources may be any of them; sinks are always one of the stream kinds.
    """
    STRING = "string"
    BYTES = "bytes"
    BYTE_STREAM = "byte_stream"
    CHAR_STREAM = "char_stream"


class ByteSource(Protocol):
    def read(self, size: int = -1, /) -> bytes: ...


class ByteSink(Protocol):
    def write(self, data: bytes, /) -> object: ...


class CharSource(Protocol):
    def read(self, size: int = -1, /) -> str: ...


class CharSink(Protocol):
    def write(self, text: str, /) -> object: ...


class Closeable(Protocol):
    def close(self) -> None: ...
