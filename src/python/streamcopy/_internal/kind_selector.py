# streamcopy/_internal/kind_selector.py

"""
Internal logic for deciding which kind of argument a caller passed in.
"""

import io
from typing import Any

from ..abc import StreamAdapter
from ..types import Kind


def _supports_buffer(obj: Any) -> bool:
    try:
        memoryview(obj).release()
    except TypeError:
        return False
    return True


def classify(obj: Any) -> Kind:
    """
    Classifies a source or sink argument.

    The heuristics are, in order:
    - `str` is a string.
    - Standard text streams and the library's own adapters are char streams.
    - Any other standard `io` stream is a char stream if it exposes an
      `encoding` attribute, a byte stream otherwise.
    - Buffer-protocol objects (bytes, bytearray, memoryview, array.array,
      NumPy arrays) are byte arrays.
    - Other stream-like objects are char streams if they expose an
      `encoding` attribute, byte streams otherwise.

    Args:
        obj: The argument to analyze.

    Returns:
        The Kind of the argument.

    Raises:
        TypeError: If the object is neither a string, a byte buffer nor a stream.
    """
    match obj:
        case str():
            return Kind.STRING
        case io.TextIOBase() | StreamAdapter():
            return Kind.CHAR_STREAM
        case io.IOBase():
            # text-mode SpooledTemporaryFile is an IOBase but not a TextIOBase
            return Kind.CHAR_STREAM if hasattr(obj, "encoding") else Kind.BYTE_STREAM
        case _ if _supports_buffer(obj):
            return Kind.BYTES
        case _ if hasattr(obj, "read") or hasattr(obj, "write"):
            return Kind.CHAR_STREAM if hasattr(obj, "encoding") else Kind.BYTE_STREAM
        case _:
            raise TypeError(
                f"Expected a string, a byte buffer or a stream, not {type(obj).__name__}"
            )


def classify_sink(obj: Any) -> Kind:
    """Classifies a sink argument, rejecting in-memory values that cannot be written to."""
    kind = classify(obj)
    if kind not in (Kind.BYTE_STREAM, Kind.CHAR_STREAM):
        raise TypeError(
            f"Sink must be a byte or char stream, not {type(obj).__name__}"
        )
    return kind
