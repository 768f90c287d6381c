# streamcopy/_internal/validation.py

"""
Internal argument validation shared by the copy primitives and conversions.
"""

from typing import Any


def validate_buffer_size(buffer_size: int) -> None:
    """
    Ensures a buffer size can be used to allocate a scratch buffer.

    Raises:
        TypeError: If `buffer_size` is not an integer.
        ValueError: If `buffer_size` is not positive.
    """
    # bool is an int subclass but never a meaningful size
    if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
        raise TypeError(
            f"buffer_size must be an integer, not {type(buffer_size).__name__}"
        )
    if buffer_size <= 0:
        raise ValueError(f"buffer_size must be positive, got {buffer_size}.")


def as_byte_view(data: Any) -> memoryview:
    """
    Returns a flat, byte-oriented view over a buffer-protocol object.

    Arrays with a wider item type (e.g. `array.array('i')` or a NumPy int64
    array) are viewed as their raw bytes in memory order.

    Raises:
        TypeError: If `data` does not support the buffer protocol.
        ValueError: If the buffer is not C-contiguous.
    """
    view = memoryview(data)
    if not view.c_contiguous:
        raise ValueError(
            "Buffer must be C-contiguous. Please copy it into a contiguous "
            "object (e.g. `bytes(...)` or `np.ascontiguousarray(arr)`) first."
        )
    if view.ndim == 1 and view.format == 'B':
        return view
    return view.cast('B')
