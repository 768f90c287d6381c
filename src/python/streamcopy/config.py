# streamcopy/config.py
"""
Library-wide defaults and encoding resolution.

The defaults are explicit constants rather than values read from the
environment, so a conversion behaves the same on every host regardless of
its locale.
"""
import codecs
from typing import Optional

from .exceptions import UnsupportedEncodingError

# Capacity of the scratch buffer each copy invocation allocates.
DEFAULT_BUFFER_SIZE: int = 4 * 1024

# Used whenever a conversion is called without an encoding name.
DEFAULT_ENCODING: str = "utf-8"


def resolve_encoding(encoding: Optional[str] = None) -> codecs.CodecInfo:
    """
    Looks up an encoding in the `codecs` registry.

    Args:
        encoding: An encoding name such as "UTF-8" or "US-ASCII". If None,
            `DEFAULT_ENCODING` is used.

    Returns:
        The registry's CodecInfo for the encoding.

    Raises:
        UnsupportedEncodingError: If the registry does not know the name.
    """
    name = DEFAULT_ENCODING if encoding is None else encoding
    try:
        return codecs.lookup(name)
    except LookupError as e:
        raise UnsupportedEncodingError(name) from e
