# streamcopy/__init__.py
"""
Buffered copy and conversion helpers between byte streams, character
streams, strings and byte buffers.
"""
from .adapters import DecodingReader, EncodingWriter
from .config import DEFAULT_BUFFER_SIZE, DEFAULT_ENCODING
from .convenience import copy, to_byte_array, to_string
from .exceptions import StreamCopyError, StreamConfigError, UnsupportedEncodingError
from .lowlevel import close_quietly, content_equals, copy_bytes, copy_chars
from .types import Kind

__version__ = "0.0.1"


# Define what gets imported with 'from streamcopy import *'
__all__ = [
    'copy',
    'to_string',
    'to_byte_array',
    'content_equals',
    'close_quietly',
    'copy_bytes',
    'copy_chars',
    'DecodingReader',
    'EncodingWriter',
    'Kind',
    'DEFAULT_BUFFER_SIZE',
    'DEFAULT_ENCODING',
    'StreamCopyError',
    'StreamConfigError',
    'UnsupportedEncodingError',
    '__version__',
]
