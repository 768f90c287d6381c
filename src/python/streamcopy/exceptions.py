# streamcopy/exceptions.py
"""Custom exception types for the streamcopy library."""


class StreamCopyError(Exception):
    """Base exception for all errors raised by this library."""
    pass

class StreamConfigError(StreamCopyError):
    """Error related to how an operation was configured, such as a bad encoding name."""
    pass

class UnsupportedEncodingError(StreamConfigError, LookupError):
    """
    Raised when an encoding name is not known to the `codecs` registry.

    It is raised while an encoding adapter is being constructed, so no byte
    has been read from or written to any stream when it surfaces.

    Attributes:
        encoding (str): The encoding name that failed to resolve.
    """
    def __init__(self, encoding: str):
        super().__init__(encoding)
        self.encoding = encoding

    def __str__(self) -> str:
        return f"Unsupported encoding: '{self.encoding}'"
