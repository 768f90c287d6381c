# streamcopy/abc.py
"""Abstract Base Classes for the streamcopy library."""

import abc


class StreamAdapter(abc.ABC):
    """
    Abstract base class for objects that present one kind of stream as another.

    An adapter never owns the stream it wraps: closing the adapter releases
    the adapter only, and the wrapped stream stays open for the caller.
    """

    @abc.abstractmethod
    def close(self) -> None:
        """
        Closes the adapter, finishing any pending work first.
        Subsequent reads or writes on the adapter will raise an error.
        """
        raise NotImplementedError

    @property
    @abc.abstractmethod
    def closed(self) -> bool:
        """Returns True if the adapter is closed."""
        raise NotImplementedError

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError(f"I/O operation on a closed {type(self).__name__}.")

    def __enter__(self) -> "StreamAdapter":
        if self.closed:
            raise ValueError("Cannot enter context with a closed adapter.")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
