# tests/conftest.py
"""
Pytest configuration and shared fixtures for the test suite.
"""
import io
import pytest
from pathlib import Path

SAMPLE_TEXT = "Grüße, 世界! naïve café ✓ \U0001F389\nsecond line\r\nthird"


class _ReadOnlySource:
    """A byte source exposing only `read`, so the copy loop cannot use `readinto`."""
    def __init__(self, data: bytes, max_chunk: int | None = None):
        self._stream = io.BytesIO(data)
        self._max_chunk = max_chunk
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if self._max_chunk is not None and (size < 0 or size > self._max_chunk):
            size = self._max_chunk
        return self._stream.read(size)


class _FailingSource:
    """Yields `data` and then raises `error` on the next read."""
    def __init__(self, data: bytes, error: Exception):
        self._data = data
        self._error = error
        self._done = False

    def read(self, size: int = -1) -> bytes:
        if self._done:
            raise self._error
        self._done = True
        return self._data


class _FailingSink:
    def __init__(self, error: Exception):
        self._error = error

    def write(self, data) -> int:
        raise self._error


class _CollectingSink:
    """Keeps every object handed to `write`, the way a queue-backed sink would."""
    def __init__(self):
        self.chunks = []

    def write(self, data) -> None:
        self.chunks.append(data)


class _FlushRecordingBytesIO(io.BytesIO):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.flush_count = 0

    def flush(self) -> None:
        self.flush_count += 1
        super().flush()


class _ExplodingCloser:
    def __init__(self, error: BaseException):
        self._error = error
        self.close_calls = 0

    def close(self) -> None:
        self.close_calls += 1
        raise self._error


@pytest.fixture
def read_only_source():
    """Factory: `read_only_source(data, max_chunk=None)` builds a source without `readinto`."""
    return _ReadOnlySource


@pytest.fixture
def failing_source():
    """Factory: `failing_source(data, error)` yields `data` once, then raises `error`."""
    return _FailingSource


@pytest.fixture
def failing_sink():
    """Factory: `failing_sink(error)` raises `error` on every write."""
    return _FailingSink


@pytest.fixture
def collecting_sink():
    """A byte sink that stores the written objects themselves in `.chunks`."""
    return _CollectingSink()


@pytest.fixture
def flush_recording_sink():
    """A BytesIO that counts calls to `flush()` in `.flush_count`."""
    return _FlushRecordingBytesIO()


@pytest.fixture
def exploding_closer():
    """Factory: `exploding_closer(error)` raises `error` from `close()`."""
    return _ExplodingCloser


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sample_bytes() -> bytes:
    """Every byte value, repeated so the payload spans several default-sized buffers."""
    return bytes(range(256)) * 40


@pytest.fixture(scope="session")
def utf8_text_file(tmp_path_factory) -> Path:
    """
    A UTF-8 text file on disk, written once per test session.
    """
    filepath = tmp_path_factory.getbasetemp() / "sample_utf8.txt"
    filepath.write_bytes(SAMPLE_TEXT.encode("utf-8"))
    return filepath
