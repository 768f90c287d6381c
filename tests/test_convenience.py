# tests/test_convenience.py
"""
Tests for the high-level copy/to_string/to_byte_array entry points.
"""
import io
import tempfile
import numpy as np
import pytest
from pathlib import Path

import streamcopy
from streamcopy import copy, to_byte_array, to_string, DecodingReader, EncodingWriter, Kind
from streamcopy._internal import kind_selector


@pytest.mark.parametrize("obj, expected", [
    ("text", Kind.STRING),
    (b"raw", Kind.BYTES),
    (bytearray(b"raw"), Kind.BYTES),
    (np.zeros(3, dtype=np.uint8), Kind.BYTES),
    (io.BytesIO(), Kind.BYTE_STREAM),
    (io.StringIO(), Kind.CHAR_STREAM),
])
def test_classify(obj, expected):
    assert kind_selector.classify(obj) is expected


def test_classify_read_only_object_as_byte_stream(read_only_source):
    assert kind_selector.classify(read_only_source(b"")) is Kind.BYTE_STREAM


def test_classify_spooled_temporary_files_by_mode():
    with tempfile.SpooledTemporaryFile(mode="w+") as text_file:
        assert kind_selector.classify(text_file) is Kind.CHAR_STREAM
    with tempfile.SpooledTemporaryFile(mode="w+b") as binary_file:
        assert kind_selector.classify(binary_file) is Kind.BYTE_STREAM


def test_classify_adapters_and_duck_typed_text():
    class TextLike:
        encoding = "utf-8"

        def write(self, text):
            pass

    assert kind_selector.classify(DecodingReader(io.BytesIO())) is Kind.CHAR_STREAM
    assert kind_selector.classify(EncodingWriter(io.BytesIO())) is Kind.CHAR_STREAM
    assert kind_selector.classify(TextLike()) is Kind.CHAR_STREAM


def test_classify_rejects_unknown_objects():
    with pytest.raises(TypeError, match="Expected a string"):
        kind_selector.classify(42)


# --- copy ---

def test_copy_byte_stream_to_byte_stream():
    sink = io.BytesIO()
    assert copy(io.BytesIO(b"ABC"), sink, buffer_size=1) == 3
    assert sink.getvalue() == b"ABC"


def test_copy_byte_stream_to_char_stream():
    sink = io.StringIO()
    assert copy(io.BytesIO("çà".encode("latin-1")), sink, "latin-1") == 2
    assert sink.getvalue() == "çà"


def test_copy_char_stream_to_byte_stream_flushes(flush_recording_sink):
    sink = flush_recording_sink
    assert copy(io.StringIO("ü"), sink) == 1
    assert sink.getvalue() == "ü".encode("utf-8")
    assert sink.flush_count == 1


def test_copy_char_stream_to_char_stream():
    sink = io.StringIO()
    assert copy(io.StringIO("abc"), sink) == 3
    assert sink.getvalue() == "abc"


def test_copy_string_to_streams():
    byte_sink, char_sink = io.BytesIO(), io.StringIO()
    assert copy("€", byte_sink, "cp1252") == 1
    assert copy("€", char_sink) == 1
    assert byte_sink.getvalue() == b"\x80"
    assert char_sink.getvalue() == "€"


def test_copy_bytes_to_streams():
    byte_sink, char_sink = io.BytesIO(), io.StringIO()
    assert copy(b"hi", byte_sink) == 2
    assert copy(b"hi", char_sink, "US-ASCII") == 2
    assert byte_sink.getvalue() == b"hi"
    assert char_sink.getvalue() == "hi"


def test_copy_into_text_mode_spooled_file():
    with tempfile.SpooledTemporaryFile(mode="w+") as sink:
        assert copy("hi", sink) == 2
        assert copy(io.BytesIO("çà".encode("utf-8")), sink) == 2
        sink.seek(0)
        assert sink.read() == "hiçà"


def test_copy_between_files(tmp_path: Path, utf8_text_file: Path, sample_text):
    """Reads a UTF-8 file and re-encodes it as UTF-16 through a text-mode file."""
    target = tmp_path / "utf16.txt"
    with open(utf8_text_file, "rb") as src, open(target, "w", encoding="utf-16", newline="") as dst:
        copy(src, dst)

    assert target.read_bytes().decode("utf-16") == sample_text


@pytest.mark.parametrize("source, sink", [
    (io.BytesIO(b"x"), io.BytesIO()),
    (io.StringIO("x"), io.StringIO()),
    ("x", io.StringIO()),
    (b"x", io.BytesIO()),
])
def test_copy_rejects_encoding_without_conversion(source, sink):
    with pytest.raises(ValueError, match="encoding can only be provided"):
        copy(source, sink, "utf-8")


@pytest.mark.parametrize("sink", ["a string", b"some bytes"])
def test_copy_rejects_in_memory_sinks(sink):
    with pytest.raises(TypeError, match="Sink must be"):
        copy(io.BytesIO(b"x"), sink)


def test_copy_validates_buffer_size_on_direct_writes():
    with pytest.raises(ValueError, match="buffer_size"):
        copy("x", io.StringIO(), buffer_size=0)


# --- to_string ---

@pytest.mark.parametrize("source", [
    io.BytesIO(b"\x68\x69"),
    bytes([0x68, 0x69]),
    bytearray(b"hi"),
])
def test_to_string_decodes_bytes(source):
    assert to_string(source, "US-ASCII") == "hi"


def test_to_string_from_text():
    assert to_string(io.StringIO("hello")) == "hello"
    assert to_string("hello") == "hello"
    with pytest.raises(ValueError):
        to_string(io.StringIO("hello"), "utf-8")


# --- to_byte_array ---

def test_to_byte_array_from_every_kind():
    assert to_byte_array(io.BytesIO(b"\x00\xff")) == b"\x00\xff"
    assert to_byte_array(io.StringIO("é")) == b"\xc3\xa9"
    assert to_byte_array("é", "latin-1") == b"\xe9"
    assert to_byte_array(memoryview(b"abc")) == b"abc"
    assert isinstance(to_byte_array(bytearray(b"abc")), bytes)


def test_to_byte_array_rejects_encoding_for_bytes():
    with pytest.raises(ValueError):
        to_byte_array(io.BytesIO(b"x"), "utf-8")


@pytest.mark.parametrize("data", [
    b"",
    "plain ascii".encode("utf-8"),
    "Grüße, 世界 \U0001F389".encode("utf-8"),
])
def test_utf8_round_trip(data):
    assert to_byte_array(to_string(data, "UTF-8"), "UTF-8") == data


def test_package_exports():
    for name in streamcopy.__all__:
        assert hasattr(streamcopy, name)
    assert streamcopy.DEFAULT_BUFFER_SIZE == 4096
    assert streamcopy.DEFAULT_ENCODING == "utf-8"
