import io

import pytest

from magicfile.core.constants import MAX_SNIFF_BYTES
from magicfile.core.sniff_buffer import SniffBuffer


class TrickleStream(io.RawIOBase):
    """Binary stream that returns at most ``step`` bytes per read."""

    def __init__(self, payload: bytes, step: int):
        self._payload = payload
        self._step = step
        self._pos = 0

    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        size = self._step if size < 0 else min(size, self._step)
        chunk = self._payload[self._pos : self._pos + size]
        self._pos += len(chunk)
        return chunk


class ExplodingStream(io.RawIOBase):
    def readable(self) -> bool:
        return True

    def read(self, size: int = -1) -> bytes:
        raise OSError("device went away")


@pytest.mark.unit
def test_fill_reads_up_to_capacity_and_closes():
    stream = io.BytesIO(b"x" * (MAX_SNIFF_BYTES + 100))
    buffer = SniffBuffer.fill(stream)

    assert len(buffer) == MAX_SNIFF_BYTES
    assert buffer.capacity == MAX_SNIFF_BYTES
    assert stream.closed is True


@pytest.mark.unit
def test_fill_short_read_keeps_exact_bytes():
    buffer = SniffBuffer.fill(io.BytesIO(b"hello"), capacity=64)

    assert bytes(buffer) == b"hello"
    assert len(buffer) == 5
    assert buffer.is_empty is False


@pytest.mark.unit
def test_fill_empty_stream_is_not_an_error():
    stream = io.BytesIO(b"")
    buffer = SniffBuffer.fill(stream)

    assert buffer.is_empty is True
    assert stream.closed is True


@pytest.mark.unit
def test_fill_loops_over_short_reads():
    stream = TrickleStream(b"abcdefghij", step=3)
    buffer = SniffBuffer.fill(stream, capacity=8)

    assert buffer.data == b"abcdefgh"
    assert stream.closed is True


@pytest.mark.unit
def test_fill_closes_stream_when_read_fails():
    stream = ExplodingStream()
    with pytest.raises(OSError, match="device went away"):
        SniffBuffer.fill(stream)
    assert stream.closed is True


@pytest.mark.unit
def test_fill_rejects_text_streams():
    stream = io.StringIO("not bytes")
    with pytest.raises(TypeError):
        SniffBuffer.fill(stream)
    assert stream.closed is True


@pytest.mark.unit
def test_from_bytes_truncates_to_capacity():
    buffer = SniffBuffer.from_bytes(bytearray(b"0123456789"), capacity=4)
    assert buffer.data == b"0123"

    assert SniffBuffer.from_bytes(memoryview(b"abc")).data == b"abc"

    with pytest.raises(TypeError):
        SniffBuffer.from_bytes("text")


@pytest.mark.unit
def test_buffer_invariants():
    with pytest.raises(ValueError):
        SniffBuffer(b"12345", capacity=4)
    with pytest.raises(ValueError):
        SniffBuffer(b"", capacity=0)

    buffer = SniffBuffer(b"1234", capacity=4)
    with pytest.raises(AttributeError):
        buffer.data = b"other"
