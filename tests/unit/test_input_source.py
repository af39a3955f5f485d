import io
import os
import threading
from pathlib import Path

import pytest

from magicfile.core.exceptions import (
    AlreadyConsumedError,
    EmptyStreamError,
    InputNotFoundError,
    MagicFileError,
)
from magicfile.core.input_source import (
    BufferInput,
    PathInput,
    StreamInput,
    StreamState,
    as_input_source,
    from_buffer,
    from_path,
    from_stream,
    materialize,
    resolve,
)
from magicfile.core.sniff_buffer import SniffBuffer

BOGUS_FILE_PATH = "thisFileProbablyDoesNot.exist"


@pytest.mark.unit
def test_from_path_returns_path_on_resolve(checkme_path):
    source = from_path(checkme_path)

    assert isinstance(source, PathInput)
    assert resolve(source) == checkme_path
    assert resolve(source) == checkme_path


@pytest.mark.unit
def test_from_path_missing_file():
    with pytest.raises(InputNotFoundError) as excinfo:
        from_path(BOGUS_FILE_PATH)

    assert isinstance(excinfo.value, FileNotFoundError)
    assert isinstance(excinfo.value, MagicFileError)
    assert excinfo.value.path == Path(BOGUS_FILE_PATH)
    assert "File cannot be read" in str(excinfo.value)


@pytest.mark.unit
def test_path_resolution_rechecks_existence(checkme_path):
    source = from_path(str(checkme_path))
    checkme_path.unlink()

    with pytest.raises(InputNotFoundError):
        resolve(source)


@pytest.mark.unit
@pytest.mark.skipif(os.geteuid() == 0, reason="root can read anything")
def test_path_resolution_rechecks_readability(checkme_path):
    source = from_path(checkme_path)
    checkme_path.chmod(0)
    try:
        with pytest.raises(InputNotFoundError):
            resolve(source)
    finally:
        checkme_path.chmod(0o644)


@pytest.mark.unit
def test_stream_resolves_once():
    stream = io.BytesIO(b"0123456789")
    source = from_stream(stream)

    assert source.consumed is False
    buffer = resolve(source)

    assert buffer.data == b"0123456789"
    assert source.consumed is True
    assert source.state is StreamState.RESOLVED
    assert stream.closed is True

    with pytest.raises(AlreadyConsumedError):
        resolve(source)


@pytest.mark.unit
def test_stream_respects_capacity():
    source = from_stream(io.BytesIO(b"abcdef"), capacity=2)
    assert resolve(source).data == b"ab"


@pytest.mark.unit
def test_empty_stream_fails_and_counts_as_consumed():
    source = from_stream(io.BytesIO(b""))

    with pytest.raises(EmptyStreamError):
        resolve(source)
    assert source.state is StreamState.FAILED

    with pytest.raises(AlreadyConsumedError):
        resolve(source)


@pytest.mark.unit
def test_closed_stream_fails():
    stream = io.BytesIO(b"data")
    stream.close()
    source = from_stream(stream)

    with pytest.raises(EmptyStreamError, match="stream is closed"):
        resolve(source)
    assert source.state is StreamState.FAILED


@pytest.mark.unit
def test_stream_read_error_closes_and_fails():
    class BrokenStream(io.RawIOBase):
        def readable(self):
            return True

        def read(self, size=-1):
            raise OSError("read error")

    stream = BrokenStream()
    source = from_stream(stream)

    with pytest.raises(OSError, match="read error"):
        resolve(source)
    assert stream.closed is True
    assert source.state is StreamState.FAILED


@pytest.mark.unit
def test_concurrent_stream_resolution_reads_once():
    source = from_stream(io.BytesIO(b"shared stream"))
    outcomes: list[object] = []
    barrier = threading.Barrier(8)

    def worker():
        barrier.wait()
        try:
            outcomes.append(resolve(source))
        except AlreadyConsumedError as e:
            outcomes.append(e)

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    buffers = [item for item in outcomes if isinstance(item, SniffBuffer)]
    assert len(buffers) == 1
    assert buffers[0].data == b"shared stream"
    assert len(outcomes) == 8


@pytest.mark.unit
def test_buffer_source_is_repeatable():
    source = from_buffer(b"same bytes")

    first = resolve(source)
    second = resolve(source)

    assert first is second
    assert first.data == b"same bytes"


@pytest.mark.unit
def test_from_buffer_accepts_sniff_buffer():
    buffer = SniffBuffer(b"abc")
    assert from_buffer(buffer).buffer is buffer


@pytest.mark.unit
def test_materialize_turns_stream_into_buffer():
    source = from_stream(io.BytesIO(b"payload"))
    materialized = materialize(source)

    assert isinstance(materialized, BufferInput)
    assert resolve(materialized).data == b"payload"
    assert resolve(materialized).data == b"payload"
    assert source.consumed is True


@pytest.mark.unit
def test_materialize_leaves_other_sources_alone(checkme_path):
    path_source = from_path(checkme_path)
    buffer_source = from_buffer(b"abc")

    assert materialize(path_source) is path_source
    assert materialize(buffer_source) is buffer_source


@pytest.mark.unit
def test_as_input_source_coercion(checkme_path):
    assert isinstance(as_input_source(str(checkme_path)), PathInput)
    assert isinstance(as_input_source(checkme_path), PathInput)
    assert isinstance(as_input_source(b"bytes"), BufferInput)
    assert isinstance(as_input_source(bytearray(b"bytes")), BufferInput)
    assert isinstance(as_input_source(SniffBuffer(b"bytes")), BufferInput)
    assert isinstance(as_input_source(io.BytesIO(b"bytes")), StreamInput)

    existing = from_buffer(b"x")
    assert as_input_source(existing) is existing

    with pytest.raises(TypeError, match="No file specified"):
        as_input_source(None)
    with pytest.raises(TypeError):
        as_input_source(42)


@pytest.mark.unit
def test_resolve_rejects_unknown_sources():
    with pytest.raises(TypeError):
        resolve("not a source")
