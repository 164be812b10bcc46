import hashlib
import io

import pytest
import requests

from mcasset import utils
from conftest import DummySession


class TrackingIO(io.BytesIO):
    def __init__(self, *args, fail_after=None):
        super().__init__(*args)
        self.fail_after = fail_after
        self.writes = 0
        self.was_closed = False

    def write(self, data):
        self.writes += 1
        if self.fail_after is not None and self.writes > self.fail_after:
            raise OSError("disk full")
        return super().write(data)

    def close(self):
        self.was_closed = True


def test_object_path_shards_by_first_two_chars():
    assert utils.object_path("abcdef0123") == "ab/abcdef0123"


def test_object_path_rejects_short_hash():
    with pytest.raises(ValueError):
        utils.object_path("a")


def test_object_url_strips_trailing_slash():
    url = utils.object_url("https://res.test/", "ffee99")
    assert url == "https://res.test/ff/ffee99"


def test_copy_stream_copies_and_closes_sink_only():
    source = TrackingIO(b"x" * 40000)
    sink = TrackingIO()
    copied = utils.copy_stream(source, sink, chunk_size=1024)
    assert copied == 40000
    assert sink.getvalue() == b"x" * 40000
    assert sink.was_closed
    assert not source.was_closed


def test_copy_stream_closes_source_when_asked():
    source = TrackingIO(b"data")
    sink = TrackingIO()
    utils.copy_stream(source, sink, close_source=True)
    assert source.was_closed
    assert sink.was_closed


def test_copy_stream_closes_sink_on_failure():
    source = TrackingIO(b"y" * 4096)
    sink = TrackingIO(fail_after=1)
    with pytest.raises(OSError):
        utils.copy_stream(source, sink, close_source=True, chunk_size=1024)
    assert sink.was_closed
    assert source.was_closed


def test_open_stream_raises_and_closes_on_error_status():
    session = DummySession()
    with pytest.raises(requests.HTTPError):
        utils.open_stream(session, "https://missing.test/x")


def test_open_stream_enables_content_decoding():
    session = DummySession({"https://ok.test/x": b"body"})
    with utils.open_stream(session, "https://ok.test/x") as response:
        assert response.raw.decode_content is True
        assert response.raw.read() == b"body"


def test_get_json_raises_on_bad_body():
    session = DummySession({"https://ok.test/doc": b"not json"})
    with pytest.raises(ValueError):
        utils.get_json(session, "https://ok.test/doc")


def test_download_bytes_returns_content():
    session = DummySession({"https://ok.test/jar": b"PK\x03\x04"})
    assert utils.download_bytes(session, "https://ok.test/jar") == b"PK\x03\x04"


def test_calculate_hash_sha1(tmp_path):
    f = tmp_path / "obj"
    f.write_bytes(b"hello")
    assert utils.calculate_hash(str(f)) == hashlib.sha1(b"hello").hexdigest()


def test_is_within_directory(tmp_path):
    base = str(tmp_path / "out")
    assert utils.is_within_directory(base, base + "/assets/a.txt")
    assert not utils.is_within_directory(base, base + "/assets/../../evil.txt")
    assert not utils.is_within_directory(base, base)
    assert not utils.is_within_directory(base, base + "-sibling/x")
