import io
import json
import zipfile

import pytest
import requests

from mcasset import constants


class DummyRaw(io.BytesIO):
    decode_content = False


class DummyResp:
    def __init__(self, content=b"", status_code=200):
        self.content = content
        self.status_code = status_code
        self.raw = DummyRaw(content)
        self.closed = False

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        return json.loads(self.content)

    def close(self):
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class DummySession:
    """Serves canned bodies by URL; unknown URLs get a 404."""

    def __init__(self, routes=None):
        self.routes = dict(routes or {})
        self.calls = []
        self.headers = {}

    def add(self, url, body):
        if isinstance(body, (dict, list)):
            body = json.dumps(body).encode()
        self.routes[url] = body

    def get(self, url, stream=False, timeout=None, headers=None):
        self.calls.append(url)
        body = self.routes.get(url)
        if isinstance(body, Exception):
            raise body
        if body is None:
            return DummyResp(status_code=404)
        return DummyResp(body)


def build_zip(entries):
    """entries: list of (name, bytes or None for a directory)."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as zf:
        for name, data in entries:
            if data is None:
                zf.writestr(zipfile.ZipInfo(name), b"")
            else:
                zf.writestr(name, data)
    return buf.getvalue()


MANIFEST = {
    "latest": {"release": "1.20.4", "snapshot": "24w03a"},
    "versions": [
        {"id": "24w03a", "type": "snapshot", "url": "https://meta.test/v/24w03a.json",
         "releaseTime": "2024-01-17T13:09:21+00:00"},
        {"id": "1.20.4", "type": "release", "url": "https://meta.test/v/1.20.4.json",
         "releaseTime": "2023-12-07T12:56:20+00:00"},
        {"id": "1.20.3", "type": "release", "url": "https://meta.test/v/1.20.3.json",
         "releaseTime": "2023-12-05T12:10:33+00:00"},
    ],
}


def version_info(version_id):
    return {
        "id": version_id,
        "assetIndex": {"id": "12", "url": f"https://meta.test/index/{version_id}.json"},
        "downloads": {
            "client": {"url": f"https://meta.test/client/{version_id}.jar",
                       "sha1": "0" * 40, "size": 100},
        },
    }


@pytest.fixture
def session():
    s = DummySession()
    s.add(constants.VERSION_MANIFEST_URL, MANIFEST)
    return s


@pytest.fixture
def make_zip():
    return build_zip


@pytest.fixture
def manifest_json():
    return json.loads(json.dumps(MANIFEST))


@pytest.fixture
def make_version_info():
    return version_info
