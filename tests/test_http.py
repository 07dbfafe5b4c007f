import http.client
import json
import pathlib
import sys
from io import BytesIO
from urllib.error import HTTPError, URLError

import pytest

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1]))
from paper_export.core.errors import ApiError
from paper_export.core.http import http_content, http_json
from paper_export.core.utils import export_file


class FakeResponse:
    def __init__(self, body, status=200, headers=None):
        self._body = body
        self.status = status
        self.headers = headers or {}

    def read(self):
        return self._body

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


def test_http_json_forbidden(monkeypatch):
    def fake_urlopen(req, timeout=60):
        body = b'{"error_summary": "missing_scope/..", "error": {".tag": "missing_scope"}}'
        raise HTTPError(req.full_url, 403, "Forbidden", None, BytesIO(body))

    monkeypatch.setattr("paper_export.core.http.urlopen", fake_urlopen)
    with pytest.raises(ApiError) as exc:
        http_json("https://example/2/files/list_folder", "token", {"path": ""})
    assert exc.value.status == 403
    assert "Forbidden" in str(exc.value)
    assert "missing_scope/.." in str(exc.value)


def test_http_json_unauthorized(monkeypatch):
    def fake_urlopen(req, timeout=60):
        raise HTTPError(req.full_url, 401, "Unauthorized", None, BytesIO(b"invalid_access_token"))

    monkeypatch.setattr("paper_export.core.http.urlopen", fake_urlopen)
    with pytest.raises(ApiError) as exc:
        http_json("https://example/2/x", "token", {})
    assert exc.value.status == 401
    assert str(exc.value) == "Authentication failed: invalid_access_token"


def test_http_json_network_error(monkeypatch):
    def fake_urlopen(req, timeout=60):
        raise URLError("connection refused")

    monkeypatch.setattr("paper_export.core.http.urlopen", fake_urlopen)
    with pytest.raises(ApiError) as exc:
        http_json("https://example/2/x", "token", {})
    assert exc.value.status is None
    assert "connection refused" in str(exc.value)


def test_http_json_sends_bearer_and_body(monkeypatch):
    seen = {}

    def fake_urlopen(req, timeout=60):
        seen["method"] = req.get_method()
        seen["auth"] = req.get_header("Authorization")
        seen["body"] = json.loads(req.data.decode("utf-8"))
        return FakeResponse(b'{"entries": [], "cursor": "c", "has_more": false}')

    monkeypatch.setattr("paper_export.core.http.urlopen", fake_urlopen)
    data = http_json("https://example/2/files/list_folder", "secret", {"path": "/A", "recursive": True})
    assert data["cursor"] == "c"
    assert seen["method"] == "POST"
    assert seen["auth"] == "Bearer secret"
    assert seen["body"] == {"path": "/A", "recursive": True}


def test_http_json_rejects_non_json(monkeypatch):
    monkeypatch.setattr(
        "paper_export.core.http.urlopen", lambda req, timeout=60: FakeResponse(b"<html>")
    )
    with pytest.raises(ApiError):
        http_json("https://example/2/x", "token", {})


def test_http_content_puts_arg_in_header(monkeypatch):
    seen = {}

    def fake_urlopen(req, timeout=60):
        seen["arg"] = json.loads(req.get_header("Dropbox-api-arg"))
        seen["auth"] = req.get_header("Authorization")
        seen["data"] = req.data
        return FakeResponse(b"# Title\n", headers={"Dropbox-API-Result": "{}"})

    monkeypatch.setattr("paper_export.core.http.urlopen", fake_urlopen)
    raw = http_content(
        "https://example/2/files/export",
        "token",
        {"path": "id:abc", "export_format": "markdown"},
        debug=True,
    )
    assert raw == b"# Title\n"
    assert seen["arg"] == {"path": "id:abc", "export_format": "markdown"}
    assert seen["data"] is None
    assert seen["auth"] == "Bearer token"


def test_http_content_conflict_carries_error_summary(monkeypatch):
    def fake_urlopen(req, timeout=60):
        body = b'{"error_summary": "non_exportable/..", "error": {".tag": "non_exportable"}}'
        raise HTTPError(req.full_url, 409, "Conflict", None, BytesIO(body))

    monkeypatch.setattr("paper_export.core.http.urlopen", fake_urlopen)
    with pytest.raises(ApiError) as exc:
        export_file("token", "id:abc")
    assert exc.value.status == 409
    assert str(exc.value) == "[HTTP 409] non_exportable/.."
    assert exc.value.url.endswith("/files/export")


def test_dropped_connection_becomes_api_error(monkeypatch):
    def fake_urlopen(req, timeout=60):
        raise http.client.RemoteDisconnected("Remote end closed connection without response")

    monkeypatch.setattr("paper_export.core.http.urlopen", fake_urlopen)
    with pytest.raises(ApiError) as exc:
        http_json("https://example/2/files/list_folder", "token", {"path": ""})
    assert exc.value.status is None
    assert "RemoteDisconnected" in str(exc.value)


def test_short_read_becomes_api_error(monkeypatch):
    class ShortResponse(FakeResponse):
        def read(self):
            raise http.client.IncompleteRead(b"# par", 100)

    monkeypatch.setattr(
        "paper_export.core.http.urlopen", lambda req, timeout=60: ShortResponse(b"")
    )
    with pytest.raises(ApiError):
        http_content("https://example/2/files/export", "token", {"path": "id:abc"})
