import pytest
import requests

from course_planner import sources
from course_planner.errors import SourceUnavailable


class FakeResponse:
    def __init__(self, text="", status_code=200):
        self.text = text
        self.status_code = status_code

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


def test_read_local_file(tmp_path):
    path = tmp_path / "c.csv"
    path.write_text("CS101,Intro\r\nCS102,Next\n", encoding="utf-8")
    assert sources.open_source(str(path)) == ["CS101,Intro", "CS102,Next"]


def test_read_local_file_strips_bom(tmp_path):
    path = tmp_path / "bom.csv"
    path.write_bytes("\ufeffCS101,Intro\n".encode("utf-8"))
    assert sources.open_source(path) == ["CS101,Intro"]


def test_missing_file_is_unavailable(tmp_path):
    with pytest.raises(SourceUnavailable):
        sources.open_source(str(tmp_path / "missing.csv"))


def test_undecodable_file_is_unavailable(tmp_path):
    path = tmp_path / "latin1.csv"
    path.write_bytes(b"CS102,Caf\xe9\n")
    with pytest.raises(SourceUnavailable) as excinfo:
        sources.open_source(str(path))
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_directory_is_unavailable(tmp_path):
    with pytest.raises(SourceUnavailable):
        sources.open_source(str(tmp_path))


def test_blank_source_is_unavailable():
    with pytest.raises(SourceUnavailable):
        sources.open_source("  ")


def test_url_source_uses_requests(monkeypatch):
    calls = {}

    def fake_get(url, headers=None, timeout=None):
        calls["url"] = url
        calls["timeout"] = timeout
        return FakeResponse("CS101,Intro\nCS102,Next,CS101\n")

    monkeypatch.setattr(sources.requests, "get", fake_get)

    lines = sources.open_source("https://example.edu/courses.csv", timeout=3)

    assert lines == ["CS101,Intro", "CS102,Next,CS101"]
    assert calls == {"url": "https://example.edu/courses.csv", "timeout": 3}


def test_url_http_error_is_unavailable(monkeypatch):
    monkeypatch.setattr(sources.requests, "get", lambda *a, **kw: FakeResponse(status_code=404))
    with pytest.raises(SourceUnavailable) as excinfo:
        sources.open_source("http://example.edu/missing.csv")
    assert "404" in excinfo.value.reason


def test_url_connection_error_is_unavailable(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(sources.requests, "get", boom)
    with pytest.raises(SourceUnavailable):
        sources.open_source("http://example.edu/courses.csv")
