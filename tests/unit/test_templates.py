"""Tests for template fetching and page counting."""

from __future__ import annotations

import urllib.error
from io import BytesIO

import pytest

from axis_intake.assembly.templates import count_pages, fetch_template, is_url
from axis_intake.exceptions import TemplateFetchError, TemplateParseError


class _FakeResponse(BytesIO):
    def __enter__(self) -> _FakeResponse:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


class TestIsUrl:
    @pytest.mark.parametrize("location", ["https://cdn.example.com/a.pdf", "HTTP://host/a.pdf"])
    def test_urls(self, location: str) -> None:
        assert is_url(location)

    @pytest.mark.parametrize("location", ["pdf/front cover page.pdf", "/srv/end.pdf", "ftp://host/a.pdf"])
    def test_paths(self, location: str) -> None:
        assert not is_url(location)


class TestFetchTemplate:
    def test_local_file(self, tmp_path) -> None:
        path = tmp_path / "front cover page.pdf"
        path.write_bytes(b"%PDF-1.4 stub")
        assert fetch_template(str(path)) == b"%PDF-1.4 stub"

    def test_missing_file(self, tmp_path) -> None:
        location = str(tmp_path / "absent.pdf")
        with pytest.raises(TemplateFetchError) as exc_info:
            fetch_template(location)
        assert exc_info.value.source == location
        assert exc_info.value.kind == "template-fetch-failed"

    def test_empty_file(self, tmp_path) -> None:
        path = tmp_path / "empty.pdf"
        path.write_bytes(b"")
        with pytest.raises(TemplateFetchError, match="empty"):
            fetch_template(str(path))

    def test_url(self, monkeypatch) -> None:
        seen: dict[str, object] = {}

        def fake_urlopen(url, timeout):
            seen["url"], seen["timeout"] = url, timeout
            return _FakeResponse(b"%PDF-remote")

        monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)
        assert fetch_template("https://cdn.example.com/end.pdf", timeout=5.0) == b"%PDF-remote"
        assert seen == {"url": "https://cdn.example.com/end.pdf", "timeout": 5.0}

    def test_url_failure(self, monkeypatch) -> None:
        def fake_urlopen(url, timeout):
            raise urllib.error.URLError("connection refused")

        monkeypatch.setattr("urllib.request.urlopen", fake_urlopen)
        with pytest.raises(TemplateFetchError, match="connection refused"):
            fetch_template("https://cdn.example.com/end.pdf")


class TestCountPages:
    def test_real_pdf(self, make_pdf) -> None:
        assert count_pages(make_pdf(pages=3), "end template") == 3

    def test_garbage(self) -> None:
        with pytest.raises(TemplateParseError) as exc_info:
            count_pages(b"definitely not a pdf", "end template")
        assert exc_info.value.source == "end template"
        assert exc_info.value.kind == "template-parse-failed"
