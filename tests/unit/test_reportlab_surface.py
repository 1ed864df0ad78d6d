"""Tests for the reportlab drawing surface."""

from __future__ import annotations

from io import BytesIO

import pytest

pytest.importorskip("reportlab")

from axis_intake.rendering.protocols import IDrawingSurface  # noqa: E402
from axis_intake.rendering.reportlab_surface import (  # noqa: E402
    ReportLabSurface,
    _sanitize_text,
    _split_marker,
)
from axis_intake.rendering.styles import TextStyle  # noqa: E402

BODY = TextStyle("Helvetica", 10)


class TestHelpers:
    def test_sanitize_replaces_typographic_characters(self) -> None:
        assert _sanitize_text("Semi‑autonomous “fleet”…") == 'Semi-autonomous "fleet"...'

    def test_split_marker(self) -> None:
        assert _split_marker("☑ Yes") == ("☑", "Yes")
        assert _split_marker("☐ No selection") == ("☐", "No selection")
        assert _split_marker("Answer: 4") == (None, "Answer: 4")


class TestReportLabSurface:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(ReportLabSurface(595.0, 842.0), IDrawingSurface)

    def test_page_count_tracks_new_pages(self) -> None:
        surface = ReportLabSurface(595.0, 842.0)
        surface.new_page()
        surface.new_page()
        assert surface.page_count == 3

    def test_finish_produces_pdf_once(self) -> None:
        pypdf = pytest.importorskip("pypdf")
        surface = ReportLabSurface(595.0, 842.0, title="Technology Insurance Application")
        surface.draw_text(50, 100, "☑ Yes", BODY)
        surface.new_page()
        surface.draw_right_text(500, 100, "Page 2 of 2", BODY)
        data = surface.finish()
        assert data.startswith(b"%PDF")
        assert surface.finish() == data
        reader = pypdf.PdfReader(BytesIO(data))
        assert len(reader.pages) == 2
        assert "Page 2 of 2" in reader.pages[1].extract_text()

    def test_wrap_respects_width(self) -> None:
        surface = ReportLabSurface(595.0, 842.0)
        lines = surface.wrap("word " * 60, BODY, 200.0)
        assert len(lines) > 1
        assert all(surface.text_width(line, BODY) <= 200.0 for line in lines)

    def test_wrap_keeps_blank_text_as_one_line(self) -> None:
        assert ReportLabSurface(595.0, 842.0).wrap("", BODY, 200.0) == [""]

    def test_marker_adds_width(self) -> None:
        surface = ReportLabSurface(595.0, 842.0)
        assert surface.text_width("☑ Yes", BODY) > surface.text_width("Yes", BODY)
