"""Tests for table-of-contents pagination and drawing."""

from __future__ import annotations

import pytest

from axis_intake.assembly.toc import TOC_TITLE, dot_leader, generate_toc, layout_toc, toc_page_count
from axis_intake.exceptions import PageAccountingError
from axis_intake.models import PageRecord
from axis_intake.rendering.cursor import PageGeometry
from tests.fakes.fake_surface import SurfaceRecorder


def _records(count: int, first_page: int = 3) -> tuple[list[PageRecord], list[str]]:
    titles = [f"{i}. Section {i}" for i in range(1, count + 1)]
    return [PageRecord(title=t, page=first_page + i // 2) for i, t in enumerate(titles)], titles


class TestLayout:
    @pytest.mark.parametrize(("entries", "pages"), [(0, 1), (1, 1), (13, 1), (16, 1), (40, 2), (60, 3)])
    def test_page_count(self, geometry: PageGeometry, entries: int, pages: int) -> None:
        assert toc_page_count(entries, geometry) == pages

    def test_lines_stay_above_bottom_margin(self, geometry: PageGeometry) -> None:
        for page in layout_toc(60, geometry):
            assert all(y + geometry.toc_line_height <= geometry.bottom for y in page)

    def test_first_page_starts_below_title(self, geometry: PageGeometry) -> None:
        pages = layout_toc(40, geometry)
        assert pages[0][0] == pytest.approx(geometry.content_top + geometry.toc_title_gap)
        assert pages[1][0] == pytest.approx(geometry.content_top)

    def test_every_entry_placed_once(self, geometry: PageGeometry) -> None:
        assert sum(len(p) for p in layout_toc(45, geometry)) == 45


class TestDotLeader:
    def test_fills_available_width(self) -> None:
        assert dot_leader(30.0, 3.0) == ".........."

    def test_never_empty(self) -> None:
        assert dot_leader(-12.0, 3.0) == "."
        assert dot_leader(1.0, 3.0) == "."


class TestGenerateToc:
    def test_entries_in_given_order(self, recorder: SurfaceRecorder, geometry, styles) -> None:
        records, titles = _records(16)
        generate_toc(records, titles, surface_factory=recorder, geometry=geometry, styles=styles)
        surface = recorder.surfaces[0]
        drawn = [t for t in surface.texts() if t in titles]
        assert drawn == titles
        assert surface.page_count == 1

    def test_page_numbers_right_aligned(self, recorder: SurfaceRecorder, geometry, styles) -> None:
        records, titles = _records(4, first_page=5)
        generate_toc(records, titles, surface_factory=recorder, geometry=geometry, styles=styles)
        numbers = [c for c in recorder.surfaces[0].calls if c.op == "right_text" and c.text.isdigit()]
        assert [c.text for c in numbers] == ["5", "5", "6", "6"]
        assert all(c.x == pytest.approx(geometry.right) for c in numbers)

    def test_dot_leaders_drawn(self, recorder: SurfaceRecorder, geometry, styles) -> None:
        records, titles = _records(3)
        generate_toc(records, titles, surface_factory=recorder, geometry=geometry, styles=styles)
        leaders = [t for t in recorder.surfaces[0].texts() if t and set(t) == {"."}]
        assert len(leaders) == 3

    def test_title_once_header_every_page(self, recorder: SurfaceRecorder, geometry, styles) -> None:
        records, titles = _records(40)
        generate_toc(records, titles, surface_factory=recorder, geometry=geometry, styles=styles)
        surface = recorder.surfaces[0]
        assert surface.page_count == 2
        assert surface.pages_with(TOC_TITLE) == [1]
        assert surface.pages_with("Technology Insurance Application") == [1, 2]

    def test_footers_use_merged_numbers(self, recorder: SurfaceRecorder, geometry, styles) -> None:
        records, titles = _records(40)
        generate_toc(
            records,
            titles,
            surface_factory=recorder,
            geometry=geometry,
            styles=styles,
            first_page=2,
            total_pages=25,
        )
        surface = recorder.surfaces[0]
        assert surface.pages_with("Page 2 of 25") == [1]
        assert surface.pages_with("Page 3 of 25") == [2]

    def test_no_footers_without_total(self, recorder: SurfaceRecorder, geometry, styles) -> None:
        records, titles = _records(3)
        generate_toc(records, titles, surface_factory=recorder, geometry=geometry, styles=styles)
        assert not any(t.startswith("Page ") for t in recorder.surfaces[0].texts())

    def test_missing_record_raises(self, recorder: SurfaceRecorder, geometry, styles) -> None:
        records, titles = _records(3)
        with pytest.raises(PageAccountingError, match="4. Section 4"):
            generate_toc(
                records,
                [*titles, "4. Section 4"],
                surface_factory=recorder,
                geometry=geometry,
                styles=styles,
            )
        assert recorder.surfaces == []
