"""Table of contents: shared pagination rule and the ToC document itself.

``layout_toc`` is the single source of truth for how many entries fit on
each ToC page.  The assembler sizes the page offset with it before content
is rendered, and ``generate_toc`` draws from the same layout, so the
offset baked into every section page number cannot drift.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from axis_intake.assembly.content import SurfaceFactory
from axis_intake.core.config import BrandingConfig
from axis_intake.exceptions import PageAccountingError
from axis_intake.models import PageRecord
from axis_intake.rendering.cursor import PageGeometry, mm_to_pt
from axis_intake.rendering.page_chrome import PageChrome
from axis_intake.rendering.protocols import IDrawingSurface
from axis_intake.rendering.styles import TextStyle

TOC_TITLE = "Table of Contents"

_ENTRY_INDENT_MM = 5.0
_LEADER_GAP_MM = 2.0


def layout_toc(entry_count: int, geometry: PageGeometry) -> list[list[float]]:
    """Baseline ``y`` of every entry, grouped by ToC page.

    The first page starts below the title; a new page starts whenever the
    next line would pass the bottom margin.  Always at least one page.
    """
    pages: list[list[float]] = [[]]
    y = geometry.content_top + geometry.toc_title_gap
    for _ in range(entry_count):
        if y + geometry.toc_line_height > geometry.bottom:
            pages.append([])
            y = geometry.content_top
        pages[-1].append(y)
        y += geometry.toc_line_height
    return pages


def toc_page_count(entry_count: int, geometry: PageGeometry) -> int:
    return len(layout_toc(entry_count, geometry))


def dot_leader(available: float, dot_width: float) -> str:
    """Dots filling *available* points; never fewer than one."""
    if dot_width <= 0:
        return "."
    return "." * max(int(available // dot_width), 1)


def generate_toc(
    page_records: Sequence[PageRecord],
    included_titles: Sequence[str],
    *,
    surface_factory: SurfaceFactory,
    geometry: PageGeometry,
    styles: Mapping[str, TextStyle],
    branding: BrandingConfig | None = None,
    first_page: int = 1,
    total_pages: int | None = None,
) -> bytes:
    """Render one entry per included title, in the given order.

    A title without a page record is a data-consistency fault and raises
    ``PageAccountingError``; entries are never skipped.  *first_page* is
    the merged-document number of the first ToC page, used for footers.
    """
    pages_by_title = {r.title: r.page for r in page_records}
    missing = [t for t in included_titles if t not in pages_by_title]
    if missing:
        raise PageAccountingError(f"No page recorded for section(s): {', '.join(missing)}")

    surface = surface_factory(geometry.width, geometry.height)
    chrome = PageChrome(surface, geometry, styles, branding)
    entry_style = styles["toc_entry"]
    titles = iter(included_titles)

    for page_index, baselines in enumerate(layout_toc(len(included_titles), geometry)):
        if page_index:
            surface.new_page()
        chrome.draw_header(page_index)
        if page_index == 0:
            surface.draw_text(geometry.margin, geometry.content_top, TOC_TITLE, styles["toc_title"])
        for y in baselines:
            title = next(titles)
            _draw_entry(surface, geometry, entry_style, y, title, pages_by_title[title])
        if total_pages is not None:
            chrome.draw_footer(first_page + page_index, total_pages)

    return surface.finish()


def _draw_entry(
    surface: IDrawingSurface,
    geometry: PageGeometry,
    style: TextStyle,
    y: float,
    title: str,
    page: int,
) -> None:
    number = str(page)
    gap = mm_to_pt(_LEADER_GAP_MM)
    x = geometry.margin + mm_to_pt(_ENTRY_INDENT_MM)

    surface.draw_text(x, y, title, style)
    leader_start = x + surface.text_width(title, style) + gap
    leader_end = geometry.right - surface.text_width(number, style) - gap
    surface.draw_text(leader_start, y, dot_leader(leader_end - leader_start, surface.text_width(".", style)), style)
    surface.draw_right_text(geometry.right, y, number, style)
