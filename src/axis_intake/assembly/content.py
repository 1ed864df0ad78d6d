"""One rendering pass over the included sections."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass

from axis_intake.assembly.page_accountant import PageAccountant
from axis_intake.catalog.descriptors import SectionSpec
from axis_intake.core.config import BrandingConfig
from axis_intake.models import AnswerRecord, PageRecord
from axis_intake.rendering.cursor import LayoutCursor, PageGeometry
from axis_intake.rendering.page_chrome import PageChrome
from axis_intake.rendering.protocols import IDrawingSurface
from axis_intake.rendering.section_renderer import SectionRenderer
from axis_intake.rendering.styles import TextStyle

SurfaceFactory = Callable[[float, float], IDrawingSurface]


@dataclass(frozen=True)
class ContentPass:
    """Output of one content pass."""

    pdf: bytes
    page_count: int
    records: tuple[PageRecord, ...]
    offset: int

    @property
    def section_starts(self) -> tuple[int, ...]:
        """Content-relative 1-based start page of each section."""
        return tuple(r.page - self.offset for r in self.records)


def render_content(
    sections: Sequence[SectionSpec],
    record: AnswerRecord,
    *,
    surface_factory: SurfaceFactory,
    geometry: PageGeometry,
    styles: Mapping[str, TextStyle],
    branding: BrandingConfig | None = None,
    offset: int = 0,
    total_pages: int | None = None,
) -> ContentPass:
    """Render *sections* onto a fresh surface.

    Section start pages are recorded with *offset* added.  Footers are only
    drawn when *total_pages* is known.
    """
    surface = surface_factory(geometry.width, geometry.height)
    chrome = PageChrome(surface, geometry, styles, branding)

    def end_page(page_index: int) -> None:
        if total_pages is not None:
            chrome.draw_footer(page_index + 1 + offset, total_pages)

    cursor = LayoutCursor(surface, geometry, on_page_start=chrome.draw_header, on_page_end=end_page)
    renderer = SectionRenderer(cursor, styles)
    accountant = PageAccountant(lambda: cursor.page_number, offset)

    for spec in sections:
        # Break first so the recorded page is the one the title lands on.
        cursor.ensure(geometry.section_reserve)
        accountant.record_section_start(spec.title)
        renderer.render_section(spec, record.section(spec.answer_key))

    cursor.close()
    pdf = surface.finish()
    return ContentPass(pdf=pdf, page_count=surface.page_count, records=tuple(accountant.records), offset=offset)
