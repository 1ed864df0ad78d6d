"""Page geometry and the layout cursor that owns vertical position."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from axis_intake.core.config import PDFLayoutConfig
from axis_intake.exceptions import RenderError
from axis_intake.rendering.protocols import IDrawingSurface

try:
    from reportlab.lib.pagesizes import A4, LETTER
    from reportlab.lib.units import mm
except ImportError as _exc:
    raise ImportError(
        "reportlab is required for PDF output. Install with: pip install axis-intake"
    ) from _exc

# ── Page size lookup ─────────────────────────────────────────────────

_PAGE_SIZES = {"letter": LETTER, "a4": A4}

PageHook = Callable[[int], None]


@dataclass(frozen=True)
class PageGeometry:
    """Page dimensions and layout distances, all in points from the top edge."""

    width: float
    height: float
    margin: float
    content_top: float
    line_height: float
    question_gap: float
    section_gap: float
    section_reserve: float
    question_reserve: float
    cell_padding: float
    toc_line_height: float
    toc_title_gap: float
    header_logo_top: float
    header_baseline: float
    header_rule: float

    @classmethod
    def from_config(cls, config: PDFLayoutConfig | None = None) -> PageGeometry:
        cfg = config or PDFLayoutConfig()
        width, height = _PAGE_SIZES[cfg.page_size]
        return cls(
            width=width,
            height=height,
            margin=cfg.margin_mm * mm,
            content_top=cfg.content_top_mm * mm,
            line_height=cfg.line_height_mm * mm,
            question_gap=cfg.question_gap_mm * mm,
            section_gap=cfg.section_gap_mm * mm,
            section_reserve=cfg.section_reserve_mm * mm,
            question_reserve=cfg.question_reserve_mm * mm,
            cell_padding=cfg.table_cell_padding_mm * mm,
            toc_line_height=cfg.toc_line_height_mm * mm,
            toc_title_gap=cfg.toc_title_gap_mm * mm,
            header_logo_top=cfg.header_logo_top_mm * mm,
            header_baseline=cfg.header_text_baseline_mm * mm,
            header_rule=cfg.header_rule_mm * mm,
        )

    @property
    def bottom(self) -> float:
        """Lowest usable y before the bottom margin."""
        return self.height - self.margin

    @property
    def content_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def right(self) -> float:
        return self.width - self.margin


def mm_to_pt(value: float) -> float:
    return value * mm


class LayoutCursor:
    """Vertical position on the current page of one rendering pass.

    ``y`` stays within ``[content_top, bottom]``.  Writers call
    :meth:`ensure` with the height they are about to consume; when it does
    not fit, the page is closed (``on_page_end``), a new page is started and
    its chrome drawn (``on_page_start``) before the write proceeds.  Hooks
    receive the 0-based page index within this surface.
    """

    def __init__(
        self,
        surface: IDrawingSurface,
        geometry: PageGeometry,
        *,
        on_page_start: PageHook | None = None,
        on_page_end: PageHook | None = None,
    ) -> None:
        self.surface = surface
        self.geometry = geometry
        self._on_page_start = on_page_start
        self._on_page_end = on_page_end
        self.y = geometry.content_top
        self._closed = False
        if on_page_start is not None:
            on_page_start(self.page_index)

    @property
    def page_index(self) -> int:
        return self.surface.page_count - 1

    @property
    def page_number(self) -> int:
        """1-based page number within this surface."""
        return self.surface.page_count

    @property
    def remaining(self) -> float:
        return self.geometry.bottom - self.y

    def fits(self, height: float) -> bool:
        return self.y + height <= self.geometry.bottom

    def ensure(self, height: float) -> bool:
        """Break the page unless *height* fits below the cursor.

        Returns True when a page break happened.
        """
        if height > self.geometry.bottom - self.geometry.content_top:
            raise RenderError(f"A block of {height:.1f}pt cannot fit on one page")
        if self.fits(height):
            return False
        self.break_page()
        return True

    def break_page(self) -> None:
        if self._on_page_end is not None:
            self._on_page_end(self.page_index)
        self.surface.new_page()
        self.y = self.geometry.content_top
        if self._on_page_start is not None:
            self._on_page_start(self.page_index)

    def advance(self, height: float) -> None:
        self.y = min(self.y + height, self.geometry.bottom)

    def close(self) -> None:
        """Run the end-of-page hook for the last page; idempotent."""
        if self._closed:
            return
        self._closed = True
        if self._on_page_end is not None:
            self._on_page_end(self.page_index)
