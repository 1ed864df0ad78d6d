"""Per-page header and footer shared by content and table-of-contents pages."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from axis_intake.core.config import BrandingConfig
from axis_intake.rendering.cursor import PageGeometry, mm_to_pt
from axis_intake.rendering.protocols import IDrawingSurface
from axis_intake.rendering.styles import BRAND_BLUE, TextStyle

log = logging.getLogger(__name__)

_LOGO_WIDTH_MM = 30.0
_LOGO_HEIGHT_MM = 15.0
_RULE_WIDTH = 1.4
_FOOTER_RIGHT_INSET_MM = 40.0
_FOOTER_BASELINE_MM = 10.0


class PageChrome:
    """Draws the brand header and the ``Page N of T`` footer."""

    def __init__(
        self,
        surface: IDrawingSurface,
        geometry: PageGeometry,
        styles: Mapping[str, TextStyle],
        branding: BrandingConfig | None = None,
    ) -> None:
        self._surface = surface
        self._geometry = geometry
        self._styles = styles
        self._branding = branding or BrandingConfig()
        self._logo = self._branding.logo_path
        if self._logo is not None and not self._logo.is_file():
            log.warning("Logo %s not found; using brand name text", self._logo)
            self._logo = None

    def draw_header(self, page_index: int = 0) -> None:
        g = self._geometry
        s = self._surface
        if self._logo is not None:
            s.draw_image(
                self._logo,
                g.margin,
                g.header_logo_top,
                mm_to_pt(_LOGO_WIDTH_MM),
                mm_to_pt(_LOGO_HEIGHT_MM),
            )
        else:
            s.draw_text(g.margin, g.header_baseline, self._branding.brand_name, self._styles["header_brand"])
        s.draw_right_text(g.right, g.header_baseline, self._branding.product_title, self._styles["header_title"])
        s.draw_line(g.margin, g.header_rule, g.right, g.header_rule, BRAND_BLUE, _RULE_WIDTH)

    def draw_footer(self, page_number: int, total_pages: int) -> None:
        g = self._geometry
        self._surface.draw_text(
            g.width - mm_to_pt(_FOOTER_RIGHT_INSET_MM),
            g.height - mm_to_pt(_FOOTER_BASELINE_MM),
            f"Page {page_number} of {total_pages}",
            self._styles["footer"],
        )
