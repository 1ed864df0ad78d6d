"""Centralized colours and symbolic text styles for generated pages."""

from __future__ import annotations

from dataclasses import dataclass

from axis_intake.core.config import PDFLayoutConfig

# ── Brand palette (hex strings) ──────────────────────────────────────
# Kept as plain hex so each drawing surface can convert to whatever color
# object its rendering library requires (e.g. reportlab HexColor).

BRAND_BLUE = "#0050F0"
SKY_BLUE = "#00BCFF"
DARK_NAVY = "#000036"
ALT_ROW_BG = "#F5F5F5"
WHITE = "#FFFFFF"
BLACK = "#000000"

# ── Base-14 bold faces ───────────────────────────────────────────────

_BOLD_FACES: dict[str, str] = {
    "Helvetica": "Helvetica-Bold",
    "Times-Roman": "Times-Bold",
    "Courier": "Courier-Bold",
}


def bold_face(family: str) -> str:
    return _BOLD_FACES.get(family, f"{family}-Bold")


@dataclass(frozen=True)
class TextStyle:
    """Concrete draw attributes behind a symbolic style name."""

    font: str
    size: float
    color: str = BLACK

    @property
    def leading(self) -> float:
        return self.size * 1.2


# Names every surface and renderer agree on.
STYLE_NAMES: tuple[str, ...] = (
    "section_title",
    "question",
    "answer",
    "follow_up",
    "table_header",
    "table_cell",
    "toc_title",
    "toc_entry",
    "header_brand",
    "header_title",
    "footer",
    "cover_company",
    "cover_timestamp",
)


def build_styles(config: PDFLayoutConfig | None = None) -> dict[str, TextStyle]:
    """Map each symbolic style name to font, size and colour."""
    cfg = config or PDFLayoutConfig()
    regular = cfg.font_family
    bold = bold_face(regular)
    body = cfg.body_font_size

    return {
        "section_title": TextStyle(bold, cfg.heading_font_size, BRAND_BLUE),
        "question": TextStyle(bold, cfg.question_font_size, DARK_NAVY),
        "answer": TextStyle(regular, body, BLACK),
        "follow_up": TextStyle(regular, body, DARK_NAVY),
        "table_header": TextStyle(bold, body - 1, WHITE),
        "table_cell": TextStyle(regular, body - 1, BLACK),
        "toc_title": TextStyle(bold, cfg.heading_font_size + 2, BRAND_BLUE),
        "toc_entry": TextStyle(regular, cfg.question_font_size, DARK_NAVY),
        "header_brand": TextStyle(bold, cfg.header_font_size, BRAND_BLUE),
        "header_title": TextStyle(bold, cfg.header_font_size, BRAND_BLUE),
        "footer": TextStyle(regular, cfg.footer_font_size, BLACK),
        "cover_company": TextStyle(bold, 14, SKY_BLUE),
        "cover_timestamp": TextStyle(regular, 14, BLACK),
    }
