"""reportlab canvas behind the ``IDrawingSurface`` protocol.

Converts the top-down coordinates the renderers use into reportlab's
bottom-up page space and sanitizes text the base-14 fonts cannot show.
"""

from __future__ import annotations

from io import BytesIO
from pathlib import Path

from axis_intake.catalog.descriptors import CHECKED, UNCHECKED
from axis_intake.rendering.styles import BLACK, TextStyle

try:
    from reportlab.lib.colors import HexColor
    from reportlab.lib.utils import simpleSplit
    from reportlab.pdfbase.pdfmetrics import stringWidth
    from reportlab.pdfgen import canvas
except ImportError as _exc:
    raise ImportError(
        "reportlab is required for PDF output. Install with: pip install axis-intake"
    ) from _exc


# ── Unicode sanitization ────────────────────────────────────────────
# The base-14 fonts lack glyphs for many characters pasted into form
# answers (non-breaking hyphens, narrow spaces, smart quotes, etc.).

_UNICODE_REPLACEMENTS: dict[str, str] = {
    # Dashes / hyphens
    "\u2011": "-",       # non-breaking hyphen
    "\u2010": "-",       # hyphen
    "\u2012": "-",       # figure dash
    "\u2013": "-",       # en-dash
    "\u2014": "-",       # em-dash
    "\u2015": "-",       # horizontal bar
    # Spaces
    "\u202f": " ",       # narrow no-break space
    "\u00a0": " ",       # non-breaking space
    "\u2009": " ",       # thin space
    "\u200a": " ",       # hair space
    # Quotes
    "\u2018": "'",       # left single quote
    "\u2019": "'",       # right single quote
    "\u201c": '"',       # left double quote
    "\u201d": '"',       # right double quote
    # Misc punctuation
    "\u2026": "...",     # ellipsis
    "\u2022": "-",       # bullet
}

_MARKERS = (CHECKED, UNCHECKED)
_CHECK_GLYPH = "4"  # ZapfDingbats heavy check mark


def _sanitize_text(text: str) -> str:
    for char, replacement in _UNICODE_REPLACEMENTS.items():
        text = text.replace(char, replacement)
    return text


def _hex(color_str: str) -> HexColor:
    return HexColor(color_str)


def _split_marker(text: str) -> tuple[str | None, str]:
    if text[:1] in _MARKERS:
        return text[0], text[1:].lstrip()
    return None, text


class ReportLabSurface:
    """Paginated reportlab canvas writing into an in-memory buffer."""

    def __init__(self, width: float, height: float, title: str = "") -> None:
        self._buffer = BytesIO()
        self._canvas = canvas.Canvas(self._buffer, pagesize=(width, height), invariant=1)
        if title:
            self._canvas.setTitle(title)
        self._width = width
        self._height = height
        self._pages = 1
        self._finished = False

    @property
    def page_width(self) -> float:
        return self._width

    @property
    def page_height(self) -> float:
        return self._height

    @property
    def page_count(self) -> int:
        return self._pages

    def new_page(self) -> None:
        self._canvas.showPage()
        self._pages += 1

    # ── Text ─────────────────────────────────────────────────────────

    def draw_text(self, x: float, y: float, text: str, style: TextStyle) -> None:
        marker, rest = _split_marker(text)
        if marker is not None:
            x += self._draw_marker(x, y, marker == CHECKED, style)
            text = rest
        c = self._canvas
        c.saveState()
        c.setFont(style.font, style.size)
        c.setFillColor(_hex(style.color))
        c.drawString(x, self._height - y, _sanitize_text(text))
        c.restoreState()

    def draw_right_text(self, x: float, y: float, text: str, style: TextStyle) -> None:
        c = self._canvas
        c.saveState()
        c.setFont(style.font, style.size)
        c.setFillColor(_hex(style.color))
        c.drawRightString(x, self._height - y, _sanitize_text(text))
        c.restoreState()

    def draw_centred_text(self, x: float, y: float, text: str, style: TextStyle) -> None:
        c = self._canvas
        c.saveState()
        c.setFont(style.font, style.size)
        c.setFillColor(_hex(style.color))
        c.drawCentredString(x, self._height - y, _sanitize_text(text))
        c.restoreState()

    def text_width(self, text: str, style: TextStyle) -> float:
        marker, rest = _split_marker(text)
        extra = self._marker_width(style) if marker is not None else 0.0
        return extra + stringWidth(_sanitize_text(rest), style.font, style.size)

    def wrap(self, text: str, style: TextStyle, max_width: float) -> list[str]:
        lines: list[str] = []
        for paragraph in _sanitize_text(text).splitlines() or [""]:
            lines.extend(simpleSplit(paragraph, style.font, style.size, max_width) or [""])
        return lines

    # ── Shapes and images ────────────────────────────────────────────

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 0.5) -> None:
        c = self._canvas
        c.saveState()
        c.setStrokeColor(_hex(color))
        c.setLineWidth(width)
        c.line(x1, self._height - y1, x2, self._height - y2)
        c.restoreState()

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        c = self._canvas
        c.saveState()
        c.setFillColor(_hex(color))
        c.rect(x, self._height - y - height, width, height, stroke=0, fill=1)
        c.restoreState()

    def draw_image(self, path: Path, x: float, y: float, width: float, height: float) -> None:
        self._canvas.drawImage(
            str(path),
            x,
            self._height - y - height,
            width=width,
            height=height,
            mask="auto",
            preserveAspectRatio=True,
        )

    def finish(self) -> bytes:
        if not self._finished:
            self._canvas.showPage()
            self._canvas.save()
            self._finished = True
        return self._buffer.getvalue()

    # ── Selection markers ────────────────────────────────────────────

    @staticmethod
    def _marker_width(style: TextStyle) -> float:
        return style.size * 0.8 + style.size * 0.4

    def _draw_marker(self, x: float, y: float, checked: bool, style: TextStyle) -> float:
        """Draw a tick box on the text baseline and return the width it used."""
        side = style.size * 0.8
        c = self._canvas
        base = self._height - y
        c.saveState()
        c.setStrokeColor(_hex(BLACK))
        c.setLineWidth(0.6)
        c.rect(x, base - 1, side, side, stroke=1, fill=0)
        if checked:
            c.setFont("ZapfDingbats", side)
            c.setFillColor(_hex(style.color))
            c.drawString(x + side * 0.1, base - 0.5, _CHECK_GLYPH)
        c.restoreState()
        return self._marker_width(style)
