"""Cover page: dynamic company name and timestamp stamped onto a template."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from io import BytesIO

from pypdf import PdfReader, PdfWriter

from axis_intake.assembly.templates import read_pdf
from axis_intake.rendering.reportlab_surface import ReportLabSurface
from axis_intake.rendering.styles import TextStyle, build_styles

# Overlay positions in points; the y values are measured up from the bottom edge.
COVER_TEXT_X = 110.0
COMPANY_FROM_BOTTOM = 260.0
TIMESTAMP_FROM_BOTTOM = 240.0


def format_submitted(submitted_at: datetime) -> str:
    """``Submitted: MM/DD/YYYY, hh:mm:ss AM`` in 12-hour clock."""
    return f"Submitted: {submitted_at:%m/%d/%Y, %I:%M:%S %p}"


def build_overlay(
    company_name: str,
    submitted_at: datetime,
    width: float,
    height: float,
    styles: Mapping[str, TextStyle] | None = None,
) -> bytes:
    """One transparent page of *width* x *height* carrying the cover text."""
    styles = styles or build_styles()
    surface = ReportLabSurface(width, height)
    surface.draw_text(COVER_TEXT_X, height - COMPANY_FROM_BOTTOM, company_name, styles["cover_company"])
    surface.draw_text(
        COVER_TEXT_X,
        height - TIMESTAMP_FROM_BOTTOM,
        format_submitted(submitted_at),
        styles["cover_timestamp"],
    )
    return surface.finish()


def generate_cover(
    company_name: str,
    submitted_at: datetime,
    template: bytes,
    *,
    styles: Mapping[str, TextStyle] | None = None,
    source: str = "cover template",
) -> bytes:
    """Stamp the overlay onto page 1 of *template*; later pages pass through.

    A template that does not parse or has no pages raises
    ``TemplateParseError``.
    """
    reader = read_pdf(template, source)
    first = reader.pages[0]
    width = float(first.mediabox.width)
    height = float(first.mediabox.height)

    overlay = PdfReader(BytesIO(build_overlay(company_name, submitted_at, width, height, styles))).pages[0]

    writer = PdfWriter()
    for page in reader.pages:
        writer.add_page(page)
    writer.pages[0].merge_page(overlay)

    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()
