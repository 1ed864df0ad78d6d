"""Page rendering: drawing surfaces, layout cursor, page chrome, sections.

Usage::

    from axis_intake.rendering import ReportLabSurface, SectionRenderer

    surface = ReportLabSurface(geometry.width, geometry.height)
    cursor = LayoutCursor(surface, geometry)
    SectionRenderer(cursor, build_styles()).render_section(spec, answers)
"""

from __future__ import annotations

from typing import Any

from axis_intake.rendering.protocols import IDrawingSurface
from axis_intake.rendering.styles import TextStyle, build_styles

__all__ = [
    "IDrawingSurface",
    "LayoutCursor",
    "PageGeometry",
    "ReportLabSurface",
    "SectionRenderer",
    "TextStyle",
    "build_styles",
]


def __getattr__(name: str) -> Any:
    """Lazy-load the reportlab-backed pieces so importing styles stays cheap."""
    if name == "ReportLabSurface":
        from axis_intake.rendering.reportlab_surface import ReportLabSurface

        return ReportLabSurface
    if name in ("LayoutCursor", "PageGeometry"):
        from axis_intake.rendering import cursor

        return getattr(cursor, name)
    if name == "SectionRenderer":
        from axis_intake.rendering.section_renderer import SectionRenderer

        return SectionRenderer
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
