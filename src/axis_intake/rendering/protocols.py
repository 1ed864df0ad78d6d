"""Drawing surface protocol: the page-drawing capability the renderers call into.

Coordinates are points with ``y`` measured downward from the top edge of the
current page; ``y`` passed to the text methods is the text baseline.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from axis_intake.rendering.styles import TextStyle


@runtime_checkable
class IDrawingSurface(Protocol):
    """Protocol for paginated drawing targets (reportlab canvas, test fakes)."""

    @property
    def page_width(self) -> float: ...

    @property
    def page_height(self) -> float: ...

    @property
    def page_count(self) -> int:
        """Pages started so far; the first page exists from construction."""
        ...

    def new_page(self) -> None:
        """Close the current page and start a blank one."""
        ...

    def draw_text(self, x: float, y: float, text: str, style: TextStyle) -> None: ...

    def draw_right_text(self, x: float, y: float, text: str, style: TextStyle) -> None:
        """Draw *text* so that it ends at *x*."""
        ...

    def draw_centred_text(self, x: float, y: float, text: str, style: TextStyle) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, color: str, width: float = 0.5) -> None: ...

    def fill_rect(self, x: float, y: float, width: float, height: float, color: str) -> None:
        """Fill a rectangle whose top-left corner is (*x*, *y*)."""
        ...

    def draw_image(self, path: Path, x: float, y: float, width: float, height: float) -> None: ...

    def text_width(self, text: str, style: TextStyle) -> float: ...

    def wrap(self, text: str, style: TextStyle, max_width: float) -> list[str]:
        """Split *text* into lines no wider than *max_width*."""
        ...

    def finish(self) -> bytes:
        """Close the last page and return the serialized document."""
        ...


__all__ = ["IDrawingSurface"]
