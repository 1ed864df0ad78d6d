"""Table drawing on a layout cursor: header row, striped body, row-level page breaks."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from axis_intake.catalog.descriptors import Column
from axis_intake.rendering.cursor import LayoutCursor, mm_to_pt
from axis_intake.rendering.styles import ALT_ROW_BG, BRAND_BLUE, TextStyle

_SPACE_BEFORE_MM = 5.0
_SPACE_AFTER_MM = 10.0


@dataclass(frozen=True)
class _LaidOutRow:
    cells: tuple[tuple[str, ...], ...]
    height: float


class TableDrawer:
    """Draws one table at the cursor, splitting between rows across pages.

    The header row is repeated at the top of every continuation page; the
    page header itself comes from the cursor's page-start hook.
    """

    def __init__(self, cursor: LayoutCursor, styles: Mapping[str, TextStyle]) -> None:
        self._cursor = cursor
        self._header_style = styles["table_header"]
        self._cell_style = styles["table_cell"]

    def draw(self, columns: Sequence[Column], header: Sequence[str], body: Sequence[Sequence[str]]) -> None:
        cursor = self._cursor
        geometry = cursor.geometry
        widths = [c.width * geometry.content_width for c in columns]

        head = self._lay_out(header, widths, self._header_style)
        rows = [self._lay_out(row, widths, self._cell_style) for row in body]

        # Rows taller than a page (below a repeated header) are cut into slices.
        limit = geometry.bottom - geometry.content_top - head.height
        segments = [(index, part) for index, row in enumerate(rows) for part in self._split(row, limit)]

        cursor.advance(mm_to_pt(_SPACE_BEFORE_MM))
        # Never leave the header row alone at the foot of a page.
        first_block = head.height + (segments[0][1].height if segments else 0.0)
        cursor.ensure(first_block)
        self._draw_row(head, columns, widths, self._header_style, BRAND_BLUE)

        for index, part in segments:
            if cursor.ensure(part.height):
                self._draw_row(head, columns, widths, self._header_style, BRAND_BLUE)
            fill = ALT_ROW_BG if index % 2 == 1 else None
            self._draw_row(part, columns, widths, self._cell_style, fill)

        cursor.advance(mm_to_pt(_SPACE_AFTER_MM))

    def _lay_out(self, cells: Sequence[str], widths: Sequence[float], style: TextStyle) -> _LaidOutRow:
        pad = self._cursor.geometry.cell_padding
        surface = self._cursor.surface
        wrapped = tuple(
            tuple(surface.wrap(text, style, max(width - 2 * pad, 1.0)))
            for text, width in zip(cells, widths)
        )
        tallest = max((len(lines) for lines in wrapped), default=1) or 1
        return _LaidOutRow(cells=wrapped, height=tallest * style.leading + 2 * pad)

    def _split(self, row: _LaidOutRow, max_height: float) -> list[_LaidOutRow]:
        """Cut *row* into consecutive line slices no taller than *max_height*."""
        if row.height <= max_height:
            return [row]
        pad = self._cursor.geometry.cell_padding
        leading = self._cell_style.leading
        per_slice = max(int((max_height - 2 * pad) // leading), 1)
        tallest = max(len(lines) for lines in row.cells)
        parts = []
        for start in range(0, tallest, per_slice):
            cells = tuple(lines[start : start + per_slice] for lines in row.cells)
            height = max(len(lines) for lines in cells) * leading + 2 * pad
            parts.append(_LaidOutRow(cells=cells, height=height))
        return parts

    def _draw_row(
        self,
        row: _LaidOutRow,
        columns: Sequence[Column],
        widths: Sequence[float],
        style: TextStyle,
        fill: str | None,
    ) -> None:
        cursor = self._cursor
        surface = cursor.surface
        pad = cursor.geometry.cell_padding
        top = cursor.y
        x = cursor.geometry.margin

        if fill is not None:
            surface.fill_rect(x, top, sum(widths), row.height, fill)

        for column, width, lines in zip(columns, widths, row.cells):
            baseline = top + pad + style.size
            for line in lines:
                if column.align == "right":
                    surface.draw_right_text(x + width - pad, baseline, line, style)
                elif column.align == "center":
                    surface.draw_centred_text(x + width / 2, baseline, line, style)
                else:
                    surface.draw_text(x + pad, baseline, line, style)
                baseline += style.leading
            x += width

        cursor.advance(row.height)
