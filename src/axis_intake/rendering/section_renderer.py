"""Generic section renderer: draws any ``SectionSpec`` from catalog data.

One renderer handles every question kind, so sections differ only in the
descriptors they declare.  The renderer is total over the answer shape:
a missing or unrecognised field renders as a placeholder, never an error.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from axis_intake.catalog.descriptors import (
    CHECKED,
    NO_SELECTION,
    UNCHECKED,
    QuestionDescriptor,
    QuestionKind,
    SectionSpec,
)
from axis_intake.rendering.cursor import LayoutCursor, mm_to_pt
from axis_intake.rendering.styles import TextStyle
from axis_intake.rendering.tables import TableDrawer

_FOLLOW_UP_GAP_MM = 2.0


class SectionRenderer:
    """Draws sections onto the cursor's surface, breaking pages as needed."""

    def __init__(self, cursor: LayoutCursor, styles: Mapping[str, TextStyle]) -> None:
        self._cursor = cursor
        self._styles = styles
        self._tables = TableDrawer(cursor, styles)

    def render_section(self, spec: SectionSpec, answers: Mapping[str, Any]) -> None:
        cursor = self._cursor
        geometry = cursor.geometry
        reserve = geometry.question_reserve
        if spec.question_reserve_mm is not None:
            reserve = mm_to_pt(spec.question_reserve_mm)

        # Keep the section title off the foot of a page.
        cursor.ensure(geometry.section_reserve)
        self._write(spec.title, self._styles["section_title"])
        cursor.advance(geometry.section_gap)

        for question in spec.questions:
            cursor.ensure(reserve)
            self.render_question(question, answers)
            cursor.advance(geometry.question_gap)

        cursor.advance(geometry.section_gap)

    def render_question(
        self,
        question: QuestionDescriptor,
        answers: Mapping[str, Any],
        *,
        nested: bool = False,
    ) -> None:
        if question.text:
            self._write(question.text, self._styles["follow_up" if nested else "question"])

        kind = question.kind
        answer_style = self._styles["answer"]
        if kind in (QuestionKind.TEXT, QuestionKind.NUMBER):
            self._write(question.answer_line(answers), answer_style)
        elif kind == QuestionKind.SINGLE_CHOICE:
            option = question.selected_option(answers)
            if option is None:
                self._write_marked(False, NO_SELECTION, answer_style)
            else:
                self._write_marked(True, option.label, answer_style)
        elif kind == QuestionKind.MULTI_CHOICE:
            chosen = question.selected(answers)
            for option in question.options:
                self._write_marked(option.value in chosen, option.label, answer_style)
        elif kind == QuestionKind.COMPOSITE:
            for sub in question.fields:
                self._write(sub.line(answers), answer_style)
        elif kind == QuestionKind.TABLE and question.table is not None:
            spec = question.table
            self._tables.draw(spec.columns, [c.header for c in spec.columns], spec.body(answers))

        if question.follow_up is not None and question.follow_up_active(answers):
            self._cursor.advance(mm_to_pt(_FOLLOW_UP_GAP_MM))
            for child in question.follow_up.questions:
                self.render_question(child, answers, nested=True)

    # ── Line writers ─────────────────────────────────────────────────

    def _write(self, text: str, style: TextStyle) -> None:
        cursor = self._cursor
        geometry = cursor.geometry
        for line in cursor.surface.wrap(text, style, geometry.content_width):
            cursor.ensure(geometry.line_height)
            cursor.surface.draw_text(geometry.margin, cursor.y, line, style)
            cursor.advance(geometry.line_height)

    def _write_marked(self, checked: bool, label: str, style: TextStyle) -> None:
        cursor = self._cursor
        geometry = cursor.geometry
        marker = CHECKED if checked else UNCHECKED
        indent = cursor.surface.text_width(f"{marker} ", style)
        lines = cursor.surface.wrap(label, style, geometry.content_width - indent)
        for index, line in enumerate(lines):
            cursor.ensure(geometry.line_height)
            if index == 0:
                cursor.surface.draw_text(geometry.margin, cursor.y, f"{marker} {line}", style)
            else:
                cursor.surface.draw_text(geometry.margin + indent, cursor.y, line, style)
            cursor.advance(geometry.line_height)
