"""Tests for the symbolic style table."""

from __future__ import annotations

from axis_intake.core.config import PDFLayoutConfig
from axis_intake.rendering.styles import (
    BLACK,
    BRAND_BLUE,
    STYLE_NAMES,
    WHITE,
    TextStyle,
    bold_face,
    build_styles,
)


class TestBuildStyles:
    def test_every_symbolic_name_is_defined(self) -> None:
        assert set(build_styles()) == set(STYLE_NAMES)

    def test_section_title_is_bold_brand_blue(self) -> None:
        style = build_styles()["section_title"]
        assert style.font == "Helvetica-Bold"
        assert style.color == BRAND_BLUE

    def test_table_header_is_white(self) -> None:
        assert build_styles()["table_header"].color == WHITE

    def test_footer_is_black(self) -> None:
        assert build_styles()["footer"].color == BLACK

    def test_font_family_override(self) -> None:
        styles = build_styles(PDFLayoutConfig(font_family="Times-Roman"))
        assert styles["answer"].font == "Times-Roman"
        assert styles["question"].font == "Times-Bold"


class TestTextStyle:
    def test_leading(self) -> None:
        assert TextStyle("Helvetica", 10).leading == 12.0

    def test_bold_face_fallback(self) -> None:
        assert bold_face("Courier") == "Courier-Bold"
        assert bold_face("Inter") == "Inter-Bold"
