"""Tests for SectionRenderer over the real catalog, using a recording surface."""

from __future__ import annotations

from axis_intake.catalog import CORE_SECTIONS, SECTOR_SECTIONS
from axis_intake.catalog.core_sections import GENERAL_INFORMATION, OPERATIONS, PRIOR_INCIDENTS, SECTORS
from axis_intake.catalog.descriptors import Column, FieldValue, Static, TableSpec, choice, table, yes_no
from axis_intake.catalog.sector_sections import ROBOTICS_ADDITIONAL
from axis_intake.models import AnswerRecord
from axis_intake.rendering.cursor import LayoutCursor, PageGeometry
from axis_intake.rendering.section_renderer import SectionRenderer
from tests.fakes.fake_surface import RecordingSurface

EMPLOYEES_FOLLOW_UP = "If yes, list the country and the number of employees in each:"


def _render(cursor: LayoutCursor, styles, spec, answers) -> None:
    SectionRenderer(cursor, styles).render_section(spec, answers)


class TestYesNoFollowUps:
    def test_follow_up_shown_when_yes(self, cursor, surface: RecordingSurface, styles) -> None:
        answers = {"employees_outside_canada": "yes", "employees_outside_list": "Germany: 4"}
        _render(cursor, styles, GENERAL_INFORMATION, answers)
        texts = surface.texts()
        assert "☑ Yes" in texts
        assert EMPLOYEES_FOLLOW_UP in texts
        assert "Answer: Germany: 4" in texts

    def test_follow_up_hidden_when_no(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, GENERAL_INFORMATION, {"employees_outside_canada": "no"})
        texts = surface.texts()
        assert "☑ No" in texts
        assert EMPLOYEES_FOLLOW_UP not in texts

    def test_follow_up_prompt_uses_follow_up_style(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, GENERAL_INFORMATION, {"employees_outside_canada": "yes"})
        call = next(c for c in surface.calls if c.text == EMPLOYEES_FOLLOW_UP)
        assert call.style == styles["follow_up"]

    def test_follow_up_follows_parent(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, GENERAL_INFORMATION, {"employees_outside_canada": "yes"})
        texts = surface.texts()
        parent = texts.index("8. Are any Employees based outside of Canada?")
        assert texts.index(EMPLOYEES_FOLLOW_UP) > parent


class TestPlaceholders:
    def test_empty_tables_render_defaults(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, OPERATIONS, {})
        texts = surface.texts()
        assert "0%" in texts
        assert "$0" in texts
        assert "Not provided" in texts
        assert "N/A" in texts

    def test_zero_is_rendered(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, GENERAL_INFORMATION, {"num_employees": 0})
        assert "Answer: 0" in surface.texts()

    def test_composite_lines(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, GENERAL_INFORMATION, {"breach_contact_name": "Dana Moss"})
        texts = surface.texts()
        assert "Name: Dana Moss" in texts
        assert "Email: Not provided" in texts

    def test_unmatched_single_choice(self, cursor, surface: RecordingSurface, styles) -> None:
        SectionRenderer(cursor, styles).render_question(yes_no("Q?", "q"), {"q": "maybe"})
        assert surface.texts() == ["Q?", "☐ No selection"]

    def test_every_section_renders_from_empty_answers(
        self, cursor, surface: RecordingSurface, styles, geometry: PageGeometry
    ) -> None:
        renderer = SectionRenderer(cursor, styles)
        for spec in (*CORE_SECTIONS, *SECTOR_SECTIONS):
            renderer.render_section(spec, {})
        texts = surface.texts()
        assert not any(t.startswith("☑") for t in texts)
        assert surface.page_count > 1
        assert all(c.y <= geometry.bottom for c in surface.calls)


class TestChoices:
    def test_sectors_checked_for_directly_built_record(self, cursor, surface: RecordingSurface, styles) -> None:
        record = AnswerRecord(selected_sectors=frozenset({"ai"}))
        _render(cursor, styles, SECTORS, record.section("sectors"))
        texts = surface.texts()
        assert "☑ Artificial Intelligence" in texts
        assert "☐ Autonomous Robotics" in texts

    def test_multi_choice_marks_each_option(self, cursor, surface: RecordingSurface, styles) -> None:
        answers = {"robotics_navigation": ["lidar", "other"], "nav_other_specify": "UWB beacons"}
        _render(cursor, styles, ROBOTICS_ADDITIONAL, answers)
        texts = surface.texts()
        assert "☑ LiDAR" in texts
        assert "☑ Other" in texts
        assert "☐ GPS" in texts
        assert "Please specify other navigation methods:" in texts
        assert texts.index("Answer: UWB beacons") > texts.index("☐ Beacon/Infrared")

    def test_nested_choice_follow_up(self, cursor, surface: RecordingSurface, styles) -> None:
        answers = {"hosting_services": "yes", "hosting_infrastructure": "third_party", "third_party_name": "CloudCo"}
        _render(cursor, styles, OPERATIONS, answers)
        texts = surface.texts()
        assert "☑ Third Party" in texts
        assert "☐ Own Infrastructure" in texts
        assert "Provider name: CloudCo" in texts
        assert "Tier rating: Not provided" in texts

    def test_nested_follow_up_hidden_for_own_infrastructure(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, OPERATIONS, {"hosting_services": "yes", "hosting_infrastructure": "own"})
        assert not any(t.startswith("Provider name") for t in surface.texts())

    def test_keyed_options_and_any_trigger(self, cursor, surface: RecordingSurface, styles) -> None:
        answers = {"incident_extortion": "yes", "incident_details_text": "Ransom email, 2023."}
        _render(cursor, styles, PRIOR_INCIDENTS, answers)
        texts = surface.texts()
        assert "☑ Received an extortion demand relating to your data and/or computer systems?" in texts
        assert "Details: Ransom email, 2023." in texts

    def test_any_trigger_stays_hidden_with_nothing_ticked(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, PRIOR_INCIDENTS, {"incident_details_text": "ignored"})
        assert "Details: ignored" not in surface.texts()

    def test_long_label_wraps_with_indent(self, cursor, surface: RecordingSurface, styles, geometry) -> None:
        question = choice("Q?", "q", [("long", "word " * 40)])
        SectionRenderer(cursor, styles).render_question(question, {"q": "long"})
        answer_lines = [c for c in surface.calls if c.text and c.text != "Q?"]
        assert len(answer_lines) > 1
        assert answer_lines[0].text.startswith("☑ ")
        assert answer_lines[1].x > geometry.margin


class TestSectionLayout:
    def test_title_drawn_first_in_section_style(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, GENERAL_INFORMATION, {})
        first = surface.calls[0]
        assert first.text == "2. General Information"
        assert first.style == styles["section_title"]

    def test_title_not_orphaned_at_page_foot(
        self, cursor, surface: RecordingSurface, styles, geometry: PageGeometry
    ) -> None:
        cursor.y = geometry.bottom - geometry.section_reserve / 2
        _render(cursor, styles, GENERAL_INFORMATION, {})
        assert surface.pages_with("2. General Information") == [2]

    def test_lines_advance_down_the_page(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, GENERAL_INFORMATION, {})
        page_one = [c.y for c in surface.calls if c.page == 1 and c.op == "text"]
        assert page_one == sorted(page_one)


class TestTables:
    def test_header_repeats_on_continuation_pages(self, cursor, surface: RecordingSurface, styles) -> None:
        spec = TableSpec(
            columns=(Column("Activity", 0.6), Column("Percentage", 0.4, "right")),
            rows=tuple((Static(f"Row {i}"), FieldValue(f"r{i}", default="0", suffix="%")) for i in range(60)),
        )
        SectionRenderer(cursor, styles).render_question(table("Revenue split", spec), {})
        assert surface.pages_with("Activity") == [1, 2]
        assert surface.pages_with("Percentage") == [1, 2]
        assert surface.pages_with("Row 59") == [2]

    def test_alternate_rows_striped(self, cursor, surface: RecordingSurface, styles) -> None:
        spec = TableSpec(
            columns=(Column("A", 0.5), Column("B", 0.5)),
            rows=((Static("1"), Static("x")), (Static("2"), Static("y")), (Static("3"), Static("z"))),
        )
        SectionRenderer(cursor, styles).render_question(table("", spec), {})
        fills = [c.text for c in surface.calls if c.op == "rect"]
        assert fills == ["#0050F0", "#F5F5F5"]

    def test_long_cell_truncated(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, OPERATIONS, {"client_1_name": "A very long client name that keeps going"})
        assert "A very long client nam..." in surface.texts()

    def test_right_aligned_column(self, cursor, surface: RecordingSurface, styles) -> None:
        _render(cursor, styles, OPERATIONS, {"revenue_hardware": "40"})
        call = next(c for c in surface.calls if c.text == "40%")
        assert call.op == "right_text"

    def test_row_taller_than_page_is_split_across_pages(
        self, cursor, surface: RecordingSurface, styles, geometry: PageGeometry
    ) -> None:
        answers = {"risk_healthcare": "yes", "healthcare_details": "word " * 3000}
        _render(cursor, styles, OPERATIONS, answers)

        assert all(c.y <= geometry.bottom for c in surface.calls)
        detail_pages = sorted({c.page for c in surface.calls if c.text.startswith("word")})
        assert len(detail_pages) >= 3
        assert set(detail_pages) <= set(surface.pages_with("Area"))
        words = sum(c.text.split().count("word") for c in surface.calls if c.text.startswith("word"))
        assert words == 3000
