"""Tests for question descriptors, table cells and catalog builders."""

from __future__ import annotations

import pytest

from axis_intake.catalog.descriptors import (
    NOT_PROVIDED,
    ChoiceLabel,
    Column,
    FieldValue,
    GatedValue,
    Option,
    QuestionDescriptor,
    QuestionKind,
    Static,
    SubField,
    TableSpec,
    Trigger,
    checkboxes,
    choice,
    composite,
    format_unit,
    number,
    scale,
    text,
    truncate,
    when,
    when_any,
    when_yes,
    yes_no,
)
from axis_intake.exceptions import CatalogError


class TestFormatting:
    @pytest.mark.parametrize(
        ("value", "unit", "expected"),
        [
            ("12", "percent", "12%"),
            (None, "percent", "0%"),
            ("", "currency", "$0"),
            (250000, "currency", "$250000"),
            (" 7 ", None, "7"),
        ],
    )
    def test_format_unit(self, value, unit, expected) -> None:
        assert format_unit(value, unit) == expected

    def test_truncate_keeps_short_text(self) -> None:
        assert truncate("Acme", 25) == "Acme"

    def test_truncate_long_text(self) -> None:
        result = truncate("A very long client name that keeps going", 25)
        assert result == "A very long client nam..."
        assert len(result) == 25

    def test_truncate_without_budget(self) -> None:
        assert truncate("x" * 100, None) == "x" * 100


class TestTrigger:
    def test_value_trigger(self) -> None:
        trigger = Trigger(frozenset({"yes"}))
        assert trigger.matches(frozenset({"yes"}))
        assert not trigger.matches(frozenset({"no"}))
        assert not trigger.matches(frozenset())

    def test_any_trigger(self) -> None:
        trigger = Trigger()
        assert trigger.is_any
        assert trigger.matches(frozenset({"a"}))
        assert not trigger.matches(frozenset())


class TestDescriptorValidation:
    def test_trigger_value_must_be_an_option(self) -> None:
        with pytest.raises(CatalogError, match="maybe"):
            yes_no("Q?", "q", when("maybe", then=[text("Why?", "why")]))

    def test_follow_up_on_text_question_rejected(self) -> None:
        with pytest.raises(CatalogError):
            QuestionDescriptor(
                "Q?",
                QuestionKind.TEXT,
                keys=("q",),
                follow_up=when_any([text("Why?", "why")]),
            )

    def test_any_trigger_on_single_choice_rejected(self) -> None:
        with pytest.raises(CatalogError):
            choice("Q?", "q", [("a", "A")], follow_up=when_any([text("Why?", "why")]))

    def test_choice_needs_options(self) -> None:
        with pytest.raises(CatalogError):
            choice("Q?", "q", [])

    def test_mixed_keyed_options_rejected(self) -> None:
        with pytest.raises(CatalogError):
            checkboxes("Q?", None, [Option("a", "A", key="a"), Option("b", "B")])

    def test_unkeyed_multi_choice_needs_field(self) -> None:
        with pytest.raises(CatalogError):
            checkboxes("Q?", None, [("a", "A")])

    def test_text_binds_one_field(self) -> None:
        with pytest.raises(CatalogError):
            QuestionDescriptor("Q?", QuestionKind.TEXT)

    def test_composite_needs_fields(self) -> None:
        with pytest.raises(CatalogError):
            composite("Q?", [])

    def test_table_kind_needs_table(self) -> None:
        with pytest.raises(CatalogError):
            QuestionDescriptor("Q?", QuestionKind.TABLE)


class TestSelection:
    def test_single_choice(self) -> None:
        q = yes_no("Q?", "q")
        assert q.selected({"q": "yes"}) == frozenset({"yes"})
        assert q.selected_option({"q": "no"}).label == "No"

    def test_single_choice_unmatched_value(self) -> None:
        q = yes_no("Q?", "q")
        assert q.selected({"q": "maybe"}) == frozenset()
        assert q.selected_option({"q": "maybe"}) is None

    def test_multi_choice_from_list(self) -> None:
        q = checkboxes("Q?", "nav", [("gps", "GPS"), ("lidar", "LiDAR")])
        assert q.selected({"nav": ["lidar", "unknown"]}) == frozenset({"lidar"})

    def test_multi_choice_from_single_string(self) -> None:
        q = checkboxes("Q?", "nav", [("gps", "GPS"), ("lidar", "LiDAR")])
        assert q.selected({"nav": "gps"}) == frozenset({"gps"})

    def test_multi_choice_keyed_options(self) -> None:
        q = checkboxes("Q?", None, [Option("a", "A", key="flag_a"), Option("b", "B", key="flag_b")])
        assert q.selected({"flag_a": "yes", "flag_b": "no"}) == frozenset({"a"})
        assert q.selected({"flag_b": True}) == frozenset({"b"})

    def test_follow_up_active(self) -> None:
        q = yes_no("Q?", "q", when_yes(text("Details", "d")))
        assert q.follow_up_active({"q": "yes"})
        assert not q.follow_up_active({"q": "no"})
        assert not q.follow_up_active({})

    def test_scale_stores_ordinals(self) -> None:
        q = scale("Maturity", "m", ["Low", "Medium", "High"])
        assert [o.value for o in q.options] == ["1", "2", "3"]
        assert q.selected_option({"m": "2"}).label == "Medium"


class TestAnswerLine:
    def test_text_value(self) -> None:
        assert text("Name", "n").answer_line({"n": "  Acme "}) == "Answer: Acme"

    def test_absent_value(self) -> None:
        assert text("Name", "n").answer_line({}) == f"Answer: {NOT_PROVIDED}"

    def test_zero_is_an_answer(self) -> None:
        assert number("Employees", "n").answer_line({"n": 0}) == "Answer: 0"

    def test_custom_label(self) -> None:
        assert text("Q", "d", answer_label="Details").answer_line({"d": "x"}) == "Details: x"

    def test_unit_defaults_to_zero(self) -> None:
        assert number("Share", "p", unit="percent").answer_line({}) == "Answer: 0%"


class TestSubField:
    def test_line_with_suffix(self) -> None:
        assert SubField("n", "Personal", suffix=" records").line({"n": "500"}) == "Personal: 500 records"

    def test_absent_line(self) -> None:
        assert SubField("n", "Personal", suffix=" records").line({}) == "Personal: Not provided"

    def test_unit_line(self) -> None:
        assert SubField("v", "Value", unit="currency").line({}) == "Value: $0"


class TestCells:
    def test_static(self) -> None:
        assert Static("Hardware").text({}) == "Hardware"

    def test_field_value_default_and_affixes(self) -> None:
        cell = FieldValue("v", default="0", prefix="$")
        assert cell.text({}) == "$0"
        assert cell.text({"v": "10"}) == "$10"

    def test_field_value_truncates(self) -> None:
        assert FieldValue("n", max_chars=10).text({"n": "Northwind Robotics"}) == "Northwi..."

    @pytest.mark.parametrize("max_chars", [0, 1, 3])
    def test_field_value_rejects_budget_without_room_for_ellipsis(self, max_chars: int) -> None:
        with pytest.raises(CatalogError, match="max_chars"):
            FieldValue("n", max_chars=max_chars)

    def test_field_value_smallest_budget(self) -> None:
        assert FieldValue("n", max_chars=4).text({"n": "Northwind"}) == "N..."

    def test_choice_label(self) -> None:
        cell = ChoiceLabel("risk")
        assert cell.text({"risk": "yes"}) == "Yes"
        assert cell.text({"risk": "no"}) == "No"
        assert cell.text({}) == "-"

    def test_gated_value(self) -> None:
        cell = GatedValue("details", "risk")
        assert cell.text({"risk": "no", "details": "ignored"}) == "N/A"
        assert cell.text({"risk": "yes"}) == "No details"
        assert cell.text({"risk": "yes", "details": "Hospitals"}) == "Hospitals"


class TestTableSpec:
    def test_row_width_mismatch(self) -> None:
        with pytest.raises(CatalogError):
            TableSpec(columns=(Column("A", 0.5), Column("B", 0.5)), rows=((Static("x"),),))

    def test_widths_over_full_width(self) -> None:
        with pytest.raises(CatalogError):
            TableSpec(columns=(Column("A", 0.7), Column("B", 0.5)), rows=())

    def test_body(self) -> None:
        spec = TableSpec(
            columns=(Column("Activity", 0.6), Column("Percentage", 0.4, "right")),
            rows=((Static("Hardware"), FieldValue("hw", default="0", suffix="%")),),
        )
        assert spec.body({}) == [["Hardware", "0%"]]
        assert spec.body({"hw": "40"}) == [["Hardware", "40%"]]
