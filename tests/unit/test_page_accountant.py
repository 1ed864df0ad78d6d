"""Tests for PageAccountant section page bookkeeping."""

from __future__ import annotations

import pytest

from axis_intake.assembly.page_accountant import PageAccountant
from axis_intake.exceptions import PageAccountingError


class _Pages:
    def __init__(self) -> None:
        self.current = 1

    def __call__(self) -> int:
        return self.current


class TestPageAccountant:
    def test_offset_is_added(self) -> None:
        pages = _Pages()
        accountant = PageAccountant(pages, offset=2)
        record = accountant.record_section_start("1. Sectors")
        assert record.page == 3
        assert accountant.page_for("1. Sectors") == 3

    def test_records_in_order(self) -> None:
        pages = _Pages()
        accountant = PageAccountant(pages)
        accountant.record_section_start("1. Sectors")
        accountant.record_section_start("2. General Information")
        pages.current = 3
        accountant.record_section_start("3. Operations")
        assert [(r.title, r.page) for r in accountant.records] == [
            ("1. Sectors", 1),
            ("2. General Information", 1),
            ("3. Operations", 3),
        ]

    def test_records_is_a_copy(self) -> None:
        accountant = PageAccountant(_Pages())
        accountant.record_section_start("1. Sectors")
        accountant.records.clear()
        assert len(accountant.records) == 1

    def test_duplicate_title_rejected(self) -> None:
        accountant = PageAccountant(_Pages())
        accountant.record_section_start("1. Sectors")
        with pytest.raises(PageAccountingError):
            accountant.record_section_start("1. Sectors")

    def test_decreasing_page_rejected(self) -> None:
        pages = _Pages()
        accountant = PageAccountant(pages)
        pages.current = 4
        accountant.record_section_start("3. Operations")
        pages.current = 2
        with pytest.raises(PageAccountingError):
            accountant.record_section_start("4. Financials")

    def test_missing_title(self) -> None:
        with pytest.raises(PageAccountingError):
            PageAccountant(_Pages()).page_for("9. Privacy, Data Security & API Controls")

    def test_negative_offset_rejected(self) -> None:
        with pytest.raises(ValueError):
            PageAccountant(_Pages(), offset=-1)
