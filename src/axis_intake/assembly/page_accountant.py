"""Page accountant: where each section starts in the merged document."""

from __future__ import annotations

import logging
from collections.abc import Callable

from axis_intake.exceptions import PageAccountingError
from axis_intake.models import PageRecord

log = logging.getLogger(__name__)


class PageAccountant:
    """Append-only ``title -> page`` table for one rendering pass.

    ``current_page`` returns the 1-based page within the content-only
    document; ``offset`` is the number of pages (cover plus table of
    contents) that precede the content in the merged output.
    """

    def __init__(self, current_page: Callable[[], int], offset: int = 0) -> None:
        if offset < 0:
            raise ValueError("offset must be >= 0")
        self._current_page = current_page
        self._offset = offset
        self._records: list[PageRecord] = []
        self._seen: set[str] = set()

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def records(self) -> list[PageRecord]:
        return list(self._records)

    def record_section_start(self, title: str) -> PageRecord:
        if title in self._seen:
            raise PageAccountingError(f"Section {title!r} was already recorded")
        page = self._current_page() + self._offset
        if self._records and page < self._records[-1].page:
            raise PageAccountingError(
                f"Section {title!r} starts on page {page}, before "
                f"{self._records[-1].title!r} on page {self._records[-1].page}"
            )
        record = PageRecord(title=title, page=page)
        self._records.append(record)
        self._seen.add(title)
        log.debug("Section %r starts on page %d", title, page)
        return record

    def page_for(self, title: str) -> int:
        for record in self._records:
            if record.title == title:
                return record.page
        raise PageAccountingError(f"No page recorded for section {title!r}")
