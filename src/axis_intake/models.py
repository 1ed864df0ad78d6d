"""Pydantic data models for axis-intake.

``AnswerRecord`` is the immutable input to document assembly;
``PageRecord`` and ``AssembledDocument`` describe its output.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from axis_intake.exceptions import AnswerRecordError

log = logging.getLogger(__name__)

# ── Sector enumeration ───────────────────────────────────────────────
# Fixed order: conditional sections are appended to the document in this order.

SECTOR_ORDER: tuple[str, ...] = ("ai", "defi", "robotics")

_EMPTY_SECTION: Mapping[str, Any] = MappingProxyType({})


def is_absent(value: Any) -> bool:
    """True when *value* counts as "not provided".

    ``None``, blank strings and empty collections are absent; ``0`` and
    ``False`` are real answers.
    """
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    if isinstance(value, (list, tuple, set, frozenset, dict)):
        return len(value) == 0
    return False


class AnswerRecord(BaseModel):
    """Submitted answers grouped by section key.

    Sections are plain ``field -> value`` mappings; values may be strings,
    numbers, a single option value, a list of option values, or absent.
    """

    model_config = ConfigDict(frozen=True)

    sections: dict[str, dict[str, Any]] = Field(default_factory=dict)
    selected_sectors: frozenset[str] = frozenset()

    @model_validator(mode="after")
    def _derive_sectors_section(self) -> AnswerRecord:
        # The sectors section always mirrors selected_sectors, in SECTOR_ORDER.
        self.sections["sectors"] = {"sectors": [s for s in SECTOR_ORDER if s in self.selected_sectors]}
        return self

    @classmethod
    def from_form_data(cls, data: Any) -> AnswerRecord:
        """Build a record from the nested form payload.

        Selected sectors come from ``selectedSectors`` or, as the intake form
        posts them, a top-level ``sectors`` list.
        """
        if not isinstance(data, Mapping):
            raise AnswerRecordError(f"Answer record must be a JSON object, got {type(data).__name__}")

        raw_sectors = data.get("selectedSectors")
        if raw_sectors is None:
            raw_sectors = data.get("sectors")
        selected = _normalize_sectors(raw_sectors)

        sections: dict[str, dict[str, Any]] = {}
        for key, value in data.items():
            if key in ("selectedSectors", "sectors"):
                continue
            if isinstance(value, Mapping):
                sections[str(key)] = dict(value)
            else:
                log.debug("Ignoring non-mapping section %r", key)
        return cls(sections=sections, selected_sectors=selected)

    def section(self, key: str) -> Mapping[str, Any]:
        """Read-only view of one section's answers (empty when missing)."""
        answers = self.sections.get(key)
        if answers is None:
            return _EMPTY_SECTION
        return MappingProxyType(answers)

    def has_sector(self, sector: str) -> bool:
        return sector in self.selected_sectors

    @property
    def company_name(self) -> str | None:
        value = self.section("generalInfo").get("legal_name")
        return None if is_absent(value) else str(value).strip()


def _normalize_sectors(raw: Any) -> frozenset[str]:
    if raw is None:
        return frozenset()
    if isinstance(raw, str):
        raw = [raw]
    if not isinstance(raw, (list, tuple, set, frozenset)):
        raise AnswerRecordError(f"Selected sectors must be a list, got {type(raw).__name__}")
    known = {str(s) for s in raw if str(s) in SECTOR_ORDER}
    unknown = {str(s) for s in raw} - known
    if unknown:
        log.warning("Dropping unknown sectors: %s", ", ".join(sorted(unknown)))
    return frozenset(known)


# ── Assembly output ──────────────────────────────────────────────────


class PageRecord(BaseModel):
    """A section title and the 1-based page it starts on in the merged document."""

    model_config = ConfigDict(frozen=True)

    title: str
    page: int = Field(ge=1)


class PartPageCounts(BaseModel):
    """Page counts contributed by each merged part."""

    cover: int = 0
    toc: int = 0
    content: int = 0
    end: int = 0

    @property
    def total(self) -> int:
        return self.cover + self.toc + self.content + self.end


class AssembledDocument(BaseModel):
    """Final merged PDF plus the bookkeeping used to build it."""

    filename: str
    content: bytes
    submitted_at: datetime
    page_records: list[PageRecord] = Field(default_factory=list)
    page_counts: PartPageCounts = Field(default_factory=PartPageCounts)

    @property
    def content_type(self) -> str:
        return "application/pdf"

    @property
    def toc_numbers(self) -> dict[str, int]:
        return {r.title: r.page for r in self.page_records}
