"""Declarative question catalog: 13 core sections plus 3 sector sections."""

from __future__ import annotations

from axis_intake.catalog.core_sections import CORE_SECTIONS
from axis_intake.catalog.descriptors import QuestionDescriptor, QuestionKind, SectionSpec
from axis_intake.catalog.sector_sections import SECTOR_SECTIONS
from axis_intake.models import SECTOR_ORDER, AnswerRecord

_SECTOR_INDEX = {spec.sector: spec for spec in SECTOR_SECTIONS}


def included_sections(record: AnswerRecord) -> list[SectionSpec]:
    """Sections rendered for *record*, in document order.

    Core sections always come first; sector sections follow in the fixed
    AI, DeFi, Robotics order and only when that sector was selected.
    """
    sections = list(CORE_SECTIONS)
    sections.extend(_SECTOR_INDEX[s] for s in SECTOR_ORDER if record.has_sector(s))
    return sections


def included_titles(record: AnswerRecord) -> list[str]:
    return [spec.title for spec in included_sections(record)]


__all__ = [
    "CORE_SECTIONS",
    "SECTOR_SECTIONS",
    "QuestionDescriptor",
    "QuestionKind",
    "SectionSpec",
    "included_sections",
    "included_titles",
]
