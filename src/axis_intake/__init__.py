"""axis-intake: technology insurance application intake and PDF assembly.

Usage::

    from axis_intake import AnswerRecord, ApplicationAssembler

    record = AnswerRecord.from_form_data(form_payload)
    document = ApplicationAssembler().assemble(record)
    Path(document.filename).write_bytes(document.content)
"""

from __future__ import annotations

from axis_intake.assembly import ApplicationAssembler, build_filename
from axis_intake.core.config import AppSettings
from axis_intake.exceptions import (
    AnswerRecordError,
    AxisIntakeError,
    CatalogError,
    MergeError,
    PageAccountingError,
    RenderError,
    TemplateFetchError,
    TemplateParseError,
)
from axis_intake.models import AnswerRecord, AssembledDocument, PageRecord, PartPageCounts

__all__ = [
    "AnswerRecord",
    "AnswerRecordError",
    "AppSettings",
    "ApplicationAssembler",
    "AssembledDocument",
    "AxisIntakeError",
    "CatalogError",
    "MergeError",
    "PageAccountingError",
    "PageRecord",
    "PartPageCounts",
    "RenderError",
    "TemplateFetchError",
    "TemplateParseError",
    "build_filename",
]
