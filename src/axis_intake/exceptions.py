"""Exception hierarchy for axis-intake.

Every exception carries a ``kind`` code that callers surface to end users
so they can tell a missing template apart from a broken one.
"""

from __future__ import annotations


class AxisIntakeError(Exception):
    """Base exception for all axis-intake errors."""

    kind: str = "generic-render-failure"


class AnswerRecordError(AxisIntakeError):
    """Raised when the submitted answers are not a usable record."""

    kind = "invalid-answer-record"


class CatalogError(AxisIntakeError):
    """Raised when a question descriptor is declared inconsistently."""


class TemplateFetchError(AxisIntakeError):
    """Raised when a static template document cannot be retrieved."""

    kind = "template-fetch-failed"

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(message)
        self.source = source


class TemplateParseError(AxisIntakeError):
    """Raised when template bytes are not a usable paginated document."""

    kind = "template-parse-failed"

    def __init__(self, message: str, source: str = "") -> None:
        super().__init__(message)
        self.source = source


class RenderError(AxisIntakeError):
    """Raised when generating cover, table of contents or content fails."""

    kind = "generic-render-failure"


class PageAccountingError(RenderError):
    """Section page numbers are missing or inconsistent between passes."""


class MergeError(AxisIntakeError):
    """Raised when the generated parts cannot be merged into one document."""

    kind = "merge-failed"


__all__ = [
    "AxisIntakeError",
    "AnswerRecordError",
    "CatalogError",
    "TemplateFetchError",
    "TemplateParseError",
    "RenderError",
    "PageAccountingError",
    "MergeError",
]
