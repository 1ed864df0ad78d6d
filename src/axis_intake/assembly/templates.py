"""Static template documents: fetch by path or URL, then count pages."""

from __future__ import annotations

import logging
import urllib.error
import urllib.request
from io import BytesIO
from pathlib import Path

from pypdf import PdfReader

from axis_intake.exceptions import TemplateFetchError, TemplateParseError

log = logging.getLogger(__name__)

_URL_SCHEMES = ("http://", "https://")


def is_url(location: str) -> bool:
    return location.lower().startswith(_URL_SCHEMES)


def fetch_template(location: str, timeout: float = 30.0) -> bytes:
    """Return the raw bytes of a template at a filesystem path or http(s) URL.

    Any failure, including an empty body, raises ``TemplateFetchError``;
    nothing is retried.
    """
    try:
        if is_url(location):
            with urllib.request.urlopen(location, timeout=timeout) as resp:
                data = resp.read()
        else:
            data = Path(location).read_bytes()
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise TemplateFetchError(f"Could not fetch template {location!r}: {exc}", source=location) from exc

    if not data:
        raise TemplateFetchError(f"Template {location!r} is empty", source=location)
    log.debug("Fetched template %s (%d bytes)", location, len(data))
    return data


def read_pdf(data: bytes, source: str) -> PdfReader:
    """Parse *data* as a PDF with at least one page."""
    try:
        reader = PdfReader(BytesIO(data))
        page_count = len(reader.pages)
    except Exception as exc:
        raise TemplateParseError(f"Template {source!r} is not a valid PDF: {exc}", source=source) from exc
    if page_count == 0:
        raise TemplateParseError(f"Template {source!r} has no pages", source=source)
    return reader


def count_pages(data: bytes, source: str) -> int:
    return len(read_pdf(data, source).pages)
