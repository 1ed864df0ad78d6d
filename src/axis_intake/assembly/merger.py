"""Document merger: concatenates cover, ToC, content and end-page PDFs."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from io import BytesIO

from pypdf import PdfReader, PdfWriter

from axis_intake.exceptions import MergeError

log = logging.getLogger(__name__)


def merge_documents(parts: Sequence[tuple[str, bytes]]) -> bytes:
    """Copy every page of each named part, in order, into one PDF.

    Pages are not reflowed or renumbered.  Any part that fails to parse
    aborts the merge with ``MergeError``; there is no partial output.
    """
    writer = PdfWriter()
    for name, data in parts:
        try:
            reader = PdfReader(BytesIO(data))
            pages = list(reader.pages)
        except Exception as exc:
            raise MergeError(f"Cannot read {name} document: {exc}") from exc
        if not pages:
            raise MergeError(f"The {name} document has no pages")
        try:
            for page in pages:
                writer.add_page(page)
        except Exception as exc:
            raise MergeError(f"Cannot copy pages of {name} document: {exc}") from exc
        log.debug("Merged %s (%d pages)", name, len(pages))

    buffer = BytesIO()
    try:
        writer.write(buffer)
    except Exception as exc:
        raise MergeError(f"Cannot write merged document: {exc}") from exc
    return buffer.getvalue()


def merge(cover: bytes, toc: bytes, content: bytes, end: bytes) -> bytes:
    return merge_documents([("cover", cover), ("table of contents", toc), ("content", content), ("end page", end)])
