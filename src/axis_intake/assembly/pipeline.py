"""Application assembler: answers in, merged PDF out.

Phases run strictly in order and any failure aborts the whole run::

    fetch templates -> count template pages -> measuring pass
    -> size ToC -> final pass -> cover -> ToC -> merge

The measuring pass renders the content with no offset to learn its page
count; the ToC page count depends only on the number of included sections.
With both known, the final pass records section pages against the real
offset and draws ``Page N of T`` footers.  Both passes must paginate
identically, otherwise ``PageAccountingError`` is raised.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from datetime import datetime, timezone

from axis_intake.assembly.content import SurfaceFactory, render_content
from axis_intake.assembly.cover import generate_cover
from axis_intake.assembly.merger import merge
from axis_intake.assembly.templates import count_pages, fetch_template
from axis_intake.assembly.toc import generate_toc, toc_page_count
from axis_intake.catalog import included_sections
from axis_intake.core.config import AppSettings
from axis_intake.exceptions import (
    AxisIntakeError,
    PageAccountingError,
    RenderError,
    TemplateFetchError,
)
from axis_intake.models import AnswerRecord, AssembledDocument, PartPageCounts
from axis_intake.rendering.cursor import PageGeometry
from axis_intake.rendering.reportlab_surface import ReportLabSurface
from axis_intake.rendering.styles import build_styles

log = logging.getLogger(__name__)

TemplateFetcher = Callable[[str], bytes]


def build_filename(prefix: str, submitted_at: datetime) -> str:
    """``<prefix>-<UTC ISO-8601 to seconds, colons as hyphens>.pdf``."""
    stamp = submitted_at.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S")
    return f"{prefix}-{stamp.replace(':', '-')}.pdf"


@contextmanager
def _phase(name: str) -> Iterator[None]:
    """Wrap unexpected exceptions raised inside a phase in ``RenderError``."""
    try:
        yield
    except AxisIntakeError:
        raise
    except Exception as exc:
        raise RenderError(f"{name} failed: {exc}") from exc


class ApplicationAssembler:
    """Builds the merged application PDF from an ``AnswerRecord``."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        fetch: TemplateFetcher | None = None,
        surface_factory: SurfaceFactory | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._geometry = PageGeometry.from_config(self._settings.pdf)
        self._styles = build_styles(self._settings.pdf)
        timeout = self._settings.templates.fetch_timeout
        self._fetch = fetch or (lambda location: fetch_template(location, timeout=timeout))
        title = self._settings.branding.product_title
        self._surface_factory = surface_factory or (lambda w, h: ReportLabSurface(w, h, title=title))

    @property
    def settings(self) -> AppSettings:
        return self._settings

    def assemble(
        self,
        record: AnswerRecord,
        submitted_at: datetime | None = None,
        *,
        cover_template: str | None = None,
        end_template: str | None = None,
    ) -> AssembledDocument:
        submitted_at = submitted_at or datetime.now().astimezone()
        try:
            return self._assemble(
                record,
                submitted_at,
                cover_template or self._settings.templates.cover,
                end_template or self._settings.templates.end,
            )
        except AxisIntakeError as exc:
            log.error("Application assembly failed [%s]: %s", exc.kind, exc)
            raise

    def _fetch_template(self, location: str) -> bytes:
        try:
            return self._fetch(location)
        except AxisIntakeError:
            raise
        except Exception as exc:
            raise TemplateFetchError(f"Could not fetch template {location!r}: {exc}", source=location) from exc

    def _assemble(
        self,
        record: AnswerRecord,
        submitted_at: datetime,
        cover_location: str,
        end_location: str,
    ) -> AssembledDocument:
        started = time.monotonic()
        branding = self._settings.branding

        cover_bytes = self._fetch_template(cover_location)
        end_bytes = self._fetch_template(end_location)

        cover_pages = count_pages(cover_bytes, cover_location)
        end_pages = count_pages(end_bytes, end_location)

        sections = included_sections(record)
        titles = [s.title for s in sections]
        render_kwargs = {
            "surface_factory": self._surface_factory,
            "geometry": self._geometry,
            "styles": self._styles,
            "branding": branding,
        }

        with _phase("Content measuring pass"):
            measured = render_content(sections, record, **render_kwargs)

        toc_pages = toc_page_count(len(sections), self._geometry)
        counts = PartPageCounts(cover=cover_pages, toc=toc_pages, content=measured.page_count, end=end_pages)
        offset = cover_pages + toc_pages

        with _phase("Content rendering"):
            final = render_content(
                sections, record, offset=offset, total_pages=counts.total, **render_kwargs
            )
        if final.page_count != measured.page_count or final.section_starts != measured.section_starts:
            raise PageAccountingError(
                f"Final pass paginated differently from the measuring pass "
                f"({final.page_count} vs {measured.page_count} content pages)"
            )
        for page_record in final.records:
            log.debug("ToC entry %r -> page %d", page_record.title, page_record.page)

        company = record.company_name or branding.default_company_name
        with _phase("Cover generation"):
            cover = generate_cover(
                company, submitted_at, cover_bytes, styles=self._styles, source=cover_location
            )

        with _phase("Table of contents generation"):
            toc = generate_toc(
                final.records,
                titles,
                surface_factory=self._surface_factory,
                geometry=self._geometry,
                styles=self._styles,
                branding=branding,
                first_page=cover_pages + 1,
                total_pages=counts.total,
            )

        merged = merge(cover, toc, final.pdf, end_bytes)

        log.info(
            "Assembled application: %d sections, %d pages (cover=%d toc=%d content=%d end=%d) in %.2fs",
            len(sections),
            counts.total,
            counts.cover,
            counts.toc,
            counts.content,
            counts.end,
            time.monotonic() - started,
        )
        return AssembledDocument(
            filename=build_filename(branding.filename_prefix, submitted_at),
            content=merged,
            submitted_at=submitted_at,
            page_records=list(final.records),
            page_counts=counts,
        )
