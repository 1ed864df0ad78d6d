"""Nested pydantic-settings configuration for the application.

Each sub-config reads its own ``AXIS_<GROUP>_*`` env vars and is aggregated
by ``AppSettings``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class PDFLayoutConfig(BaseSettings):
    """Page geometry and typography for generated pages.

    Distances are millimetres measured from the top edge of the page.
    Env vars use ``AXIS_PDF_`` prefix::

        export AXIS_PDF_PAGE_SIZE=letter
        export AXIS_PDF_LINE_HEIGHT_MM=5.5
    """

    model_config = {"env_prefix": "AXIS_PDF_"}

    page_size: Literal["a4", "letter"] = "a4"
    margin_mm: float = Field(default=20.0, gt=0.0, le=60.0)
    header_logo_top_mm: float = 15.0
    header_text_baseline_mm: float = 25.0
    header_rule_mm: float = 35.0
    content_top_mm: float = Field(default=50.0, gt=0.0)
    line_height_mm: float = Field(default=6.0, gt=0.0, le=30.0)
    question_gap_mm: float = Field(default=8.0, ge=0.0)
    section_gap_mm: float = Field(default=5.0, ge=0.0)
    section_reserve_mm: float = Field(default=20.0, ge=0.0)
    question_reserve_mm: float = Field(default=15.0, ge=0.0)
    table_cell_padding_mm: float = Field(default=1.5, ge=0.0)
    toc_line_height_mm: float = Field(default=8.0, gt=0.0)
    toc_title_gap_mm: float = Field(default=15.0, ge=0.0)
    font_family: str = "Helvetica"
    body_font_size: int = Field(default=10, ge=6, le=72)
    question_font_size: int = Field(default=11, ge=6, le=72)
    heading_font_size: int = Field(default=16, ge=6, le=72)
    header_font_size: int = Field(default=12, ge=6, le=72)
    footer_font_size: int = Field(default=9, ge=6, le=72)


class BrandingConfig(BaseSettings):
    """Product naming and brand marks.

    Env vars use ``AXIS_BRANDING_`` prefix.
    """

    model_config = {"env_prefix": "AXIS_BRANDING_"}

    brand_name: str = "AXIS"
    product_title: str = "Technology Insurance Application"
    filename_prefix: str = "Axis-Technology-Insurance-Application"
    default_company_name: str = "ABC Sample Corporation"
    logo_path: Path | None = None


class TemplateConfig(BaseSettings):
    """Locations of the static cover and end-page documents.

    Each location is a filesystem path or an ``http(s)://`` URL.
    Env vars use ``AXIS_TEMPLATE_`` prefix::

        export AXIS_TEMPLATE_COVER="https://assets.example.com/front cover page.pdf"
    """

    model_config = {"env_prefix": "AXIS_TEMPLATE_"}

    cover: str = "pdf/front cover page.pdf"
    end: str = "pdf/end last page.pdf"
    fetch_timeout: float = Field(default=30.0, gt=0.0)


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``AXIS_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "AXIS_OBSERVABILITY_"}

    service_name: str = "axis-intake"
    log_level: str = "INFO"


class APIConfig(BaseSettings):
    """HTTP API metadata.

    Env vars use ``AXIS_API_`` prefix.
    """

    model_config = {"env_prefix": "AXIS_API_"}

    title: str = "Axis Intake"
    description: str = "Assembles technology insurance applications into a merged PDF"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    pdf: PDFLayoutConfig = PDFLayoutConfig()
    branding: BrandingConfig = BrandingConfig()
    templates: TemplateConfig = TemplateConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
    api: APIConfig = APIConfig()
