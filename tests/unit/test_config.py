"""Tests for AppSettings sub-configs: defaults and env overrides."""

from __future__ import annotations

from pathlib import Path

from axis_intake.core.config import (
    AppSettings,
    BrandingConfig,
    ObservabilityConfig,
    PDFLayoutConfig,
    TemplateConfig,
)


class TestPDFLayoutConfigDefaults:
    def test_page_size_default(self) -> None:
        assert PDFLayoutConfig().page_size == "a4"

    def test_margin_default(self) -> None:
        assert PDFLayoutConfig().margin_mm == 20.0

    def test_content_top_default(self) -> None:
        assert PDFLayoutConfig().content_top_mm == 50.0

    def test_line_height_default(self) -> None:
        assert PDFLayoutConfig().line_height_mm == 6.0

    def test_reserves_default(self) -> None:
        cfg = PDFLayoutConfig()
        assert cfg.section_reserve_mm == 20.0
        assert cfg.question_reserve_mm == 15.0

    def test_font_family_default(self) -> None:
        assert PDFLayoutConfig().font_family == "Helvetica"


class TestPDFLayoutConfigEnvOverrides:
    def test_page_size_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("AXIS_PDF_PAGE_SIZE", "letter")
        assert PDFLayoutConfig().page_size == "letter"

    def test_line_height_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("AXIS_PDF_LINE_HEIGHT_MM", "5.5")
        assert PDFLayoutConfig().line_height_mm == 5.5


class TestBrandingConfig:
    def test_defaults(self) -> None:
        cfg = BrandingConfig()
        assert cfg.brand_name == "AXIS"
        assert cfg.product_title == "Technology Insurance Application"
        assert cfg.filename_prefix == "Axis-Technology-Insurance-Application"
        assert cfg.default_company_name == "ABC Sample Corporation"
        assert cfg.logo_path is None

    def test_logo_path_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("AXIS_BRANDING_LOGO_PATH", "/srv/assets/logo.png")
        assert BrandingConfig().logo_path == Path("/srv/assets/logo.png")


class TestTemplateConfig:
    def test_defaults(self) -> None:
        cfg = TemplateConfig()
        assert cfg.cover == "pdf/front cover page.pdf"
        assert cfg.end == "pdf/end last page.pdf"
        assert cfg.fetch_timeout == 30.0

    def test_cover_url_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("AXIS_TEMPLATE_COVER", "https://assets.example.com/cover.pdf")
        assert TemplateConfig().cover == "https://assets.example.com/cover.pdf"


class TestObservabilityConfig:
    def test_log_level_from_env(self, monkeypatch) -> None:
        monkeypatch.setenv("AXIS_OBSERVABILITY_LOG_LEVEL", "DEBUG")
        assert ObservabilityConfig().log_level == "DEBUG"


class TestAppSettings:
    def test_aggregates_sub_configs(self) -> None:
        settings = AppSettings()
        assert isinstance(settings.pdf, PDFLayoutConfig)
        assert isinstance(settings.branding, BrandingConfig)
        assert isinstance(settings.templates, TemplateConfig)
        assert settings.observability.service_name == "axis-intake"
