"""Shared fixtures for axis-intake tests."""

from __future__ import annotations

from collections.abc import Callable
from io import BytesIO
from typing import Any

import pytest

from axis_intake.core.config import PDFLayoutConfig
from axis_intake.models import AnswerRecord
from axis_intake.rendering.cursor import LayoutCursor, PageGeometry
from axis_intake.rendering.styles import TextStyle, build_styles
from tests.fakes.fake_surface import RecordingSurface, SurfaceRecorder


@pytest.fixture
def geometry() -> PageGeometry:
    """Default A4 geometry."""
    return PageGeometry.from_config(PDFLayoutConfig())


@pytest.fixture
def styles() -> dict[str, TextStyle]:
    return build_styles(PDFLayoutConfig())


@pytest.fixture
def surface(geometry: PageGeometry) -> RecordingSurface:
    return RecordingSurface(geometry.width, geometry.height)


@pytest.fixture
def cursor(surface: RecordingSurface, geometry: PageGeometry) -> LayoutCursor:
    return LayoutCursor(surface, geometry)


@pytest.fixture
def recorder() -> SurfaceRecorder:
    return SurfaceRecorder()


@pytest.fixture
def empty_record() -> AnswerRecord:
    return AnswerRecord.from_form_data({})


@pytest.fixture
def sample_form() -> dict[str, Any]:
    """Partially completed form payload as the intake form posts it."""
    return {
        "sectors": ["ai", "robotics"],
        "generalInfo": {
            "legal_name": "Northwind Robotics Inc.",
            "incorporation_location": "Ontario",
            "year_established": 2014,
            "num_employees": 0,
            "employees_outside_canada": "yes",
            "employees_outside_list": "Germany: 4, USA: 11",
            "breach_contact_name": "Dana Moss",
            "breach_contact_email": "dana@example.com",
        },
        "operations": {
            "services_description": "Warehouse automation software and fleet robots.",
            "revenue_software": "60",
            "revenue_hardware": "40",
            "risk_healthcare": "yes",
            "healthcare_details": "Hospital supply robots",
            "risk_rail": "no",
            "hosting_services": "yes",
            "hosting_infrastructure": "third_party",
            "third_party_name": "CloudCo",
            "client_1_name": "A very long client name that keeps going",
            "client_1_value": "250000",
        },
        "financials": {"revenue_last_domestic": "1200000"},
        "priorIncidents": {"incident_extortion": "yes", "incident_details_text": "Ransom email, 2023."},
        "ai": {"ai_functionality_integrated": "no"},
        "robotics": {"robotics_navigation": ["lidar", "other"], "nav_other_specify": "UWB beacons"},
    }


@pytest.fixture
def sample_record(sample_form: dict[str, Any]) -> AnswerRecord:
    return AnswerRecord.from_form_data(sample_form)


def _make_pdf(pages: int = 1, label: str = "Template", size: tuple[float, float] | None = None) -> bytes:
    from reportlab.lib.pagesizes import A4
    from reportlab.pdfgen import canvas

    buffer = BytesIO()
    c = canvas.Canvas(buffer, pagesize=size or A4)
    for number in range(1, pages + 1):
        c.drawString(72, 720, f"{label} page {number}")
        c.showPage()
    c.save()
    return buffer.getvalue()


@pytest.fixture
def make_pdf() -> Callable[..., bytes]:
    """Factory for small real PDFs: ``make_pdf(pages=2, label="Cover")``."""
    pytest.importorskip("reportlab")
    return _make_pdf
