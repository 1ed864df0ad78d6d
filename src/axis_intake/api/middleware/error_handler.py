"""Global exception handlers mapping domain exceptions to HTTP responses."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from axis_intake.exceptions import (
    AnswerRecordError,
    AxisIntakeError,
    MergeError,
    TemplateFetchError,
    TemplateParseError,
)


def _error(status_code: int, exc: AxisIntakeError) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": str(exc), "type": exc.kind})


def register_error_handlers(app: FastAPI) -> None:
    """Register exception-to-HTTP-status mappings."""

    @app.exception_handler(TemplateFetchError)
    async def handle_fetch_error(request: Request, exc: TemplateFetchError) -> JSONResponse:
        return _error(502, exc)

    @app.exception_handler(TemplateParseError)
    async def handle_parse_error(request: Request, exc: TemplateParseError) -> JSONResponse:
        return _error(422, exc)

    @app.exception_handler(MergeError)
    async def handle_merge_error(request: Request, exc: MergeError) -> JSONResponse:
        return _error(500, exc)

    @app.exception_handler(AnswerRecordError)
    async def handle_bad_record(request: Request, exc: AnswerRecordError) -> JSONResponse:
        return _error(422, exc)

    @app.exception_handler(AxisIntakeError)
    async def handle_generic_error(request: Request, exc: AxisIntakeError) -> JSONResponse:
        return _error(500, exc)
