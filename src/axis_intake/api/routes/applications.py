"""Application PDF endpoint."""

from __future__ import annotations

import logging
from io import BytesIO
from typing import Any

from fastapi import APIRouter, Body, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import StreamingResponse

from axis_intake.models import AnswerRecord

log = logging.getLogger(__name__)

router = APIRouter(tags=["applications"])


@router.post("/applications/pdf")
async def render_application(req: Request, answers: dict[str, Any] = Body(...)) -> StreamingResponse:
    """Assemble the submitted answers into the merged application PDF."""
    record = AnswerRecord.from_form_data(answers)
    assembler = req.app.state.assembler
    document = await run_in_threadpool(assembler.assemble, record)
    log.info("Rendered %s (%d pages)", document.filename, document.page_counts.total)

    return StreamingResponse(
        BytesIO(document.content),
        media_type=document.content_type,
        headers={"Content-Disposition": f'attachment; filename="{document.filename}"'},
    )
