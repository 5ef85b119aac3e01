from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Literal

from fastapi import APIRouter, Query
from fastapi.responses import Response

from aidetect.core.logging import get_logger
from aidetect.schemas.analyze import DetectionResult
from aidetect.services.report_renderer import build_export_report, render_json, render_pdf, report_filename

router = APIRouter()
logger = get_logger(__name__)


def _attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}


@router.post("/reports/export")
async def export_report(
    result: DetectionResult,
    export_format: Literal["json", "pdf"] = Query(default="json", alias="format"),
):
    report = build_export_report(result)
    filename = report_filename(extension=export_format)

    if export_format == "pdf":
        with tempfile.TemporaryDirectory() as tmp_dir:
            pdf_path = Path(tmp_dir) / filename
            render_pdf(report, pdf_path)
            payload = pdf_path.read_bytes()
        logger.info("report_exported", format=export_format, filename=filename)
        return Response(content=payload, media_type="application/pdf", headers=_attachment(filename))

    logger.info("report_exported", format=export_format, filename=filename)
    return Response(
        content=render_json(report).encode("utf-8"),
        media_type="application/json",
        headers=_attachment(filename),
    )
