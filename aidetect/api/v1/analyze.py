from __future__ import annotations

import time

from fastapi import APIRouter, Depends, File, Form, HTTPException, Request, UploadFile, status

from aidetect.api.deps import get_app_settings, get_detector
from aidetect.core.config import Settings
from aidetect.core.logging import get_logger
from aidetect.schemas.analyze import AnalyzeRequest, DetectionResult
from aidetect.schemas.common import ContentKind
from aidetect.services.detector import ContentDetector
from aidetect.utils.files import process_upload
from aidetect.utils.request_body import read_json_model

router = APIRouter()
logger = get_logger(__name__)


@router.post("/analyze", response_model=DetectionResult, response_model_exclude_none=True)
async def analyze_content(
    request: Request,
    detector: ContentDetector = Depends(get_detector),
    settings: Settings = Depends(get_app_settings),
    file: UploadFile | None = File(default=None),
    text_form: str | None = Form(default=None, alias="text"),
    kind_form: ContentKind | None = Form(default=None, alias="contentType"),
):
    start = time.perf_counter()
    text: str | None = None
    kind = ContentKind.TEXT
    source = "paste"

    content_type = (request.headers.get("content-type") or "").lower()
    if "application/json" in content_type:
        body = await read_json_model(request, AnalyzeRequest)
        text = body.text
        kind = body.content_type
    elif file is not None:
        processed = await process_upload(file, settings.max_upload_bytes)
        text = processed.content
        kind = processed.type
        source = "upload"
    else:
        text = text_form
        kind = kind_form or ContentKind.TEXT

    if source != "upload" and (not text or not text.strip()):
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail="text or file is required")

    result = await detector.detect_or_fallback(text or "", kind)

    logger.info(
        "analyze_request_complete",
        source=source,
        content_type=kind.value,
        latency_ms=round((time.perf_counter() - start) * 1000, 3),
    )
    return result
