from fastapi import APIRouter, Depends, File, UploadFile

from aidetect.api.deps import get_app_settings
from aidetect.core.config import Settings
from aidetect.schemas.files import ProcessedFileResponse
from aidetect.services.file_processor import describe_file_type
from aidetect.utils.files import process_upload

router = APIRouter()


@router.post("/files", response_model=ProcessedFileResponse, response_model_exclude_none=True)
async def inspect_file(
    file: UploadFile = File(...),
    settings: Settings = Depends(get_app_settings),
):
    processed = await process_upload(file, settings.max_upload_bytes)
    return ProcessedFileResponse(
        **processed.model_dump(),
        type_description=describe_file_type(processed.metadata.mime_type),
    )
