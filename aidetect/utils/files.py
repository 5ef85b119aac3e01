from fastapi import HTTPException, UploadFile, status

from aidetect.schemas.files import ProcessedFile
from aidetect.services.file_processor import process_file


async def read_upload(file: UploadFile, max_upload_bytes: int) -> bytes:
    raw = await file.read(max_upload_bytes + 1)
    if len(raw) > max_upload_bytes:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail="File too large")
    return raw


async def process_upload(file: UploadFile, max_upload_bytes: int) -> ProcessedFile:
    raw = await read_upload(file, max_upload_bytes)
    return process_file(file.filename or "upload", raw, file.content_type)
