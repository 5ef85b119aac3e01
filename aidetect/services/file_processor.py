from __future__ import annotations

import io

from PIL import Image

from aidetect.core.logging import get_logger
from aidetect.schemas.common import ContentKind
from aidetect.schemas.files import FileMetadata, ImageAnalysis, ImageDimensions, ProcessedFile

logger = get_logger(__name__)

FILE_TYPE_DESCRIPTIONS = {
    "text/plain": "Text Document",
    "application/pdf": "PDF Document",
    "application/msword": "Word Document",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "Word Document",
    "image/jpeg": "JPEG Image",
    "image/jpg": "JPEG Image",
    "image/png": "PNG Image",
    "image/gif": "GIF Image",
    "image/bmp": "BMP Image",
    "image/webp": "WebP Image",
}

_METADATA_INFO_KEYS = ("exif", "xmp", "XML:com.adobe.xmp", "icc_profile", "comment")

PDF_PLACEHOLDER = (
    'This is mock extracted text from the PDF document "{name}". In a real implementation, this would use a '
    "PDF parsing library like pdf-parse or PDF.js to extract actual text content from the PDF file. The "
    "extracted text would then be analyzed for AI-generated content patterns."
)

DOCUMENT_PLACEHOLDER = (
    'This is mock extracted text from the document "{name}". In a real implementation, this would use '
    "libraries like mammoth.js for Word documents to extract actual text content. The extracted text would "
    "then be analyzed for AI-generated content patterns and linguistic markers."
)


def describe_file_type(mime_type: str) -> str:
    return FILE_TYPE_DESCRIPTIONS.get(mime_type, "Unknown File Type")


def _image_format(mime_type: str) -> str:
    _, _, subtype = mime_type.partition("/")
    return subtype.upper()


def _process_image(data: bytes, base: FileMetadata) -> ProcessedFile:
    # Header fields only; verify() walks the chunks without decoding pixels.
    try:
        with Image.open(io.BytesIO(data)) as image:
            width, height = image.size
            has_metadata = any(key in image.info for key in _METADATA_INFO_KEYS)
            image.verify()
    except Exception:
        logger.warning("image_decode_failed", name=base.name, mime_type=base.mime_type, size=base.size)
        return ProcessedFile(content=f"Image file: {base.name}", type=ContentKind.IMAGE, metadata=base)

    analysis = ImageAnalysis(
        dimensions=ImageDimensions(width=width, height=height),
        format=_image_format(base.mime_type),
        has_metadata=has_metadata,
    )
    return ProcessedFile(
        content=f"Image analysis: {width}x{height} {analysis.format} image",
        type=ContentKind.IMAGE,
        metadata=base.model_copy(update={"image_analysis": analysis}),
    )


def _with_extracted_text(content: str, base: FileMetadata) -> ProcessedFile:
    return ProcessedFile(
        content=content,
        type=ContentKind.DOCUMENT,
        metadata=base.model_copy(update={"extracted_text": content}),
    )


def process_file(name: str, data: bytes, mime_type: str | None) -> ProcessedFile:
    """Turn an uploaded file into analyzable content.

    Plain text is decoded as UTF-8 with replacement characters. PDF and Word
    files get placeholder text; images contribute their dimensions only.
    Nothing here raises for unreadable content: a degraded ``ProcessedFile``
    is returned instead.
    """
    mime = (mime_type or "").lower()
    base = FileMetadata(name=name, size=len(data), mime_type=mime)

    if mime.startswith("image/"):
        result = _process_image(data, base)
    elif mime == "text/plain":
        content = data.decode("utf-8", errors="replace")
        result = ProcessedFile(
            content=content,
            type=ContentKind.TEXT,
            metadata=base.model_copy(update={"extracted_text": content}),
        )
    elif mime == "application/pdf":
        result = _with_extracted_text(PDF_PLACEHOLDER.format(name=name), base)
    elif "word" in mime or "document" in mime:
        result = _with_extracted_text(DOCUMENT_PLACEHOLDER.format(name=name), base)
    else:
        result = ProcessedFile(content=f"File: {name}", type=ContentKind.DOCUMENT, metadata=base)

    logger.info("file_processed", name=name, mime_type=mime, size=base.size, content_type=result.type.value)
    return result
