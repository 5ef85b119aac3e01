from pydantic import Field

from aidetect.schemas.common import CamelModel, ContentKind


class ImageDimensions(CamelModel):
    width: int
    height: int


class ImageAnalysis(CamelModel):
    dimensions: ImageDimensions
    format: str
    has_metadata: bool = Field(alias="hasMetadata")


class FileMetadata(CamelModel):
    name: str
    size: int
    mime_type: str = Field(alias="mimeType")
    extracted_text: str | None = Field(default=None, alias="extractedText")
    image_analysis: ImageAnalysis | None = Field(default=None, alias="imageAnalysis")


class ProcessedFile(CamelModel):
    content: str
    type: ContentKind
    metadata: FileMetadata


class ProcessedFileResponse(ProcessedFile):
    type_description: str = Field(alias="typeDescription")
