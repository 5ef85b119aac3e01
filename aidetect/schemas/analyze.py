from pydantic import BaseModel, ConfigDict, Field

from aidetect.schemas.common import CamelModel, ContentKind


class AnalyzeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text: str
    content_type: ContentKind = Field(default=ContentKind.TEXT, alias="contentType")


class AnalysisDetails(CamelModel):
    patterns: list[str]
    indicators: list[str]
    recommendation: str


class DetectionMetadata(CamelModel):
    processing_time: float = Field(alias="processingTime")
    model_version: str = Field(alias="modelVersion")
    algorithm: str
    word_count: int | None = Field(default=None, alias="wordCount")
    sentence_count: int | None = Field(default=None, alias="sentenceCount")


class DetectionResult(CamelModel):
    ai_probability: float = Field(ge=0.0, le=100.0, alias="aiProbability")
    confidence: float = Field(ge=0.0, le=100.0)
    content_type: ContentKind = Field(alias="contentType")
    analysis: AnalysisDetails
    metadata: DetectionMetadata | None = None
