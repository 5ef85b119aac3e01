from enum import Enum

from pydantic import BaseModel, ConfigDict


class ContentKind(str, Enum):
    TEXT = "text"
    DOCUMENT = "document"
    IMAGE = "image"


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class ErrorResponse(BaseModel):
    detail: str
    trace_id: str


class HealthResponse(BaseModel):
    status: str = "ok"
