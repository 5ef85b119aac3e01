from aidetect.schemas.analyze import DetectionResult
from aidetect.schemas.common import CamelModel


class ExportReport(CamelModel):
    timestamp: str
    results: DetectionResult
    summary: str
