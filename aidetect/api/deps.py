from aidetect.core.config import Settings, get_settings
from aidetect.services.detector import ContentDetector, detector_service


def get_detector() -> ContentDetector:
    return detector_service


def get_app_settings() -> Settings:
    return get_settings()
