from fastapi import APIRouter

from aidetect.api.v1 import analyze, files, reports

router = APIRouter()
router.include_router(analyze.router, tags=["analyze"])
router.include_router(files.router, tags=["files"])
router.include_router(reports.router, tags=["reports"])
