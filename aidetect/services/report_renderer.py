from __future__ import annotations

import json
import time
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path

from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from aidetect.schemas.analyze import DetectionResult
from aidetect.schemas.report import ExportReport

REPORT_PREFIX = "ai-detection-report"


def iso_timestamp(now: datetime | None = None) -> str:
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def report_summary(result: DetectionResult) -> str:
    # Ties round up on the exact binary value, matching toFixed(1).
    percent = Decimal(result.ai_probability).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)
    return f"AI Content Detection Report - {percent}% AI Probability"


def build_export_report(result: DetectionResult, now: datetime | None = None) -> ExportReport:
    return ExportReport(timestamp=iso_timestamp(now), results=result, summary=report_summary(result))


def report_filename(now_ms: int | None = None, extension: str = "json") -> str:
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    return f"{REPORT_PREFIX}-{now_ms}.{extension}"


def render_json(report: ExportReport) -> str:
    return json.dumps(report.to_payload(), ensure_ascii=False, indent=2)


def parse_report(raw: str | bytes) -> ExportReport:
    return ExportReport.model_validate_json(raw)


def write_json(report: ExportReport, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_json(report), encoding="utf-8")


def render_pdf(report: ExportReport, output_path: Path) -> None:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    c = canvas.Canvas(str(output_path), pagesize=letter)
    _, height = letter

    y = height - 50
    c.setFont("Helvetica-Bold", 16)
    c.drawString(40, y, "AI Content Detection Report")
    y -= 22
    c.setFont("Helvetica", 10)
    c.drawString(40, y, report.summary)
    y -= 14
    c.drawString(40, y, f"Generated: {report.timestamp}")
    y -= 24

    def line(text: str, indent: int = 0) -> None:
        nonlocal y
        c.drawString(40 + indent, y, text)
        y -= 14
        if y < 80:
            c.showPage()
            c.setFont("Helvetica", 10)
            y = height - 50

    for key, value in report.results.to_payload().items():
        if isinstance(value, dict):
            line(f"{key}:")
            for k2, v2 in value.items():
                if isinstance(v2, list):
                    line(f"- {k2}:", indent=20)
                    for item in v2:
                        line(f"* {item}", indent=40)
                else:
                    line(f"- {k2}: {v2}", indent=20)
        else:
            line(f"{key}: {value}")

    c.save()
