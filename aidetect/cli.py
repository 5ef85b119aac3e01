from __future__ import annotations

import argparse
import asyncio
import json
import mimetypes
from pathlib import Path

from aidetect.core.config import get_settings
from aidetect.core.logging import configure_logging
from aidetect.schemas.common import ContentKind
from aidetect.services.detector import ContentDetector
from aidetect.services.file_processor import describe_file_type, process_file
from aidetect.services.report_renderer import build_export_report, report_filename, write_json
from aidetect.utils.random_source import make_random_source


def _add_analyze_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--text", default=None, help="Text to analyze.")
    parser.add_argument("--input-file", default=None, help="File to ingest and analyze (text, PDF, Word, image).")
    parser.add_argument(
        "--kind",
        choices=[kind.value for kind in ContentKind],
        default=None,
        help="Content kind for --text. Files infer their own kind.",
    )
    parser.add_argument("--mime-type", default=None, help="Override the guessed MIME type of --input-file.")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible scoring.")
    parser.add_argument("--no-delay", action="store_true", help="Skip the simulated processing delay.")
    parser.add_argument("--export-dir", default=None, help="Also write an export report into this directory.")


def _add_inspect_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("path", help="File to ingest.")
    parser.add_argument("--mime-type", default=None, help="Override the guessed MIME type.")


def _guess_mime_type(path: Path, override: str | None) -> str:
    if override:
        return override
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or "application/octet-stream"


def _load_content(text: str | None, input_file: str | None, kind: str | None, mime_type: str | None) -> tuple[str, ContentKind]:
    if text and input_file:
        raise ValueError("Use either --text or --input-file, not both.")
    if not text and not input_file:
        raise ValueError("Provide --text or --input-file.")
    if text:
        return text, ContentKind(kind or ContentKind.TEXT)

    path = Path(input_file)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    processed = process_file(path.name, path.read_bytes(), _guess_mime_type(path, mime_type))
    return processed.content, processed.type


def _analyze_from_args(args: argparse.Namespace) -> dict:
    content, kind = _load_content(args.text, args.input_file, args.kind, args.mime_type)

    settings = get_settings()
    if args.no_delay:
        settings = settings.model_copy(update={"simulate_latency": False})
    detector = ContentDetector(settings=settings)

    rng = make_random_source(args.seed) if args.seed is not None else None
    result = asyncio.run(detector.detect_or_fallback(content, kind, rng=rng))

    output = {"result": result.to_payload()}
    if args.export_dir:
        report_path = Path(args.export_dir) / report_filename()
        write_json(build_export_report(result), report_path)
        output["report_path"] = str(report_path)
    return output


def _inspect_from_args(args: argparse.Namespace) -> dict:
    path = Path(args.path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    mime_type = _guess_mime_type(path, args.mime_type)
    processed = process_file(path.name, path.read_bytes(), mime_type)
    payload = processed.to_payload()
    payload["typeDescription"] = describe_file_type(processed.metadata.mime_type)
    return payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aidetect",
        description="Heuristic AI content detection for text, documents and images.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_analyze = sub.add_parser("analyze", help="Score text or a file and print the detection result.")
    _add_analyze_args(p_analyze)

    p_inspect = sub.add_parser("inspect", help="Show what the file ingestion step extracts from a file.")
    _add_inspect_args(p_inspect)

    return parser


def main(argv: list[str] | None = None) -> None:
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "analyze":
        try:
            output = _analyze_from_args(args)
        except (ValueError, FileNotFoundError) as exc:
            parser.error(str(exc))
        print(json.dumps(output, ensure_ascii=False, indent=2))
        return

    if args.command == "inspect":
        try:
            output = _inspect_from_args(args)
        except FileNotFoundError as exc:
            parser.error(str(exc))
        print(json.dumps(output, ensure_ascii=False, indent=2))
        return

    raise RuntimeError(f"Unknown command: {args.command}")


if __name__ == "__main__":
    main()
