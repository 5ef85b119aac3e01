import io
import json

import pytest
from PIL import Image

from aidetect.cli import build_parser, main
from aidetect.services.report_renderer import parse_report


def _run(capsys, argv: list[str]) -> dict:
    main(argv)
    return json.loads(capsys.readouterr().out)


def test_analyze_text_is_reproducible_with_seed(capsys):
    argv = ["analyze", "--text", "Moreover, the plan is sound. It will work.", "--seed", "7", "--no-delay"]

    first = _run(capsys, argv)
    second = _run(capsys, argv)

    assert first == second
    assert first["result"]["contentType"] == "text"
    assert first["result"]["metadata"]["wordCount"] == 8


def test_analyze_text_with_kind(capsys):
    output = _run(capsys, ["analyze", "--text", "Scanned page text.", "--kind", "document", "--no-delay"])

    assert output["result"]["contentType"] == "document"


def test_analyze_input_file_infers_kind(capsys, tmp_path):
    image_path = tmp_path / "photo.png"
    buffer = io.BytesIO()
    Image.new("RGB", (12, 10)).save(buffer, format="PNG")
    image_path.write_bytes(buffer.getvalue())

    output = _run(capsys, ["analyze", "--input-file", str(image_path), "--seed", "1", "--no-delay"])

    assert output["result"]["contentType"] == "image"
    assert "wordCount" not in output["result"]["metadata"]


def test_analyze_writes_export_report(capsys, tmp_path):
    output = _run(
        capsys,
        ["analyze", "--text", "A short note.", "--seed", "3", "--no-delay", "--export-dir", str(tmp_path)],
    )

    written = list(tmp_path.glob("ai-detection-report-*.json"))
    assert len(written) == 1
    assert output["report_path"] == str(written[0])

    report = parse_report(written[0].read_text(encoding="utf-8"))
    assert report.results.to_payload() == output["result"]


def test_inspect_text_file(capsys, tmp_path):
    path = tmp_path / "notes.txt"
    path.write_text("Hello there.", encoding="utf-8")

    output = _run(capsys, ["inspect", str(path)])

    assert output["type"] == "text"
    assert output["content"] == "Hello there."
    assert output["typeDescription"] == "Text Document"


def test_inspect_with_mime_override(capsys, tmp_path):
    path = tmp_path / "upload.bin"
    path.write_bytes(b"%PDF-1.4")

    output = _run(capsys, ["inspect", str(path), "--mime-type", "application/pdf"])

    assert output["type"] == "document"
    assert output["typeDescription"] == "PDF Document"


@pytest.mark.parametrize(
    "argv",
    [
        ["analyze"],
        ["analyze", "--text", "x", "--input-file", "y.txt"],
        ["analyze", "--input-file", "does-not-exist.txt"],
        ["inspect", "does-not-exist.txt"],
    ],
)
def test_invalid_arguments_exit(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)

    assert exc.value.code == 2


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])
