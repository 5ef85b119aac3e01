import pytest
from fastapi import HTTPException
from starlette.requests import Request

from aidetect.schemas.analyze import AnalyzeRequest
from aidetect.schemas.common import ContentKind
from aidetect.utils.request_body import read_json_body, read_json_model


def _make_request(messages: list[dict], content_type: str = "application/json") -> Request:
    queue = list(messages)

    async def receive() -> dict:
        if queue:
            return queue.pop(0)
        return {"type": "http.disconnect"}

    scope = {
        "type": "http",
        "asgi": {"version": "3.0", "spec_version": "2.3"},
        "http_version": "1.1",
        "method": "POST",
        "scheme": "http",
        "path": "/v1/analyze",
        "raw_path": b"/v1/analyze",
        "query_string": b"",
        "root_path": "",
        "headers": [(b"content-type", content_type.encode("ascii"))],
        "client": ("127.0.0.1", 12345),
        "server": ("testserver", 80),
    }
    return Request(scope, receive)


def _body(raw: bytes) -> list[dict]:
    return [{"type": "http.request", "body": raw, "more_body": False}]


@pytest.mark.asyncio
async def test_read_json_body_valid_object():
    request = _make_request(_body(b'{"text":"hello"}'))

    payload = await read_json_body(request)

    assert payload == {"text": "hello"}


@pytest.mark.asyncio
async def test_read_json_body_invalid_json():
    request = _make_request(_body(b"{"))

    with pytest.raises(HTTPException) as exc:
        await read_json_body(request)

    assert exc.value.status_code == 400
    assert exc.value.detail == "Invalid JSON body"


@pytest.mark.asyncio
async def test_read_json_body_client_disconnect():
    request = _make_request([{"type": "http.disconnect"}])

    with pytest.raises(HTTPException) as exc:
        await read_json_body(request)

    assert exc.value.status_code == 499
    assert exc.value.detail == "Client disconnected"


@pytest.mark.asyncio
async def test_read_json_body_rejects_non_object():
    request = _make_request(_body(b"[]"))

    with pytest.raises(HTTPException) as exc:
        await read_json_body(request)

    assert exc.value.status_code == 400
    assert exc.value.detail == "JSON body must be an object"


@pytest.mark.asyncio
async def test_read_json_model_accepts_camel_case_kind():
    request = _make_request(_body(b'{"text":"hello","contentType":"document"}'))

    body = await read_json_model(request, AnalyzeRequest)

    assert body.text == "hello"
    assert body.content_type is ContentKind.DOCUMENT


@pytest.mark.asyncio
async def test_read_json_model_defaults_to_text_kind():
    request = _make_request(_body(b'{"text":"hello"}'))

    body = await read_json_model(request, AnalyzeRequest)

    assert body.content_type is ContentKind.TEXT


@pytest.mark.asyncio
async def test_read_json_model_rejects_unknown_kind():
    request = _make_request(_body(b'{"text":"hello","contentType":"video"}'))

    with pytest.raises(HTTPException) as exc:
        await read_json_model(request, AnalyzeRequest)

    assert exc.value.status_code == 422
