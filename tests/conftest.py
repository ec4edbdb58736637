# Pytest fixtures: a Client wired to an httpx.MockTransport that records
# every request it sees, plus helpers to build canned API responses.

import json
from typing import Any, AsyncIterator, Callable, Dict, List

import httpx
import pytest

from openai_lite import Client

BASE_URL = "https://api.test/v1"
API_KEY = "sk-test"


def json_response(status_code: int, payload: Any) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


def sse_response(*chunks: bytes) -> httpx.Response:
    """A 200 event-stream whose body arrives split exactly as `chunks`."""

    async def _body() -> AsyncIterator[bytes]:
        for c in chunks:
            yield c

    return httpx.Response(200, headers={"content-type": "text/event-stream"}, content=_body())


def sse_event(payload: Dict[str, Any]) -> bytes:
    return f"data: {json.dumps(payload)}\n\n".encode("utf-8")


def chunk_payload(content: str = None, role: str = None, finish_reason: str = None) -> Dict[str, Any]:
    delta: Dict[str, Any] = {}
    if role is not None:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion.chunk",
        "created": 1700000000,
        "model": "gpt-3.5-turbo",
        "choices": [{"index": 0, "delta": delta, "finish_reason": finish_reason}],
    }


@pytest.fixture
def seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_client(seen) -> Callable[[Callable[[httpx.Request], httpx.Response]], Client]:
    """Build a Client whose transport answers with `handler(request)`."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]) -> Client:
        def _record(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return handler(request)

        http = httpx.AsyncClient(transport=httpx.MockTransport(_record))
        return Client(api_key=API_KEY, base_url=BASE_URL, http_client=http)

    return _make
