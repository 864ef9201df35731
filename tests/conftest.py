"""Shared pytest fixtures for ai_handler tests."""

from typing import Callable, Dict, List

import httpx
import orjson
import pytest

from ai_handler.core.config import HandlerSettings


def gemini_body(text: str, finish_reason: str = "STOP") -> Dict:
    """Build a minimal generateContent response carrying ``text``."""
    return {
        "candidates": [
            {
                "content": {"role": "model", "parts": [{"text": text}]},
                "finishReason": finish_reason,
            }
        ]
    }


class RecordingGemini:
    """MockTransport handler that records requests and replays a canned answer."""

    def __init__(self, status_code: int = 200, json_body: Dict = None, raw_body: bytes = None):
        self.status_code = status_code
        self.json_body = json_body if json_body is not None else gemini_body("hello from gemini")
        self.raw_body = raw_body
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.json_body)

    @property
    def last_payload(self) -> Dict:
        return orjson.loads(self.requests[-1].content)


@pytest.fixture
def settings() -> HandlerSettings:
    """Settings with a Gemini key and no affiliate IDs."""
    return HandlerSettings(gemini_api_key="AIzaTestKey1234567890", gemini_model="gemini-test")


@pytest.fixture
def settings_without_key() -> HandlerSettings:
    return HandlerSettings()


@pytest.fixture
def make_gemini() -> Callable[..., RecordingGemini]:
    """Factory for a recording Gemini stub."""
    return RecordingGemini


@pytest.fixture
def make_http_client() -> Callable[[RecordingGemini], httpx.AsyncClient]:
    """Wrap a Gemini stub in an AsyncClient backed by httpx.MockTransport."""
    def _make(stub: RecordingGemini) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(stub))
    return _make


@pytest.fixture
def gemini_response() -> Callable[..., Dict]:
    """Builder for generateContent response bodies."""
    return gemini_body
