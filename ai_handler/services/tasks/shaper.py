"""
Response shaping: turns handler outcomes into `TaskResponse` objects.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

import orjson

from ...models.api_models import TaskResponse
from .resolver import TASK_FUTURE_INTEL

logger = logging.getLogger("AIHandler.Services.Tasks.Shaper")

JSON_HEADERS = {"Content-Type": "application/json"}
TEXT_HEADERS = {"Content-Type": "text/plain; charset=utf-8"}


def json_response(status_code: int, data: Any) -> TaskResponse:
    return TaskResponse(
        status_code=status_code,
        headers=dict(JSON_HEADERS),
        body=orjson.dumps(data).decode("utf-8"),
    )


def text_response(status_code: int, text: str, headers: Optional[Dict[str, str]] = None) -> TaskResponse:
    return TaskResponse(
        status_code=status_code,
        headers=dict(TEXT_HEADERS) if headers is None else headers,
        body=text,
    )


def method_not_allowed_response() -> TaskResponse:
    return text_response(405, "Method Not Allowed", headers={})


def ping_response() -> TaskResponse:
    return json_response(200, {"ok": True, "pong": True})


def error_response(status_code: int, message: str, details: Optional[str] = None) -> TaskResponse:
    data: Dict[str, Any] = {"error": message}
    if details is not None:
        data["details"] = details
    return json_response(status_code, data)


def shape_model_output(task_key: str, text: str, request_id: str = "-") -> TaskResponse:
    """
    getFutureIntel -> strict JSON when it parses, otherwise {"text": raw}.
    Everything else -> raw text.
    """
    if task_key == TASK_FUTURE_INTEL:
        try:
            parsed = orjson.loads(text)
        except orjson.JSONDecodeError:
            logger.warning(f"RID-{request_id}: Model output for {task_key} is not valid JSON, wrapping as text.")
            return json_response(200, {"text": text})
        return json_response(200, parsed)

    return text_response(200, text)
