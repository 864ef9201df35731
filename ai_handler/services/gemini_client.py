"""
Gemini generateContent invocation.

One request per call, no retries. Every failure raises; the task handler
reports it as `server_error`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx
import orjson

from ..core.config import HandlerSettings
from ..core.logging_utils import mask_api_key
from .requests import prepare_gemini_generate_request

logger = logging.getLogger("AIHandler.Services.GeminiClient")

# Finish reasons the SDK treats as "no usable text"
BLOCKING_FINISH_REASONS = {"SAFETY", "RECITATION", "LANGUAGE"}


class GeminiResponseError(Exception):
    """Raised when Gemini answers with an error status or an unusable body."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


def _extract_upstream_error_message(response: httpx.Response) -> str:
    try:
        data = orjson.loads(response.content)
        message = data.get("error", {}).get("message")
        if message:
            return str(message)
    except (orjson.JSONDecodeError, AttributeError):
        pass
    return response.text[:200] or (response.reason_phrase or "Unknown error")


def _with_message(text: str, message: Optional[str]) -> str:
    return f"{text}: {message}" if message else text


def extract_text_from_response(data: Dict[str, Any]) -> str:
    """
    Concatenate the text parts of the first candidate.

    Same rules as the official SDK's `response.text()`:
    - first candidate finished with SAFETY, RECITATION or LANGUAGE -> error,
      even if it carries partial text
    - no candidates but promptFeedback present -> error (prompt blocked)
    - no candidates and no feedback -> ""
    """
    if not isinstance(data, dict):
        raise GeminiResponseError("Malformed Gemini response: expected a JSON object")

    candidates: List[Dict[str, Any]] = data.get("candidates") or []
    if not candidates:
        feedback = data.get("promptFeedback")
        if feedback:
            text = "Text not available. Response was blocked"
            if feedback.get("blockReason"):
                text += f" due to {feedback['blockReason']}"
            raise GeminiResponseError(_with_message(text, feedback.get("blockReasonMessage")))
        return ""

    candidate = candidates[0]
    finish_reason = candidate.get("finishReason")
    if finish_reason in BLOCKING_FINISH_REASONS:
        raise GeminiResponseError(
            _with_message(f"Candidate was blocked due to {finish_reason}", candidate.get("finishMessage"))
        )

    parts = (candidate.get("content") or {}).get("parts") or []
    return "".join(p["text"] for p in parts if isinstance(p, dict) and isinstance(p.get("text"), str))


async def generate_text(
    http_client: httpx.AsyncClient,
    settings: HandlerSettings,
    system_instruction: str,
    user_prompt: Optional[str],
    request_id: str,
) -> str:
    log_prefix = f"RID-{request_id}"
    url, headers, json_payload = prepare_gemini_generate_request(
        settings, system_instruction, user_prompt, request_id
    )
    logger.info(f"{log_prefix}: Calling Gemini model '{settings.gemini_model}' with key {mask_api_key(settings.gemini_api_key)}")

    response = await http_client.post(url, headers=headers, content=orjson.dumps(json_payload))

    if response.status_code >= 400:
        error_text = _extract_upstream_error_message(response)
        logger.error(f"{log_prefix}: Gemini upstream error {response.status_code}: {error_text}")
        raise GeminiResponseError(f"Gemini API error ({response.status_code}): {error_text}",
                                  status_code=response.status_code)

    try:
        data = orjson.loads(response.content)
    except orjson.JSONDecodeError as e:
        raise GeminiResponseError(f"Malformed Gemini response: {e}") from e

    text = extract_text_from_response(data)
    logger.info(f"{log_prefix}: Gemini returned {len(text)} chars")
    return text
