# -*- coding: utf-8 -*-
"""
Gemini REST API request builder (thin, focused).

- Places the task template in `systemInstruction`.
- Sends a single user turn: the trimmed user prompt, or the template itself
  when the caller supplied no prompt.
- Targets the non-streaming `generateContent` endpoint.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from ....core.config import HandlerSettings
from ..headers import build_gemini_headers

logger = logging.getLogger("AIHandler.Services.Requests.GeminiBuilder")


def select_content_to_generate(system_instruction: str, user_prompt: Optional[str]) -> str:
    """
    The trimmed user prompt when non-empty, else the system instruction so a
    task can run with no user input at all.
    """
    trimmed = (user_prompt or "").strip()
    return trimmed if trimmed else system_instruction


def build_generate_content_url(base_url: str, model_name: str) -> str:
    base = base_url.rstrip('/')
    if "/v1beta/models/" in base:
        # Full model endpoint supplied as base
        if base.endswith(":generateContent"):
            return base
        if base.endswith(":streamGenerateContent"):
            return base.replace(":streamGenerateContent", ":generateContent")
        return f"{base}:generateContent"
    return f"{base}/v1beta/models/{model_name}:generateContent"


def prepare_gemini_generate_request(
    settings: HandlerSettings,
    system_instruction: str,
    user_prompt: Optional[str],
    request_id: str,
) -> Tuple[str, Dict[str, str], Dict[str, Any]]:
    """
    Build Gemini REST API request -> (url, headers, json_payload).
    The caller has already checked that settings.gemini_api_key is set.
    """
    log_prefix = f"RID-{request_id}"

    model_name = settings.gemini_model
    target_url = build_generate_content_url(settings.gemini_api_base_url, model_name)
    headers = build_gemini_headers(settings.gemini_api_key)

    content_to_generate = select_content_to_generate(system_instruction, user_prompt)

    json_payload: Dict[str, Any] = {
        "systemInstruction": {"parts": [{"text": system_instruction}]},
        "contents": [
            {"role": "user", "parts": [{"text": content_to_generate}]}
        ],
    }

    logger.info(f"{log_prefix}: Prepared Gemini REST API request. URL: {target_url} "
                f"Payload keys: {list(json_payload.keys())}, content chars: {len(content_to_generate)}")
    return target_url, headers, json_payload
