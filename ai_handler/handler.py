"""
Unified task handler.

`handle_event` is transport-agnostic: the FastAPI catch-all route and the
`lambda_handler` adapter both feed it an HTTP-like event and return the
resulting `{statusCode, headers, body}` unchanged.
"""

import asyncio
import base64
import logging
import uuid
from typing import Any, Dict, Optional

import httpx
import orjson
from pydantic import ValidationError

from .core.config import HandlerSettings, LOG_LEVEL_FROM_ENV
from .core.http_client import create_http_client
from .core.logging_utils import configure_logging
from .models.api_models import TaskEvent, TaskPayload, TaskResponse
from .services.gemini_client import generate_text
from .services.tasks import (
    TASK_PING,
    build_prompts,
    error_response,
    map_task,
    method_not_allowed_response,
    ping_response,
    shape_model_output,
)

logger = logging.getLogger("AIHandler.Handler")


def decode_body(event: TaskEvent) -> Optional[str]:
    if event.is_base64_encoded and event.body:
        return base64.b64decode(event.body, validate=True).decode("utf-8")
    return event.body


def parse_payload(body: Optional[str]) -> TaskPayload:
    data = orjson.loads(body or "{}")
    if data is None:
        data = {}
    return TaskPayload.model_validate(data)


async def handle_event(
    event: TaskEvent,
    settings: HandlerSettings,
    http_client: httpx.AsyncClient,
    request_id: Optional[str] = None,
) -> TaskResponse:
    request_id = request_id or str(uuid.uuid4())
    log_prefix = f"RID-{request_id}"

    # Method names are case-sensitive
    if event.http_method != "POST":
        logger.info(f"{log_prefix}: Rejected method '{event.http_method}' {event.path}")
        return method_not_allowed_response()

    try:
        payload = parse_payload(decode_body(event))
        task_key = map_task(event.path, payload.task)
        logger.info(f"{log_prefix}: path='{event.path}' task='{payload.task}' -> '{task_key}'")

        # Health check, no key required
        if task_key == TASK_PING:
            return ping_response()

        if not settings.gemini_api_key:
            logger.error(f"{log_prefix}: GEMINI_API_KEY is not configured")
            return error_response(500, "GEMINI_API_KEY missing")

        prompts = build_prompts(settings, payload)
        system_instruction = prompts.get(task_key)
        if not system_instruction:
            logger.warning(f"{log_prefix}: Unknown task '{task_key}'")
            return error_response(400, f"Unknown task: {task_key}")

        text = await generate_text(
            http_client, settings, system_instruction, payload.user_prompt, request_id
        )
        return shape_model_output(task_key, text, request_id)
    except Exception as e:
        logger.error(f"{log_prefix}: ai-handler error: {e}", exc_info=True)
        return error_response(500, "server_error", details=str(e))


async def _handle_raw_event(event: Dict[str, Any], settings: HandlerSettings) -> Dict[str, Any]:
    try:
        task_event = TaskEvent.model_validate(event)
    except ValidationError as e:
        logger.error(f"Invalid serverless event: {e}", exc_info=True)
        return error_response(500, "server_error", details=str(e)).to_event_dict()
    async with create_http_client(settings.request_timeout, settings.connect_timeout) as http_client:
        response = await handle_event(task_event, settings, http_client)
    return response.to_event_dict()


def lambda_handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Serverless entry (API Gateway / Netlify style event).

    Args:
        event: dict with httpMethod, path and body
        context: platform context object, unused

    Returns:
        {"statusCode": int, "headers": dict, "body": str}
    """
    configure_logging(LOG_LEVEL_FROM_ENV)
    settings = HandlerSettings.from_env()
    return asyncio.run(_handle_raw_event(event, settings))
