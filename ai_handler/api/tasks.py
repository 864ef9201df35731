import logging
import uuid

import httpx
from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from ..core.config import HandlerSettings
from ..handler import handle_event
from ..models.api_models import TaskEvent

logger = logging.getLogger("AIHandler.Routers.Tasks")
router = APIRouter()

FORWARDED_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]


async def get_http_client(request: Request) -> httpx.AsyncClient:
    client = getattr(request.app.state, "http_client", None)
    if client is None or (hasattr(client, 'is_closed') and client.is_closed):
        logger.error("HTTP client not available or closed in app.state.")
        raise HTTPException(status_code=503, detail="Service unavailable: HTTP client not initialized or closed.")
    return client


async def get_settings(request: Request) -> HandlerSettings:
    settings = getattr(request.app.state, "settings", None)
    if settings is None:
        settings = HandlerSettings.from_env()
    return settings


@router.api_route("/{full_path:path}", methods=FORWARDED_METHODS, summary="AI任务代理", tags=["AI Proxy"])
async def task_proxy_entrypoint(
    full_path: str,
    fastapi_request_obj: Request,
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: HandlerSettings = Depends(get_settings),
):
    """
    所有未被工具路由占用的路径都交给统一的任务处理器，
    例如 /getMarketIntel、/api/getFutureIntel、/.netlify/functions/ai-handler
    """
    request_id = str(uuid.uuid4())
    raw_body = await fastapi_request_obj.body()

    event = TaskEvent(
        http_method=fastapi_request_obj.method,
        path=fastapi_request_obj.url.path,
        body=raw_body.decode("utf-8", errors="replace") if raw_body else None,
    )
    result = await handle_event(event, settings, http_client, request_id=request_id)

    logger.info(f"RID-{request_id}: {event.http_method} /{full_path} -> {result.status_code}")
    return Response(content=result.body, status_code=result.status_code, headers=result.headers)
