import logging
import httpx
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from contextlib import asynccontextmanager

from .core.config import APP_VERSION, LOG_LEVEL_FROM_ENV, HandlerSettings
from .core.http_client import create_http_client
from .core.logging_utils import configure_logging, mask_api_key
from .api import tasks as tasks_router

configure_logging(LOG_LEVEL_FROM_ENV)

logger = logging.getLogger("AIHandler.Main")


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    logger.info("Lifespan: 应用启动，开始初始化...")

    settings = HandlerSettings.from_env()
    app_instance.state.settings = settings
    logger.info(
        f"Lifespan: Gemini model: {settings.gemini_model}, base: {settings.gemini_api_base_url}, "
        f"key: {mask_api_key(settings.gemini_api_key)}, affiliate IDs configured: {settings.has_affiliate_ids}"
    )

    try:
        app_instance.state.http_client = create_http_client(settings.request_timeout, settings.connect_timeout)
        logger.info(f"Lifespan: HTTP客户端初始化成功。Connect Timeout: {settings.connect_timeout}s, Read Timeout: {settings.request_timeout}s")
    except Exception as e:
        logger.error(f"Lifespan: HTTP客户端初始化过程中发生错误: {e}", exc_info=True)
        app_instance.state.http_client = None

    yield

    logger.info("Lifespan: 应用关闭，开始关闭HTTP客户端...")
    client_to_close = getattr(app_instance.state, "http_client", None)
    if client_to_close and isinstance(client_to_close, httpx.AsyncClient) and not client_to_close.is_closed:
        try:
            await client_to_close.aclose()
            logger.info("Lifespan: HTTP客户端成功关闭。")
        except Exception as e:
            logger.error(f"Lifespan: 关闭HTTP客户端时发生错误: {e}", exc_info=True)

    if hasattr(app_instance.state, "http_client"):
        delattr(app_instance.state, "http_client")

    logger.info("Lifespan: 应用关闭流程完成。")


app = FastAPI(
    title="AI Handler",
    description=f"Gemini 任务路由代理，版本: {APP_VERSION}",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["*"]
)

app.add_middleware(GZipMiddleware, minimum_size=500)
logger.info(f"FastAPI AI Handler v{APP_VERSION} 初始化完成，已配置CORS。")


@app.get("/", status_code=200, include_in_schema=False, tags=["Utilities"])
async def root():
    """根路由，确认服务正常运行"""
    return {
        "message": "AI Handler is running",
        "version": APP_VERSION,
        "status": "ok",
        "endpoints": {
            "tasks": "POST /{any path}",
            "health": "/health",
            "docs": "/docs",
        }
    }


@app.get("/health", status_code=200, include_in_schema=False, tags=["Utilities"])
async def health_check(request: Request):
    client_from_state = getattr(request.app.state, "http_client", None)
    client_status = "ok"
    detail_message = "HTTP client initialized and seems operational."

    if client_from_state is None:
        client_status = "error"
        detail_message = "HTTP client not initialized in app.state."
    elif not isinstance(client_from_state, httpx.AsyncClient):
        client_status = "error"
        detail_message = f"Unexpected object type in app.state.http_client: {type(client_from_state)}"
    elif client_from_state.is_closed:
        client_status = "warning"
        detail_message = "HTTP client in app.state is closed."

    return {"status": client_status, "detail": detail_message, "app_version": APP_VERSION}


# 任务路由是通配路径，必须最后注册
app.include_router(tasks_router.router)
logger.info("任务路由已加载（通配路径，POST 转发到任务处理器）")
