"""
HTTP 客户端工厂
FastAPI 应用在 lifespan 中创建一个复用的 httpx.AsyncClient 并挂到 app.state 上；
无服务器入口（lambda_handler）每次调用都运行在新的事件循环里，因此每次调用创建并关闭自己的客户端
"""
import logging
import httpx

from .config import API_TIMEOUT, CONNECT_TIMEOUT, MAX_CONNECTIONS

logger = logging.getLogger("AIHandler.Core.HTTPClient")


def create_http_client(
    read_timeout: float = API_TIMEOUT,
    connect_timeout: float = CONNECT_TIMEOUT,
) -> httpx.AsyncClient:
    """
    创建 HTTP 客户端

    配置说明：
    - timeout: Gemini 生成可能较慢，读取超时单独配置；连接超时较短
    - limits: 连接池限制
    - http2: 启用 HTTP/2 支持（如果服务端支持）
    """
    logger.debug(f"Creating HTTP client. Read Timeout: {read_timeout}s, Connect Timeout: {connect_timeout}s")
    return httpx.AsyncClient(
        limits=httpx.Limits(
            max_connections=MAX_CONNECTIONS,
            max_keepalive_connections=20,
            keepalive_expiry=120.0
        ),
        timeout=httpx.Timeout(read_timeout, connect=connect_timeout),
        follow_redirects=True,
        http2=True,
        trust_env=True
    )
