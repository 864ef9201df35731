import logging
from typing import Optional

CONSOLE_FORMAT = '%(asctime)s %(levelname)-8s [%(name)s:%(module)s:%(lineno)d] - %(message)s'

_NOISY_LIBRARY_LOGGERS = ["httpx", "httpcore", "hpack", "uvicorn.access", "watchfiles"]


def configure_logging(level_name: str) -> None:
    """
    配置根日志记录器（控制台输出），可重复调用而不会重复添加处理器
    """
    numeric_log_level = getattr(logging, level_name.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_log_level)

    if not any(getattr(h, "_ai_handler_console", False) for h in root_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
        console_handler._ai_handler_console = True  # type: ignore[attr-defined]
        root_logger.addHandler(console_handler)

    for lib_logger_name in _NOISY_LIBRARY_LOGGERS:
        logging.getLogger(lib_logger_name).setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)


def mask_api_key(api_key: Optional[str]) -> str:
    """Return a masked/fingerprinted representation of an API key for safe logging."""
    if not api_key:
        return "(empty)"
    head = api_key[:4]
    tail = api_key[-4:] if len(api_key) > 8 else "****"
    return f"{head}...{tail} (len={len(api_key)})"
