#!/usr/bin/env python3
"""
Local development server for the task router.

Environment is read once by ai_handler.core.config (which loads .env);
HOST and PORT only matter here.
"""
import os
import sys
import logging

import uvicorn

# 添加项目根目录到Python路径
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from ai_handler.core.config import APP_VERSION, LOG_LEVEL_FROM_ENV, DEFAULT_GEMINI_MODEL
from ai_handler.core.logging_utils import configure_logging

configure_logging(LOG_LEVEL_FROM_ENV)
logger = logging.getLogger("AIHandler.Runner")


def main():
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8888"))
    model = os.getenv("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL

    logger.info(f"Starting AI Handler v{APP_VERSION} on {host}:{port} (model: {model}, log level: {LOG_LEVEL_FROM_ENV})")
    if not os.getenv("GEMINI_API_KEY"):
        logger.warning("GEMINI_API_KEY is not set: only the ping task will succeed")

    try:
        # Import string so uvicorn owns the app lifecycle
        uvicorn.run(
            "ai_handler.main:app",
            host=host,
            port=port,
            log_level=LOG_LEVEL_FROM_ENV.lower(),
            access_log=True,
            loop="asyncio",
        )
    except KeyboardInterrupt:
        logger.info("Server shutdown requested by user (Ctrl+C)")
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
