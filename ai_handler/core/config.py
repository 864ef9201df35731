import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

APP_VERSION = os.getenv("APP_VERSION", "1.0.3")

LOG_LEVEL_FROM_ENV = os.getenv("LOG_LEVEL", "INFO").upper()

GOOGLE_API_BASE_URL = "https://generativelanguage.googleapis.com"
DEFAULT_GEMINI_MODEL = "gemini-1.5-pro-latest"

# Read timeout covers the whole generateContent call
API_TIMEOUT = float(os.getenv("GEMINI_TIMEOUT", "60.0"))
CONNECT_TIMEOUT = float(os.getenv("GEMINI_CONNECT_TIMEOUT", "15.0"))
MAX_CONNECTIONS = int(os.getenv("MAX_CONNECTIONS", "100"))

@dataclass(frozen=True)
class HandlerSettings:
    """Per-process configuration handed to the task handler."""
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    gemini_api_base_url: str = GOOGLE_API_BASE_URL
    request_timeout: float = API_TIMEOUT
    connect_timeout: float = CONNECT_TIMEOUT
    shopee_affiliate_id: Optional[str] = None
    lazada_affiliate_id: Optional[str] = None
    tiktok_affiliate_id: Optional[str] = None
    involve_asia_id: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HandlerSettings":
        env = os.environ if environ is None else environ

        def _get(key: str) -> Optional[str]:
            # Empty strings count as unset
            return env.get(key) or None

        return cls(
            gemini_api_key=_get("GEMINI_API_KEY"),
            gemini_model=_get("GEMINI_MODEL") or DEFAULT_GEMINI_MODEL,
            gemini_api_base_url=(_get("GEMINI_API_BASE_URL") or GOOGLE_API_BASE_URL).rstrip("/"),
            request_timeout=float(_get("GEMINI_TIMEOUT") or API_TIMEOUT),
            connect_timeout=float(_get("GEMINI_CONNECT_TIMEOUT") or CONNECT_TIMEOUT),
            shopee_affiliate_id=_get("SHOPEE_AFFILIATE_ID"),
            lazada_affiliate_id=_get("LAZADA_AFFILIATE_ID"),
            tiktok_affiliate_id=_get("TIKTOK_AFFILIATE_ID"),
            involve_asia_id=_get("INVOLVE_ASIA_ID"),
        )

    @property
    def has_affiliate_ids(self) -> bool:
        return any((
            self.shopee_affiliate_id,
            self.lazada_affiliate_id,
            self.tiktok_affiliate_id,
            self.involve_asia_id,
        ))
