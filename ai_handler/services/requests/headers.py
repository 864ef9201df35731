"""
Headers builders for request construction.
"""

from __future__ import annotations

from typing import Dict


def build_gemini_headers(api_key: str) -> Dict[str, str]:
    """
    Build headers for Gemini REST API endpoints:
      - Content-Type: application/json
      - x-goog-api-key: <api_key>
    The key travels only in this header, never in the query string.
    """
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
        "x-goog-api-key": api_key,
    }
