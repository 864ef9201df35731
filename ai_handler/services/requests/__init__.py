"""
Requests building package.
"""

from .builders import (
    build_generate_content_url,
    prepare_gemini_generate_request,
    select_content_to_generate,
)
from .headers import build_gemini_headers

__all__ = [
    "build_generate_content_url",
    "prepare_gemini_generate_request",
    "select_content_to_generate",
    "build_gemini_headers",
]
