# -*- coding: utf-8 -*-
"""
Request builders package.

Contains thin, focused builders for provider protocols (Gemini REST).
"""
from .gemini_builder import (
    build_generate_content_url,
    prepare_gemini_generate_request,
    select_content_to_generate,
)

__all__ = [
    "build_generate_content_url",
    "prepare_gemini_generate_request",
    "select_content_to_generate",
]
