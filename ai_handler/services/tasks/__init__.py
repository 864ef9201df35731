"""
Task package: resolution, prompt templates and response shaping.
"""

from .resolver import (
    TASK_PING,
    TASK_DEAL_ASSASSIN,
    TASK_FUTURE_INTEL,
    TASK_GENERIC,
    map_task,
)
from .prompts import build_affiliate_instruction, build_prompts
from .shaper import (
    error_response,
    method_not_allowed_response,
    ping_response,
    shape_model_output,
)

__all__ = [
    "TASK_PING",
    "TASK_DEAL_ASSASSIN",
    "TASK_FUTURE_INTEL",
    "TASK_GENERIC",
    "map_task",
    "build_affiliate_instruction",
    "build_prompts",
    "error_response",
    "method_not_allowed_response",
    "ping_response",
    "shape_model_output",
]
