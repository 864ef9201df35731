# -*- coding: utf-8 -*-
"""
System prompt templates per task.

Single source of truth for the instruction text sent as `systemInstruction`.
The template set is rebuilt on every request because it depends on the
payload (`generic`) and on which affiliate IDs are configured (`deal-assassin`).
"""

from __future__ import annotations

from typing import Dict

from ...core.config import HandlerSettings
from ...models.api_models import TaskPayload
from .resolver import TASK_DEAL_ASSASSIN, TASK_FUTURE_INTEL, TASK_GENERIC

DEFAULT_GENERIC_PROMPT = "You are a concise helpful assistant."

DEAL_ASSASSIN_PROMPT = (
    "You are the 'Deal Assassin' for Malaysia. Find value-for-money laptops and accessories in MYR.\n"
    "Return clean, concise text with bullet points (no tables). "
)

FUTURE_INTEL_PROMPT = (
    "You are a tech trend analyst for SE Asia. Output ONLY valid JSON with this shape:\n"
    '{"summary": "string", "signals": [{"title":"", "why_it_matters":""}], "confidence": "low|med|high"}\n'
    "No markdown, no backticks."
)

INVOLVE_ASIA_PROGRAMS_URL = "https://app.involve.asia/publisher/programs"


def build_affiliate_instruction(settings: HandlerSettings) -> str:
    """
    Returns the affiliate block, or "" when no affiliate ID is configured.
    Unset IDs inside the block render as empty strings.
    """
    if not settings.has_affiliate_ids:
        return ""

    return (
        "\n"
        "CRITICAL MONETIZATION: When you share a product link, append affiliate params when applicable "
        "(skip silently if not applicable):\n"
        f"• Shopee: &aff_sub1={settings.shopee_affiliate_id or ''}\n"
        f"• Lazada: &sub_id1={settings.lazada_affiliate_id or ''}\n"
        f"• TikTok Shop: &aff_sub_id1={settings.tiktok_affiliate_id or ''}\n"
        f"• Other MY stores: use InvolveAsia deeplink if known: {INVOLVE_ASIA_PROGRAMS_URL} (skip if unknown).\n"
        "Do not say you use affiliate links."
    )


def build_prompts(settings: HandlerSettings, payload: TaskPayload) -> Dict[str, str]:
    return {
        TASK_DEAL_ASSASSIN: DEAL_ASSASSIN_PROMPT + build_affiliate_instruction(settings),
        TASK_FUTURE_INTEL: FUTURE_INTEL_PROMPT,
        TASK_GENERIC: payload.system_prompt or DEFAULT_GENERIC_PROMPT,
    }
