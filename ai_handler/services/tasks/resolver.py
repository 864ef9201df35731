"""
Task resolution: maps the request path and the optional `task` field to a
canonical task identifier.
"""

from __future__ import annotations

from typing import Optional

TASK_PING = "ping"
TASK_DEAL_ASSASSIN = "deal-assassin"
TASK_FUTURE_INTEL = "getFutureIntel"
TASK_GENERIC = "generic"

# Keys are lower-case; lookups are case-insensitive
TASK_ALIASES = {
    "getmarketintel": TASK_DEAL_ASSASSIN,
    "getfutureintel": TASK_FUTURE_INTEL,
    "default": TASK_GENERIC,
}

PATH_SUFFIX_TASKS = (
    ("/getmarketintel", TASK_DEAL_ASSASSIN),
    ("/getfutureintel", TASK_FUTURE_INTEL),
    ("/callgemini", TASK_GENERIC),
)


def map_task(event_path: Optional[str], raw_task: Optional[str]) -> str:
    """
    map_task(event_path, raw_task) -> str

    - Alias table first (case-insensitive).
    - Otherwise a non-empty raw task is returned verbatim, casing preserved;
      unknown names are rejected later by template lookup.
    - Empty raw task falls back to the path suffix, then to `generic`.
    """
    path_lower = (event_path or "").lower()
    task_lower = (raw_task or "").lower()

    aliased = TASK_ALIASES.get(task_lower)
    if aliased:
        return aliased
    if raw_task:
        return raw_task

    for suffix, task in PATH_SUFFIX_TASKS:
        if path_lower.endswith(suffix):
            return task
    return TASK_GENERIC
