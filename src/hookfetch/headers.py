"""Header and option merging for a single request.

Precedence, later wins on a (case-insensitive) key collision:

1. instance default headers
2. ``Content-Type: application/json``, only if the defaults lack it
3. mutations made by before-hooks
4. headers passed explicitly to the verb method
"""

import copy
from collections.abc import Mapping
from typing import Any

import httpx

DEFAULT_CONTENT_TYPE = "application/json"

HeaderTypes = httpx.Headers | Mapping[str, str] | None


def base_headers(defaults: HeaderTypes, per_call: HeaderTypes = None) -> httpx.Headers:
    """Merge instance defaults, the JSON content type and per-call headers.

    This is the header set before-hooks start from.
    """
    merged = httpx.Headers(defaults)
    if "Content-Type" not in merged:
        merged["Content-Type"] = DEFAULT_CONTENT_TYPE
    if per_call:
        merged.update(per_call)
    return merged


def reapply_headers(headers: httpx.Headers, per_call: HeaderTypes) -> httpx.Headers:
    """Write per-call headers back over ``headers`` in place.

    Runs after all before-hooks so the caller's explicit headers win.
    """
    if per_call:
        headers.update(per_call)
    return headers


def merge_options(
    defaults: Mapping[str, Any], per_call: Mapping[str, Any]
) -> dict[str, Any]:
    """Overlay per-call transport options on the instance defaults.

    Options explicitly passed as None do not clear a default. Container
    defaults (dicts, lists, sets) are deep-copied so a before-hook editing
    them in place cannot change the instance defaults.
    """
    merged = {
        key: copy.deepcopy(value) if isinstance(value, dict | list | set) else value
        for key, value in defaults.items()
    }
    merged.update({key: value for key, value in per_call.items() if value is not None})
    return merged
