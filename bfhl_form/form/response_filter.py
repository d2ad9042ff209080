"""Builds the filtered view of the remote response."""

import json
from collections.abc import Iterable
from typing import Any

from bfhl_form.form.models import RESPONSE_FIELDS


def filter_response(response: Any, selection: Iterable[str]) -> dict[str, Any] | None:
    """Keep only the response fields whose checkbox label is selected.

    Returns None when there is no response yet. Values are passed through
    verbatim; a selected field missing from the response is omitted.
    """
    if response is None:
        return None
    selected = set(selection)
    filtered: dict[str, Any] = {}
    if not isinstance(response, dict):
        return filtered
    for label, field_name in RESPONSE_FIELDS.items():
        if label in selected and field_name in response:
            filtered[field_name] = response[field_name]
    return filtered


def render_filtered(response: Any, selection: Iterable[str]) -> str | None:
    """Pretty-printed JSON of the filtered response, or None without a response."""
    filtered = filter_response(response, selection)
    if filtered is None:
        return None
    return json.dumps(filtered, indent=2, ensure_ascii=False)
