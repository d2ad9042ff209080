"""Validates the JSON text submitted through the form."""

import json
from typing import Any

from bfhl_form.form.exceptions import InvalidShapeError, InvalidSyntaxError


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are not JSON
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_payload(raw: str) -> list[Any]:
    """Parse raw form text and return its "data" array.

    Elements are returned verbatim and in order; their types are not checked.

    Raises:
        InvalidSyntaxError: if the text is not valid JSON.
        InvalidShapeError: if the JSON is not an object with a "data" array.
    """
    try:
        parsed = json.loads(raw, parse_constant=_reject_constant)
    except (ValueError, TypeError) as exc:
        raise InvalidSyntaxError() from exc

    if not isinstance(parsed, dict):
        raise InvalidShapeError()
    data = parsed.get("data")
    if not isinstance(data, list):
        raise InvalidShapeError()
    return data
