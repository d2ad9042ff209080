"""Example remote client.

Answers like the bfhl endpoint does, without any network call. Useful for
local development and tests.
"""

from typing import Any

from bfhl_form.remote.client_base import BaseRemoteClient


class ExampleRemoteClient(BaseRemoteClient):
    """Splits the submitted tokens into alphabets and numbers locally."""

    def __init__(self) -> None:
        self.requests: list[dict[str, Any]] = []

    async def post_json(self, body: dict[str, Any]) -> Any:
        self.requests.append(body)
        tokens = [str(item) for item in body.get("data", [])]
        alphabets = [t for t in tokens if t.isalpha()]
        numbers = [t for t in tokens if t.isdigit()]
        lowercase = [t for t in alphabets if t.islower()]
        return {
            "is_success": True,
            "alphabets": alphabets,
            "numbers": numbers,
            "highest_lowercase_alphabet": [max(lowercase)] if lowercase else [],
            "file_valid": bool(body.get("file_b64")),
        }
