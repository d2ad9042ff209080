import json
from typing import Any

import httpx

from bfhl_form.form.exceptions import RemoteError
from bfhl_form.remote.client_base import BaseRemoteClient


class HttpxRemoteClient(BaseRemoteClient):
    """Remote endpoint client built on httpx.AsyncClient.

    Exactly one attempt per call. Without ``timeout_seconds`` the request
    runs under httpx's default timeout.
    """

    def __init__(
        self,
        *,
        endpoint_url: str,
        timeout_seconds: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._client_kwargs: dict[str, Any] = {}
        if timeout_seconds is not None:
            self._client_kwargs["timeout"] = timeout_seconds
        if transport is not None:
            self._client_kwargs["transport"] = transport

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    async def post_json(self, body: dict[str, Any]) -> Any:
        try:
            # ASCII-escaped so lone surrogates cannot break UTF-8 encoding
            content = json.dumps(body).encode("ascii")
        except (TypeError, ValueError) as exc:
            raise RemoteError(f"Request body is not serializable: {exc}") from exc

        try:
            async with httpx.AsyncClient(**self._client_kwargs) as client:
                response = await client.post(
                    self._endpoint_url,
                    content=content,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise RemoteError(
                f"Remote endpoint returned HTTP {exc.response.status_code}"
            ) from exc
        except httpx.InvalidURL as exc:
            raise RemoteError(f"Remote endpoint URL is invalid: {exc}") from exc
        except httpx.HTTPError as exc:
            raise RemoteError(f"Remote endpoint network error: {exc!r}") from exc

        try:
            return response.json()
        except ValueError as exc:
            raise RemoteError(f"Remote endpoint returned invalid JSON: {exc}") from exc
