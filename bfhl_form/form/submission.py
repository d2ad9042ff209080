from typing import Any

from bfhl_form.form.exceptions import RemoteError
from bfhl_form.form.models import SubmissionRequested
from bfhl_form.logging.logger import Log
from bfhl_form.remote.client_base import BaseRemoteClient


def build_request_body(data: list[Any], file_b64: str) -> dict[str, Any]:
    """Request body sent to the remote endpoint."""
    return {"data": data, "file_b64": file_b64}


class SubmissionHandler:
    """Consumes SubmissionRequested events with exactly one remote call each."""

    def __init__(self, client: BaseRemoteClient) -> None:
        self._client = client

    async def handle(
        self,
        event: SubmissionRequested,
        file_b64: str,
        session: str | None = None,
    ) -> Any:
        """Send the payload and return the decoded response.

        Raises:
            RemoteError: on any failure of the call; logged before re-raising.
        """
        body = build_request_body(event.data, file_b64)
        Log.info(
            f"Submitting {len(event.data)} items "
            f"({len(file_b64)} base64 chars of file content)",
            session=session,
        )
        try:
            response = await self._client.post_json(body)
        except RemoteError as exc:
            Log.error(f"Remote submission failed: {exc.detail or exc}", session=session)
            raise
        Log.info("Remote response received", session=session)
        return response
