import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from bfhl_form.form.exceptions import RemoteError
from bfhl_form.form.models import SubmissionRequested
from bfhl_form.form.submission import SubmissionHandler, build_request_body


def _make_handler(response: object = None, error: Exception | None = None) -> tuple[SubmissionHandler, MagicMock]:
    client = MagicMock()
    client.post_json = AsyncMock(return_value=response, side_effect=error)
    return SubmissionHandler(client), client


class TestBuildRequestBody:
    def test_without_file(self) -> None:
        assert build_request_body(["A", "1", "B", "2"], "") == {
            "data": ["A", "1", "B", "2"],
            "file_b64": "",
        }

    def test_with_file(self) -> None:
        assert build_request_body(["A"], "aGVsbG8=") == {"data": ["A"], "file_b64": "aGVsbG8="}


class TestSubmissionHandler:
    def test_posts_body_once_and_returns_response(self) -> None:
        handler, client = _make_handler(response={"numbers": ["1"]})
        result = asyncio.run(handler.handle(SubmissionRequested(data=["A", "1"]), ""))
        assert result == {"numbers": ["1"]}
        client.post_json.assert_awaited_once_with({"data": ["A", "1"], "file_b64": ""})

    def test_forwards_file_content(self) -> None:
        handler, client = _make_handler(response={})
        asyncio.run(handler.handle(SubmissionRequested(data=["A"]), "Zm9v"))
        client.post_json.assert_awaited_once_with({"data": ["A"], "file_b64": "Zm9v"})

    def test_remote_error_is_logged_and_reraised(self, caplog: pytest.LogCaptureFixture) -> None:
        handler, client = _make_handler(error=RemoteError("HTTP 500"))
        with caplog.at_level("ERROR", logger="bfhl_form"):
            with pytest.raises(RemoteError, match="API error"):
                asyncio.run(handler.handle(SubmissionRequested(data=["A"]), ""))
        assert client.post_json.await_count == 1
        assert "HTTP 500" in caplog.text
