from unittest.mock import patch

import pytest
from fastapi import FastAPI

from bfhl_form.main import main


class TestMain:
    def test_serves_app_on_configured_address(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HOST", "0.0.0.0")
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("REMOTE_PROVIDER", "example")
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        with patch("bfhl_form.main.uvicorn.run") as mock_run:
            main()
        mock_run.assert_called_once()
        app = mock_run.call_args.args[0]
        assert isinstance(app, FastAPI)
        assert mock_run.call_args.kwargs == {"host": "0.0.0.0", "port": 9001, "log_level": "info"}
