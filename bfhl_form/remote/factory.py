from bfhl_form.config.settings import Settings
from bfhl_form.remote.client_base import BaseRemoteClient
from bfhl_form.remote.example_client_adapter import ExampleRemoteClient
from bfhl_form.remote.httpx_client_adapter import HttpxRemoteClient


class RemoteClientFactory:
    """Creates the configured remote endpoint client."""

    PROVIDERS = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseRemoteClient:
        """Create a remote client from application settings."""
        provider = settings.remote_provider.lower()
        if provider == "example":
            return ExampleRemoteClient()
        if provider == "http":
            url = settings.remote_endpoint_url.strip()
            if not url:
                raise ValueError(
                    "remote_endpoint_url is required for remote_provider=http"
                )
            return HttpxRemoteClient(
                endpoint_url=url,
                timeout_seconds=settings.remote_timeout_seconds,
            )
        raise ValueError(
            f"Unknown remote provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
