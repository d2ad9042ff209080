from bfhl_form.remote.client_base import BaseRemoteClient
from bfhl_form.remote.factory import RemoteClientFactory

__all__ = ["BaseRemoteClient", "RemoteClientFactory"]
