from abc import ABC, abstractmethod
from typing import Any


class BaseRemoteClient(ABC):
    """Contract for clients of the remote processing endpoint."""

    @abstractmethod
    async def post_json(self, body: dict[str, Any]) -> Any:
        """POST a JSON body once and return the decoded JSON response.

        Raises:
            RemoteError: on network failure, non-2xx status or a body that
                is not JSON.
        """
