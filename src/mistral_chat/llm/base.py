from abc import ABC, abstractmethod
from typing import Any

from .models import ChatRequest, ChatResult


class ChatClient(ABC):
    """Abstract base class for chat completion clients.

    This module hides the design decision of how a request reaches the API.
    Implementations must handle:
    - HTTP client setup and authentication headers
    - Request serialization and response parsing
    - Turning transport failures into error results

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            result = await client.complete(request, api_key, api_url)
        # Automatically cleaned up
    """

    @abstractmethod
    async def complete(
        self,
        request: ChatRequest,
        api_key: str,
        api_url: str,
    ) -> ChatResult:
        """Send one chat completion request.

        Args:
            request: Model name and ordered messages to send
            api_key: Key for the Authorization header
            api_url: Full chat completions endpoint URL

        Returns:
            ChatResult with a success, empty or error status. Transport and
            HTTP failures are reported through the result, not raised.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""
        pass

    async def __aenter__(self) -> "ChatClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
