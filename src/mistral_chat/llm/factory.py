from typing import Any

from .base import ChatClient
from .providers import MistralClient


def create_chat_client(provider: str = "mistral", **config: Any) -> ChatClient:
    """Create a chat completion client.

    This factory function hides the instantiation logic for the client.

    Args:
        provider: Provider type ('mistral')
        **config: Provider-specific configuration
            For Mistral:
                - timeout: float (default: 30.0)
                - transport: httpx.AsyncBaseTransport | None

    Returns:
        Initialized chat client instance

    Raises:
        ValueError: If provider type is not supported

    Examples:
        >>> client = create_chat_client("mistral", timeout=10.0)
    """
    provider_lower = provider.lower()

    if provider_lower == "mistral":
        return MistralClient(**config)

    raise ValueError(
        f"Unsupported provider: {provider}. "
        f"Supported providers: 'mistral'"
    )
