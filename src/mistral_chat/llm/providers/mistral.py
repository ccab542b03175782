import logging
from typing import Any

import httpx
from pydantic import ValidationError

from ..base import ChatClient
from ..models import ChatRequest, ChatResponse, ChatResult

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class MistralClient(ChatClient):
    """Mistral chat completions client over plain HTTP.

    Hidden design decisions:
    - HTTP client initialization (httpx.AsyncClient, created on first use)
    - Bearer token authentication
    - Response parsing, reading only the first choice
    - Mapping of HTTP, network and parse failures onto error results

    One POST per call, no retries. A timeout resolves down the error path.
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
        **client_kwargs: Any
    ):
        """Initialize Mistral client.

        Args:
            timeout: Seconds to wait for the whole exchange before failing
            transport: Optional httpx transport (e.g. httpx.MockTransport)
            **client_kwargs: Additional kwargs for httpx.AsyncClient
        """
        self._timeout = timeout
        self._transport = transport
        self._client_kwargs = client_kwargs
        self._client: httpx.AsyncClient | None = None

    @property
    def timeout(self) -> float:
        return self._timeout

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=httpx.Timeout(self._timeout),
                transport=self._transport,
                **self._client_kwargs
            )
        return self._client

    async def complete(
        self,
        request: ChatRequest,
        api_key: str,
        api_url: str,
    ) -> ChatResult:
        """Send the request and classify the response.

        Args:
            request: Model name and ordered messages to send
            api_key: Key for the Authorization header
            api_url: Full chat completions endpoint URL

        Returns:
            ChatResult: success with the first choice's content, empty when
            the response has no choices, error for anything else
        """
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        }

        logger.debug(
            "Sending chat request to %s (model=%s, messages=%d)",
            api_url, request.model, len(request.messages)
        )

        try:
            response = await self._get_client().post(
                api_url,
                headers=headers,
                json=request.model_dump(),
            )
        except httpx.TimeoutException as e:
            logger.error("Request to %s timed out after %ss: %s", api_url, self._timeout, e)
            return ChatResult.failure(f"Request timed out: {e}")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.error("Request to %s failed: %s", api_url, e)
            return ChatResult.failure(str(e))
        except ValueError as e:
            # Raised while building the request, e.g. a non-ASCII API key header
            logger.error("Could not build request to %s: %s", api_url, e)
            return ChatResult.failure(f"Invalid request: {e}")

        if not response.is_success:
            logger.error("Error: HTTP %d from %s", response.status_code, api_url)
            logger.error("Server response: %s", response.text)
            return ChatResult.failure(
                f"HTTP {response.status_code}: {response.text}",
                status_code=response.status_code,
            )

        try:
            payload = ChatResponse.model_validate_json(response.content)
        except ValidationError as e:
            logger.error("Failed to parse chat response: %s", e)
            return ChatResult.failure(
                f"Malformed response body: {e}",
                status_code=response.status_code,
            )

        content = payload.first_content
        if content is None:
            logger.warning("Received an empty response from the API.")
            return ChatResult.empty(status_code=response.status_code)

        logger.debug("Chat response received (%d chars)", len(content))
        return ChatResult.success(content, status_code=response.status_code)

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
