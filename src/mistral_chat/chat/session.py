"""Chat session: transcript bookkeeping around single-flight API requests.

A session is either idle or awaiting a response. Only one request may be in
flight per session; a send attempted meanwhile is rejected with a warning and
changes nothing. Every request that is sent ends with exactly one assistant
turn appended to the transcript, whether the exchange succeeded, returned no
choices, or failed.
"""

import asyncio
import logging
from enum import Enum
from typing import Any

from ..llm.base import ChatClient
from ..llm.factory import create_chat_client
from ..llm.models import ChatRequest, ChatResult, ChatResultStatus, Message
from ..settings.models import ModelType, get_model_name
from ..settings.provider import SettingsProvider
from .transcript import Transcript

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_TEXT = "Empty response."
ERROR_RESPONSE_TEXT = "Error retrieving response."


class SessionState(str, Enum):
    """Whether a session has a request in flight."""

    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class ChatSession:
    """A single conversation with the Mistral chat API.

    Configuration is read from the settings provider at send time, so edits to
    the stored record take effect on the next request.

    Usage:
        async with ChatSession(SettingsProvider(store)) as session:
            result = await session.send_message("Hello")
            print(session.current_reply)
    """

    def __init__(
        self,
        settings: SettingsProvider,
        client: ChatClient | None = None,
        transcript: Transcript | None = None,
        **client_config: Any
    ):
        """Initialize a chat session.

        Args:
            settings: Source of API key, URL and model
            client: Chat client to use (default: a MistralClient)
            transcript: Existing transcript to continue (default: empty)
            **client_config: Passed to create_chat_client when no client is given
        """
        self._settings = settings
        self._client = client or create_chat_client("mistral", **client_config)
        self._transcript = transcript if transcript is not None else Transcript()
        self._state = SessionState.IDLE
        self._current_reply = ""

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def is_awaiting_response(self) -> bool:
        return self._state is SessionState.AWAITING_RESPONSE

    @property
    def has_responded(self) -> bool:
        """True when no request is outstanding."""
        return self._state is SessionState.IDLE

    @property
    def current_reply(self) -> str:
        """Content of the last successful reply ("" before the first one)."""
        return self._current_reply

    @property
    def transcript(self) -> Transcript:
        return self._transcript

    @property
    def settings(self) -> SettingsProvider:
        return self._settings

    async def send_message(
        self,
        text: str,
        record_user_turn: bool = True,
        *,
        api_key: str | None = None,
        model: ModelType | str | None = None,
    ) -> ChatResult | None:
        """Send a user turn and append the assistant's resolution.

        The request carries the transcript so far followed by the new user
        turn, even when ``record_user_turn`` is False and the turn is left out
        of the transcript itself.

        Args:
            text: User message; empty text is ignored
            record_user_turn: Whether to append the user turn to the transcript
            api_key: Overrides the configured API key for this request
            model: Overrides the configured model for this request

        Returns:
            The ChatResult of the exchange, or None if the message was empty or
            a request was already in flight

        Raises:
            UnknownModelError: If the model has no wire name; raised before any
                state change
        """
        if not text:
            return None

        if self._state is SessionState.AWAITING_RESPONSE:
            logger.warning("The previous request has not been answered yet, sending is unavailable.")
            return None

        model_name = get_model_name(model if model is not None else self._settings.get_model())
        key = api_key if api_key is not None else self._settings.get_api_key()
        url = self._settings.get_api_url()

        request = ChatRequest(
            model=model_name,
            messages=[*self._transcript.messages, Message.user(text)],
        )

        if record_user_turn:
            self._transcript.append(Message.user(text))

        self._state = SessionState.AWAITING_RESPONSE
        try:
            result = await self._client.complete(request, api_key=key, api_url=url)
        except asyncio.CancelledError:
            self._transcript.append(Message.assistant(ERROR_RESPONSE_TEXT))
            logger.warning("Request cancelled before a response arrived.")
            raise
        except Exception as e:
            logger.exception("Chat client failed while handling the request.")
            result = ChatResult.failure(f"{type(e).__name__}: {e}")
        finally:
            self._state = SessionState.IDLE

        self._apply_result(result)
        return result

    async def reply_to_last_message(self) -> ChatResult | None:
        """Re-send the last turn's content without recording it again.

        Returns:
            The ChatResult, or None if the transcript is empty or a request is
            already in flight
        """
        last = self._transcript.last()
        if last is None or self._state is SessionState.AWAITING_RESPONSE:
            return None
        return await self.send_message(last.content, record_user_turn=False)

    def _apply_result(self, result: ChatResult) -> None:
        if result.status is ChatResultStatus.SUCCESS:
            self._current_reply = result.content
            self._transcript.append(Message.assistant(result.content))
        elif result.status is ChatResultStatus.EMPTY:
            self._transcript.append(Message.assistant(EMPTY_RESPONSE_TEXT))
        else:
            self._transcript.append(Message.assistant(ERROR_RESPONSE_TEXT))

    async def close(self) -> None:
        """Close the underlying chat client."""
        await self._client.close()

    async def __aenter__(self) -> "ChatSession":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self._client.__aexit__(exc_type, exc_val, exc_tb)
