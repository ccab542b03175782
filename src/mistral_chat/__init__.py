"""
mistral_chat: an async client and CLI for the Mistral AI chat completions API.

Each module hides one design decision: where settings live, how a request
reaches the API, and how a conversation is recorded.
"""

__version__ = "0.1.0"

from .chat import (
    EMPTY_RESPONSE_TEXT,
    ERROR_RESPONSE_TEXT,
    ChatSession,
    SessionState,
    Transcript,
    load_transcript,
    save_transcript,
)
from .exceptions import MistralChatError, SettingsNotConfiguredError, UnknownModelError
from .llm import ChatClient, ChatResult, ChatResultStatus, Message, MistralClient, create_chat_client
from .settings import (
    ApiSettings,
    ModelType,
    SettingsProvider,
    create_settings_store,
    get_model_name,
)

__all__ = [
    "EMPTY_RESPONSE_TEXT",
    "ERROR_RESPONSE_TEXT",
    "ApiSettings",
    "ChatClient",
    "ChatResult",
    "ChatResultStatus",
    "ChatSession",
    "Message",
    "MistralChatError",
    "MistralClient",
    "ModelType",
    "SessionState",
    "SettingsNotConfiguredError",
    "SettingsProvider",
    "Transcript",
    "UnknownModelError",
    "create_chat_client",
    "create_settings_store",
    "get_model_name",
    "load_transcript",
    "save_transcript",
]
