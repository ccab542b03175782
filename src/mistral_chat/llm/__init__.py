from .base import ChatClient
from .factory import create_chat_client
from .models import ChatRequest, ChatResponse, ChatResult, ChatResultStatus, Choice, Message, Role
from .providers import MistralClient

__all__ = [
    "ChatClient",
    "create_chat_client",
    "ChatRequest",
    "ChatResponse",
    "ChatResult",
    "ChatResultStatus",
    "Choice",
    "Message",
    "MistralClient",
    "Role",
]
