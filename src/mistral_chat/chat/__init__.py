"""Chat session module for mistral_chat.

Holds the conversation transcript and drives single-flight requests.
"""

from .persistence import load_transcript, save_transcript
from .session import EMPTY_RESPONSE_TEXT, ERROR_RESPONSE_TEXT, ChatSession, SessionState
from .transcript import Transcript

__all__ = [
    "EMPTY_RESPONSE_TEXT",
    "ERROR_RESPONSE_TEXT",
    "ChatSession",
    "SessionState",
    "Transcript",
    "load_transcript",
    "save_transcript",
]
