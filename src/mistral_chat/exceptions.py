"""Exceptions raised by mistral_chat.

Transport failures are not exceptions: they come back from the chat client
as ``ChatResult`` values with an ``error`` status.
"""


class MistralChatError(Exception):
    """Base class for all mistral_chat errors."""


class SettingsNotConfiguredError(MistralChatError):
    """Raised when settings are required but no usable record exists."""


class UnknownModelError(MistralChatError, ValueError):
    """Raised when a model identifier has no wire-level model name."""
