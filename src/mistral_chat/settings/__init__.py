"""Settings module for mistral_chat.

Resolves the API key, endpoint URL and model from a stored record.
"""

from .base import SettingsStore
from .factory import create_settings_store
from .models import (
    DEFAULT_API_URL,
    DEFAULT_MODEL,
    MODEL_WIRE_NAMES,
    ApiSettings,
    ModelType,
    get_model_name,
)
from .provider import SettingsProvider
from .stores import InMemorySettingsStore, JsonSettingsStore, default_settings_path

__all__ = [
    "DEFAULT_API_URL",
    "DEFAULT_MODEL",
    "MODEL_WIRE_NAMES",
    "ApiSettings",
    "InMemorySettingsStore",
    "JsonSettingsStore",
    "ModelType",
    "SettingsProvider",
    "SettingsStore",
    "create_settings_store",
    "default_settings_path",
    "get_model_name",
]
