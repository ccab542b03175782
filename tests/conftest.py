"""Pytest configuration and shared fixtures."""
import logging
import os

import httpx
import pytest
from helpers import TEST_API_URL, RecordingHandler, completion_body

from mistral_chat.settings import ApiSettings, InMemorySettingsStore, ModelType, SettingsProvider


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {
        "mistral": os.getenv("MISTRAL_API_KEY"),
    }


@pytest.fixture
def api_settings():
    """Return a configured settings record."""
    return ApiSettings(api_key="test-key", api_url=TEST_API_URL, model=ModelType.MISTRAL_NEMO)


@pytest.fixture
def settings_provider(api_settings):
    """Return a settings provider over an in-memory record."""
    return SettingsProvider(InMemorySettingsStore(api_settings))


@pytest.fixture
def reply_handler():
    """Handler answering every request with a 'Hi!' completion."""
    return RecordingHandler(httpx.Response(200, json=completion_body("Hi!")))


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo handler and propagation changes made by configure_logging."""
    logger = logging.getLogger("mistral_chat")
    yield
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
