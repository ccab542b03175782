"""Settings store backends.

``JsonSettingsStore`` keeps the record in a JSON file on disk.
``InMemorySettingsStore`` keeps it in memory and is lost when the process
exits, which suits tests and embedding.
"""

import logging
import os
from pathlib import Path

from pydantic import ValidationError

from .base import SettingsStore
from .models import ApiSettings

logger = logging.getLogger(__name__)

SETTINGS_PATH_ENV = "MISTRAL_CHAT_SETTINGS"


def default_settings_path() -> Path:
    """Location of the settings file.

    Uses ``$MISTRAL_CHAT_SETTINGS`` when set, otherwise
    ``~/.mistral_chat/settings.json``.
    """
    override = os.getenv(SETTINGS_PATH_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".mistral_chat" / "settings.json"


class JsonSettingsStore(SettingsStore):
    """Settings record stored as a JSON document."""

    def __init__(self, path: str | Path | None = None):
        self._path = Path(path) if path is not None else default_settings_path()

    def load(self) -> ApiSettings | None:
        """Read the record; a missing or unreadable file means no record."""
        if not self._path.is_file():
            logger.debug("No settings file at %s", self._path)
            return None

        try:
            return ApiSettings.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (ValidationError, UnicodeDecodeError, OSError) as e:
            logger.error("Ignoring malformed settings file %s: %s", self._path, e)
            return None

    def save(self, settings: ApiSettings) -> None:
        """Write the record, creating parent directories as needed."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(settings.model_dump_json(indent=2), encoding="utf-8")
        logger.info("Settings saved to %s", self._path)

    @property
    def backend_type(self) -> str:
        return "file"

    @property
    def path(self) -> Path:
        return self._path


class InMemorySettingsStore(SettingsStore):
    """Settings record held in memory."""

    def __init__(self, settings: ApiSettings | None = None):
        self._settings = settings

    def load(self) -> ApiSettings | None:
        return self._settings

    def save(self, settings: ApiSettings) -> None:
        self._settings = settings

    @property
    def backend_type(self) -> str:
        return "memory"
