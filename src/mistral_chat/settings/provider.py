"""Resolution of API key, URL and model from the stored settings record."""

import logging

from ..exceptions import SettingsNotConfiguredError
from .base import SettingsStore
from .models import DEFAULT_MODEL, ApiSettings, ModelType

logger = logging.getLogger(__name__)


class SettingsProvider:
    """Read-only view over a settings store with default fallbacks.

    Getters never raise for missing configuration: without a record the key
    and URL are empty strings and the model is the default one, so a missing
    setup surfaces later as an authentication or connection error. Use
    ``require_settings`` to fail early instead.
    """

    def __init__(self, store: SettingsStore):
        self._store = store

    @property
    def store(self) -> SettingsStore:
        return self._store

    def get_settings(self) -> ApiSettings | None:
        """Get the stored record, or None if there is none."""
        return self._store.load()

    def get_api_key(self) -> str:
        settings = self._store.load()
        return settings.api_key if settings is not None and settings.api_key else ""

    def get_api_url(self) -> str:
        settings = self._store.load()
        return settings.api_url if settings is not None and settings.api_url else ""

    def get_model(self) -> ModelType:
        settings = self._store.load()
        return settings.model if settings is not None else DEFAULT_MODEL

    @property
    def is_configured(self) -> bool:
        """Whether a record exists and carries an API key."""
        return bool(self.get_api_key())

    def require_settings(self) -> ApiSettings:
        """Get the stored record, failing if it is missing or has no API key.

        Raises:
            SettingsNotConfiguredError: If no usable record exists
        """
        settings = self._store.load()
        if settings is None or not settings.api_key:
            raise SettingsNotConfiguredError(
                "Mistral API settings are not configured. "
                "Run 'mistral-chat configure' to set an API key."
            )
        return settings

    def update(
        self,
        api_key: str | None = None,
        api_url: str | None = None,
        model: ModelType | str | None = None,
    ) -> ApiSettings:
        """Merge the given fields into the stored record and save it.

        Fields left as None keep their current (or default) value.

        Returns:
            The saved record
        """
        current = self._store.load() or ApiSettings()
        changes: dict[str, object] = {}
        if api_key is not None:
            changes["api_key"] = api_key
        if api_url is not None:
            changes["api_url"] = api_url
        if model is not None:
            changes["model"] = ModelType(model)

        updated = ApiSettings.model_validate({**current.model_dump(), **changes})
        self._store.save(updated)
        logger.debug("Updated settings fields: %s", ", ".join(changes) or "none")
        return updated
