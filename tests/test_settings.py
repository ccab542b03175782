"""Unit tests for the settings module."""
import json
from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mistral_chat.exceptions import SettingsNotConfiguredError, UnknownModelError
from mistral_chat.settings import (
    DEFAULT_API_URL,
    ApiSettings,
    InMemorySettingsStore,
    JsonSettingsStore,
    ModelType,
    SettingsProvider,
    SettingsStore,
    create_settings_store,
    default_settings_path,
    get_model_name,
)


class TestModelNames:
    """Tests for the model identifier to wire name mapping."""

    def test_declared_models_map_to_wire_names(self):
        """Test that every declared model has its documented wire name."""
        assert get_model_name(ModelType.MISTRAL_NEMO) == "open-mistral-nemo"
        assert get_model_name(ModelType.MISTRAL_SMALL) == "mistral-small-latest"
        assert get_model_name(ModelType.CODESTRAL_MAMBA) == "open-codestral-mamba"

    def test_string_values_are_accepted(self):
        """Test that the enum's string value resolves like the member."""
        assert get_model_name("mistral-small") == "mistral-small-latest"

    @given(st.sampled_from(list(ModelType)))
    def test_mapping_is_total_and_pure(self, model: ModelType):
        """Test that every member maps, and repeatably, to a non-sentinel name."""
        name = get_model_name(model)
        assert name == get_model_name(model)
        assert name != "error"

    @given(st.text())
    def test_undeclared_values_are_rejected(self, value: str):
        """Test that anything outside the enum fails fast."""
        if value in [m.value for m in ModelType]:
            assert get_model_name(value)
        else:
            with pytest.raises(UnknownModelError):
                get_model_name(value)

    def test_unknown_model_error_is_value_error(self):
        """Test that callers catching ValueError also catch unknown models."""
        with pytest.raises(ValueError, match="Unknown model"):
            get_model_name("gpt-4o")


class TestApiSettings:
    """Tests for the ApiSettings record."""

    def test_defaults(self):
        """Test that absent fields fall back to defaults."""
        settings = ApiSettings()

        assert settings.api_key == ""
        assert settings.api_url == DEFAULT_API_URL
        assert settings.model == ModelType.MISTRAL_NEMO
        assert settings.model_name == "open-mistral-nemo"

    def test_partial_record_fills_defaults(self):
        """Test that a record with only a key keeps default URL and model."""
        settings = ApiSettings.model_validate_json('{"api_key": "abc"}')

        assert settings.api_key == "abc"
        assert settings.api_url == DEFAULT_API_URL
        assert settings.model == ModelType.MISTRAL_NEMO

    def test_record_is_immutable(self):
        """Test that settings records cannot be mutated in place."""
        settings = ApiSettings(api_key="abc")
        with pytest.raises(ValueError):
            settings.api_key = "other"  # type: ignore[misc]

    def test_masked_api_key(self):
        """Test that only the last four characters of the key are shown."""
        assert ApiSettings(api_key="sk-1234567890").masked_api_key == "*********7890"
        assert ApiSettings(api_key="abc").masked_api_key == "***"
        assert ApiSettings().masked_api_key == ""


class TestSettingsStores:
    """Tests for settings store backends."""

    def test_store_is_abstract(self):
        """Test that SettingsStore cannot be instantiated directly."""
        with pytest.raises(TypeError):
            SettingsStore()  # type: ignore

    def test_json_store_missing_file_is_no_record(self, tmp_path):
        """Test that a missing file reads as no record."""
        store = JsonSettingsStore(tmp_path / "settings.json")
        assert store.load() is None

    def test_json_store_save_and_load(self, tmp_path):
        """Test that a saved record is read back unchanged."""
        path = tmp_path / "nested" / "settings.json"
        store = JsonSettingsStore(path)
        settings = ApiSettings(api_key="abc", api_url="https://example.test", model=ModelType.CODESTRAL_MAMBA)

        store.save(settings)

        assert path.is_file()
        assert json.loads(path.read_text())["model"] == "codestral-mamba"
        assert store.load() == settings

    def test_json_store_malformed_file_is_no_record(self, tmp_path):
        """Test that an unreadable record is ignored rather than raised."""
        path = tmp_path / "settings.json"
        path.write_text("{not json")

        assert JsonSettingsStore(path).load() is None

    def test_json_store_undecodable_file_is_no_record(self, tmp_path):
        """Test that a file that is not UTF-8 reads as no record."""
        path = tmp_path / "settings.json"
        path.write_bytes(b'{"api_key": "\xff\xfe"}')
        provider = SettingsProvider(JsonSettingsStore(path))

        assert provider.get_settings() is None
        assert provider.get_api_key() == ""
        assert provider.get_model() == ModelType.MISTRAL_NEMO

    def test_json_store_unreadable_file_is_no_record(self, tmp_path, monkeypatch):
        """Test that an OS error while reading reads as no record."""
        path = tmp_path / "settings.json"
        path.write_text('{"api_key": "abc"}')

        def deny(self, *args, **kwargs):
            raise PermissionError(13, "Permission denied", str(self))

        monkeypatch.setattr(Path, "read_text", deny)

        assert JsonSettingsStore(path).load() is None

    def test_json_store_invalid_model_is_no_record(self, tmp_path):
        """Test that a record naming an unknown model is ignored."""
        path = tmp_path / "settings.json"
        path.write_text('{"api_key": "abc", "model": "gpt-4o"}')

        assert JsonSettingsStore(path).load() is None

    def test_default_path_honours_environment(self, monkeypatch, tmp_path):
        """Test that MISTRAL_CHAT_SETTINGS overrides the default location."""
        monkeypatch.setenv("MISTRAL_CHAT_SETTINGS", str(tmp_path / "custom.json"))
        assert default_settings_path() == tmp_path / "custom.json"
        assert JsonSettingsStore().path == tmp_path / "custom.json"

    def test_default_path_without_environment(self, monkeypatch):
        """Test the fallback location under the home directory."""
        monkeypatch.delenv("MISTRAL_CHAT_SETTINGS", raising=False)
        assert default_settings_path().parts[-2:] == (".mistral_chat", "settings.json")

    def test_in_memory_store(self):
        """Test that the in-memory store keeps the last saved record."""
        store = InMemorySettingsStore()
        assert store.load() is None

        store.save(ApiSettings(api_key="abc"))
        assert store.load() == ApiSettings(api_key="abc")


class TestSettingsProvider:
    """Tests for SettingsProvider resolution."""

    def test_no_record_gives_empty_defaults(self):
        """Test that a missing record yields empty key/url and the default model."""
        provider = SettingsProvider(InMemorySettingsStore())

        assert provider.get_api_key() == ""
        assert provider.get_api_url() == ""
        assert provider.get_model() == ModelType.MISTRAL_NEMO
        assert provider.is_configured is False

    def test_record_values_are_returned(self, settings_provider, api_settings):
        """Test that stored values are returned as-is."""
        assert settings_provider.get_api_key() == api_settings.api_key
        assert settings_provider.get_api_url() == api_settings.api_url
        assert settings_provider.get_model() == api_settings.model
        assert settings_provider.is_configured is True

    def test_record_with_empty_fields(self):
        """Test that empty stored strings come back as empty strings."""
        provider = SettingsProvider(InMemorySettingsStore(ApiSettings(api_key="", api_url="")))

        assert provider.get_api_key() == ""
        assert provider.get_api_url() == ""
        assert provider.is_configured is False

    def test_require_settings_signals_missing_configuration(self):
        """Test that require_settings raises instead of returning defaults."""
        provider = SettingsProvider(InMemorySettingsStore())

        with pytest.raises(SettingsNotConfiguredError, match="configure"):
            provider.require_settings()

    def test_require_settings_returns_record(self, settings_provider, api_settings):
        """Test that a configured record is returned by require_settings."""
        assert settings_provider.require_settings() == api_settings

    def test_update_creates_record_with_defaults(self):
        """Test that updating with no record starts from defaults."""
        store = InMemorySettingsStore()
        provider = SettingsProvider(store)

        updated = provider.update(api_key="abc")

        assert updated == ApiSettings(api_key="abc")
        assert store.load() == updated

    def test_update_merges_fields(self, settings_provider, api_settings):
        """Test that only given fields change."""
        updated = settings_provider.update(model="mistral-small")

        assert updated.model == ModelType.MISTRAL_SMALL
        assert updated.api_key == api_settings.api_key
        assert updated.api_url == api_settings.api_url
        assert settings_provider.get_model() == ModelType.MISTRAL_SMALL

    def test_update_rejects_unknown_model(self, settings_provider, api_settings):
        """Test that an unknown model leaves the record unchanged."""
        with pytest.raises(ValueError):
            settings_provider.update(model="gpt-4o")
        assert settings_provider.get_settings() == api_settings

    def test_reads_are_live(self):
        """Test that the provider sees records saved after it was created."""
        store = InMemorySettingsStore()
        provider = SettingsProvider(store)

        store.save(ApiSettings(api_key="later"))

        assert provider.get_api_key() == "later"


class TestSettingsFactory:
    """Tests for settings store factory function."""

    def test_create_file_store(self, tmp_path):
        """Test creating the JSON file store."""
        store = create_settings_store("file", path=tmp_path / "s.json")
        assert isinstance(store, JsonSettingsStore)
        assert store.backend_type == "file"

    def test_create_memory_store(self):
        """Test creating the in-memory store."""
        store = create_settings_store("memory", settings=ApiSettings(api_key="abc"))
        assert isinstance(store, InMemorySettingsStore)
        assert store.backend_type == "memory"
        assert store.load().api_key == "abc"

    def test_unsupported_backend(self):
        """Test that unknown backends raise ValueError."""
        with pytest.raises(ValueError, match="Unsupported settings backend"):
            create_settings_store("redis")
