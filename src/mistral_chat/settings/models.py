"""Data models for the Mistral API settings record.

These models define the persisted configuration and the mapping from the
locally selected model to the name the API expects, independent of where the
record is stored.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from ..exceptions import UnknownModelError

DEFAULT_API_URL = "https://api.mistral.ai/v1/chat/completions"


class ModelType(str, Enum):
    """Models selectable in the settings record."""

    MISTRAL_NEMO = "mistral-nemo"
    MISTRAL_SMALL = "mistral-small"
    CODESTRAL_MAMBA = "codestral-mamba"


DEFAULT_MODEL = ModelType.MISTRAL_NEMO

MODEL_WIRE_NAMES: dict[ModelType, str] = {
    ModelType.MISTRAL_NEMO: "open-mistral-nemo",
    ModelType.MISTRAL_SMALL: "mistral-small-latest",
    ModelType.CODESTRAL_MAMBA: "open-codestral-mamba",
}


def get_model_name(model: ModelType | str) -> str:
    """Convert a model identifier to the model name sent in the request body.

    Args:
        model: A ModelType member or its string value

    Returns:
        The provider-specific model name

    Raises:
        UnknownModelError: If the identifier is not a declared model
    """
    try:
        return MODEL_WIRE_NAMES[ModelType(model)]
    except (KeyError, ValueError):
        raise UnknownModelError(
            f"Unknown model: {model!r}. "
            f"Supported models: {', '.join(m.value for m in ModelType)}"
        ) from None


class ApiSettings(BaseModel):
    """Persisted Mistral API configuration record.

    Fields absent from the stored record fall back to these defaults.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(default="", description="Mistral API key")
    api_url: str = Field(default=DEFAULT_API_URL, description="Chat completions endpoint")
    model: ModelType = Field(default=DEFAULT_MODEL, description="Selected model")

    @property
    def model_name(self) -> str:
        """Wire-level name of the selected model."""
        return get_model_name(self.model)

    @property
    def masked_api_key(self) -> str:
        """API key with all but the last four characters hidden."""
        if not self.api_key:
            return ""
        if len(self.api_key) <= 4:
            return "*" * len(self.api_key)
        return "*" * (len(self.api_key) - 4) + self.api_key[-4:]
