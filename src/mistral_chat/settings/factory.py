"""Factory for creating settings stores."""

from typing import Any

from .base import SettingsStore


def create_settings_store(
    backend: str = "file",
    **kwargs: Any
) -> SettingsStore:
    """Create a settings store.

    Args:
        backend: Backend type ("file" or "memory")
        **kwargs: Backend-specific configuration
            For file:
                - path: str | Path | None (default: ~/.mistral_chat/settings.json)
            For memory:
                - settings: ApiSettings | None

    Returns:
        SettingsStore instance

    Raises:
        ValueError: If backend type is not supported
    """
    if backend == "file":
        from .stores import JsonSettingsStore
        return JsonSettingsStore(**kwargs)

    elif backend == "memory":
        from .stores import InMemorySettingsStore
        return InMemorySettingsStore(**kwargs)

    raise ValueError(
        f"Unsupported settings backend: {backend}. "
        f"Supported backends: file, memory"
    )
