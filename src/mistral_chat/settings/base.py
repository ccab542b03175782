"""Abstract base class for settings record storage.

This module defines the interface for loading and saving the API settings
record. The abstraction hides:
- Storage format (JSON file, in-memory)
- Location of the record
"""

from abc import ABC, abstractmethod

from .models import ApiSettings


class SettingsStore(ABC):
    """Abstract settings storage backend.

    ``load`` returns None when no record exists; that is not an error.
    """

    @abstractmethod
    def load(self) -> ApiSettings | None:
        """Read the stored settings record, if any."""

    @abstractmethod
    def save(self, settings: ApiSettings) -> None:
        """Persist the settings record, replacing any previous one."""

    @property
    @abstractmethod
    def backend_type(self) -> str:
        """Get the backend type identifier."""
