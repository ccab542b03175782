"""Provider factory functions for CLI.

Centralizes creation of the settings provider and chat session.
Hides configuration details from command implementations.
"""

from pathlib import Path

from rich.console import Console

from ..chat import ChatSession
from ..settings import SettingsProvider, create_settings_store

# Default console for output
_console = Console()


def get_settings_provider(settings_file: Path | None = None) -> SettingsProvider:
    """Create the settings provider backed by the JSON settings file.

    Args:
        settings_file: Settings file path (default: $MISTRAL_CHAT_SETTINGS or
            ~/.mistral_chat/settings.json)

    Returns:
        SettingsProvider instance
    """
    return SettingsProvider(create_settings_store("file", path=settings_file))


def get_session(
    settings_file: Path | None = None,
    timeout: float = 30.0,
    api_key: str | None = None,
    console: Console | None = None,
) -> ChatSession:
    """Create a chat session from the stored settings.

    Warns, without failing, when no API key is configured: the request is
    still sent and the failure is reported as an error reply.

    Args:
        settings_file: Settings file path
        timeout: Request timeout in seconds
        api_key: API key given on the command line, if any
        console: Optional Rich console for output

    Returns:
        ChatSession instance
    """
    con = console or _console
    settings = get_settings_provider(settings_file)
    if not api_key and not settings.is_configured:
        con.print(
            "[yellow]Warning: Mistral API key not configured. "
            "Run 'mistral-chat configure' or pass --api-key.[/yellow]"
        )
    return ChatSession(settings, timeout=timeout)
