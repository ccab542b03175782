"""Saving and restoring a transcript as a JSON file.

The file is a list of ``{"role": ..., "content": ...}`` objects in turn order.
"""

import json
import logging
from pathlib import Path

from ..llm.models import Message
from .transcript import Transcript

logger = logging.getLogger(__name__)


def save_transcript(transcript: Transcript, path: str | Path) -> Path:
    """Write the transcript to a JSON file.

    Args:
        transcript: Transcript to save
        path: Destination file; parent directories are created

    Returns:
        The path written
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    history_data = [
        {"role": message.role, "content": message.content}
        for message in transcript
    ]
    file_path.write_text(json.dumps(history_data, indent=2, ensure_ascii=False), encoding="utf-8")
    logger.info("History saved to: %s", file_path)
    return file_path


def load_transcript(transcript: Transcript, path: str | Path) -> bool:
    """Overwrite the transcript with the turns stored in a JSON file.

    Entries without both ``role`` and ``content`` are skipped.

    Args:
        transcript: Transcript to overwrite
        path: File written by ``save_transcript``

    Returns:
        False if the file does not exist (transcript untouched), True otherwise

    Raises:
        ValueError: If the file is not a JSON list
    """
    file_path = Path(path)
    if not file_path.is_file():
        logger.warning("File not found: %s", file_path)
        return False

    history_data = json.loads(file_path.read_text(encoding="utf-8"))
    if not isinstance(history_data, list):
        raise ValueError(f"Expected a list of messages in {file_path}")

    messages = []
    for item in history_data:
        if not isinstance(item, dict) or "role" not in item or "content" not in item:
            logger.debug("Skipping malformed history entry: %r", item)
            continue
        messages.append(Message(role=str(item["role"]), content=str(item["content"])))

    transcript.replace(messages)
    logger.info("History loaded from %s (%d messages)", file_path, len(messages))
    return True
