"""Ordered conversation transcript and history utilities.

The transcript grows by append only. Editing a turn replaces its slot with a
new Message, since messages are immutable. Each appended turn is stamped with
the time it was recorded so the dialog duration can be computed; turns
restored from a file carry no timestamp.
"""

from collections.abc import Callable, Iterable, Iterator
from datetime import datetime

from ..llm.models import Message


class Transcript:
    """Ordered sequence of role-tagged messages."""

    def __init__(
        self,
        messages: Iterable[Message] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._clock = clock
        self._messages: list[Message] = []
        self._timestamps: list[datetime | None] = []
        for message in messages or ():
            self.append(message)

    def append(self, message: Message) -> None:
        """Add a turn at the end and record when it was added."""
        self._messages.append(message)
        self._timestamps.append(self._clock())

    @property
    def messages(self) -> list[Message]:
        """Copy of the turns in order."""
        return list(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(list(self._messages))

    def count(self) -> int:
        """Number of turns in the transcript."""
        return len(self._messages)

    def get(self, index: int) -> Message | None:
        """Get the turn at index, or None if the index is out of range.

        Negative indices are out of range.
        """
        if 0 <= index < len(self._messages):
            return self._messages[index]
        return None

    def last(self) -> Message | None:
        return self._messages[-1] if self._messages else None

    def clear(self) -> None:
        self._messages.clear()
        self._timestamps.clear()

    def replace(self, messages: Iterable[Message]) -> None:
        """Overwrite the whole transcript; the new turns have no timestamps."""
        self._messages = list(messages)
        self._timestamps = [None] * len(self._messages)

    def format_history(self) -> str:
        """Render the transcript as ``role: content`` lines."""
        return "\n".join(f"{m.role}: {m.content}" for m in self._messages)

    def search(self, keyword: str) -> list[Message]:
        """Find turns whose content contains keyword, ignoring case."""
        needle = keyword.casefold()
        return [m for m in self._messages if needle in m.content.casefold()]

    def edit(self, index: int, new_content: str) -> bool:
        """Replace the content of the turn at index, keeping its role.

        Returns:
            True if the turn was replaced, False for an out-of-range index
        """
        if not 0 <= index < len(self._messages):
            return False
        original = self._messages[index]
        self._messages[index] = Message(role=original.role, content=new_content)
        return True

    def count_by_role(self) -> dict[str, int]:
        """Number of turns per role, in order of first appearance."""
        counts: dict[str, int] = {}
        for message in self._messages:
            counts[message.role] = counts.get(message.role, 0) + 1
        return counts

    def to_markdown(self) -> str:
        """Export the transcript as markdown, one bold-labelled turn per paragraph."""
        return "".join(f"**{m.role}:** {m.content}\n\n" for m in self._messages)

    def dialog_duration(self) -> float:
        """Seconds between the first and last timestamped turns.

        Returns 0.0 when fewer than two turns carry a timestamp.
        """
        stamps = [ts for ts in self._timestamps if ts is not None]
        if len(stamps) < 2:
            return 0.0
        return (stamps[-1] - stamps[0]).total_seconds()
