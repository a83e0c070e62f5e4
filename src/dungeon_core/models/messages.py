"""In-game message log.

The message log is what the player reads; it is separate from the
structlog diagnostics.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from pydantic import BaseModel, ConfigDict, Field

from dungeon_core.core.constants import WHITE, Color


class Message(BaseModel):
    """One colored line of the message log."""

    model_config = ConfigDict(frozen=True)

    text: str = Field(description="Message text")
    color: Color = Field(default=WHITE, description="Text color")


class MessageLog:
    """Ordered, append-only log of messages.

    Storage is unbounded unless ``max_messages`` is given, in which case
    the oldest entries are dropped once the cap is exceeded.
    ``total_added`` keeps counting past the cap.
    """

    def __init__(self, max_messages: int | None = None) -> None:
        self._messages: deque[Message] = deque(maxlen=max_messages)
        self._total_added = 0

    @property
    def max_messages(self) -> int | None:
        return self._messages.maxlen

    @property
    def total_added(self) -> int:
        return self._total_added

    def add(self, text: str, color: Color = WHITE) -> Message:
        message = Message(text=text, color=color)
        self.append(message)
        return message

    def append(self, message: Message) -> None:
        self._messages.append(message)
        self._total_added += 1

    def extend(self, messages: Iterable[Message]) -> None:
        for message in messages:
            self.append(message)

    def recent(self, count: int) -> list[Message]:
        """The newest ``count`` messages, oldest first."""
        if count <= 0:
            return []
        return list(self._messages)[-count:]

    def since(self, total_added: int) -> list[Message]:
        """Messages appended after the log had seen ``total_added`` entries.

        Entries already dropped by the cap are not returned.
        """
        return self.recent(self._total_added - total_added)

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self) -> Iterator[Message]:
        return iter(self._messages)


__all__ = [
    "Message",
    "MessageLog",
]
