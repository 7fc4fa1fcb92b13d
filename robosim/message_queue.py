"""First-in first-out queue of commands and topic messages."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Protocol, Union


@dataclass(frozen=True)
class Command:
    """A named command with a numeric argument."""

    type: str
    value: float

    def describe(self) -> str:
        """Line reported when the command is processed."""
        return f"Processing command: {self.type} with value {self.value:g}"


@dataclass(frozen=True)
class Message:
    """A value published on a topic at a given timestamp."""

    topic: str
    value: float
    timestamp: int

    def describe(self) -> str:
        """Line reported when the message is processed."""
        return (
            f"Processing message from topic: {self.topic}, "
            f"value: {self.value:g}, timestamp: {self.timestamp}"
        )


class _Describable(Protocol):
    def describe(self) -> str: ...


QueueItem = Union[Command, Message]


class MessageQueue:
    """Processes queued items one at a time in arrival order."""

    def __init__(self) -> None:
        self._items: deque[QueueItem] = deque()

    def push(self, item: QueueItem) -> None:
        """Add an item to the back of the queue."""
        self._items.append(item)

    def process(self) -> QueueItem | None:
        """Pop and report the front item; return it, or None when empty."""
        if not self._items:
            return None
        item = self._items.popleft()
        print(item.describe())
        return item

    def drain(self) -> list[QueueItem]:
        """Process every queued item and return them in order."""
        processed = []
        while self._items:
            item = self.process()
            if item is not None:
                processed.append(item)
        return processed

    def empty(self) -> bool:
        """Whether the queue holds no items."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)