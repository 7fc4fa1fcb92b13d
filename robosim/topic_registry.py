"""A registry of named topics holding their latest numeric value."""

from __future__ import annotations


class TopicNotFoundError(LookupError):
    """Raised when a topic has never been set."""

    def __init__(self, topic: str) -> None:
        super().__init__(f"Topic not found: {topic}")
        self.topic = topic


class TopicRegistry:
    """Maps topic names to values; iteration is in sorted topic order."""

    def __init__(self) -> None:
        self._data: dict[str, float] = {}

    def set(self, topic: str, value: float) -> None:
        """Store ``value`` under ``topic``, replacing any previous value."""
        self._data[topic] = value

    def get(self, topic: str) -> float:
        """Value stored under ``topic``."""
        try:
            return self._data[topic]
        except KeyError:
            raise TopicNotFoundError(topic) from None

    def exists(self, topic: str) -> bool:
        """Whether ``topic`` has been set."""
        return topic in self._data

    def __contains__(self, topic: object) -> bool:
        return topic in self._data

    def __len__(self) -> int:
        return len(self._data)

    def items(self) -> list[tuple[str, float]]:
        """All (topic, value) pairs sorted by topic."""
        return sorted(self._data.items())

    def format_all(self) -> str:
        """One ``topic: value`` line per topic, in sorted order."""
        return "\n".join(f"{topic}: {value:g}" for topic, value in self.items())