"""Fixed-size rolling buffer of sensor readings."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator


class SensorBuffer:
    """Keeps the most recent ``max_size`` readings, dropping the oldest."""

    def __init__(self, max_size: int) -> None:
        if max_size < 0:
            raise ValueError("max_size must not be negative")
        self.max_size = max_size
        self._readings: deque[float] = deque(maxlen=max_size)

    def add_reading(self, reading: float) -> None:
        """Append a reading; a zero-size buffer ignores it."""
        self._readings.append(reading)

    def average(self) -> float:
        """Mean of the stored readings, 0.0 when empty."""
        if not self._readings:
            return 0.0
        return sum(self._readings) / len(self._readings)

    def latest(self) -> float:
        """The most recent reading."""
        if not self._readings:
            raise IndexError("sensor buffer is empty")
        return self._readings[-1]

    def empty(self) -> bool:
        """Whether the buffer holds no readings."""
        return not self._readings

    def __len__(self) -> int:
        return len(self._readings)

    def __iter__(self) -> Iterator[float]:
        return iter(self._readings)