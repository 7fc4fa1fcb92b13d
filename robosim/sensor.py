"""Range-checked sensors and classification of raw readings."""

from __future__ import annotations

import argparse
import enum
from collections.abc import Iterable, Sequence
from dataclasses import dataclass


class SensorRangeError(ValueError):
    """Raised when a sensor is given a reading outside its range."""


class ReadingLevel(enum.Enum):
    """Classification of a single raw reading."""

    INVALID = "invalid"
    ZERO = "zero"
    LOW = "low"
    NORMAL = "normal"


def classify_reading(value: float) -> ReadingLevel:
    """Classify a reading: negative, zero, low (below 2.0) or normal."""
    if value < 0.0:
        return ReadingLevel.INVALID
    if value == 0.0:
        return ReadingLevel.ZERO
    if value < 2.0:
        return ReadingLevel.LOW
    return ReadingLevel.NORMAL


def count_valid_readings(readings: Iterable[float]) -> int:
    """Count readings that are not classified as invalid."""
    return sum(1 for r in readings if classify_reading(r) is not ReadingLevel.INVALID)


@dataclass
class SensorReading:
    """A single named reading with a validity flag."""

    sensor_name: str
    value: float
    is_valid: bool

    def in_range(self, minimum: float, maximum: float) -> bool:
        """Whether the value lies in the closed interval [minimum, maximum]."""
        return minimum <= self.value <= maximum

    def describe(self) -> str:
        """One-line human readable description."""
        valid = "Yes" if self.is_valid else "No"
        return f"Sensor: {self.sensor_name}, Value: {self.value:g}, Valid: {valid}"


_STATUS_TEXT = {
    ReadingLevel.INVALID: "[Error] Invalid Reading: {}",
    ReadingLevel.ZERO: "[Warning] Zero reading detected: {}",
    ReadingLevel.LOW: "[Info] Low reading: {}",
    ReadingLevel.NORMAL: "[Info] Normal reading: {}",
}


class Sensor:
    """A named sensor that only accepts readings within its range."""

    def __init__(self, name: str, min_range: float, max_range: float) -> None:
        self.name = name
        self.min_range = min_range
        self.max_range = max_range
        self.reading = 0.0
        self.is_valid = False

    def update_reading(self, new_value: float) -> None:
        """Store a new reading; out-of-range values keep the old one and raise."""
        if new_value < self.min_range or new_value > self.max_range:
            self.is_valid = False
            raise SensorRangeError(
                f"{self.name}: reading {new_value:g} out of range "
                f"[{self.min_range:g}, {self.max_range:g}]"
            )
        self.reading = new_value
        self.is_valid = True

    def is_in_range(self) -> bool:
        """Whether the stored reading lies within the sensor's range."""
        return self.min_range <= self.reading <= self.max_range

    def status(self) -> str:
        """Status line describing the stored reading."""
        return _STATUS_TEXT[classify_reading(self.reading)].format(self.name)


_READING_REPORT = {
    ReadingLevel.INVALID: "[Error] Invalid reading: {:g}",
    ReadingLevel.ZERO: "[Warning] Zero reading detected: {:g}",
    ReadingLevel.LOW: "[Info] Low reading: {:g}",
    ReadingLevel.NORMAL: "[Info] Normal reading: {:g}",
}


def _update_and_report(sensor: Sensor, value: float) -> None:
    try:
        sensor.update_reading(value)
    except SensorRangeError as exc:
        print(f"[ERROR] {exc}")
    print(sensor.status())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the sensor demonstration."""
    parser = argparse.ArgumentParser(description="Demonstrate sensors and readings.")
    parser.parse_args(argv)

    temperature = Sensor("Temperature", -40.0, 125.0)
    for value in (25.5, -50.0, 0.0, 1.5, 30.0):
        _update_and_report(temperature, value)
    _update_and_report(Sensor("Pressure", 0.0, 200.0), 150.0)
    _update_and_report(Sensor("Humidity", 0.0, 100.0), 45.0)

    raw = [0.0, 0.1, 0.9, -2.1, 3.5, -4.0, -5.2, 6.8, 7.3, 8.9]
    for value in raw:
        print(_READING_REPORT[classify_reading(value)].format(value))
    print(f"Valid readings count: {count_valid_readings(raw)}")

    readings = [
        SensorReading("LIDAR", 3.75, True),
        SensorReading("Camera", 0.0, False),
        SensorReading("Ultrasonic", 1.25, True),
    ]
    for reading in readings:
        print(reading.describe())
    for label, reading in zip(("R1", "R2", "R3"), readings):
        print(f"{label} in range [1.0, 5.0]: {int(reading.in_range(1.0, 5.0))}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())