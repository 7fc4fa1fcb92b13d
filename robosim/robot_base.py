"""Base class for robots driven by an init/update/shutdown cycle."""

from __future__ import annotations

from abc import ABC, abstractmethod


class RobotBase(ABC):
    """A named robot that is spun through a fixed number of update cycles."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.is_running = False

    @abstractmethod
    def init(self) -> None:
        """Prepare the robot before the first cycle."""

    @abstractmethod
    def update(self) -> None:
        """Run a single cycle."""

    @abstractmethod
    def shutdown(self) -> None:
        """Stop the robot after the last cycle."""

    def spin(self, cycles: int) -> None:
        """Initialise, run ``cycles`` updates, then shut down."""
        self.init()
        for _ in range(cycles):
            self.update()
        self.shutdown()


class SensorNode(RobotBase):
    """A node that reports its current sensor value on every cycle."""

    def __init__(self, name: str, sensor_range: float) -> None:
        super().__init__(name)
        self.sensor_range = sensor_range
        self.current_value = 0.0
        self.cycle_count = 0

    def init(self) -> None:
        print(f"Initializing SensorNode: {self.name}")
        self.is_running = True

    def update(self) -> None:
        if not self.is_running:
            return
        self.cycle_count += 1
        print(f"Current Value :{self.current_value:g}")

    def shutdown(self) -> None:
        self.is_running = False

    def set_sensor_value(self, value: float) -> None:
        """Set the value reported by subsequent updates."""
        self.current_value = value
        print(f"Sensor value updated to: {self.current_value:g}")