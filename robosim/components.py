"""Simple robot components and a controller with a settable speed."""

from __future__ import annotations


class RobotComponent:
    """A component that counts its updates once it has been activated."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.is_active = False
        self.update_count = 0

    def activate(self) -> None:
        """Mark the component active so that updates are counted."""
        self.is_active = True
        print(f"{self.name} Activated")

    def update(self) -> None:
        """Count an update if the component is active."""
        if not self.is_active:
            return
        self.update_count += 1
        print(f"{self.name} Updated {self.update_count} times.")

    def status(self) -> str:
        """One-line status summary."""
        active = "Yes" if self.is_active else "No"
        return (
            f"Component: {self.name}, Active: {active}, "
            f"Update Count: {self.update_count}"
        )


class RobotController:
    """Holds a speed and reports readings it receives."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.speed = 0.0

    def set_speed(self, speed: float) -> None:
        """Set the controller speed."""
        self.speed = speed
        print(f"{self.name} speed set to: {self.speed:g}")

    def process_reading(self, source: str, value: float) -> str:
        """Report a reading from ``source`` and return the report line."""
        line = f"{self.name} received from {source}: {value:g}"
        print(line)
        return line