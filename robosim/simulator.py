"""Simulated robot combining a sensor buffer, topic registry and command queue."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from robosim.message_queue import Command, MessageQueue
from robosim.robot_base import RobotBase
from robosim.sensor_buffer import SensorBuffer
from robosim.topic_registry import TopicRegistry

_INITIAL_READING = 1.0
_READING_STEP = 0.3


class RobotSimulator(RobotBase):
    """Produces a rising simulated reading, buffers it and publishes averages."""

    def __init__(self, name: str, buffer_size: int) -> None:
        super().__init__(name)
        self.sensor_buffer = SensorBuffer(buffer_size)
        self.message_queue = MessageQueue()
        self.topic_registry = TopicRegistry()
        self.cycle_count = 0
        self.latest_reading = _INITIAL_READING
        print(f"[INIT] {self.name} components created")

    def queue_command(self, command: Command) -> None:
        """Queue a command to be processed during a later cycle."""
        self.message_queue.push(command)

    def init(self) -> None:
        self.is_running = True
        print(f"[INIT] {self.name} ready")

    def update(self) -> None:
        self.cycle_count += 1
        self.latest_reading += _READING_STEP
        self.sensor_buffer.add_reading(self.latest_reading)
        avg = self.sensor_buffer.average()
        self.topic_registry.set("/sensor/latest", self.latest_reading)
        self.topic_registry.set("/sensor/avg", avg)
        self.message_queue.process()
        print(
            f"Cycle {self.cycle_count} | latest={self.latest_reading:g} avg={avg:g}"
        )

    def shutdown(self) -> None:
        self.is_running = False
        print(f"[SHUTDOWN] {self.name} after {self.cycle_count} cycles")
        if len(self.topic_registry):
            print(self.topic_registry.format_all())


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulator with a few queued commands."""
    parser = argparse.ArgumentParser(description="Run the robot simulator.")
    parser.add_argument("--cycles", type=int, default=10)
    parser.add_argument("--buffer-size", type=int, default=5)
    args = parser.parse_args(argv)

    robot = RobotSimulator("AMR_01", args.buffer_size)
    robot.queue_command(Command("MOVE", 1.5))
    robot.queue_command(Command("ROTATE", 0.785))
    robot.queue_command(Command("STOP", 0.0))
    robot.spin(args.cycles)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())