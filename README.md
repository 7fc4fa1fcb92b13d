# robosim

A small, dependency-free toolkit for simulating a robot's control loop:
range-checked sensors, a fixed-size reading buffer, a topic registry, a
first-in first-out command queue, and a robot base class that runs an
`init` / `update` / `shutdown` cycle.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

```
robosim                        # run robot "AMR_01" for 10 cycles with three queued commands
robosim --cycles 20 --buffer-size 3
robosim-sensor                 # feed readings to range-checked sensors and print their status
robosim-math                   # print clamp, lerp and range-mapping examples
```

Each cycle of `robosim` raises a simulated reading by 0.3 (starting from
1.0), stores it in the sensor buffer, publishes `/sensor/latest` and
`/sensor/avg`, processes at most one queued command and prints a summary
line. On shutdown it prints every topic in sorted order.

## Modules

- `robosim.simulator` – `RobotSimulator(name, buffer_size)` with
  `queue_command(command)` and `spin(cycles)`.
- `robosim.robot_base` – abstract `RobotBase` (`init`, `update`,
  `shutdown`, `spin`) and `SensorNode`, which prints its current value
  each cycle and has `set_sensor_value(value)`.
- `robosim.sensor_buffer` – `SensorBuffer(max_size)`: keeps the newest
  readings; `add_reading`, `average` (0.0 when empty), `latest` (raises
  `IndexError` when empty), `empty`, `len()` and iteration.
- `robosim.topic_registry` – `TopicRegistry` with `set`, `get` (raises
  `TopicNotFoundError`), `exists`, `in`, `len()`, `items()` and
  `format_all()`, all in sorted topic order.
- `robosim.message_queue` – `Command(type, value)`, `Message(topic, value,
  timestamp)` and `MessageQueue` with `push`, `process` (prints and
  returns the front item, or `None` when empty), `drain`, `empty` and
  `len()`.
- `robosim.sensor` – `Sensor(name, min_range, max_range)` whose
  `update_reading` raises `SensorRangeError` for out-of-range values and
  keeps the previous reading; `status()`, `is_in_range()`;
  `SensorReading`, `ReadingLevel`, `classify_reading` and
  `count_valid_readings`.
- `robosim.mathutils` – `clamp`, `lerp` and `map_range` (raises
  `ValueError` for an empty input range).
- `robosim.readings` – `average`, `meters_to_feet`, `scale_reading`,
  `apply_to_readings`, `min_max` and `reading_at` (returns `None` for an
  out-of-bounds index).
- `robosim.components` – `RobotComponent` (counts updates once activated)
  and `RobotController` (`set_speed`, `process_reading`).

## Library use

```python
from robosim.simulator import RobotSimulator
from robosim.message_queue import Command

robot = RobotSimulator("AMR_01", 5)
robot.queue_command(Command("MOVE", 1.5))
robot.queue_command(Command("STOP", 0.0))
robot.spin(10)
```

Building blocks can be used on their own:

```python
from robosim.sensor_buffer import SensorBuffer
from robosim.topic_registry import TopicRegistry, TopicNotFoundError
from robosim.mathutils import clamp, lerp, map_range

buffer = SensorBuffer(3)
for value in (1.0, 2.0, 3.0, 4.0):
    buffer.add_reading(value)
buffer.average()          # 3.0, only the last three readings are kept

topics = TopicRegistry()
topics.set("/sensor/avg", buffer.average())
"/sensor/avg" in topics   # True
topics.get("/missing")    # raises TopicNotFoundError

map_range(5.0, 0.0, 10.0, 100.0, 200.0)   # 150.0
```

Write your own robot by subclassing `robosim.robot_base.RobotBase` and
implementing `init`, `update` and `shutdown`; `spin(cycles)` calls `init`
once, `update` once per cycle, then `shutdown`.

## What it does not do

Everything runs in a single process and in memory. The sensor readings
are simulated; nothing talks to real hardware. Topics and commands are
not sent over a network, and nothing is saved to disk between runs.