import pytest

from robosim.robot_base import RobotBase, SensorNode


class _Recorder(RobotBase):
    def __init__(self, name):
        super().__init__(name)
        self.calls = []

    def init(self):
        self.calls.append("init")
        self.is_running = True

    def update(self):
        self.calls.append("update")

    def shutdown(self):
        self.calls.append("shutdown")
        self.is_running = False


def test_base_is_abstract():
    with pytest.raises(TypeError):
        RobotBase("x")


def test_spin_calls_in_order():
    robot = _Recorder("r")
    RobotBase.spin(robot, 2)
    assert robot.calls == ["init", "update", "update", "shutdown"]
    assert robot.is_running is False


def test_spin_zero_cycles():
    robot = _Recorder("r")
    RobotBase.spin(robot, 0)
    assert robot.calls == ["init", "shutdown"]


def test_name_kept():
    assert SensorNode("Lidar", 100.0).name == "Lidar"


def test_sensor_node_spin_counts_cycles():
    node = SensorNode("Lidar", 100.0)
    node.spin(5)
    assert node.cycle_count == 5
    assert node.is_running is False
    assert node.sensor_range == 100.0


def test_sensor_node_update_before_init_ignored():
    node = SensorNode("Camera", 50.0)
    node.update()
    assert node.cycle_count == 0


def test_sensor_node_set_value_reported(capsys):
    node = SensorNode("Lidar", 100.0)
    node.set_sensor_value(42.0)
    assert node.current_value == 42.0
    node.init()
    node.update()
    out = capsys.readouterr().out
    assert "Sensor value updated to: 42" in out
    assert "Current Value :42" in out