from functools import partial

from robosim.components import RobotComponent, RobotController


def test_component_starts_inactive():
    comp = RobotComponent("Arm")
    assert comp.status() == "Component: Arm, Active: No, Update Count: 0"


def test_update_ignored_until_active():
    comp = RobotComponent("Leg")
    comp.update()
    assert comp.update_count == 0
    comp.activate()
    for _ in range(3):
        comp.update()
    assert comp.update_count == 3
    assert comp.status() == "Component: Leg, Active: Yes, Update Count: 3"


def test_components_are_independent():
    a, b = RobotComponent("a"), RobotComponent("b")
    a.activate()
    a.update()
    b.update()
    assert (a.update_count, b.update_count) == (1, 0)


def test_controller_bound_speed():
    controller = RobotController("Robo1")
    assert controller.speed == 0.0
    set_speed = partial(controller.set_speed, 1.5)
    set_speed()
    set_speed()
    assert controller.speed == 1.5


def test_controller_bound_reading(capsys):
    controller = RobotController("Robo1")
    process = partial(controller.process_reading, "/lidar")
    lines = [process(v) for v in (0.5, 1.0, 1.5)]
    assert lines[0] == "Robo1 received from /lidar: 0.5"
    assert len(set(lines)) == 3
    assert capsys.readouterr().out.splitlines() == lines