from robosim.message_queue import Command, Message, MessageQueue


def test_command_describe():
    assert Command("MOVE", 1.5).describe() == "Processing command: MOVE with value 1.5"
    assert Command("STOP", 0.0).describe() == "Processing command: STOP with value 0"


def test_message_describe():
    assert Message("/scan", 1.5, 1001).describe() == (
        "Processing message from topic: /scan, value: 1.5, timestamp: 1001"
    )


def test_process_empty_returns_none(capsys):
    q = MessageQueue()
    assert q.process() is None
    assert capsys.readouterr().out == ""


def test_process_is_fifo(capsys):
    q = MessageQueue()
    cmds = [Command("MOVE", 1.5), Command("ROTATE", 0.785), Command("STOP", 0.0)]
    for c in cmds:
        q.push(c)
    assert len(q) == 3
    assert q.process() == cmds[0]
    assert len(q) == 2
    assert capsys.readouterr().out == "Processing command: MOVE with value 1.5\n"


def test_drain_processes_everything(capsys):
    q = MessageQueue()
    msgs = [Message("/scan", 1.5, 1001), Message("/odom", 0.5, 1002),
            Message("/imu", 0.8, 1003)]
    for m in msgs:
        q.push(m)
    assert q.drain() == msgs
    assert q.empty()
    lines = capsys.readouterr().out.splitlines()
    assert lines == [m.describe() for m in msgs]


def test_empty_flag():
    q = MessageQueue()
    assert q.empty()
    q.push(Command("MOVE", 1.0))
    assert not q.empty()