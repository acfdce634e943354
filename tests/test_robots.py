import io

from tp2.robots import DONE, Dispatcher, Task, main


def test_report_queues_tasks_in_order():
    out = io.StringIO()
    dispatcher = Dispatcher(1, 3, 0, 0, out)
    dispatcher.report(0)
    assert [task.task_id for task in dispatcher.pending] == [0, 1, 2]
    assert dispatcher.pending[1] == Task(0, 1, "Tarea del sensor 0 número 1")
    assert out.getvalue().splitlines() == [
        "Sensor 0 generó tarea 0",
        "Sensor 0 generó tarea 1",
        "Sensor 0 generó tarea 2",
    ]


def test_process_drains_after_sensors_finish():
    out = io.StringIO()
    dispatcher = Dispatcher(1, 2, 0, 0, out)
    dispatcher.report(0)
    dispatcher.process(7)
    assert dispatcher.pending == []
    lines = out.getvalue().splitlines()
    assert lines[-3:] == [
        "Robot 7 procesando tarea 0 del sensor 0",
        "Robot 7 procesando tarea 1 del sensor 0",
        "Robot 7 terminó",
    ]


def test_run_processes_every_task_once():
    out = io.StringIO()
    dispatcher = Dispatcher(3, 5, 0, 0, out)
    processed = dispatcher.run(3)
    keys = [(task.sensor_id, task.task_id) for _, task in processed]
    assert sorted(keys) == [(s, t) for s in range(3) for t in range(5)]
    assert dispatcher.pending == []


def test_run_takes_each_sensor_in_fifo_order():
    dispatcher = Dispatcher(2, 4, 0, 0, io.StringIO())
    processed = dispatcher.run(2)
    for sensor in range(2):
        ids = [task.task_id for _, task in processed if task.sensor_id == sensor]
        assert ids == sorted(ids)


def test_run_output_ends_with_done_and_robots_finish():
    out = io.StringIO()
    Dispatcher(2, 2, 0, 0, out).run(3)
    lines = out.getvalue().splitlines()
    assert lines[-1] == DONE
    for robot in range(3):
        assert lines.count(f"Robot {robot} terminó") == 1


def test_robot_ids_used_are_in_range():
    processed = Dispatcher(2, 3, 0, 0, io.StringIO()).run(2)
    assert {robot for robot, _ in processed} <= {0, 1}


def test_main_runs(capsys):
    args = ["--sensors", "1", "--robots", "1", "--tasks", "2",
            "--sensor-delay", "0", "--robot-delay", "0"]
    assert main(args) == 0
    assert capsys.readouterr().out.splitlines()[-1] == DONE