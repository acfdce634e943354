"""Sensors produce tasks into a shared queue that robots consume."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from collections import deque
from dataclasses import dataclass
from typing import TextIO

DEFAULT_SENSORS = 3
DEFAULT_ROBOTS = 3
DEFAULT_TASKS_PER_SENSOR = 5
DEFAULT_SENSOR_DELAY = 0.175
DEFAULT_ROBOT_DELAY = 0.25
DONE = "Todas las tareas han sido procesadas!"


@dataclass(frozen=True)
class Task:
    """A unit of work produced by a sensor."""

    sensor_id: int
    task_id: int
    description: str


class Dispatcher:
    """Shared task queue coordinating sensor producers and robot consumers."""

    def __init__(
        self,
        sensors: int = DEFAULT_SENSORS,
        tasks_per_sensor: int = DEFAULT_TASKS_PER_SENSOR,
        sensor_delay: float = DEFAULT_SENSOR_DELAY,
        robot_delay: float = DEFAULT_ROBOT_DELAY,
        out: TextIO | None = None,
    ) -> None:
        self.sensors = sensors
        self.tasks_per_sensor = tasks_per_sensor
        self.sensor_delay = sensor_delay
        self.robot_delay = robot_delay
        self._out = out
        self._queue: deque[Task] = deque()
        self._queue_lock = threading.Lock()
        self._available = threading.Condition(self._queue_lock)
        self._print_lock = threading.Lock()
        self._finished_sensors = 0
        self.processed: list[tuple[int, Task]] = []

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def pending(self) -> list[Task]:
        with self._queue_lock:
            return list(self._queue)

    def _say(self, message: str) -> None:
        with self._print_lock:
            print(message, file=self.out, flush=True)

    def report(self, sensor_id: int) -> None:
        """Generate this sensor's tasks, then mark the sensor as finished."""
        for task_id in range(self.tasks_per_sensor):
            task = Task(sensor_id, task_id, f"Tarea del sensor {sensor_id} número {task_id}")
            self._say(f"Sensor {sensor_id} generó tarea {task_id}")
            with self._available:
                self._queue.append(task)
                self._available.notify()
            time.sleep(self.sensor_delay)
        with self._available:
            self._finished_sensors += 1
            self._available.notify_all()

    def _all_reported(self) -> bool:
        return self._finished_sensors >= self.sensors

    def process(self, robot_id: int) -> None:
        """Take tasks until the queue is empty and every sensor has finished."""
        while True:
            with self._available:
                self._available.wait_for(lambda: self._queue or self._all_reported())
                if not self._queue:
                    break
                task = self._queue.popleft()
                self.processed.append((robot_id, task))
            self._say(
                f"Robot {robot_id} procesando tarea {task.task_id} del sensor {task.sensor_id}"
            )
            time.sleep(self.robot_delay)
        self._say(f"Robot {robot_id} terminó")

    def run(self, robots: int = DEFAULT_ROBOTS) -> list[tuple[int, Task]]:
        """Run all sensors and ``robots`` robots; return (robot id, task) pairs taken."""
        sensor_threads = [
            threading.Thread(target=self.report, args=(i,)) for i in range(self.sensors)
        ]
        robot_threads = [threading.Thread(target=self.process, args=(i,)) for i in range(robots)]
        for thread in sensor_threads + robot_threads:
            thread.start()
        for thread in sensor_threads + robot_threads:
            thread.join()
        print(DONE, file=self.out, flush=True)
        return list(self.processed)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate sensors feeding tasks to robots.")
    parser.add_argument("--sensors", type=int, default=DEFAULT_SENSORS)
    parser.add_argument("--robots", type=int, default=DEFAULT_ROBOTS)
    parser.add_argument("--tasks", type=int, default=DEFAULT_TASKS_PER_SENSOR)
    parser.add_argument("--sensor-delay", type=float, default=DEFAULT_SENSOR_DELAY)
    parser.add_argument("--robot-delay", type=float, default=DEFAULT_ROBOT_DELAY)
    args = parser.parse_args(argv)
    Dispatcher(
        args.sensors, args.tasks, args.sensor_delay, args.robot_delay
    ).run(args.robots)
    return 0


if __name__ == "__main__":
    sys.exit(main())