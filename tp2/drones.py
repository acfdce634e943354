"""Drones that share take-off zones with their neighbours around a ring."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from collections.abc import Sequence
from contextlib import ExitStack
from typing import TextIO

DEFAULT_COUNT = 5
DEFAULT_TAKEOFF_SECONDS = 5.0


class Drone:
    """A drone that needs its own zone and the next one free to take off."""

    def __init__(
        self,
        drone_id: int,
        zones: Sequence[threading.Lock],
        print_lock: threading.Lock,
        takeoff_seconds: float = DEFAULT_TAKEOFF_SECONDS,
        out: TextIO | None = None,
    ) -> None:
        if not zones:
            raise ValueError("at least one zone is required")
        if not 0 <= drone_id < len(zones):
            raise ValueError(f"drone id {drone_id} has no zone among {len(zones)}")
        self.drone_id = drone_id
        self.zones = zones
        self.print_lock = print_lock
        self.takeoff_seconds = takeoff_seconds
        self._out = out

    @property
    def out(self) -> TextIO:
        return self._out if self._out is not None else sys.stdout

    @property
    def left(self) -> int:
        return self.drone_id

    @property
    def right(self) -> int:
        return (self.drone_id + 1) % len(self.zones)

    def _say(self, message: str) -> None:
        with self.print_lock:
            print(f"Dron {self.drone_id} {message}", file=self.out, flush=True)

    def fly(self) -> None:
        """Wait for both neighbouring zones, take off and reach altitude."""
        self._say("esperando para despegar...")
        # Taking the zones in a fixed global order rules out deadlock.
        with ExitStack() as stack:
            for index in sorted({self.left, self.right}):
                stack.enter_context(self.zones[index])
            self._say("despegando...")
            time.sleep(self.takeoff_seconds)
            self._say("alcanzó altura de 10m")


def run_drones(
    count: int = DEFAULT_COUNT,
    takeoff_seconds: float = DEFAULT_TAKEOFF_SECONDS,
    out: TextIO | None = None,
) -> list[Drone]:
    """Fly ``count`` drones concurrently and wait for all of them."""
    zones = [threading.Lock() for _ in range(count)]
    print_lock = threading.Lock()
    drones = [Drone(i, zones, print_lock, takeoff_seconds, out) for i in range(count)]
    threads = [threading.Thread(target=drone.fly) for drone in drones]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return drones


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Simulate drones sharing take-off zones.")
    parser.add_argument("--count", type=int, default=DEFAULT_COUNT, help="number of drones")
    parser.add_argument(
        "--seconds", type=float, default=DEFAULT_TAKEOFF_SECONDS, help="take-off duration"
    )
    args = parser.parse_args(argv)
    run_drones(args.count, args.seconds)
    return 0


if __name__ == "__main__":
    sys.exit(main())