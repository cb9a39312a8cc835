"""
This module carries speed-control events from the input side to the simulation loop.

SpeedControlChannel wraps a thread-safe queue. Input handlers, which may run on another
thread, post slider positions; the loop drains the queue without blocking at the top of
each iteration and only the most recent position is applied, so bursts of drag events
collapse into a single time-step update.
"""

from __future__ import annotations
import queue
import threading
from typing import Optional


class SpeedControlChannel:
    def __init__(self) -> None:
        self._events: "queue.SimpleQueue[int]" = queue.SimpleQueue()
        self._count_lock = threading.Lock()
        self.events_posted = 0

    def post(self, slider_position: int) -> None:
        self._events.put(int(slider_position))
        with self._count_lock:
            self.events_posted += 1

    def drain(self) -> Optional[int]:
        latest = None
        while True:
            try:
                latest = self._events.get_nowait()
            except queue.Empty:
                return latest

    def empty(self) -> bool:
        return self._events.empty()
