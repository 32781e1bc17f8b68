"""Virtual-time one-shot task scheduler."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from heapq import heappop, heappush

TaskCallback = Callable[[], None]


@dataclass(slots=True)
class _Task:
    task_id: int
    due_ms: float
    callback: TaskCallback
    cancelled: bool = False


class Scheduler:
    """Millisecond clock advanced explicitly by the host loop."""

    def __init__(self) -> None:
        self._now_ms = 0.0
        self._next_task_id = 1
        self._tasks: dict[int, _Task] = {}
        self._queue: list[tuple[float, int]] = []

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def queued_task_count(self) -> int:
        """Return count of active queued tasks."""
        return sum(1 for task in self._tasks.values() if not task.cancelled)

    def has_task(self, task_id: object) -> bool:
        if isinstance(task_id, bool) or not isinstance(task_id, int):
            return False
        task = self._tasks.get(task_id)
        return task is not None and not task.cancelled

    def call_later(self, delay_ms: float, callback: TaskCallback) -> int:
        """Schedule a one-shot callback after delay."""
        if delay_ms < 0.0:
            raise ValueError("delay_ms must be >= 0")
        task_id = self._next_task_id
        self._next_task_id += 1
        due_ms = self._now_ms + delay_ms
        self._tasks[task_id] = _Task(task_id=task_id, due_ms=due_ms, callback=callback)
        heappush(self._queue, (due_ms, task_id))
        return task_id

    def cancel(self, task_id: object) -> bool:
        """Cancel a scheduled task; return whether it was still pending."""
        if not self.has_task(task_id):
            return False
        self._tasks[task_id].cancelled = True
        return True

    def cancel_all(self) -> int:
        """Cancel every pending task and return how many were cancelled."""
        cancelled = 0
        for task in self._tasks.values():
            if not task.cancelled:
                task.cancelled = True
                cancelled += 1
        return cancelled

    def clear(self) -> None:
        """Drop all tasks, keeping the clock position."""
        self._tasks.clear()
        self._queue.clear()

    def advance(self, delta_ms: float) -> int:
        """Advance scheduler clock and run due callbacks."""
        if delta_ms < 0.0:
            raise ValueError("delta_ms must be >= 0")
        return self.run_due(self._now_ms + delta_ms)

    def run_due(self, now_ms: float) -> int:
        """Run callbacks due at or before `now_ms`."""
        if now_ms < self._now_ms:
            raise ValueError("now_ms cannot move backwards")
        self._now_ms = now_ms
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_ms:
            _, task_id = heappop(self._queue)
            task = self._tasks.pop(task_id, None)
            if task is None or task.cancelled:
                continue
            task.callback()
            executed += 1
        return executed
