import asyncio
import heapq
import itertools
import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Protocol

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def iso_timestamp(value: datetime) -> str:
    """Render like JavaScript's toISOString(): UTC, milliseconds, trailing Z."""
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def epoch_millis(value: datetime) -> int:
    return int(value.timestamp() * 1000)


class Scheduler(Protocol):
    def now(self) -> datetime: ...

    def schedule(self, delay: float, callback: Callable[[], None]) -> None: ...

    def close(self) -> None: ...


def _run_callback(callback: Callable[[], None]) -> None:
    # deferred work has no caller to report to
    try:
        callback()
    except Exception:
        logger.exception("deferred callback failed callback=%r", callback)


class AsyncioScheduler:
    """Runs callbacks on the running event loop after a delay in seconds."""

    def __init__(self) -> None:
        self._tasks: set[asyncio.Task] = set()

    def now(self) -> datetime:
        return utc_now()

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        task = asyncio.create_task(self._run_later(delay, callback))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run_later(self, delay: float, callback: Callable[[], None]) -> None:
        await asyncio.sleep(delay)
        _run_callback(callback)

    @property
    def pending(self) -> int:
        return len(self._tasks)

    def close(self) -> None:
        for task in list(self._tasks):
            task.cancel()


class ManualScheduler:
    """
    Virtual-time scheduler. Nothing runs until advance() moves the clock past
    a callback's due time; callbacks with the same due time run in the order
    they were scheduled.
    """

    def __init__(self, start: datetime | None = None) -> None:
        self._now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)
        self._queue: list[tuple[datetime, int, Callable[[], None]]] = []
        self._counter = itertools.count()

    def now(self) -> datetime:
        return self._now

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        due = self._now + timedelta(seconds=delay)
        heapq.heappush(self._queue, (due, next(self._counter), callback))

    def advance(self, seconds: float) -> int:
        target = self._now + timedelta(seconds=seconds)
        fired = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, callback = heapq.heappop(self._queue)
            self._now = due
            _run_callback(callback)
            fired += 1
        self._now = target
        return fired

    @property
    def pending(self) -> int:
        return len(self._queue)

    def close(self) -> None:
        self._queue.clear()
