"""A growable pool of worker threads that runs submitted callables."""

from __future__ import annotations

import os
import threading
from collections import deque
from collections.abc import Callable
from concurrent.futures import Future
from enum import Enum
from typing import Any

__all__ = ["PoolStatus", "ThreadPool"]


class PoolStatus(Enum):
    """Life-cycle state of a thread pool."""

    STOP = "stop"
    RUNNING = "running"
    PAUSE = "pause"


class ThreadPool:
    """Runs callables on between ``min_threads`` and ``max_threads`` threads.

    Threads beyond the minimum leave the pool after ``max_idle_ms``
    milliseconds without work. Tasks still queued when the pool stops stay
    queued and run once the pool is started again.
    """

    def __init__(
        self,
        min_threads: int = 1,
        max_threads: int | None = None,
        max_idle_ms: int = 60000,
    ) -> None:
        self.min_threads = min_threads
        self.max_threads = max_threads if max_threads is not None else (os.cpu_count() or 1)
        self.max_idle_ms = max_idle_ms
        self._cond = threading.Condition()
        self._tasks: deque[Callable[[], None]] = deque()
        self._threads: set[threading.Thread] = set()
        self._status = PoolStatus.STOP
        self._idle = 0

    @property
    def status(self) -> PoolStatus:
        with self._cond:
            return self._status

    @property
    def thread_count(self) -> int:
        with self._cond:
            return len(self._threads)

    @property
    def idle_count(self) -> int:
        with self._cond:
            return self._idle

    @property
    def task_count(self) -> int:
        with self._cond:
            return len(self._tasks)

    def __enter__(self) -> ThreadPool:
        if self.status is PoolStatus.STOP:
            self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self.status is not PoolStatus.STOP:
            self.stop()

    def start(self, start_threads: int = 0) -> None:
        """Start the pool with ``start_threads`` threads, clamped to the limits."""
        with self._cond:
            if self._status is not PoolStatus.STOP:
                raise RuntimeError("thread pool is already running")
            self._start_locked(start_threads)

    def _start_locked(self, start_threads: int) -> None:
        self._status = PoolStatus.RUNNING
        count = min(max(start_threads, self.min_threads), self.max_threads)
        for _ in range(count):
            self._spawn_locked()

    def stop(self) -> None:
        """Stop the pool and join all of its threads."""
        with self._cond:
            if self._status is PoolStatus.STOP:
                raise RuntimeError("thread pool is not running")
            self._status = PoolStatus.STOP
            self._cond.notify_all()
            threads = list(self._threads)
        current = threading.current_thread()
        for thread in threads:
            if thread is not current:
                thread.join()
        with self._cond:
            self._threads.clear()
            self._idle = 0
            self._cond.notify_all()

    def pause(self) -> None:
        """Keep threads from taking new tasks until resumed."""
        with self._cond:
            if self._status is PoolStatus.RUNNING:
                self._status = PoolStatus.PAUSE
                self._cond.notify_all()

    def resume(self) -> None:
        """Let a paused pool take tasks again."""
        with self._cond:
            if self._status is PoolStatus.PAUSE:
                self._status = PoolStatus.RUNNING
                self._cond.notify_all()

    def wait(self) -> None:
        """Block until the queue is empty and every thread is idle, or the pool stops."""
        with self._cond:
            self._cond.wait_for(
                lambda: self._status is PoolStatus.STOP
                or (not self._tasks and self._idle == len(self._threads))
            )

    def submit(self, fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Future:
        """Queue ``fn(*args, **kwargs)`` and return a future for its result.

        A stopped pool is started first.
        """
        future: Future = Future()

        def task() -> None:
            if not future.set_running_or_notify_cancel():
                return
            try:
                result = fn(*args, **kwargs)
            except BaseException as exc:  # noqa: BLE001 - handed to the caller
                future.set_exception(exc)
            else:
                future.set_result(result)

        with self._cond:
            if self._status is PoolStatus.STOP:
                self._start_locked(0)
            if self._idle <= len(self._tasks):
                self._spawn_locked()
            self._tasks.append(task)
            self._cond.notify_all()
        return future

    def _spawn_locked(self) -> bool:
        if len(self._threads) >= self.max_threads:
            return False
        thread = threading.Thread(target=self._worker, daemon=True)
        self._threads.add(thread)
        self._idle += 1
        thread.start()
        return True

    def _worker(self) -> None:
        me = threading.current_thread()
        while True:
            with self._cond:
                task = self._next_task(me)
                if task is None:
                    return
            task()
            with self._cond:
                self._idle += 1
                self._cond.notify_all()

    def _next_task(self, me: threading.Thread) -> Callable[[], None] | None:
        timeout = self.max_idle_ms / 1000
        while True:
            ready = self._cond.wait_for(
                lambda: self._status is PoolStatus.STOP
                or (self._status is PoolStatus.RUNNING and bool(self._tasks)),
                timeout=timeout,
            )
            if self._status is PoolStatus.STOP:
                return None
            if ready:
                self._idle -= 1
                return self._tasks.popleft()
            if self._status is PoolStatus.PAUSE:
                continue
            if len(self._threads) > self.min_threads:
                self._threads.discard(me)
                self._idle -= 1
                self._cond.notify_all()
                return None