"""
Deferred callback primitives.

The caret controller and the completion callback must run *after* the host
input has applied the current update, on the same thread that dispatches
the host's events.  Hosts provide that guarantee through a
:class:`Scheduler`:

* :class:`AsyncioScheduler` (default) – ``loop.call_later`` on the running
  asyncio loop; callbacks scheduled while no loop runs are queued until
  :meth:`ManualScheduler.run_pending` is called.
* :class:`ManualScheduler` – queues callbacks until :meth:`run_pending` is
  called; suitable for hosts that drain deferred work at the end of their
  update cycle, and for tests.
* :class:`TimerScheduler` – opt-in, runs callbacks on ``threading.Timer``
  worker threads.  The host input and the ``on_complete_pattern`` callback
  are then touched from a thread other than the one dispatching events, so
  both must be thread safe.

A UI toolkit can plug in its own primitive (``widget.after``) by
implementing :meth:`Scheduler.schedule`.
"""

import abc
import asyncio
import threading
from typing import Callable, List, Optional, Tuple


class Scheduler(abc.ABC):
    """Runs a callback once the current update has settled."""

    @abc.abstractmethod
    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        """
        Run *callback* no sooner than *delay* seconds from now.

        A ``delay`` of ``0`` means "after the current update".
        """
        raise NotImplementedError


class ManualScheduler(Scheduler):
    """
    Collects callbacks and runs them on demand, in ``(delay, order)`` order.

    Callbacks scheduled while :meth:`run_pending` is draining the queue are
    run in the same call.
    """

    def __init__(self):
        self._pending: List[Tuple[float, int, Callable[[], None]]] = []
        self._counter = 0

    @property
    def pending(self) -> int:
        return len(self._pending)

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        self._pending.append((delay, self._counter, callback))
        self._counter += 1

    def run_pending(self) -> int:
        """
        Run queued callbacks until the queue is empty.

        Returns
        -------
        int
            Number of callbacks that were run.
        """
        executed = 0
        while self._pending:
            self._pending.sort(key=lambda item: (item[0], item[1]))
            _, _, callback = self._pending.pop(0)
            callback()
            executed += 1
        return executed


class AsyncioScheduler(ManualScheduler):
    """
    Runs callbacks on an asyncio event loop.

    Parameters
    ----------
    loop : asyncio.AbstractEventLoop | None
        Loop to schedule on.  When omitted the loop running at
        :meth:`schedule` time is used; with no running loop the callback is
        queued for :meth:`run_pending`.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        super().__init__()
        self._loop = loop
        self._handles: List[asyncio.TimerHandle] = []

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        loop = self._loop or self._running_loop()
        if loop is None:
            super().schedule(delay, callback)
            return
        now = loop.time()
        self._handles = [
            h for h in self._handles if not h.cancelled() and h.when() > now
        ]
        self._handles.append(loop.call_later(delay, callback))

    def cancel_all(self) -> None:
        """Cancel loop callbacks that have not run and drop queued ones."""
        handles, self._handles = self._handles, []
        for handle in handles:
            handle.cancel()
        self._pending.clear()

    @staticmethod
    def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None


class TimerScheduler(Scheduler):
    """Runs every callback on its own daemon ``threading.Timer`` thread."""

    def __init__(self):
        self._timers: List[threading.Timer] = []
        self._lock = threading.Lock()

    def schedule(self, delay: float, callback: Callable[[], None]) -> None:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        with self._lock:
            self._timers = [t for t in self._timers if t.is_alive()]
            self._timers.append(timer)
        timer.start()

    def cancel_all(self) -> None:
        """Cancel every callback that has not started yet."""
        with self._lock:
            timers, self._timers = self._timers, []
        for timer in timers:
            timer.cancel()
