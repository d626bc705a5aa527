"""
Single-threaded event queue for the terminal hosts.

Everything runs on the caller's thread: timers fire from run_pending() or
run_forever(), never in the background.
"""

import logging
import sched
import time
from typing import Callable, Optional, Tuple

logger = logging.getLogger(__name__)


class TimerHandle:
    """Cancellable timer registered on an EventLoop."""

    def __init__(self, loop: "EventLoop", callback: Callable[[], None],
                 interval: Optional[float] = None):
        self._loop = loop
        self._callback = callback
        self.interval = interval
        self.cancelled = False
        self._event = None
        self._deadline = 0.0

    def _arm(self, deadline: float):
        self._deadline = deadline
        self._event = self._loop._queue.enterabs(deadline, 0, self._fire)

    def _fire(self):
        self._event = None
        if self.cancelled:
            return
        if self.interval is None:
            self.cancelled = True
            self._callback()
            return

        # Fixed cadence; beats missed while the loop was busy are skipped
        now = self._loop.time()
        deadline = self._deadline + self.interval
        if deadline <= now:
            deadline = now + self.interval
        self._arm(deadline)
        self._callback()

    def cancel(self):
        """Stop the timer; safe to call more than once"""
        self.cancelled = True
        if self._event is not None:
            try:
                self._loop._queue.cancel(self._event)
            except ValueError:
                pass
            self._event = None


class EventLoop:
    """Timer queue built on sched.scheduler with an injectable clock."""

    def __init__(self, timefunc: Callable[[], float] = time.monotonic,
                 delayfunc: Callable[[float], None] = time.sleep):
        self.time = timefunc
        self._queue = sched.scheduler(timefunc, delayfunc)
        self._stopping = False

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback once after `delay` seconds"""
        handle = TimerHandle(self, callback)
        handle._arm(self.time() + max(0.0, delay))
        return handle

    def call_every(self, interval: float, callback: Callable[[], None]) -> TimerHandle:
        """Run callback every `interval` seconds until cancelled"""
        if interval <= 0:
            raise ValueError("interval must be positive")
        handle = TimerHandle(self, callback, interval)
        handle._arm(self.time() + interval)
        return handle

    def run_pending(self) -> Optional[float]:
        """Fire every due callback; returns seconds until the next one"""
        return self._queue.run(blocking=False)

    def run_forever(self):
        """Block running callbacks until stop() is called or nothing is queued"""
        self._stopping = False
        while not self._stopping and not self._queue.empty():
            self._queue.run(blocking=False)
            if self._stopping or self._queue.empty():
                break
            next_deadline = self._queue.queue[0].time
            delay = next_deadline - self.time()
            if delay > 0:
                self._queue.delayfunc(delay)

    def stop(self):
        """Make run_forever() return after the current callback"""
        self._stopping = True

    def empty(self) -> bool:
        return self._queue.empty()


class ResizeWatcher:
    """Polls a viewport size provider and reports changes."""

    def __init__(self, loop: EventLoop, size: Callable[[], Tuple[int, int]],
                 on_resize: Callable[[int, int], None], poll_interval: float = 0.25):
        self._size = size
        self._on_resize = on_resize
        self._last = size()
        self._handle = loop.call_every(poll_interval, self._poll)

    def _poll(self):
        current = self._size()
        if current != self._last:
            logger.debug("Viewport resized %s -> %s", self._last, current)
            self._last = current
            self._on_resize(*current)

    def close(self):
        self._handle.cancel()
