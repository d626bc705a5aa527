"""
Tick scheduling for the clock.

Two implementations share one interface: RepeatingScheduler drives the host's
native repeating timer, OneShotScheduler re-arms a one-shot timer after every
tick for hosts that only offer deferred calls. make_scheduler() picks one when
the clock is built.
"""

import logging
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class SchedulerUnavailable(RuntimeError):
    """The host offers no timer primitive at all."""


class Scheduler:
    """Calls a function every `interval_ms` milliseconds until stopped."""

    def __init__(self):
        self._callback: Optional[Callable[[], None]] = None
        self._interval_ms = 0

    @property
    def running(self) -> bool:
        return self._callback is not None

    def start(self, interval_ms: int, callback: Callable[[], None]):
        if self.running:
            return
        self._interval_ms = max(1, int(interval_ms))
        self._callback = callback
        try:
            self._begin()
        except Exception:
            self._callback = None
            raise

    def stop(self):
        if not self.running:
            return
        self._callback = None
        self._end()

    def _begin(self):
        raise NotImplementedError

    def _end(self):
        raise NotImplementedError


class RepeatingScheduler(Scheduler):
    """Uses a host primitive `call_every(seconds, fn) -> handle`."""

    def __init__(self, call_every: Callable):
        super().__init__()
        self._call_every = call_every
        self._handle = None

    def _begin(self):
        self._handle = self._call_every(self._interval_ms / 1000.0, self._tick)

    def _tick(self):
        if self._callback is not None:
            self._callback()

    def _end(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


class OneShotScheduler(Scheduler):
    """Uses a host primitive `call_later(seconds, fn) -> handle`, re-arming each tick."""

    def __init__(self, call_later: Callable):
        super().__init__()
        self._call_later = call_later
        self._handle = None

    def _begin(self):
        self._arm()

    def _arm(self):
        self._handle = self._call_later(self._interval_ms / 1000.0, self._tick)

    def _tick(self):
        self._handle = None
        callback = self._callback
        if callback is None:
            return
        try:
            callback()
        finally:
            # The callback may have stopped (or restarted) the scheduler
            if self._callback is not None and self._handle is None:
                self._arm()

    def _end(self):
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None


def make_scheduler(host) -> Scheduler:
    """Pick the native repeating timer when the host has one, else the fallback"""
    call_every = getattr(host, "call_every", None)
    if callable(call_every):
        return RepeatingScheduler(call_every)

    call_later = getattr(host, "call_later", None)
    if callable(call_later):
        logger.info("No repeating timer on %r, rescheduling one-shot timers", host)
        return OneShotScheduler(call_later)

    raise SchedulerUnavailable(f"{host!r} has neither call_every nor call_later")
