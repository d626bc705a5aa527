"""
Pytest configuration and shared fixtures for blockclock tests.
"""

import pytest

from blockclock.config import ClockConfig
from blockclock.eventloop import EventLoop
from blockclock.scheduler import Scheduler
from blockclock.surface import OverlaySurface


class FakeTime:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start=0.0):
        self.now = start

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.now += seconds

    def advance(self, seconds):
        self.now += seconds


class RecordingSurface(OverlaySurface):
    """Keeps the last frame of every layer instead of drawing it."""

    def __init__(self, size=(80, 24)):
        self.size = size
        self.layers = {}
        self.opened = []
        self.flushes = 0
        self.fail_on_show = 0
        self.on_show = None

    def viewport(self):
        return self.size

    def is_open(self, layer):
        return layer in self.layers

    def show(self, layer, placement, rows, cells, base_color, dim=False):
        if self.fail_on_show:
            self.fail_on_show -= 1
            raise RuntimeError("overlay went away")
        if layer not in self.layers:
            self.opened.append(layer)
        self.layers[layer] = {
            'placement': placement,
            'rows': list(rows),
            'cells': list(cells),
            'base_color': base_color,
            'dim': dim,
        }
        if self.on_show is not None:
            self.on_show(layer)

    def close(self, layer):
        self.layers.pop(layer, None)

    def flush(self):
        self.flushes += 1


class ManualScheduler(Scheduler):
    """Scheduler whose ticks are fired by the test."""

    def __init__(self, fail=False):
        super().__init__()
        self.fail = fail
        self.starts = 0
        self.stops = 0

    def _begin(self):
        if self.fail:
            raise RuntimeError("no timer")
        self.starts += 1

    def _end(self):
        self.stops += 1

    def fire(self):
        if self._callback is not None:
            self._callback()


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def loop(fake_time):
    return EventLoop(timefunc=fake_time, delayfunc=fake_time.sleep)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def config():
    return ClockConfig()


@pytest.fixture
def times():
    """Time strings handed out one per refresh, repeating the last one"""
    values = ["09:05:07", "09:05:08", "09:05:09", "09:05:10"]

    def source():
        if len(values) > 1:
            return values.pop(0)
        return values[0]
    return source


@pytest.fixture
def failing_scheduler():
    return ManualScheduler(fail=True)
