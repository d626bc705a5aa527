"""
Floating clock: the refresh loop tying render, layout and coloring to an
overlay surface.
"""

import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Tuple

from .colors import make_color_strategy
from .config import ClockConfig
from .layout import place
from .mapper import assign_colors
from .renderer import grid_size, render
from .scheduler import Scheduler, make_scheduler
from .surface import MAIN, SHADOW, OverlaySurface

logger = logging.getLogger(__name__)

# Shadow layer sits one row down and two columns right of the main layer
SHADOW_OFFSET = (2, 1)


class ClockState(Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


def strftime_source(fmt: str = "%H:%M:%S",
                    now: Callable[[], datetime] = datetime.now) -> Callable[[], str]:
    """Time source formatting the wall clock on every call"""
    return lambda: now().strftime(fmt)


class FloatingClock:
    """A block-digit clock shown over a host surface while active."""

    def __init__(self, config: ClockConfig, surface: OverlaySurface,
                 viewport: Callable[[], Tuple[int, int]], scheduler: Scheduler,
                 time_source: Callable[[], str]):
        self.config = config
        self._surface = surface
        self._viewport = viewport
        self._scheduler = scheduler
        self._time_source = time_source
        self.state = ClockState.INACTIVE
        self.last_time: Optional[str] = None

    @property
    def is_active(self) -> bool:
        return self.state is ClockState.ACTIVE

    def start(self):
        """Show the clock and start ticking; no-op when already active"""
        if self.is_active:
            return
        self.state = ClockState.ACTIVE
        logger.info("Clock started (interval %d ms)", self.config.interval)
        try:
            self._scheduler.start(self.config.interval, self._tick)
        except Exception:
            logger.warning("Could not start the clock timer; repainting on resize only",
                           exc_info=True)
        self.refresh()

    def stop(self):
        """Stop ticking and tear the overlay down; no-op when inactive"""
        if not self.is_active:
            return
        self.state = ClockState.INACTIVE
        try:
            self._scheduler.stop()
        finally:
            self._teardown()
            logger.info("Clock stopped")

    def toggle(self):
        if self.is_active:
            self.stop()
        else:
            self.start()

    def on_resize(self, *size):
        """Repaint immediately after the viewport changed"""
        if self.is_active:
            self.refresh()

    def _tick(self):
        if self.is_active:
            self.refresh()

    def refresh(self) -> bool:
        """Run one render/layout/paint pass; True when the clock was painted.

        Failures abandon the pass; the next tick tries again.
        """
        if not self.is_active:
            return False
        try:
            painted = self._paint()
        except Exception:
            logger.debug("Clock paint failed, skipping this tick", exc_info=True)
            return False

        if not self.is_active:
            # Stopped from inside the paint
            self._teardown()
            return False
        return painted

    def _paint(self) -> bool:
        config = self.config
        cols, rows = self._viewport()
        if cols < config.min_cols or rows < config.min_rows:
            if self._surface.is_open(MAIN):
                logger.debug("Viewport %dx%d below minimum %dx%d, hiding clock",
                             cols, rows, config.min_cols, config.min_rows)
            self._surface.close_all()
            self._surface.flush()
            return False

        time_str = self._time_source()
        lines = render(time_str, config.scale, config.padding)
        width, height = grid_size(lines)

        if config.use_shadow:
            dx, dy = SHADOW_OFFSET
            shadow = place(width, height, cols, rows, dx, dy)
            self._surface.show(SHADOW, shadow, lines, (), config.shadow_fg,
                               dim=config.shadow_winblend > 0)
        else:
            self._surface.close(SHADOW)

        color_for_slot = make_color_strategy(config.color_mode, len(time_str), config.fg,
                                             palette=config.palette, gradient=config.gradient)
        cells = assign_colors(lines, time_str, config.scale, config.padding, color_for_slot)
        main = place(width, height, cols, rows)
        self._surface.show(MAIN, main, lines, cells, config.fg, dim=config.winblend > 0)
        self._surface.flush()
        self.last_time = time_str
        return True

    def _teardown(self):
        try:
            self._surface.close_all()
            self._surface.flush()
        except Exception:
            logger.debug("Overlay teardown failed", exc_info=True)


def create_clock(config: Optional[ClockConfig], surface: OverlaySurface, timers,
                 viewport: Optional[Callable[[], Tuple[int, int]]] = None,
                 time_source: Optional[Callable[[], str]] = None) -> FloatingClock:
    """Build an independent clock bound to a surface.

    `timers` is either a ready Scheduler or a host offering call_every/call_later,
    in which case make_scheduler() picks the implementation. The viewport
    defaults to the surface's own size.
    """
    config = config or ClockConfig()
    if viewport is None:
        viewport = surface.viewport
    if isinstance(timers, Scheduler):
        scheduler = timers
    else:
        scheduler = make_scheduler(timers)
    if time_source is None:
        time_source = strftime_source(config.effective_time_format)
    return FloatingClock(config, surface, viewport, scheduler, time_source)
