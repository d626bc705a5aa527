"""
blockclock: large block-digit clock for terminal overlays
"""

from .clock import ClockState, FloatingClock, create_clock, strftime_source
from .colors import DigitKey, build_gradient, make_color_strategy, parse_color
from .config import ClockConfig, ConfigError, load_config
from .layout import Placement, place
from .mapper import CellColor, assign_colors, slot_at
from .renderer import grid_size, render
from .scheduler import (OneShotScheduler, RepeatingScheduler, Scheduler,
                        SchedulerUnavailable, make_scheduler)

__version__ = "0.1.0"

__all__ = [
    "CellColor",
    "ClockConfig",
    "ClockState",
    "ConfigError",
    "DigitKey",
    "FloatingClock",
    "OneShotScheduler",
    "Placement",
    "RepeatingScheduler",
    "Scheduler",
    "SchedulerUnavailable",
    "assign_colors",
    "build_gradient",
    "create_clock",
    "grid_size",
    "load_config",
    "make_color_strategy",
    "make_scheduler",
    "parse_color",
    "place",
    "render",
    "slot_at",
    "strftime_source",
]
