#!/usr/bin/env python3
"""
Terminal Floating Clock
A large block-digit clock floating over the terminal, colored per digit

Usage: python terminal_clock.py [--mode curses|ansi] [--once] [options]

Controls (curses mode):
- Space / T: Toggle the clock
- Q / Ctrl+Q: Quit
"""

import argparse
import curses
import locale
import logging
import sys
from datetime import datetime

import colorama
from rich.console import Console
from rich.markup import escape

from blockclock.ansi_surface import AnsiSurface
from blockclock.clock import create_clock
from blockclock.colors import COLOR_MODES, PALETTES
from blockclock.config import ClockConfig, ConfigError, load_config
from blockclock.curses_surface import CursesSurface
from blockclock.eventloop import EventLoop, ResizeWatcher
from blockclock.scheduler import OneShotScheduler
from blockclock.snapshot import render_snapshot

logger = logging.getLogger("terminal_clock")

FOOTER = "Space: toggle clock | Q: quit"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Large block-digit terminal clock")
    parser.add_argument("--mode", choices=["curses", "ansi"], default="curses",
                        help="Overlay host (default: curses)")
    parser.add_argument("--once", action="store_true",
                        help="Print the current time once and exit")
    parser.add_argument("--config", type=str, help="YAML file with clock settings")
    parser.add_argument("--scale", type=int, help="Glyph scale factor")
    parser.add_argument("--padding", type=int, help="Blank columns on each side")
    parser.add_argument("--interval", type=int, help="Refresh interval in milliseconds")
    parser.add_argument("--color-mode", choices=COLOR_MODES, help="How digits are colored")
    parser.add_argument("--palette", choices=sorted(PALETTES), help="Per-digit palette")
    parser.add_argument("--gradient", nargs=2, metavar=("FROM", "TO"),
                        help="Gradient endpoints, e.g. '#fb4934' '#83a598'")
    parser.add_argument("--fg", type=str, help="Base foreground color")
    parser.add_argument("--border", type=str, help="Border style for --once")
    parser.add_argument("--no-shadow", action="store_true", help="Disable the shadow layer")
    parser.add_argument("--12h", dest="twelve_hour", action="store_true",
                        help="Use a 12-hour clock")
    parser.add_argument("--one-shot-timer", action="store_true",
                        help="Reschedule one-shot timers instead of a repeating timer")
    parser.add_argument("--log-file", type=str, help="Write logs to this file")
    parser.add_argument("--debug", action="store_true", help="Debug logging")
    return parser


def setup_logging(args):
    """Log to a file only; the terminal belongs to the clock"""
    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG if args.debug else logging.INFO,
            format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        )
    else:
        logging.getLogger().addHandler(logging.NullHandler())


def config_from_args(args) -> ClockConfig:
    """Config file values, overridden by command line flags"""
    config = load_config(args.config) if args.config else ClockConfig()

    overrides = {
        'scale': args.scale,
        'padding': args.padding,
        'interval': args.interval,
        'color_mode': args.color_mode,
        'palette': args.palette,
        'fg': args.fg,
        'border': args.border,
    }
    if args.gradient:
        overrides['gradient_from'], overrides['gradient_to'] = args.gradient
        if not args.color_mode:
            overrides['color_mode'] = "gradient"
    if args.no_shadow:
        overrides['use_shadow'] = False
    if args.twelve_hour:
        overrides['twelve_hour'] = True
    return config.merged(overrides)


def make_timers(loop: EventLoop, one_shot: bool):
    if one_shot:
        return OneShotScheduler(loop.call_later)
    return loop


def run_curses(stdscr, config: ClockConfig, one_shot: bool = False):
    """Main curses loop: input, resize and timers on one thread"""
    curses.curs_set(0)
    stdscr.keypad(True)
    stdscr.timeout(100)  # Non-blocking input

    surface = CursesSurface(stdscr, footer=FOOTER)
    surface.colors.init_colors()
    loop = EventLoop()
    clock = create_clock(config, surface, make_timers(loop, one_shot))
    clock.start()

    try:
        while True:
            key = stdscr.getch()

            if key in (ord('q'), ord('Q'), 17):  # Ctrl+Q
                break
            elif key in (ord(' '), ord('t'), ord('T')):
                clock.toggle()
            elif key == curses.KEY_RESIZE:
                curses.update_lines_cols()
                clock.on_resize()

            loop.run_pending()
    finally:
        clock.stop()


def run_ansi(config: ClockConfig, one_shot: bool = False):
    """Plain ANSI loop, repainting the whole screen every tick"""
    colorama.init()
    surface = AnsiSurface()
    loop = EventLoop()
    clock = create_clock(config, surface, make_timers(loop, one_shot))
    watcher = ResizeWatcher(loop, surface.viewport, clock.on_resize)

    try:
        clock.start()
        loop.run_forever()
    finally:
        watcher.close()
        clock.stop()
        surface.restore()
        colorama.deinit()


def print_once(config: ClockConfig, console: Console):
    """Print the current time as block digits"""
    time_str = datetime.now().strftime(config.effective_time_format)
    console.print(render_snapshot(config, time_str))


def main(argv=None):
    """Entry point for the clock application"""
    args = build_parser().parse_args(argv)
    setup_logging(args)
    console = Console()

    try:
        config = config_from_args(args)
    except ConfigError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if args.once:
        print_once(config, console)
        return

    locale.setlocale(locale.LC_ALL, "")
    logger.info("Starting %s clock", args.mode)
    try:
        if args.mode == "ansi":
            run_ansi(config, args.one_shot_timer)
        else:
            curses.wrapper(run_curses, config, args.one_shot_timer)
    except KeyboardInterrupt:
        pass

    console.print("[dim]Clock terminated. Goodbye![/dim]")


if __name__ == "__main__":
    main()
