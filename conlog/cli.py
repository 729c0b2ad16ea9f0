"""
Demo driver: prints the level table, one line per severity, and optionally
lets the user pick a new threshold and prints them again.

To run: python main.py [--level DEBUG] [--no-color] [--flush] [--disabled] [--interactive]
"""
from __future__ import annotations
import argparse
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.box import ROUNDED

from conlog.core.config import LogConfig
from conlog.core.levels import LEVEL_METADATA, LOCATED_LEVELS, Severity
from conlog.core.logging import Logger
from conlog.ui.prompt import select_severity

# Same hues as LEVEL_METADATA, as rich style names
_RICH_STYLES = {
    Severity.DEBUG: "cyan",
    Severity.INFO: "green",
    Severity.WARNING: "yellow",
    Severity.ERROR: "red",
    Severity.CRITICAL: "magenta",
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Leveled console logging demo")
    parser.add_argument("--level", help="Initial threshold (DEBUG/INFO/WARNING/ERROR/CRITICAL)")
    parser.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    parser.add_argument("--flush", action="store_true", help="Flush stdout after every line")
    parser.add_argument("--disabled", action="store_true", help="Turn every logging call into a no-op")
    parser.add_argument("--interactive", action="store_true", help="Prompt for a new threshold and rerun")
    return parser

def config_from_args(args: argparse.Namespace) -> LogConfig:
    config = LogConfig.from_env()
    if args.level:
        config.threshold = args.level
    if args.no_color:
        config.colors = False
    if args.flush:
        config.flush = True
    if args.disabled:
        config.enabled = False
    return config

def level_table(log: Logger) -> Table:
    threshold = log.get_threshold()
    table = Table(title=f"Threshold: {threshold.name}", box=ROUNDED, width=60)
    table.add_column("Level", justify="left")
    table.add_column("Location", justify="center")
    table.add_column("Printed", justify="center")
    for level, style in LEVEL_METADATA.items():
        label = style.label
        if log.config.colors:
            label = f"[{_RICH_STYLES[level]}]{label}[/]"
        table.add_row(
            label,
            "file:line" if level in LOCATED_LEVELS else "-",
            "yes" if log.is_enabled_for(level) else "no",
        )
    return table

def emit_samples(log: Logger) -> None:
    log.info("This is an info")
    log.debug("Debug Var = %d", 55)
    log.warning("Warning")
    log.error("Major error")
    log.critical("Critical")

def run(argv: Optional[Sequence[str]] = None, console: Optional[Console] = None) -> int:
    args = build_parser().parse_args(argv)
    log = Logger(config_from_args(args))
    if console is None:
        console = Console(no_color=not log.config.colors)

    console.print(level_table(log))
    emit_samples(log)
    if args.interactive:
        log.set_threshold(select_severity(logger=log))
        console.print(level_table(log))
        emit_samples(log)
    return 0

if __name__ == "__main__":
    raise SystemExit(run())
