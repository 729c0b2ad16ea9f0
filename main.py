#!/usr/bin/env python3
"""
conlog demo

Thin wrapper around the demo driver in conlog.cli: prints a line at every
severity, then (with --interactive) asks for a new threshold.

To run: python main.py --help
"""

from conlog.cli import run

if __name__ == "__main__":
    raise SystemExit(run())
