"""
Numbered-choice prompt helpers.
"""
from __future__ import annotations
import re
from typing import Callable, Optional, Sequence, TextIO

from conlog.core.errors import PromptArgumentError
from conlog.core.levels import RESET, Severity, level_color, level_label
from conlog.core.logging import Logger, logger as default_logger

INVALID_INPUT = "Invalid input. Please enter a number."
OUT_OF_RANGE = "Choice out of range. Please try again."

# Optional sign and ASCII digits only
_INTEGER = re.compile(r"[+-]?[0-9]+")

Reader = Callable[[str], str]

def select_option(
    message: str,
    options: Sequence[str],
    *,
    logger: Optional[Logger] = None,
    reader: Optional[Reader] = None,
    writer: Optional[TextIO] = None,
) -> int:
    """
    Display a numbered menu and ask until a valid choice is entered.

    Args:
        message: Heading printed above the options
        options: Option labels, shown 1-based
        logger: Receives the retry warnings (module logger by default)
        reader: Called with the prompt text, returns one line of input (`input` by default)
        writer: Where the menu is printed (the logger's stream by default)

    Returns:
        Index of chosen option (0-based)

    Raises:
        PromptArgumentError: message or options missing; nothing is printed
    """
    if message is None:
        raise PromptArgumentError("message is required")
    if not options:
        raise PromptArgumentError("at least one option is required")
    log = logger if logger is not None else default_logger
    read = reader if reader is not None else input
    count = len(options)
    heading = message
    if log.config.colors:
        heading = f"{level_color(Severity.INFO)}{message}{RESET}"

    while True:
        out = writer if writer is not None else log.stream
        out.write(f"{heading}\n")
        for i, option in enumerate(options, 1):
            out.write(f"  {i}) {option}\n")
        out.flush()

        choice = read(f"Enter choice (1-{count}): ").strip()
        if not _INTEGER.fullmatch(choice):
            log.warning(INVALID_INPUT)
            continue
        choice_num = int(choice)
        if 1 <= choice_num <= count:
            return choice_num - 1
        log.warning(OUT_OF_RANGE)

def select_severity(
    message: str = "Select log level:",
    *,
    logger: Optional[Logger] = None,
    reader: Optional[Reader] = None,
    writer: Optional[TextIO] = None,
) -> Severity:
    levels = list(Severity)
    index = select_option(
        message,
        [level_label(lvl).capitalize() for lvl in levels],
        logger=logger,
        reader=reader,
        writer=writer,
    )
    return levels[index]
