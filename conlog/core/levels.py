"""Severity levels and their display metadata.

Provides:
  Severity: ordered enumeration DEBUG < INFO < WARNING < ERROR < CRITICAL
  LEVEL_METADATA: read-only mapping severity -> LevelStyle(label, color)
  level_label / level_color: lookups with an UNKNOWN / no-color fallback
"""
from __future__ import annotations
from enum import IntEnum
from types import MappingProxyType
from typing import Mapping, NamedTuple, Union

from colorama import Fore, Style

from conlog.core.errors import InvalidSeverityError

RESET = Style.RESET_ALL
UNKNOWN_LABEL = "UNKNOWN"

class Severity(IntEnum):
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3
    CRITICAL = 4

    @classmethod
    def parse(cls, value: Union["Severity", int, str]) -> "Severity":
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise InvalidSeverityError(value) from None
        if isinstance(value, str):
            name = value.strip().upper()
            if name == "WARN":
                return cls.WARNING
            if name in cls.__members__:
                return cls[name]
        raise InvalidSeverityError(value)

class LevelStyle(NamedTuple):
    label: str
    color: str

LEVEL_METADATA: Mapping[Severity, LevelStyle] = MappingProxyType({
    Severity.DEBUG: LevelStyle("DEBUG", Fore.CYAN),
    Severity.INFO: LevelStyle("INFO", Fore.GREEN),
    Severity.WARNING: LevelStyle("WARNING", Fore.YELLOW),
    Severity.ERROR: LevelStyle("ERROR", Fore.RED),
    Severity.CRITICAL: LevelStyle("CRITICAL", Fore.MAGENTA),
})

# Rendered with file:line so faults can be located
LOCATED_LEVELS = frozenset({Severity.ERROR, Severity.CRITICAL})

def level_label(level: object) -> str:
    style = LEVEL_METADATA.get(level)  # type: ignore[call-overload]
    return style.label if style else UNKNOWN_LABEL

def level_color(level: object) -> str:
    style = LEVEL_METADATA.get(level)  # type: ignore[call-overload]
    return style.color if style else ""
