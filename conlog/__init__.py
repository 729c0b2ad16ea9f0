"""
Leveled console logging with an interactive numbered-choice prompt.
"""
from conlog.core.errors import ConlogError, FormatArgumentError, InvalidSeverityError, PromptArgumentError
from conlog.core.levels import LEVEL_METADATA, Severity
from conlog.core.config import LogConfig
from conlog.core.logging import Logger, get_threshold, logger, set_threshold, source_basename
from conlog.ui.prompt import select_option, select_severity

__all__ = [
    "ConlogError", "FormatArgumentError", "InvalidSeverityError", "PromptArgumentError",
    "LEVEL_METADATA", "Severity", "LogConfig", "Logger", "logger",
    "get_threshold", "set_threshold", "source_basename",
    "select_option", "select_severity",
]
