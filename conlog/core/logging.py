"""
Leveled console logger used across the project.
Prints `[LABEL]: message` lines to stdout, colored through colorama, above a threshold.
Error and critical calls carry the caller's `file:line`.
"""
from __future__ import annotations
import sys
import threading
from dataclasses import replace
from typing import Any, Mapping, Optional, TextIO, Tuple, Union

from colorama import just_fix_windows_console

from conlog.core.config import LogConfig
from conlog.core.errors import FormatArgumentError
from conlog.core.levels import RESET, Severity, level_color, level_label

just_fix_windows_console()

LevelLike = Union[Severity, int, str]

def source_basename(path: str) -> str:
    """Strip directories from `path`, trying `/` first and then `\\`."""
    for sep in ("/", "\\"):
        idx = path.rfind(sep)
        if idx != -1:
            return path[idx + 1:]
    return path

def render_message(template: Any, args: Tuple[Any, ...]) -> str:
    """printf-style rendering. A single mapping argument fills `%(name)s` fields.

    Without arguments the template still goes through `%`, so a literal percent
    sign must be written `%%`.
    """
    text = str(template)
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping):
        values = args[0]
    try:
        return text % values
    except (TypeError, ValueError, KeyError) as e:
        raise FormatArgumentError(text, args, str(e)) from e

def _caller_location(depth: int) -> Tuple[str, int]:
    frame = sys._getframe(depth + 1)
    return frame.f_code.co_filename, frame.f_lineno

def _noop(*args: Any, **kwargs: Any) -> None:
    return None

class Logger:
    """Threshold-filtered console logger.

    The threshold lives on the instance and is guarded by a lock, as is the
    write to the output stream. `stream=None` means the current `sys.stdout`.
    `config` is a normalized copy of the one passed in; its threshold is the
    initial value, `get_threshold()` is the live one.
    """

    def __init__(self, config: Optional[LogConfig] = None, stream: Optional[TextIO] = None):
        self.config = replace(config) if config is not None else LogConfig()
        requested = self.config.threshold
        valid = self.config.normalize()
        self._stream = stream
        self._lock = threading.Lock()
        self._threshold: Severity = self.config.threshold  # type: ignore[assignment]
        if not self.config.enabled:
            # Disabled build: every call below is replaced once, here
            for name in ("log", "log_with_location", "debug", "info", "warning",
                         "warn", "error", "critical", "set_threshold"):
                setattr(self, name, _noop)
            self.get_threshold = lambda: Severity.INFO  # type: ignore[method-assign]
            return
        if not valid:
            self.warning("Unknown log level %r, using INFO", requested)

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def set_threshold(self, level: LevelLike) -> None:
        level = Severity.parse(level)
        with self._lock:
            self._threshold = level

    def get_threshold(self) -> Severity:
        with self._lock:
            return self._threshold

    def is_enabled_for(self, level: Severity) -> bool:
        return self.config.enabled and level >= self.get_threshold()

    def _label(self, level: Any) -> str:
        label = level_label(level)
        if not self.config.colors:
            return f"[{label}]"
        return f"[{level_color(level)}{label}{RESET}]"

    def _write(self, line: str) -> None:
        with self._lock:
            out = self.stream
            out.write(line)
            if self.config.flush:
                out.flush()

    def log(self, level: Severity, template: Any, *args: Any) -> None:
        if level < self.get_threshold():
            return
        self._write(f"{self._label(level)}: {render_message(template, args)}\n")

    def log_with_location(self, level: Severity, file: str, line: int, template: Any, *args: Any) -> None:
        if level < self.get_threshold():
            return
        message = render_message(template, args)
        self._write(f"{self._label(level)} {source_basename(file)}:{line}: {message}\n")

    def debug(self, template: Any, *args: Any) -> None:
        self.log(Severity.DEBUG, template, *args)

    def info(self, template: Any, *args: Any) -> None:
        self.log(Severity.INFO, template, *args)

    def warning(self, template: Any, *args: Any) -> None:
        self.log(Severity.WARNING, template, *args)

    warn = warning

    def error(self, template: Any, *args: Any) -> None:
        file, line = _caller_location(1)
        self.log_with_location(Severity.ERROR, file, line, template, *args)

    def critical(self, template: Any, *args: Any) -> None:
        file, line = _caller_location(1)
        self.log_with_location(Severity.CRITICAL, file, line, template, *args)

logger = Logger(LogConfig.from_env())

def set_threshold(level: LevelLike) -> None:
    logger.set_threshold(level)

def get_threshold() -> Severity:
    return logger.get_threshold()
