from __future__ import annotations
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from conlog.core.errors import InvalidSeverityError
from conlog.core.levels import Severity

ENV_COLOR_DISABLED = "CONLOG_COLOR_DISABLED"
ENV_FLUSH = "CONLOG_FLUSH"
ENV_DISABLED = "CONLOG_DISABLED"
ENV_LEVEL = "CONLOG_LEVEL"

_TRUTHY = {"1", "true", "yes", "on"}

def _flag(environ: Mapping[str, str], name: str) -> bool:
    return environ.get(name, "").strip().lower() in _TRUTHY

@dataclass
class LogConfig:
    colors: bool = True                                   # ANSI colors around the level label
    flush: bool = False                                   # flush the stream after every line
    enabled: bool = True                                  # False turns every call into a no-op
    threshold: Union[Severity, int, str] = Severity.INFO  # lowest severity that is printed

    def normalize(self) -> bool:
        """Coerce fields to their expected types.

        Returns False when the threshold could not be parsed and was reset to INFO.
        """
        self.colors = bool(self.colors)
        self.flush = bool(self.flush)
        self.enabled = bool(self.enabled)
        try:
            self.threshold = Severity.parse(self.threshold)
        except InvalidSeverityError:
            self.threshold = Severity.INFO
            return False
        return True

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LogConfig":
        """Build a config from the CONLOG_* environment variables.

        The threshold is kept as given; Logger normalizes it and warns when it is invalid.
        """
        env = os.environ if environ is None else environ
        return cls(
            colors=not _flag(env, ENV_COLOR_DISABLED),
            flush=_flag(env, ENV_FLUSH),
            enabled=not _flag(env, ENV_DISABLED),
            threshold=env.get(ENV_LEVEL, "").strip() or Severity.INFO,
        )
