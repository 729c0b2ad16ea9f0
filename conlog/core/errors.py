"""
Error classes for clearer exception sources.
"""
from __future__ import annotations

class ConlogError(Exception):
    pass

class InvalidSeverityError(ConlogError, ValueError):
    def __init__(self, value: object):
        super().__init__(f"Unknown severity: {value!r}")
        self.value = value

class FormatArgumentError(ConlogError, TypeError):
    def __init__(self, template: str, args: tuple, detail: str):
        super().__init__(f"Cannot format {template!r} with {len(args)} argument(s): {detail}")
        self.template = template
        self.args_given = args
        self.detail = detail

class PromptArgumentError(ConlogError, ValueError):
    pass
