# errors.py
from __future__ import annotations

from typing import List, Optional


class SwitcherError(RuntimeError):
    """Base class for every error that ends a pulse-switcher invocation."""


class PatternError(SwitcherError):
    def __init__(self, field: str, pattern: str, reason: str) -> None:
        super().__init__(f"invalid pattern {pattern!r} in {field}: {reason}")
        self.field = field
        self.pattern = pattern


class ConfigLoadError(SwitcherError):
    pass


class ServerConnectError(SwitcherError):
    pass


class DeviceListError(SwitcherError):
    pass


class NoDefaultError(SwitcherError):
    pass


class NoMatchError(SwitcherError):
    pass


class SetDefaultError(SwitcherError):
    pass


def format_error_chain(exc: BaseException) -> str:
    """
    Render `exc` and every exception in its `__cause__` chain as one line,
    outermost context first. A cause whose text the previous message already
    ends with is skipped.
    """
    parts: List[str] = []
    cur: Optional[BaseException] = exc
    while cur is not None:
        msg = str(cur).strip() or type(cur).__name__
        # a message that already ends with its cause's text is not repeated
        if not parts or not parts[-1].endswith(msg):
            parts.append(msg)
        cur = cur.__cause__
    return ": ".join(parts)
