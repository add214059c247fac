# device_filter.py
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, fields
from typing import Iterable, List, Optional, Sequence, Tuple

from errors import PatternError
from log_setup import TRACE
from models import DeviceRecord, FilterConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PatternSet:
    """A group of regexes queried together: does any of them match a string?"""

    sources: Tuple[str, ...]
    compiled: Tuple[re.Pattern[str], ...]

    @classmethod
    def compile(cls, field: str, patterns: Sequence[str]) -> Optional[PatternSet]:
        if not patterns:
            return None
        out: List[re.Pattern[str]] = []
        for p in patterns:
            try:
                out.append(re.compile(p))
            except re.error as e:
                raise PatternError(field, p, str(e)) from e
        return cls(sources=tuple(patterns), compiled=tuple(out))

    def matches(self, text: str) -> bool:
        return any(rx.search(text) for rx in self.compiled)


@dataclass(frozen=True)
class DeviceFilter:
    """
    Include/exclude predicate over devices.

    Includes and excludes each use "first configured wins": when name patterns
    exist the description patterns of the same kind are never consulted, and the
    description patterns only apply when there are no name patterns at all.
    """

    include_name: Optional[PatternSet] = None
    include_desc: Optional[PatternSet] = None
    exclude_name: Optional[PatternSet] = None
    exclude_desc: Optional[PatternSet] = None
    trace: bool = False

    @classmethod
    def from_config(cls, conf: FilterConfig, trace: bool = False) -> DeviceFilter:
        return cls(
            include_name=PatternSet.compile("include_names", conf.include_names),
            include_desc=PatternSet.compile("include_descriptions", conf.include_descriptions),
            exclude_name=PatternSet.compile("exclude_names", conf.exclude_names),
            exclude_desc=PatternSet.compile("exclude_descriptions", conf.exclude_descriptions),
            trace=trace,
        )

    def filter(self, dev: DeviceRecord) -> bool:
        if self.include_name is not None:
            want_include = self.include_name.matches(dev.name)
        elif self.include_desc is not None:
            want_include = self.include_desc.matches(dev.description)
        else:
            # no include patterns: include every device
            want_include = True
        if self.trace:
            logger.log(TRACE, "want_include(%s) = %s", dev.name, want_include)

        if self.exclude_name is not None:
            want_exclude = self.exclude_name.matches(dev.name)
        elif self.exclude_desc is not None:
            want_exclude = self.exclude_desc.matches(dev.description)
        else:
            want_exclude = False
        if self.trace:
            logger.log(TRACE, "want_exclude(%s) = %s", dev.name, want_exclude)

        return want_include and not want_exclude

    def apply(self, devices: Iterable[DeviceRecord]) -> List[DeviceRecord]:
        return [d for d in devices if self.filter(d)]

    def describe(self) -> str:
        lines: List[str] = []
        for f in fields(self):
            if f.name == "trace":
                continue
            ps = getattr(self, f.name)
            shown = "(none)" if ps is None else ", ".join(repr(s) for s in ps.sources)
            lines.append(f"  {f.name}: {shown}")
        return "\n".join(lines)
