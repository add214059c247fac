# models.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Tuple


FILTER_FIELDS = ("include_names", "include_descriptions", "exclude_names", "exclude_descriptions")


@dataclass(frozen=True)
class DeviceRecord:
    index: int
    name: str
    description: str

    @classmethod
    def from_raw(cls, index: int, name: Optional[str] = None, description: Optional[str] = None) -> DeviceRecord:
        return cls(
            index=index,
            name=name or f"[unknown name {index}]",
            description=description or f"[unknown description {index}]",
        )

    @classmethod
    def from_sink_info(cls, info: Any) -> DeviceRecord:
        # pulsectl leaves fields it did not receive as None
        return cls.from_raw(
            int(info.index),
            getattr(info, "name", None),
            getattr(info, "description", None),
        )

    def __str__(self) -> str:
        return f"{self.description} ({self.index}, {self.name})"


@dataclass(frozen=True)
class FilterConfig:
    include_names: Tuple[str, ...] = ()
    include_descriptions: Tuple[str, ...] = ()
    exclude_names: Tuple[str, ...] = ()
    exclude_descriptions: Tuple[str, ...] = ()
