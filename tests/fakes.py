from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import pulsectl

from models import DeviceRecord


@dataclass
class FakeSinkInfo:
    index: int
    name: Optional[str]
    description: Optional[str]


@dataclass
class FakeServerInfo:
    default_sink_name: Optional[str]
    server_name: str = "pulseaudio"
    server_version: str = "15.0.0"


@dataclass
class FakePulse:
    """Stands in for a pulsectl.Pulse connection."""

    sinks: List[FakeSinkInfo] = field(default_factory=list)
    default_sink_name: Optional[str] = None
    fail_list: bool = False
    fail_set: bool = False
    fail_info: bool = False
    ignore_set: bool = False
    closed: bool = False

    def sink_list(self) -> List[FakeSinkInfo]:
        if self.fail_list:
            raise pulsectl.PulseOperationFailed(-1)
        return list(self.sinks)

    def server_info(self) -> FakeServerInfo:
        if self.fail_info:
            raise pulsectl.PulseOperationFailed(-1)
        return FakeServerInfo(default_sink_name=self.default_sink_name)

    def get_sink_by_name(self, name: str) -> FakeSinkInfo:
        for s in self.sinks:
            if s.name == name:
                return s
        raise pulsectl.PulseIndexError(name)

    def sink_default_set(self, name: str) -> None:
        if self.fail_set:
            raise pulsectl.PulseOperationFailed(-1)
        if not self.ignore_set:
            self.default_sink_name = name

    def close(self) -> None:
        self.closed = True


def make_devices(*names: str) -> List[DeviceRecord]:
    return [DeviceRecord(index=i, name=n, description=f"{n} output") for i, n in enumerate(names)]
