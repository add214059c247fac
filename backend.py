# backend.py
from __future__ import annotations

import logging
from typing import Any, List, Optional

import pulsectl

from errors import DeviceListError, NoDefaultError, ServerConnectError, SetDefaultError
from models import DeviceRecord

logger = logging.getLogger(__name__)


class PulseSinkBackend:
    """
    Sink listing and default-sink switching over the PulseAudio protocol.

    Works against PulseAudio itself and against pipewire-pulse.
    """

    def __init__(self, client_name: str = "pulse-switcher", pulse: Optional[Any] = None) -> None:
        self._client_name = client_name
        self._pulse: Optional[Any] = pulse

    def connect(self) -> Any:
        if self._pulse is None:
            try:
                self._pulse = pulsectl.Pulse(self._client_name)
            except pulsectl.PulseError as e:
                raise ServerConnectError("failed to connect to the sound server") from e
        return self._pulse

    def close(self) -> None:
        if self._pulse is not None:
            self._pulse.close()
        self._pulse = None

    def __enter__(self) -> PulseSinkBackend:
        return self

    def __exit__(self, *exc: Any) -> None:
        self.close()

    def server_label(self) -> str:
        pulse = self.connect()
        try:
            info = pulse.server_info()
        except pulsectl.PulseError as e:
            # display only
            logger.warning("failed to query server info: %s", e)
            return "unknown server"
        name = (getattr(info, "server_name", None) or "").strip() or "unknown server"
        version = (getattr(info, "server_version", None) or "").strip()
        return f"{name} {version}" if version else name

    def list_devices(self) -> List[DeviceRecord]:
        pulse = self.connect()
        try:
            sinks = pulse.sink_list()
        except pulsectl.PulseError as e:
            raise DeviceListError("failed to list devices") from e
        out = [DeviceRecord.from_sink_info(s) for s in sinks]
        logger.debug("server returned %d sinks", len(out))
        return out

    def get_default_device(self) -> DeviceRecord:
        pulse = self.connect()
        try:
            name = pulse.server_info().default_sink_name
            if not name:
                raise NoDefaultError("failed to get default device: server reports no default sink")
            sink = pulse.get_sink_by_name(name)
        except pulsectl.PulseError as e:
            raise NoDefaultError("failed to get default device") from e
        return DeviceRecord.from_sink_info(sink)

    def set_default_device(self, name: str) -> bool:
        """
        Ask the server to make sink `name` the default, then read the default
        back. Returns False when the server accepted the request but still
        reports another default sink.
        """
        pulse = self.connect()
        try:
            pulse.sink_default_set(name)
            current = pulse.server_info().default_sink_name
        except pulsectl.PulseError as e:
            raise SetDefaultError("failed setting default device") from e
        if current != name:
            logger.debug("default sink is %r after requesting %r", current, name)
        return current == name
