# rotation.py
from __future__ import annotations

from typing import Sequence

from errors import NoMatchError
from models import DeviceRecord


def next_device(filtered: Sequence[DeviceRecord], current: DeviceRecord) -> DeviceRecord:
    """
    Pick the device after `current` in `filtered`, wrapping to the front.

    Devices are compared by name. If `current` is not in `filtered`, the first
    filtered device is picked.
    """
    if not filtered:
        raise NoMatchError("no matching devices found")

    target = 0
    for i, dev in enumerate(filtered):
        if dev.name == current.name:
            target = (i + 1) % len(filtered)
            break
    return filtered[target]
