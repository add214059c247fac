from __future__ import annotations

import pytest

from fakes import FakePulse, FakeSinkInfo


@pytest.fixture
def fake_pulse() -> FakePulse:
    return FakePulse(
        sinks=[
            FakeSinkInfo(0, "alsa_output.pci-0000_00_1f.3.analog-stereo", "Built-in Audio Analog Stereo"),
            FakeSinkInfo(1, "alsa_output.usb-Astro_A50-00.game", "Astro A50 Game"),
            FakeSinkInfo(2, "alsa_output.pci-0000_01_00.1.hdmi-stereo", "HDMI Monitor"),
        ],
        default_sink_name="alsa_output.pci-0000_00_1f.3.analog-stereo",
    )
