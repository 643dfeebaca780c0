"""pytest configuration and fixtures for Python tests."""

import sys
from pathlib import Path
from typing import Optional

import pytest

# Add project root directory to path for imports
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from audio_switcher.exceptions import HardwareQueryError  # noqa: E402
from audio_switcher.models import Direction  # noqa: E402

IN = Direction.INPUT
OUT = Direction.OUTPUT


class FakeHardware:
    """In-memory AudioHardware.

    Devices are (id, name, directions) tuples; a name of None models a
    device whose name cannot be read.
    """

    def __init__(
        self,
        devices: list[tuple[int, Optional[str], set[Direction]]],
        defaults: Optional[dict[Direction, int]] = None,
        reject_ids: Optional[set[int]] = None,
        fail_system_output: bool = False,
    ):
        self.devices = {device_id: (name, dirs) for device_id, name, dirs in devices}
        self.defaults = dict(defaults or {})
        self.reject_ids = set(reject_ids or ())
        self.fail_system_output = fail_system_output
        self.set_calls: list[tuple[Direction, int]] = []
        self.system_output_calls: list[int] = []

    def device_ids(self) -> list[int]:
        return list(self.devices)

    def stream_directions(self, device_id: int) -> set[Direction]:
        return set(self.devices.get(device_id, (None, set()))[1])

    def device_name(self, device_id: int) -> Optional[str]:
        return self.devices.get(device_id, (None, set()))[0]

    def default_device_id(self, direction: Direction) -> int:
        if direction not in self.defaults:
            raise HardwareQueryError(f"Unable to get default {direction.value} device")
        return self.defaults[direction]

    def set_default_device_id(self, direction: Direction, device_id: int) -> None:
        if device_id in self.reject_ids or device_id not in self.devices:
            raise HardwareQueryError(f"Unable to set default {direction.value} device")
        self.set_calls.append((direction, device_id))
        self.defaults[direction] = device_id

    def set_system_output_device_id(self, device_id: int) -> None:
        if self.fail_system_output:
            raise HardwareQueryError("Unable to set sound effects device")
        self.system_output_calls.append(device_id)


@pytest.fixture
def studio_hardware():
    """A desk setup with a mic, a headset and two speakers."""
    return FakeHardware(
        devices=[
            (84, "MacBook Pro Microphone", {IN}),
            (73, "MacBook Pro Speakers", {OUT}),
            (91, "AirPods Pro", {IN, OUT}),
            (102, "Studio Display Speakers", {OUT}),
            (110, None, {OUT}),
        ],
        defaults={IN: 84, OUT: 73},
    )


@pytest.fixture
def fake_hardware_factory():
    """Build a FakeHardware with custom devices."""
    return FakeHardware
