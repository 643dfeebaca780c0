"""Capability interface over the host audio subsystem."""

from typing import Optional, Protocol

from ..models import Direction


class AudioHardware(Protocol):
    """Low-level calls the switcher needs from the host.

    Implementations raise ``HardwareQueryError`` when a call fails.
    ``device_name`` returns None instead of raising for devices without a
    resolvable name.
    """

    def device_ids(self) -> list[int]: ...

    def stream_directions(self, device_id: int) -> set[Direction]: ...

    def device_name(self, device_id: int) -> Optional[str]: ...

    def default_device_id(self, direction: Direction) -> int: ...

    def set_default_device_id(self, direction: Direction, device_id: int) -> None: ...

    def set_system_output_device_id(self, device_id: int) -> None: ...
