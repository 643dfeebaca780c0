"""Device directory over an AudioHardware backend."""

import logging

from ..constants import SYNC_POLICY_ABORT
from ..exceptions import HardwareQueryError, SoundEffectsSyncError
from ..models import Device, Direction, SyncFailurePolicy
from .hardware import AudioHardware

logger = logging.getLogger(__name__)


class DeviceDirectory:
    """Lists, resolves and switches devices for one direction at a time.

    Args:
        hardware: Host audio backend.
        sync_sound_effects_output: Mirror output switches to the system
            sound effects device.
        sync_failure_policy: "abort" raises SoundEffectsSyncError when the
            mirror write fails, "ignore" logs a warning and keeps the
            primary switch result.
    """

    def __init__(
        self,
        hardware: AudioHardware,
        sync_sound_effects_output: bool = False,
        sync_failure_policy: SyncFailurePolicy = SYNC_POLICY_ABORT,
    ):
        self.hardware = hardware
        self.sync_sound_effects_output = sync_sound_effects_output
        self.sync_failure_policy = sync_failure_policy

    def list_devices(self, direction: Direction) -> list[Device]:
        """Return devices with at least one stream in ``direction``.

        Enumeration order is kept. Devices without a name are skipped.
        """
        devices: list[Device] = []
        for device_id in self.hardware.device_ids():
            if direction not in self.hardware.stream_directions(device_id):
                continue
            name = self.hardware.device_name(device_id)
            if name is None:
                logger.debug("skip device %d: no name", device_id)
                continue
            devices.append(Device(name=name, id=device_id))
        return devices

    def resolve(self, device_id: int) -> Device:
        name = self.hardware.device_name(device_id)
        if name is None:
            raise HardwareQueryError(f"Unable to get name for device ID {device_id}")
        return Device(name=name, id=device_id)

    def default_device(self, direction: Direction) -> Device:
        device_id = self.hardware.default_device_id(direction)
        return self.resolve(device_id)

    def switch(self, direction: Direction, device_id: int) -> None:
        """Make ``device_id`` the default for ``direction`` without a lookup.

        Raises:
            HardwareQueryError: The host rejected the switch.
            SoundEffectsSyncError: The sound effects mirror failed under
                the "abort" policy.
        """
        logger.debug("set default %s device: %d", direction.value, device_id)
        self.hardware.set_default_device_id(direction, device_id)

        if direction == Direction.OUTPUT and self.sync_sound_effects_output:
            self._sync_sound_effects(device_id)

    def set_default(self, direction: Direction, device_id: int) -> Device:
        """Make ``device_id`` the default for ``direction``.

        Returns:
            The device as named after the switch.
        """
        self.switch(direction, device_id)
        return self.resolve(device_id)

    def _sync_sound_effects(self, device_id: int) -> None:
        try:
            self.hardware.set_system_output_device_id(device_id)
        except HardwareQueryError as e:
            if self.sync_failure_policy == SYNC_POLICY_ABORT:
                raise SoundEffectsSyncError(
                    f"Unable to set sound effects output to {device_id}: {e.message}"
                ) from e
            logger.warning(
                "Sound effects output not synced to %d: %s", device_id, e.message
            )
