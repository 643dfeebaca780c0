"""macOS audio hardware access through the SwitchAudioSource CLI.

SwitchAudioSource (switchaudio-osx) wraps the CoreAudio calls this tool
needs. With ``-f json`` it prints one object per device and line:

    {"name": "MacBook Pro Speakers", "type": "output", "id": "73", "uid": "..."}

Devices with both input and output streams are listed once per type with
the same id.
"""

import json
import logging
import subprocess
from typing import Any, Optional, Sequence

from ..constants import (
    SUBPROCESS_TIMEOUT_SEC,
    SWITCH_AUDIO_SOURCE_BIN,
    SYSTEM_DEVICE_TYPE,
)
from ..exceptions import HardwareQueryError
from ..models import Direction

logger = logging.getLogger(__name__)


def parse_device_line(line: str) -> tuple[int, str, str]:
    """Parse one JSON line into (id, name, type).

    Raises:
        HardwareQueryError: If the line is not a device object.
    """
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise HardwareQueryError(f"SwitchAudioSource output is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise HardwareQueryError("SwitchAudioSource output JSON is not an object")

    try:
        device_id = int(data["id"])
    except (KeyError, TypeError, ValueError) as e:
        raise HardwareQueryError(f"SwitchAudioSource device has no usable id: {line}") from e

    name = data.get("name")
    return device_id, name if isinstance(name, str) else "", str(data.get("type", ""))


class SwitchAudioSourceHardware:
    """AudioHardware implementation backed by ``SwitchAudioSource``."""

    def __init__(
        self,
        binary: str = SWITCH_AUDIO_SOURCE_BIN,
        timeout_sec: float = SUBPROCESS_TIMEOUT_SEC,
    ):
        self.binary = binary
        self.timeout_sec = timeout_sec
        self._table: Optional[dict[int, dict[str, Any]]] = None

    def _run(self, args: Sequence[str]) -> str:
        cmd = [self.binary, *args]
        logger.debug("run: %s", " ".join(cmd))
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                timeout=self.timeout_sec,
            )
        except (subprocess.SubprocessError, FileNotFoundError) as e:
            raise HardwareQueryError(f"{self.binary} failed: {e}") from e

        if result.returncode != 0:
            msg = (result.stderr or result.stdout).strip()
            raise HardwareQueryError(f"{self.binary} {' '.join(args)} failed: {msg}")
        return result.stdout

    def _device_table(self) -> dict[int, dict[str, Any]]:
        """Return id -> {"name", "directions"} in enumeration order."""
        if self._table is not None:
            return self._table

        table: dict[int, dict[str, Any]] = {}
        for direction in Direction:
            stdout = self._run(["-a", "-t", direction.value, "-f", "json"])
            for line in stdout.split("\n"):
                if not line.strip():
                    continue
                device_id, name, _ = parse_device_line(line)
                entry = table.setdefault(device_id, {"name": name, "directions": set()})
                entry["directions"].add(direction)
                if not entry["name"]:
                    entry["name"] = name

        self._table = table
        return table

    def _invalidate(self) -> None:
        self._table = None

    def device_ids(self) -> list[int]:
        return list(self._device_table())

    def stream_directions(self, device_id: int) -> set[Direction]:
        entry = self._device_table().get(device_id)
        return set(entry["directions"]) if entry else set()

    def device_name(self, device_id: int) -> Optional[str]:
        entry = self._device_table().get(device_id)
        if not entry or not entry["name"]:
            return None
        return entry["name"]

    def default_device_id(self, direction: Direction) -> int:
        stdout = self._run(["-c", "-t", direction.value, "-f", "json"]).strip()
        if not stdout:
            raise HardwareQueryError(f"Unable to get default {direction.value} device")
        device_id, _, _ = parse_device_line(stdout.split("\n")[0])
        return device_id

    def set_default_device_id(self, direction: Direction, device_id: int) -> None:
        self._run(["-t", direction.value, "-i", str(device_id)])
        self._invalidate()

    def set_system_output_device_id(self, device_id: int) -> None:
        self._run(["-t", SYSTEM_DEVICE_TYPE, "-i", str(device_id)])
        self._invalidate()
