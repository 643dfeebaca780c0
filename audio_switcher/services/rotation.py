"""Rotation of the default device through the favorites list."""

import logging
from collections.abc import Sequence
from typing import Optional

from ..exceptions import (
    DeviceNotFound,
    EmptyFavoritesError,
    HardwareQueryError,
    NoAvailableDeviceError,
)
from ..models import Device, Direction
from .directory import DeviceDirectory
from .selector import resolve_by_name

logger = logging.getLogger(__name__)


def next_start_index(names: Sequence[str], current_name: Optional[str]) -> int:
    """Index right after the current default, or 0 if it is unset or not a favorite."""
    if current_name is None:
        return 0
    try:
        return names.index(current_name) + 1
    except ValueError:
        return 0


def rotate_favorites(
    directory: DeviceDirectory,
    direction: Direction,
    names: Sequence[str],
) -> Device:
    """Switch to the next available favorite after the current default.

    Scans the list at most once, wrapping at the end. Favorites that are
    not connected or whose switch is rejected are skipped.

    Args:
        directory: Device directory to query and switch with.
        direction: Direction to rotate.
        names: Favorite device names in rotation order.

    Returns:
        The device that is now the default.

    Raises:
        EmptyFavoritesError: ``names`` is empty.
        NoAvailableDeviceError: No favorite could be switched to.
    """
    if not names:
        raise EmptyFavoritesError("No devices in list")

    try:
        current_name = directory.default_device(direction).name
    except HardwareQueryError as e:
        logger.info("no current %s default: %s", direction.value, e.message)
        current_name = None

    available = directory.list_devices(direction)
    count = len(names)
    start = next_start_index(names, current_name)

    for offset in range(count):
        candidate = names[(start + offset) % count]
        try:
            device = resolve_by_name(available, candidate)
        except DeviceNotFound:
            logger.info("skip %r: not available", candidate)
            continue
        try:
            directory.switch(direction, device.id)
        except HardwareQueryError as e:
            logger.info("skip %r: %s", candidate, e.message)
            continue
        # already switched, so a failed lookup is not a candidate failure
        return directory.resolve(device.id)

    raise NoAvailableDeviceError("No available devices found.")
