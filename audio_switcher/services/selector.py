"""Device selection: blocklist filtering, aliasing and lookups."""

from collections.abc import Collection, Mapping, Sequence

from ..constants import ICON_SELECTED, ICON_UNSELECTED
from ..exceptions import DeviceNotFound, IndexOutOfRange
from ..models import Device, Direction, PresentationItem


def presentation_set(
    direction: Direction,
    raw_devices: Sequence[Device],
    blocklist: Collection[str],
    alias_map: Mapping[str, str],
    default_device: Device,
) -> list[PresentationItem]:
    """Build the annotated device list for display.

    Blocklisted names (exact, case-sensitive) are dropped. Order follows
    ``raw_devices``.
    """
    items: list[PresentationItem] = []
    for device in raw_devices:
        if device.name in blocklist:
            continue
        is_default = device.id == default_device.id
        items.append(
            PresentationItem(
                display_title=alias_map.get(device.name, device.name),
                raw_name=device.name,
                device_id=device.id,
                is_default=is_default,
                icon_hint=ICON_SELECTED if is_default else ICON_UNSELECTED,
            )
        )
    return items


def resolve_by_name(devices: Sequence[Device], name: str) -> Device:
    for device in devices:
        if device.name == name:
            return device
    raise DeviceNotFound(f"Device not found: {name}")


def resolve_by_index(names: Sequence[str], index: int) -> str:
    """Return the name at ``index``.

    Negative indexes are rejected rather than counted from the end.
    """
    if index < 0 or index >= len(names):
        raise IndexOutOfRange(
            f"Invalid index {index} for a list of {len(names)} device(s)"
        )
    return names[index]
