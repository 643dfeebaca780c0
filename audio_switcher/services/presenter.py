"""Rendering of presentation items for the launcher."""

from collections.abc import Iterable

from ..constants import DEFAULT_ICONS_DIR, ICON_SELECTED
from ..models import (
    AlfredIcon,
    AlfredItem,
    Direction,
    PresentationItem,
    ScriptFilterResponse,
)


def icon_path(direction: Direction, icon_hint: str, icons_dir: str = DEFAULT_ICONS_DIR) -> str:
    """Return ``<dir>/output_selected.png``, ``<dir>/output.png`` etc."""
    suffix = "_selected" if icon_hint == ICON_SELECTED else ""
    return f"{icons_dir.rstrip('/')}/{direction.value}{suffix}.png"


def to_presentation_record(
    item: PresentationItem,
    direction: Direction,
    icons_dir: str = DEFAULT_ICONS_DIR,
) -> AlfredItem:
    return AlfredItem(
        title=item.display_title,
        uid=item.raw_name,
        autocomplete=item.display_title,
        arg=str(item.device_id),
        icon=AlfredIcon(path=icon_path(direction, item.icon_hint, icons_dir)),
    )


def to_script_filter_response(
    items: Iterable[PresentationItem],
    direction: Direction,
    icons_dir: str = DEFAULT_ICONS_DIR,
) -> ScriptFilterResponse:
    return ScriptFilterResponse(
        items=[to_presentation_record(item, direction, icons_dir) for item in items]
    )
