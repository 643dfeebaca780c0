"""Command line entry point.

Usage:
    audio-switcher [-v] <command> <input|output> [args...]

Output for the launcher goes to stdout; logs and errors go to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Mapping

from .constants import MAX_DEVICE_ID
from .exceptions import InvalidArgument, SwitcherError
from .models import Direction, SwitcherSettings
from .services import (
    AudioHardware,
    DeviceDirectory,
    SwitchAudioSourceHardware,
    alias_map,
    favorite_names,
    load_settings,
    parse_blocklist,
    parse_favorites,
    presentation_set,
    resolve_by_index,
    resolve_by_name,
    rotate_favorites,
    to_script_filter_response,
)

logger = logging.getLogger(__name__)

DIRECTIONS = [direction.value for direction in Direction]


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="audio-switcher",
        description="List and switch the default audio input/output device",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="verbose logging")
    commands = parser.add_subparsers(dest="command", required=True)

    def add(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("direction", choices=DIRECTIONS)
        return sub

    sub = add("list", "print devices as launcher JSON")
    sub.add_argument(
        "blocklist",
        nargs="?",
        default=None,
        help="device names to hide, one per line (overrides ignorelist)",
    )

    sub = add("switch_by_id", "switch to a device id")
    sub.add_argument("device_id")

    sub = add("switch_by_name", "switch to the device at a list position")
    sub.add_argument("index")
    sub.add_argument(
        "device_list",
        nargs="?",
        default=None,
        help="device names, one per line (defaults to the favorites)",
    )

    add("print_device_names", "print device names, one per line")
    add("rotate_favorites", "switch to the next available favorite")
    add("current", "print the default device name")
    return parser


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def parse_device_id(raw: str) -> int:
    """Parse a device id argument (unsigned 32-bit decimal)."""
    value = raw.strip()
    if not value.isdecimal():
        raise InvalidArgument(f"Invalid Device ID String: {raw!r}")
    device_id = int(value)
    if device_id > MAX_DEVICE_ID:
        raise InvalidArgument(f"Device ID out of range: {raw!r}")
    return device_id


def parse_index(raw: str) -> int:
    try:
        return int(raw.strip())
    except ValueError as e:
        raise InvalidArgument(f"Invalid Device Index: {raw!r}") from e


# ============================================================================
# Commands
# ============================================================================


def _cmd_list(
    args: argparse.Namespace,
    direction: Direction,
    settings: SwitcherSettings,
    directory: DeviceDirectory,
) -> str:
    blocklist = (
        parse_blocklist(args.blocklist)
        if args.blocklist is not None
        else settings.blocklist
    )
    aliases = alias_map(settings.favorites_for(direction))
    default = directory.default_device(direction)
    devices = directory.list_devices(direction)
    items = presentation_set(direction, devices, blocklist, aliases, default)
    response = to_script_filter_response(items, direction, settings.icons_dir)
    return response.model_dump_json()


def _cmd_switch_by_id(
    args: argparse.Namespace,
    direction: Direction,
    settings: SwitcherSettings,
    directory: DeviceDirectory,
) -> str:
    device_id = parse_device_id(args.device_id)
    return directory.set_default(direction, device_id).name


def _cmd_switch_by_name(
    args: argparse.Namespace,
    direction: Direction,
    settings: SwitcherSettings,
    directory: DeviceDirectory,
) -> str:
    index = parse_index(args.index)
    if args.device_list is not None:
        entries, _ = parse_favorites(args.device_list)
    else:
        entries = settings.favorites_for(direction)
    name = resolve_by_index(favorite_names(entries), index)
    device = resolve_by_name(directory.list_devices(direction), name)
    return directory.set_default(direction, device.id).name


def _cmd_print_device_names(
    args: argparse.Namespace,
    direction: Direction,
    settings: SwitcherSettings,
    directory: DeviceDirectory,
) -> str:
    return "\n".join(device.name for device in directory.list_devices(direction))


def _cmd_rotate_favorites(
    args: argparse.Namespace,
    direction: Direction,
    settings: SwitcherSettings,
    directory: DeviceDirectory,
) -> str:
    names = favorite_names(settings.favorites_for(direction))
    return rotate_favorites(directory, direction, names).name


def _cmd_current(
    args: argparse.Namespace,
    direction: Direction,
    settings: SwitcherSettings,
    directory: DeviceDirectory,
) -> str:
    return directory.default_device(direction).name


CommandHandler = Callable[
    [argparse.Namespace, Direction, SwitcherSettings, DeviceDirectory], str
]

COMMANDS: dict[str, CommandHandler] = {
    "list": _cmd_list,
    "switch_by_id": _cmd_switch_by_id,
    "switch_by_name": _cmd_switch_by_name,
    "print_device_names": _cmd_print_device_names,
    "rotate_favorites": _cmd_rotate_favorites,
    "current": _cmd_current,
}


def main(
    argv: list[str] | None = None,
    *,
    hardware: AudioHardware | None = None,
    environ: Mapping[str, str] | None = None,
) -> int:
    args = _parse_args(argv)
    _setup_logging(args.verbose)

    try:
        settings = load_settings(environ)
        if hardware is None:
            hardware = SwitchAudioSourceHardware(settings.switch_audio_source_path)
        directory = DeviceDirectory(
            hardware,
            sync_sound_effects_output=settings.sync_sound_effects_output,
            sync_failure_policy=settings.sync_failure_policy,
        )
        output = COMMANDS[args.command](
            args, Direction(args.direction), settings, directory
        )
    except SwitcherError as e:
        logger.error("%s", e)
        return e.exit_code

    if output:
        print(output)
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry
    sys.exit(main())
