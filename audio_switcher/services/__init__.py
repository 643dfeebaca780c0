"""Services for the audio device switcher."""

from .config import load_settings, parse_blocklist
from .directory import DeviceDirectory
from .hardware import AudioHardware
from .lists import alias_map, favorite_names, parse_favorites, parse_lines
from .presenter import icon_path, to_presentation_record, to_script_filter_response
from .rotation import rotate_favorites
from .selector import presentation_set, resolve_by_index, resolve_by_name
from .switch_audio_source import SwitchAudioSourceHardware

__all__ = [
    # config
    "load_settings",
    "parse_blocklist",
    # directory
    "DeviceDirectory",
    # hardware
    "AudioHardware",
    "SwitchAudioSourceHardware",
    # lists
    "alias_map",
    "favorite_names",
    "parse_favorites",
    "parse_lines",
    # presenter
    "icon_path",
    "to_presentation_record",
    "to_script_filter_response",
    # rotation
    "rotate_favorites",
    # selector
    "presentation_set",
    "resolve_by_index",
    "resolve_by_name",
]
