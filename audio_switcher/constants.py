"""Constants for the audio device switcher."""

# ============================================================================
# Environment (workflow variables)
# ============================================================================

ENV_INPUT_FAVORITES = "inputs"
ENV_OUTPUT_FAVORITES = "outputs"
ENV_BLOCKLIST = "ignorelist"
ENV_SYNC_SOUND_EFFECTS = "sync_sound_effects_output"
ENV_SYNC_FAILURE_POLICY = "sync_sound_effects_failure"
ENV_SWITCH_AUDIO_SOURCE_PATH = "switch_audio_source_path"
ENV_ICONS_DIR = "icons_dir"

# ============================================================================
# Sound effects sync
# ============================================================================

SYNC_POLICY_ABORT = "abort"
SYNC_POLICY_IGNORE = "ignore"
SYNC_POLICIES: tuple[str, ...] = (SYNC_POLICY_ABORT, SYNC_POLICY_IGNORE)

# ============================================================================
# SwitchAudioSource backend
# ============================================================================

SWITCH_AUDIO_SOURCE_BIN = "SwitchAudioSource"
SUBPROCESS_TIMEOUT_SEC = 5
SYSTEM_DEVICE_TYPE = "system"  # sound effects output

# AudioDeviceID is a UInt32
MAX_DEVICE_ID = 0xFFFFFFFF

# ============================================================================
# Presentation
# ============================================================================

DEFAULT_ICONS_DIR = "./icons"
ICON_SELECTED = "selected"
ICON_UNSELECTED = "unselected"
