"""Data models for the audio device switcher."""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .constants import DEFAULT_ICONS_DIR, SWITCH_AUDIO_SOURCE_BIN


class Direction(str, Enum):
    """Stream direction a device is considered for."""

    INPUT = "input"
    OUTPUT = "output"


# ============================================================================
# Core Types
# ============================================================================


@dataclass(frozen=True)
class Device:
    """A device as reported by one enumeration call.

    ``id`` is the host-assigned identifier and is only stable within a
    boot session.
    """

    name: str
    id: int


@dataclass(frozen=True)
class FavoriteEntry:
    """One ``name[;alias]`` line of user configuration."""

    name: str
    alias: str


@dataclass(frozen=True)
class PresentationItem:
    """A device annotated for display."""

    display_title: str
    raw_name: str
    device_id: int
    is_default: bool
    icon_hint: str


# ============================================================================
# Settings
# ============================================================================

SyncFailurePolicy = Literal["abort", "ignore"]


class SwitcherSettings(BaseModel):
    """Configuration injected into the switcher for one invocation."""

    model_config = ConfigDict(frozen=True)

    blocklist: frozenset[str] = frozenset()
    input_favorites: list[FavoriteEntry] = Field(default_factory=list)
    output_favorites: list[FavoriteEntry] = Field(default_factory=list)
    sync_sound_effects_output: bool = False
    sync_failure_policy: SyncFailurePolicy = "abort"
    switch_audio_source_path: str = SWITCH_AUDIO_SOURCE_BIN
    icons_dir: str = DEFAULT_ICONS_DIR

    def favorites_for(self, direction: Direction) -> list[FavoriteEntry]:
        if direction == Direction.INPUT:
            return self.input_favorites
        return self.output_favorites


# ============================================================================
# Launcher (Alfred script filter) Models
# ============================================================================


class AlfredIcon(BaseModel):
    """Icon reference relative to the workflow directory."""

    path: str


class AlfredItem(BaseModel):
    """One selectable row in the launcher."""

    title: str
    uid: str
    autocomplete: str
    arg: str
    icon: AlfredIcon


class ScriptFilterResponse(BaseModel):
    """Top-level document printed by the ``list`` command."""

    items: list[AlfredItem] = Field(default_factory=list)
