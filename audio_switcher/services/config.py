"""Configuration loading from workflow environment variables."""

import os
from collections.abc import Mapping
from typing import Optional

from pydantic import ValidationError

from ..constants import (
    DEFAULT_ICONS_DIR,
    ENV_BLOCKLIST,
    ENV_ICONS_DIR,
    ENV_INPUT_FAVORITES,
    ENV_OUTPUT_FAVORITES,
    ENV_SWITCH_AUDIO_SOURCE_PATH,
    ENV_SYNC_FAILURE_POLICY,
    ENV_SYNC_SOUND_EFFECTS,
    SWITCH_AUDIO_SOURCE_BIN,
    SYNC_POLICIES,
    SYNC_POLICY_ABORT,
)
from ..exceptions import InvalidArgument
from ..models import SwitcherSettings
from .lists import parse_favorites, parse_lines


def _env_str(environ: Mapping[str, str], name: str, default: str) -> str:
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip() or default


def _env_bool(environ: Mapping[str, str], name: str, default: bool) -> bool:
    raw = environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def parse_blocklist(raw: str) -> frozenset[str]:
    return frozenset(parse_lines(raw))


def load_settings(environ: Optional[Mapping[str, str]] = None) -> SwitcherSettings:
    """Build settings from workflow variables (``os.environ`` by default).

    Raises:
        InvalidArgument: If a variable holds an unsupported value.
    """
    if environ is None:
        environ = os.environ

    policy = _env_str(environ, ENV_SYNC_FAILURE_POLICY, SYNC_POLICY_ABORT).lower()
    if policy not in SYNC_POLICIES:
        raise InvalidArgument(
            f"{ENV_SYNC_FAILURE_POLICY} must be one of {', '.join(SYNC_POLICIES)}: {policy}"
        )

    input_favorites, _ = parse_favorites(environ.get(ENV_INPUT_FAVORITES, ""))
    output_favorites, _ = parse_favorites(environ.get(ENV_OUTPUT_FAVORITES, ""))

    try:
        return SwitcherSettings(
            blocklist=parse_blocklist(environ.get(ENV_BLOCKLIST, "")),
            input_favorites=input_favorites,
            output_favorites=output_favorites,
            sync_sound_effects_output=_env_bool(environ, ENV_SYNC_SOUND_EFFECTS, False),
            sync_failure_policy=policy,
            switch_audio_source_path=_env_str(
                environ, ENV_SWITCH_AUDIO_SOURCE_PATH, SWITCH_AUDIO_SOURCE_BIN
            ),
            icons_dir=_env_str(environ, ENV_ICONS_DIR, DEFAULT_ICONS_DIR),
        )
    except ValidationError as e:
        raise InvalidArgument(f"Invalid configuration: {e}") from e
