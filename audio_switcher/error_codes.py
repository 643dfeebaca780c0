"""Error codes for the audio device switcher.

Each code maps to a process exit status, in the same way the web API of
a long-running service would map its codes to HTTP statuses. The CLI is
the only place where the mapping is applied.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(str, Enum):
    """Error category classification.

    Categories are used for:
    - Grouping related errors
    - Choosing the exit status of the CLI
    - Logging
    """

    HARDWARE = "hardware"
    LOOKUP = "lookup"
    VALIDATION = "validation"
    FAVORITES = "favorites"
    INTERNAL = "internal"


class ErrorCode(str, Enum):
    """Error codes raised by the switcher components."""

    # Hardware (host audio subsystem)
    HARDWARE_QUERY_FAILED = "HARDWARE_QUERY_FAILED"
    HARDWARE_SYNC_FAILED = "HARDWARE_SYNC_FAILED"

    # Lookup
    DEVICE_NOT_FOUND = "DEVICE_NOT_FOUND"
    INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"

    # Validation
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # Favorites rotation
    FAVORITES_EMPTY = "FAVORITES_EMPTY"
    NO_AVAILABLE_DEVICE = "NO_AVAILABLE_DEVICE"


@dataclass(frozen=True)
class ErrorMapping:
    """Mapping from error code to CLI exit details."""

    exit_code: int
    category: ErrorCategory
    title: str


# Exit status 2 is shared with argparse usage errors
ERROR_MAPPINGS: dict[ErrorCode, ErrorMapping] = {
    ErrorCode.HARDWARE_QUERY_FAILED: ErrorMapping(
        3, ErrorCategory.HARDWARE, "Audio Hardware Query Failed"
    ),
    ErrorCode.HARDWARE_SYNC_FAILED: ErrorMapping(
        3, ErrorCategory.HARDWARE, "Sound Effects Output Sync Failed"
    ),
    ErrorCode.DEVICE_NOT_FOUND: ErrorMapping(
        4, ErrorCategory.LOOKUP, "Device Not Found"
    ),
    ErrorCode.INDEX_OUT_OF_RANGE: ErrorMapping(
        5, ErrorCategory.LOOKUP, "Index Out Of Range"
    ),
    ErrorCode.INVALID_ARGUMENT: ErrorMapping(
        2, ErrorCategory.VALIDATION, "Invalid Argument"
    ),
    ErrorCode.FAVORITES_EMPTY: ErrorMapping(
        6, ErrorCategory.FAVORITES, "No Devices In Favorites"
    ),
    ErrorCode.NO_AVAILABLE_DEVICE: ErrorMapping(
        7, ErrorCategory.FAVORITES, "No Available Devices Found"
    ),
}

# Default mapping for unknown error codes
_DEFAULT_MAPPING = ErrorMapping(1, ErrorCategory.INTERNAL, "Internal Error")


def get_error_mapping(error_code: str) -> ErrorMapping:
    """Get error mapping for a given error code string.

    Args:
        error_code: Error code string (e.g., "DEVICE_NOT_FOUND")

    Returns:
        ErrorMapping with exit_code, category, and title.
        Returns default 1/INTERNAL mapping for unknown codes.
    """
    try:
        code = ErrorCode(error_code)
        return ERROR_MAPPINGS.get(code, _DEFAULT_MAPPING)
    except ValueError:
        return _DEFAULT_MAPPING
