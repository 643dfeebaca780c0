"""Exception types raised by the switcher components.

Components raise these and never terminate the process themselves;
``main()`` turns them into an exit status via ``error_codes``.
"""

from .error_codes import ErrorCode, get_error_mapping


class SwitcherError(Exception):
    """Base class for switcher errors.

    Attributes:
        error_code: Application error code (e.g., "DEVICE_NOT_FOUND")
        message: Human-readable error message
    """

    error_code: ErrorCode = ErrorCode.HARDWARE_QUERY_FAILED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.error_code.value}] {self.message}"

    @property
    def exit_code(self) -> int:
        """Get CLI exit status for this error."""
        return get_error_mapping(self.error_code.value).exit_code

    @property
    def category(self) -> str:
        return get_error_mapping(self.error_code.value).category.value


class HardwareQueryError(SwitcherError):
    """Raised when a host audio call fails or returns something unusable."""

    error_code = ErrorCode.HARDWARE_QUERY_FAILED


class SoundEffectsSyncError(SwitcherError):
    """Raised when mirroring the output switch to sound effects fails.

    Not a HardwareQueryError: by the time it is raised the primary switch
    has already been applied.
    """

    error_code = ErrorCode.HARDWARE_SYNC_FAILED


class DeviceNotFound(SwitcherError):
    error_code = ErrorCode.DEVICE_NOT_FOUND


class IndexOutOfRange(SwitcherError):
    error_code = ErrorCode.INDEX_OUT_OF_RANGE


class InvalidArgument(SwitcherError):
    error_code = ErrorCode.INVALID_ARGUMENT


class EmptyFavoritesError(SwitcherError):
    error_code = ErrorCode.FAVORITES_EMPTY


class NoAvailableDeviceError(SwitcherError):
    error_code = ErrorCode.NO_AVAILABLE_DEVICE
