"""Error types raised by loader infrastructure."""

from logeye.core.errors import LogeyeError


class ChecksModuleLoadError(LogeyeError):
    """Raised when a checks module cannot be imported or exposes no suite."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load checks module: {reason}")
