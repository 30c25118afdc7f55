"""Error types raised by context infrastructure."""

from logeye.core.errors import LogeyeError


class ContextLoadError(LogeyeError):
    """Raised when a session context document cannot be read or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load context: {reason}")
