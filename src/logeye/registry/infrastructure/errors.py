"""Error types raised by registry infrastructure."""

from logeye.core.errors import LogeyeError


class RegistrationError(LogeyeError):
    """Raised when an item cannot be registered."""

    def __init__(self, registry: str, reason: str) -> None:
        super().__init__(f"Failed to register into '{registry}': {reason}")
