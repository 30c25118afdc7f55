"""Base exception class for all logeye-specific errors."""


class LogeyeError(Exception):
    """Base class for all logeye errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
