"""Error types raised while shaping check results."""

from logeye.core.errors import LogeyeError


class ResultShapeError(LogeyeError):
    """Raised by an adapter when a check returns a value its domain cannot hold."""

    def __init__(self, domain: str, name: str, reason: str) -> None:
        super().__init__(f"Invalid {domain} result from '{name}': {reason}")
