"""Errors raised while reading a logeye YAML config file."""

from pathlib import Path

from logeye.core.errors import LogeyeError


class MissingEnvVarsError(LogeyeError):
    """Some ${VAR} references have neither a value nor a ``:-default``."""

    def __init__(self, missing_vars: list[str], path: Path | None = None) -> None:
        self.missing_vars = missing_vars
        self.path = path
        where = f" in {path}" if path is not None else ""
        super().__init__(
            "Failed to load config: unset environment variables"
            f"{where}: {', '.join(sorted(missing_vars))}"
        )


class ConfigValidationError(LogeyeError):
    """The document parsed but does not match the LogeyeConfig schema."""

    def __init__(self, reason: str, path: Path | None = None) -> None:
        self.path = path
        where = f" {path}" if path is not None else ""
        super().__init__(f"Failed to validate config{where}: {reason}")


class ConfigLoadError(LogeyeError):
    """The file is missing, unreadable, or not YAML."""

    def __init__(self, path: Path, reason: str = "file not found") -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load config: {reason}: {path}")
