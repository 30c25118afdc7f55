"""LogeyeConfig aggregate — the root configuration object."""

from typing import Literal

from pydantic import BaseModel, Field

type LogFormat = Literal["console", "json"]


class ExecutionConfig(BaseModel, frozen=True):
    # None disables the soft per-item timeout.
    item_timeout_seconds: float | None = Field(default=None, gt=0)


class CacheConfig(BaseModel, frozen=True):
    """Read by the persistent-cache collaborator; the engine itself never caches."""

    enabled: bool = True


class LoggingConfig(BaseModel, frozen=True):
    format: LogFormat = "console"


class LogeyeConfig(BaseModel, frozen=True):
    """Root configuration for a logeye process. Every section has defaults."""

    execution: ExecutionConfig = Field(default_factory=ExecutionConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
