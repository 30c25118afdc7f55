"""YAML config loader for the execution, cache and logging settings."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from logeye.config.domain.config import LogeyeConfig
from logeye.config.domain.observer import ConfigObserver
from logeye.config.infrastructure.env_interpolation import collect_missing_vars, interpolate
from logeye.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)


class YamlConfigLoader:
    """Reads an optional YAML file into a LogeyeConfig; every section may be omitted."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path | None) -> LogeyeConfig:
        """
        Load the config at path, or the defaults when path is None.

        Raises:
            ConfigLoadError: if the file is missing or is not valid YAML.
            MissingEnvVarsError: listing every unset ${VAR} without a default.
            ConfigValidationError: if the document violates the schema.
        """
        if path is None:
            self._observer.config_defaults_used()
            cfg = LogeyeConfig()
        else:
            raw = _parse_yaml(path=path)
            missing = collect_missing_vars(raw)
            if missing:
                raise MissingEnvVarsError(missing_vars=missing, path=path)
            cfg = _build_config(resolved=interpolate(raw), path=path)
            self._observer.config_loaded(path=str(path))

        if not cfg.cache.enabled:
            self._observer.config_cache_disabled()
        return cfg


def _parse_yaml(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return yaml.safe_load(fh) or {}
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason="invalid YAML") from exc


def _build_config(resolved: Any, path: Path) -> LogeyeConfig:
    try:
        return LogeyeConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(
            reason=f"{exc.error_count()} validation error(s): {exc}", path=path
        ) from exc
