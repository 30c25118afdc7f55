"""Recursive ${ENV_VAR} / ${ENV_VAR:-default} interpolation for raw config data."""

import os
import re

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)(?::-([^}]*))?\}")

type RawValue = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def collect_missing_vars(data: RawValue) -> list[str]:
    """
    Return the names of referenced env vars that are unset and have no
    ``:-default``, in first-seen order. Walks the whole tree before returning.
    """
    missing: list[str] = []
    for text in _strings(data):
        for match in _ENV_VAR_PATTERN.finditer(text):
            name, default = match.group(1), match.group(2)
            if default is None and name not in os.environ and name not in missing:
                missing.append(name)
    return missing


def _strings(data: RawValue) -> list[str]:
    if isinstance(data, str):
        return [data]
    if isinstance(data, list):
        return [s for item in data for s in _strings(item)]
    if isinstance(data, dict):
        return [s for value in data.values() for s in _strings(value)]
    return []


def _substitute(match: re.Match[str]) -> str:
    name, default = match.group(1), match.group(2)
    if default is None:
        return os.environ[name]
    return os.environ.get(name, default)


def interpolate(data: RawValue) -> RawValue:
    """
    Return a copy of data with every ${ENV_VAR} reference substituted.

    Call `collect_missing_vars` first; an unset variable without a default
    raises KeyError here.
    """
    if isinstance(data, str):
        return _ENV_VAR_PATTERN.sub(_substitute, data)
    if isinstance(data, list):
        return [interpolate(item) for item in data]
    if isinstance(data, dict):
        return {key: interpolate(value) for key, value in data.items()}
    return data
