"""Tests verifying the LogeyeError type hierarchy."""

from pathlib import Path

from logeye.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)
from logeye.context.infrastructure.errors import ContextLoadError
from logeye.core.errors import LogeyeError
from logeye.engine.application.errors import ResultShapeError
from logeye.loader.infrastructure.errors import ChecksModuleLoadError
from logeye.registry.infrastructure.errors import RegistrationError


class TestLogeyeErrorHierarchy:
    """All logeye-specific exceptions inherit from LogeyeError."""

    def test_config_errors_are_logeye_errors(self) -> None:
        assert isinstance(MissingEnvVarsError(missing_vars=["A"]), LogeyeError)
        assert isinstance(ConfigValidationError(reason="bad"), LogeyeError)
        assert isinstance(ConfigLoadError(path=Path("/x.yaml")), LogeyeError)

    def test_context_load_error_is_logeye_error(self) -> None:
        assert isinstance(ContextLoadError(reason="missing"), LogeyeError)

    def test_checks_module_load_error_is_logeye_error(self) -> None:
        assert isinstance(ChecksModuleLoadError(reason="missing"), LogeyeError)

    def test_registration_error_is_logeye_error(self) -> None:
        assert isinstance(RegistrationError(registry="evals", reason="x"), LogeyeError)

    def test_result_shape_error_is_logeye_error(self) -> None:
        error = ResultShapeError(domain="filter", name="f", reason="None")
        assert isinstance(error, LogeyeError)
        assert str(error) == "Invalid filter result from 'f': None"

    def test_logeye_error_is_exception(self) -> None:
        assert isinstance(LogeyeError("test"), Exception)


class TestErrorMessages:
    def test_load_failures_start_with_failed_to(self) -> None:
        errors = [
            MissingEnvVarsError(missing_vars=["B", "A"]),
            ConfigValidationError(reason="bad"),
            ConfigLoadError(path=Path("/x.yaml")),
            ContextLoadError(reason="missing"),
            ChecksModuleLoadError(reason="missing"),
            RegistrationError(registry="evals", reason="empty name"),
        ]

        for error in errors:
            assert str(error).startswith("Failed to ")

    def test_missing_env_vars_are_listed_sorted(self) -> None:
        error = MissingEnvVarsError(missing_vars=["B", "A"])

        assert str(error).endswith("A, B")
        assert error.missing_vars == ["B", "A"]
