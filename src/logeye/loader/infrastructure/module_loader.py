"""Checks module loader — imports a user Python file and reads its CheckSuite."""

import hashlib
import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import NoReturn

from logeye.loader.domain.loaded import LoadedChecks
from logeye.loader.domain.observer import LoaderObserver
from logeye.loader.infrastructure.errors import ChecksModuleLoadError
from logeye.suite.application.suite import CheckSuite

SUITE_ATTRIBUTE = "app"


class ChecksModuleLoader:
    """Imports a checks file by path and returns its suite with a content hash.

    The file must bind a CheckSuite to the module-level name ``app``.
    """

    def __init__(self, observer: LoaderObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> LoadedChecks:
        """
        Import the module at path and fingerprint its source.

        Raises:
            ChecksModuleLoadError: if the file is missing, fails to import,
                or does not define ``app`` as a CheckSuite.
        """
        path_str = str(path)
        self._observer.checks_loading_started(path=path_str)

        try:
            source = path.read_bytes()
        except FileNotFoundError:
            self._fail(path_str, f"file not found: {path_str}")

        module = self._import(path=path)
        suite = getattr(module, SUITE_ATTRIBUTE, None)
        if not isinstance(suite, CheckSuite):
            self._fail(
                path_str,
                f"{path_str} does not define '{SUITE_ATTRIBUTE}' as a CheckSuite",
            )

        loaded = LoadedChecks(
            suite=suite,
            module_sha256=hashlib.sha256(source).hexdigest(),
            eval_names=suite.evals.names(),
            enricher_names=suite.enrichers.names(),
            filter_names=suite.filters.names(),
        )
        self._observer.checks_loading_completed(
            path=path_str,
            module_sha256=loaded.module_sha256,
            total_evals=len(loaded.eval_names),
            total_enrichers=len(loaded.enricher_names),
            total_filters=len(loaded.filter_names),
        )
        return loaded

    def _import(self, path: Path) -> ModuleType:
        digest = hashlib.sha1(str(path.resolve()).encode()).hexdigest()
        module_name = f"logeye_checks_{digest[:10]}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            self._fail(str(path), f"not an importable Python file: {path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            del sys.modules[module_name]
            self._fail(str(path), f"{path}: {type(exc).__name__}: {exc}")
        return module

    def _fail(self, path: str, reason: str) -> NoReturn:
        self._observer.checks_loading_failed(path=path, reason=reason)
        raise ChecksModuleLoadError(reason=reason)
