"""JSON context loader — reads a session snapshot document into an EvalContext."""

from pathlib import Path

from pydantic import ValidationError

from logeye.context.domain.context import EvalContext
from logeye.context.domain.observer import ContextObserver
from logeye.context.infrastructure.errors import ContextLoadError


class JsonContextLoader:
    """Loads an EvalContext from a JSON document produced by the log parser.

    The document carries ``entries``, ``stats`` and the session identifiers in
    either snake_case or camelCase.
    """

    def __init__(self, observer: ContextObserver) -> None:
        self._observer = observer

    def load(self, path: Path) -> EvalContext:
        """
        Read and validate the context document at path.

        Raises:
            ContextLoadError: if the file cannot be read, is not valid JSON, or
                fails schema validation.
        """
        path_str = str(path)
        self._observer.context_loading_started(path=path_str)

        try:
            raw = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            reason = f"file not found: {path_str}"
            self._observer.context_loading_failed(path=path_str, reason=reason)
            raise ContextLoadError(reason=reason)
        except UnicodeDecodeError as exc:
            reason = f"{path_str}: not valid UTF-8"
            self._observer.context_loading_failed(path=path_str, reason=reason)
            raise ContextLoadError(reason=reason) from exc
        except OSError as exc:
            reason = f"cannot read {path_str}: {exc.strerror or exc}"
            self._observer.context_loading_failed(path=path_str, reason=reason)
            raise ContextLoadError(reason=reason) from exc

        try:
            context = EvalContext.model_validate_json(raw)
        except ValidationError as exc:
            reason = f"{path_str}: {exc.error_count()} validation error(s): {exc}"
            self._observer.context_loading_failed(path=path_str, reason=reason)
            raise ContextLoadError(reason=reason) from exc

        self._observer.context_loading_completed(
            path=path_str,
            session_id=context.session_id,
            total_entries=len(context.entries),
        )
        return context
