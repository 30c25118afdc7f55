"""EvalResult — the graded verdict an evaluation function returns."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


class EvalResult(BaseModel):
    """Immutable pass/fail verdict with a normalised score.

    Accepts ``pass`` (the wire name) or ``passed``. When score is omitted it
    defaults to 1.0 for a pass and 0.0 for a fail.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    passed: bool = Field(alias="pass")
    score: float = Field(ge=0.0, le=1.0)
    message: str | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _default_score(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("score") is None:
            verdict = data.get("pass", data.get("passed"))
            if isinstance(verdict, bool):
                return {**data, "score": 1.0 if verdict else 0.0}
        return data
