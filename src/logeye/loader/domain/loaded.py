"""LoadedChecks — a user checks module imported and fingerprinted."""

from pydantic import BaseModel, ConfigDict, Field

from logeye.suite.application.suite import CheckSuite


class LoadedChecks(BaseModel, frozen=True):
    """Immutable value object returned by the checks module loader.

    module_sha256 identifies the exact source the suite was built from, so a
    caching collaborator can discard summaries computed by older definitions.
    Pydantic needs arbitrary_types_allowed because CheckSuite is a plain class.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    suite: CheckSuite
    module_sha256: str = Field(min_length=1)
    eval_names: list[str]
    enricher_names: list[str]
    filter_names: list[str]

    @property
    def registered_names(self) -> list[str]:
        return [*self.eval_names, *self.enricher_names, *self.filter_names]
