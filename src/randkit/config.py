"""Attempt budgets and their defaults."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, InstanceOf, ValidationError

from randkit.errors import GeneratorConfigError
from randkit.kernel.result import Fallback

DEFAULT_FILTER_ATTEMPTS = 100
DEFAULT_RETRY_ATTEMPTS = 10
DEFAULT_DEDUP_ATTEMPTS = 100


class AttemptPolicy(BaseModel):
    """How many samples a bounded retry may take, and what happens after.

    Attributes:
        max_attempts: Upper bound on upstream samples before the fallback applies
        fallback: Policy for the exhausted case
    """

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=DEFAULT_FILTER_ATTEMPTS, ge=1, strict=True)
    fallback: InstanceOf[Fallback] = Field(default_factory=Fallback.UseLast)


def make_policy(max_attempts: int, fallback: Fallback | None = None) -> AttemptPolicy:
    """Build a validated AttemptPolicy.

    Raises:
        GeneratorConfigError: If max_attempts is below 1 or fallback is not a Fallback
    """
    try:
        if fallback is None:
            return AttemptPolicy(max_attempts=max_attempts)
        return AttemptPolicy(max_attempts=max_attempts, fallback=fallback)
    except ValidationError as e:
        raise GeneratorConfigError(
            f"Invalid attempt policy: {e}", {"max_attempts": max_attempts, "fallback": fallback}
        ) from e
