"""Error types for generator construction."""

from __future__ import annotations


class GeneratorConfigError(ValueError):
    """Error raised when a generator is built with invalid parameters.

    Raised at construction time, never from run(). The offending value
    is preserved for debugging.
    """

    def __init__(self, message: str, raw_value: object) -> None:
        self.raw_value = raw_value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"GeneratorConfigError({super().__repr__()}, raw_value={self.raw_value!r})"
