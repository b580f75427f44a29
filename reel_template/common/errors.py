"""Errors raised at the public boundary of the pipeline."""


class InvalidInputError(ValueError):
    """A required pipeline input is missing or malformed."""


class ApplyError(Exception):
    """Template application failed and no fallback was allowed."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(f"Template application failed: {cause}")
        self.cause = cause
