"""Error hierarchy for uncss."""
from __future__ import annotations


class UncssError(Exception):
    """Base error for everything raised by an uncss run."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.cause = cause


class RenderFailure(UncssError):
    """The rendering process exited non-zero, wrote to stderr, or timed out."""

    def __init__(
        self,
        diagnostic: str,
        *,
        source: str = "",
        cause: Exception | None = None,
    ) -> None:
        super().__init__(diagnostic, cause=cause)
        self.diagnostic = diagnostic
        self.source = source


class ArgumentError(UncssError, TypeError):
    """The caller passed inputs, options, or a callback that cannot be used."""


class ParseFailure(UncssError):
    """Raised when stylesheet source cannot be parsed."""

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        *,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.line = line
        self.column = column
