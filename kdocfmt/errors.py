"""Domain exceptions for KDoc formatting and CLI diagnostics."""

from __future__ import annotations


class KDocFormatError(RuntimeError):
    """Raised when formatting one KDoc comment hits an invariant violation."""


class UnclassifiedTokenError(KDocFormatError):
    """Raised when the normalizer meets a raw token type it has no rule for."""

    def __init__(self, token_type: object) -> None:
        """Initialize the error with the offending raw token type."""

        super().__init__(f"Unexpected raw token type: {token_type}")
        self.token_type = token_type


class MissingTerminatorError(KDocFormatError):
    """Raised when a token sequence runs out before the end-of-comment token."""

    def __init__(self) -> None:
        """Initialize the error with a fixed diagnostic message."""

        super().__init__("Token sequence ended without an end-of-comment token.")


class PipelineStageError(RuntimeError):
    """Raised when a specific pipeline stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped pipeline error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
