"""ServiceResult and ServiceError: what every AccountService method returns.

INVARIANT: a successful result never carries an error. The CLI renders
these objects and never sees a raw ParseAccountError.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from near_account_id.domain.errors import ParseAccountError


class ServiceError(BaseModel):
    """Why an operation failed.

    ``code`` is a ParseErrorKind value (``"invalid_char"``...) for rejected
    account IDs, or an operation-specific code such as ``"invalid_hex"``.
    """

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_parse_error(cls, account_id: str, exc: ParseAccountError) -> ServiceError:
        """Carry the offending input, and the index/char when the scan found one."""
        detail: dict[str, Any] = {"account_id": account_id}
        if exc.char is not None:
            detail["index"], detail["char"] = exc.char
        return cls(code=str(exc.kind), message=str(exc), detail=detail)


class ServiceResult(BaseModel):
    """Envelope for one operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"validate"``, ``"inspect"``, ``"decode"``...).
        data: Operation payload. Batch validation fills it on failure too.
        warnings: Non-fatal notes, e.g. a reserved account was inspected.
        error: Structured error; always None when ``ok`` is True.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @model_validator(mode="after")
    def _error_iff_failed(self) -> ServiceResult:
        if self.ok and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        return self

    @classmethod
    def success(
        cls, op: str, data: dict[str, Any], warnings: list[str] | None = None
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(
        cls, op: str, error: ServiceError, data: dict[str, Any] | None = None
    ) -> ServiceResult:
        return cls(ok=False, op=op, error=error, data=data or {})
