"""ServiceResult and ServiceError, the return type of every FieldService call.

Hosts and the CLI only ever see these two models; domain results
(:class:`~numfield.domain.types.SanitizationResult`, ``KeyDecision``) are
flattened into ``data`` by the service layer.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation could not run (bad policy or malformed event)."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False only for ``INVALID_CONFIG`` / ``INVALID_EVENT``; malformed
            text is corrected, never reported as a failure.
        op: Operation name (``"edit"``, ``"paste"``, ...).
        data: Corrected value, caret and flags on success.
        warnings: Notes for the user, e.g. that an edit was reverted.
        error: Set when ``ok`` is False.
        meta: Telemetry span tree under ``"telemetry"`` when verbose.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        """Build a failed result for *op*."""
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
