"""ServiceResult and ServiceError: the envelope the CLI renders.

The time operations return plain strings, numbers, and dates. Commands
wrap them with :meth:`ServiceResult.success` or
:meth:`ServiceResult.failure` so human and JSON output share one path.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why a command could not produce a value."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one CLI operation.

    A sentinel value (``"--:--"``, ``"--"``) is still a success; it goes
    in ``data`` and usually comes with a warning.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def success(
        cls,
        op: str,
        data: dict[str, Any],
        *,
        warning: str | None = None,
    ) -> ServiceResult:
        return cls(ok=True, op=op, data=data, warnings=[warning] if warning else [])

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
