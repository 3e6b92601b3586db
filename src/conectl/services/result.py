"""ServiceResult and ServiceError — what every service call hands back.

INVARIANT: Services never raise for domain failures.  A ``ConeError``
becomes ``ServiceResult(ok=False, error=ServiceError(...))`` and the CLI
decides how to print it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from conectl.domain.errors import ConeError


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_exception(cls, exc: ConeError) -> ServiceError:
        return cls(code=exc.code, message=exc.message, detail=dict(exc.detail))


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``"serve_order"``, ``"menu"``, ...).
        data: Operation-specific payload on success.
        warnings: Non-fatal remarks, e.g. a cone-less order.
        error: Populated when ``ok`` is False.
        meta: Timing data when telemetry is enabled.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, exc: ConeError) -> ServiceResult:
        """Wrap a domain exception as a failed result."""
        return cls(ok=False, op=op, error=ServiceError.from_exception(exc))
