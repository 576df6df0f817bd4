"""Result types shared by ConvertService and ClipboardWatcher.

Every service operation returns a frozen :class:`ServiceResult`.  The CLI
renders it (:mod:`punctfix.output.formatters`) and the watch loop reports
it; neither inspects service internals.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field


class ErrorCode(StrEnum):
    NOT_FOUND = "NOT_FOUND"
    IO_ERROR = "IO_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    CLIPBOARD_ERROR = "CLIPBOARD_ERROR"


class ServiceError(BaseModel):
    """Why an operation failed."""

    model_config = {"frozen": True}

    code: ErrorCode
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one conversion operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Operation name (``convert_text``, ``convert_file``, ``watch``...).
        data: Payload on success.  ``changed`` is always present; ``text``
            carries content to print verbatim; ``reason`` explains a skip.
        warnings: Non-fatal issues, printed to stderr.
        error: Set when ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @classmethod
    def content(cls, op: str, text: str, *, changed: bool, **extra: Any) -> ServiceResult:
        """Success carrying the (converted or original) *text*."""
        data = {"changed": changed, "text": text, "length": len(text), **extra}
        return cls(ok=True, op=op, data=data)

    @classmethod
    def skipped(cls, op: str, reason: str) -> ServiceResult:
        """Success where nothing was rewritten, for *reason*."""
        return cls(ok=True, op=op, data={"changed": False, "reason": reason})

    @classmethod
    def failure(cls, op: str, code: ErrorCode, message: str, **detail: Any) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )

    @property
    def changed(self) -> bool:
        return self.ok and bool(self.data.get("changed"))
