"""Error hierarchy for the Contabo API binding."""

from __future__ import annotations

from typing import Any


class ContaboClientError(Exception):
    """Base class for all client errors."""


class RequestBuildError(ContaboClientError):
    """Raised when a request cannot be constructed; no I/O has happened."""

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


class ParameterStyleError(RequestBuildError):
    """Raised when a parameter value cannot be styled for its location."""

    def __init__(self, message: str, *, param_name: str, operation: str | None = None) -> None:
        super().__init__(message, operation=operation)
        self.param_name = param_name


class ResponseDecodeError(ContaboClientError):
    """Raised when a response body cannot be decoded."""

    def __init__(self, message: str, *, operation: str | None = None, status_code: int | None = None) -> None:
        super().__init__(message)
        self.operation = operation
        self.status_code = status_code


class TypedModelValidationError(ResponseDecodeError):
    """Raised when a matched response payload fails model validation."""

    def __init__(
        self,
        *,
        operation: str,
        model_name: str,
        errors: Any,
        status_code: int | None = None,
        raw_sample: Any | None = None,
    ) -> None:
        super().__init__(
            f"{operation} response validation failed for {model_name}",
            operation=operation,
            status_code=status_code,
        )
        self.model_name = model_name
        self.errors = errors
        self.raw_sample = raw_sample
