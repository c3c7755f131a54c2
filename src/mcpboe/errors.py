"""
Exception hierarchy for MCPBoe.

Every failure that crosses a module boundary is one of these exceptions. Each
carries a stable machine-readable code so the boundary handlers can map it to a
status code without inspecting messages.

Taxonomy:
    - RequestValidationError: malformed or out-of-range input, raised before
      any upstream call is issued
    - TransportError: network error, timeout or 5xx response that survived
      every retry attempt
    - UpstreamResponseError: upstream answered successfully but the body could
      not be decoded into the expected envelope

"Not found" and "empty result" are not exceptions: the client returns None or
an empty list for them.
"""

from typing import Any, Dict, List, Optional


class BoeError(Exception):
    """Base exception for MCPBoe."""

    def __init__(
        self, code: str, message: str, details: Optional[Dict[str, Any]] = None
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code, "message": self.message, "details": self.details}


class RequestValidationError(BoeError):
    """A request DTO failed validation."""

    def __init__(self, errors: List[str], details: Optional[Dict[str, Any]] = None):
        self.errors = list(errors)
        super().__init__(
            "VALIDATION_ERROR",
            f"Validation errors: {', '.join(self.errors)}",
            details,
        )


class TransportError(BoeError):
    """All attempts of an upstream call failed with transient errors."""

    def __init__(
        self,
        message: str,
        attempts: int,
        status_code: Optional[int] = None,
        url: Optional[str] = None,
    ):
        self.attempts = attempts
        self.status_code = status_code
        self.url = url
        super().__init__(
            "TRANSPORT_ERROR",
            message,
            {"attempts": attempts, "status_code": status_code, "url": url},
        )


class UpstreamResponseError(BoeError):
    """The upstream body did not match the envelope expected for the operation."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        super().__init__(
            "UPSTREAM_RESPONSE_ERROR", message, {"operation": operation}
        )
