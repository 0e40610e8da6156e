"""
Exception hierarchy for the Face API client.
All exceptions inherit from FaceApiException for unified handling.
"""

from typing import Optional, Dict, Any


class FaceApiException(Exception):
    """
    Base exception for all client errors.

    Attributes:
        message: Human-readable error message
        code: Machine-readable error code
        status_code: HTTP status code (None when no response was received)
        details: Additional error details
    """

    def __init__(
        self,
        message: str,
        code: str = "ERROR",
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


# === Configuration Errors ===

class ConfigurationError(FaceApiException):
    """Client could not be configured."""

    def __init__(self, message: str, field: str = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code="CONFIGURATION_ERROR",
            details=details
        )


class UnknownRegionError(ConfigurationError):
    def __init__(self, region: Any):
        super().__init__(
            message=f"The region '{region}' doesn't exist",
            field="region"
        )


# === Service Errors ===

class ServiceError(FaceApiException):
    """
    The Face service answered with an HTTP failure.

    `error` holds the service's error object exactly as it appeared under
    the `error` key of the response body.
    """

    def __init__(self, error: Dict[str, Any], status_code: Optional[int]):
        self.error = error
        super().__init__(
            message=str(error.get("message", "")),
            code=str(error.get("code", "SERVICE_ERROR")),
            status_code=status_code
        )

    def to_dict(self) -> Dict[str, Any]:
        return dict(self.error)


class UnexpectedResponseError(ServiceError):
    """HTTP failure whose body carries no structured `error` object."""

    def __init__(self, status_code: int, body: str = ""):
        super().__init__(
            error={"code": f"HTTP_{status_code}", "message": body},
            status_code=status_code
        )


class InvalidResponseError(ServiceError):
    """Successful HTTP status, but the body is not what the operation returns."""

    def __init__(self, reason: str, status_code: Optional[int] = None):
        super().__init__(
            error={"code": "INVALID_RESPONSE", "message": reason},
            status_code=status_code
        )


# === Argument Errors ===

class InvalidArgumentError(FaceApiException, TypeError):
    """A caller argument has the wrong type. Nothing was sent."""

    def __init__(self, message: str, field: str = None):
        details = {"field": field} if field else {}
        super().__init__(
            message=message,
            code="INVALID_ARGUMENT",
            details=details
        )


# === Transport Errors ===

class TransportError(FaceApiException):
    """No HTTP response was received (DNS, connection, timeout)."""

    def __init__(self, message: str, url: str = None):
        details = {"url": url} if url else {}
        super().__init__(
            message=f"Transport error: {message}",
            code="TRANSPORT_ERROR",
            details=details
        )
