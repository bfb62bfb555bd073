# dojo_api/core/exceptions.py
"""Custom exceptions for the Dojo API."""
from typing import Any, Dict, List, Optional


class DojoException(Exception):
    """Base exception for the application"""
    def __init__(self, message: str, status_code: int = 500):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ValidationException(DojoException):
    """Validation error exception"""
    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        self.errors = errors or []
        super().__init__(message, 400)


class DuplicateError(DojoException):
    """A unique value is already taken"""
    def __init__(self, message: str):
        super().__init__(message, 400)


class NotAuthenticated(DojoException):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, 401)


class PermissionDenied(DojoException):
    """Permission denied exception"""
    def __init__(self, message: str = "Forbidden. Instructor access required."):
        super().__init__(message, 403)


class NotFoundError(DojoException):
    """Resource not found exception"""
    def __init__(self, resource: str, id: Any = None):
        message = f"{resource} not found"
        if id is not None:
            message += f" with id: {id}"
        super().__init__(message, 404)


class StaleWriteError(DojoException):
    """The row changed since the client read it"""
    def __init__(self, resource: str, id: Any, expected: int, current: int):
        self.expected = expected
        self.current = current
        super().__init__(
            f"{resource} {id} was modified concurrently (expected version {expected}, current {current})",
            409,
        )


class DependentRecordsError(DojoException):
    """Delete refused because other rows still reference the target"""
    def __init__(self, message: str):
        super().__init__(message, 409)


class PaymentsNotConfigured(DojoException):
    def __init__(self):
        super().__init__(
            "Stripe payment processing is not available. Please configure Stripe API keys.",
            503,
        )


class PaymentGatewayError(DojoException):
    def __init__(self, message: str):
        super().__init__(message, 502)
