"""Exceptions for Canvas API."""


class CanvasAPIError(Exception):
    """Base exception for Canvas API errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class UnauthorizedError(CanvasAPIError):
    """Canvas rejected the access token."""

    def __init__(self, message: str):
        super().__init__(message, 401)
