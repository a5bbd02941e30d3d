# topcar/core/errors.py
from typing import Optional


class AppError(Exception):
    """Base for errors that map onto an HTTP status and the response envelope."""

    status_code = 500

    def __init__(self, error: str, message: Optional[str] = None):
        super().__init__(error)
        self.error = error
        self.message = message


class ValidationError(AppError):
    status_code = 400


class NotFoundError(AppError):
    status_code = 404


class PaymentFailedError(AppError):
    status_code = 402
