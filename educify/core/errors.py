"""Domain error codes shared by all services.

Services raise these; the HTTP layer translates them to status codes
in one place (see core.middleware).
"""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VALIDATION_FAILED = "VALIDATION_FAILED"
    EMAIL_EXISTS = "EMAIL_EXISTS"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_FOUND = "NOT_FOUND"
    PROMO_LIMIT_REACHED = "PROMO_LIMIT_REACHED"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ValidationError(DomainError):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.VALIDATION_FAILED, message=message)


class ConflictError(DomainError):
    """Raised when registering an email that already exists."""

    def __init__(self, message: str = "User already exists") -> None:
        super().__init__(code=ErrorCode.EMAIL_EXISTS, message=message)


class InvalidCredentialsError(DomainError):
    """Raised on login failure. Never says which half was wrong."""

    def __init__(self) -> None:
        super().__init__(code=ErrorCode.INVALID_CREDENTIALS, message="Invalid credentials")


class NotFoundError(DomainError):
    """Raised when a referenced row does not exist."""

    def __init__(self, message: str) -> None:
        super().__init__(code=ErrorCode.NOT_FOUND, message=message)


class PromoLimitReachedError(DomainError):
    """Raised when a promo code has been used max_uses times."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.PROMO_LIMIT_REACHED,
            message="Promo code has reached maximum usage",
        )


STATUS_CODES = {
    ErrorCode.VALIDATION_FAILED: 400,
    ErrorCode.EMAIL_EXISTS: 400,
    ErrorCode.INVALID_CREDENTIALS: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.PROMO_LIMIT_REACHED: 400,
}
