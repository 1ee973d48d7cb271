"""Domain errors and their HTTP mapping.

Services raise these; the handlers registered in ``bookdesk.main`` turn them
into ``{"message": ..., "code": ...}`` JSON responses.
"""

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "server_error"
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"
    default_message = "Invalid request"


class CredentialsError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_credentials"
    default_message = "Invalid email or password"


# ── Session token failures ───────────────────────────────────
# All three are 401; callers tell them apart by ``code``.

class AuthError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "token_invalid"
    default_message = "Not authenticated"


class TokenMissingError(AuthError):
    code = "token_missing"
    default_message = "No bearer token supplied"


class TokenExpiredError(AuthError):
    code = "token_expired"
    default_message = "Token has expired, please log in again"


class TokenInvalidError(AuthError):
    code = "token_invalid"
    default_message = "Invalid token"


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_message = "Resource not found"


# Foreign and missing ids look the same to the caller.
OwnershipError = NotFoundError


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    code = "conflict"
    default_message = "Conflict"


class ServerError(AppError):
    pass
