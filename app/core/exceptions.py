"""Domain error taxonomy. Each error carries the HTTP status the API maps it to."""


class ServiceError(Exception):
    """Base class for errors raised by services and translated by the API layer."""

    http_status = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class InvalidInputError(ServiceError):
    """Malformed or missing input."""

    http_status = 400


class UnauthenticatedError(ServiceError):
    """No credentials supplied for a protected route."""

    http_status = 401


class ForbiddenError(ServiceError):
    """Credentials supplied but invalid or expired."""

    http_status = 403


class NotFoundError(ServiceError):
    http_status = 404


class ConflictError(ServiceError):
    """Uniqueness violation (duplicate username, meal date, or review)."""

    http_status = 409


class RateLimitedError(ServiceError):
    http_status = 429


class InternalError(ServiceError):
    """Unexpected failure; the message is safe to show to clients."""

    http_status = 500
