"""Error taxonomy for the portal API. Each error carries the HTTP status it maps to."""


class PortalError(Exception):
    """Base error; rendered by the API as {"message": ...} with status_code."""

    status_code: int = 500
    headers: dict[str, str] | None = None

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class BadRequestError(PortalError):
    """Missing or malformed input."""

    status_code = 400


class InvalidCredentialsError(PortalError):
    """Unknown username or wrong password (deliberately indistinguishable)."""

    status_code = 401

    def __init__(self, message: str = "Invalid credentials") -> None:
        super().__init__(message)


class UnauthenticatedError(PortalError):
    """No bearer token on a protected route."""

    status_code = 401
    headers = {"WWW-Authenticate": "Bearer"}

    def __init__(self, message: str = "Access token required") -> None:
        super().__init__(message)


class ForbiddenError(PortalError):
    """Bearer token present but invalid or expired."""

    status_code = 403

    def __init__(self, message: str = "Invalid or expired token") -> None:
        super().__init__(message)


class NotFoundError(PortalError):
    status_code = 404


class DuplicateKeyError(PortalError):
    """A unique key (username, damage id) already exists in the store."""

    status_code = 409


class InternalError(PortalError):
    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
