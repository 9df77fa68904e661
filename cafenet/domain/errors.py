# cafenet/domain/errors.py


class CafenetError(Exception):
    """Base for every failure raised by the client and the services."""


class AuthError(CafenetError):
    """Login rejected. Carries only a generic message, never server detail."""

    def __init__(self, message: str = "Invalid username or password"):
        super().__init__(message)


class NetworkError(CafenetError):
    """Request never reached the backend or no response came back."""


class ServerError(CafenetError):
    """Backend answered with a non-2xx status or an unusable body."""

    def __init__(self, status: int, detail: str = ""):
        self.status = status
        self.detail = detail
        super().__init__(f"Backend responded with status {status}" + (f": {detail}" if detail else ""))


class ValidationError(CafenetError):
    """Rejected locally before anything was sent."""


class StorageError(CafenetError):
    """Session record could not be written or removed."""
