"""Domain exceptions."""


class DirAuthError(Exception):
    """Base exception for dirauth."""

    pass


class PermissionDenied(DirAuthError):
    """User does not have permission for the requested action.

    The message never says whether the object exists.
    """

    def __init__(self, message: str = "Permission denied.") -> None:
        super().__init__(message)


class IntegrityViolation(DirAuthError):
    """Storage returned more than one record for a unique identifier."""

    pass


class ValidationError(DirAuthError):
    """Validation failed for input data."""

    pass
