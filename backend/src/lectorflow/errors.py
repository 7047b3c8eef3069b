"""Error kinds surfaced by the review workflow.

Each error carries a stable ``code`` (returned to API clients) and the HTTP
status it maps to. Validation and authorization errors are raised directly to
the caller; unexpected backend failures are logged and re-raised as
``Internal`` so backend details never reach the client.
"""

from fastapi import status


class WorkflowError(Exception):
    """Base class for all workflow errors."""

    code = "internal"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict:
        return {"error": self.code, "message": self.message}


class Unauthenticated(WorkflowError):
    """No caller identity was presented."""

    code = "unauthenticated"
    status_code = status.HTTP_401_UNAUTHORIZED


class InvalidArgument(WorkflowError):
    """A required field is missing or has an invalid value."""

    code = "invalid-argument"
    status_code = status.HTTP_400_BAD_REQUEST


class NotFound(WorkflowError):
    """The referenced record does not exist."""

    code = "not-found"
    status_code = status.HTTP_404_NOT_FOUND


class PermissionDenied(WorkflowError):
    """The caller may not act on the referenced record."""

    code = "permission-denied"
    status_code = status.HTTP_403_FORBIDDEN


class Internal(WorkflowError):
    """Unexpected persistence or backend failure."""

    code = "internal"
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
