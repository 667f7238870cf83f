"""Application exceptions.

Route handlers raise these; ``exception_handlers`` turns them into
responses. Two body shapes exist: ``{"msg": ...}`` for authentication and
upstream failures, ``{"errors": [{"msg": ...}]}`` for everything else.
"""

from typing import Any

from fastapi import status


class AppError(Exception):
    """Base application error."""

    status_code: int = status.HTTP_400_BAD_REQUEST

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def body(self) -> dict[str, Any]:
        return {"errors": [{"msg": self.message}]}


class BadRequestError(AppError):
    """Request is well-formed but breaks a rule (duplicate user, double like, ...)."""


class AuthenticationError(AppError):
    """Missing or invalid token."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def body(self) -> dict[str, Any]:
        return {"msg": self.message}


class NotAuthorizedError(AppError):
    """Caller is acting on a resource owned by someone else."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, message: str = "User not authorized") -> None:
        super().__init__(message)


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND


class MalformedIdError(NotFoundError):
    """A path identifier that cannot name any document."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f"Resource with id '{value}' was not found")


class UpstreamNotFoundError(AppError):
    """The external service had nothing for the requested name."""

    status_code = status.HTTP_404_NOT_FOUND

    def body(self) -> dict[str, Any]:
        return {"msg": self.message}
