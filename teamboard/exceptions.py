"""Typed service errors and their translation to HTTP responses."""
import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = logging.getLogger("teamboard.errors")


class TeamboardError(Exception):
    """Base class for business-rule violations raised by the service layer."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TeamboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class AuthenticationError(TeamboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class InvalidTokenError(TeamboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid token"


class InvalidAuthorizationError(TeamboardError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid authorization header"


class Forbidden(TeamboardError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "You don't have access to this resource"


class CannotRemoveOwner(Forbidden):
    default_message = "Cannot remove workspace owner"


class NotFound(TeamboardError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class Conflict(TeamboardError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Conflict"


class DuplicateName(Conflict):
    default_message = "Workspace with this name already exists"


class AlreadyMember(Conflict):
    default_message = "User is already a member of this workspace"


async def teamboard_error_handler(request: Request, exc: TeamboardError) -> JSONResponse:
    headers = None
    if exc.status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message}, headers=headers)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(TeamboardError, teamboard_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
