"""
Error taxonomy shared by services and routers.

Services raise these; ``register_error_handlers`` turns them into exactly
one JSON response, either ``{"msg": ...}`` or ``{"errors": [...]}``.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger("tripshare_server.errors")


class TripShareError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Server Error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.msg = message or self.message

    def body(self) -> dict:
        return {"msg": self.msg}


class ValidationError(TripShareError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid request"

    def __init__(self, errors: list[dict]):
        super().__init__(errors[0]["msg"] if errors else None)
        self.errors = errors

    def body(self) -> dict:
        return {"errors": self.errors}


class NotFoundError(TripShareError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"


class ForbiddenError(TripShareError):
    # The API has always answered ownership failures with 401.
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "User not authorized"


class ConflictError(TripShareError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Conflict"


class AuthError(TripShareError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Token is not valid"


class ServerError(TripShareError):
    pass


# Library messages replaced by the wording clients already show.
_FIELD_MESSAGES = {"email": "Please include a valid email"}


def _field_errors(exc: RequestValidationError) -> list[dict]:
    errors = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ())]
        msg = err.get("msg", "Invalid value")
        if err.get("type") == "value_error" and loc[-1:] and loc[-1] in _FIELD_MESSAGES:
            msg = _FIELD_MESSAGES[loc[-1]]
        errors.append(
            {
                "msg": msg,
                "param": loc[-1] if len(loc) > 1 else "",
                "location": loc[0] if loc else "body",
            }
        )
    return errors


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(TripShareError)
    async def handle_tripshare_error(request: Request, exc: TripShareError):
        if exc.status_code >= 500:
            logger.error(f"SERVER ERROR on {request.method} {request.url.path}: {exc}")
        return JSONResponse(status_code=exc.status_code, content=exc.body())

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": _field_errors(exc)},
        )

    @app.exception_handler(SQLAlchemyError)
    async def handle_store_error(request: Request, exc: SQLAlchemyError):
        # Log the full error for server admins but show simple text to user
        logger.error(
            f"SERVER ERROR on {request.method} {request.url.path}: {exc}", exc_info=exc
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"msg": ServerError.message},
        )
