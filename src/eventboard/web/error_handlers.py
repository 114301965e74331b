import logging

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from eventboard.errors import AuthenticationError, NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


def authentication_error_response(exc: AuthenticationError | None = None) -> JSONResponse:
    """The 401 response shared by the auth guard and the error handler."""
    message = str(exc) if exc is not None else str(AuthenticationError())
    return create_json_error_response(status_code=401, message=message, error_type="authentication_error")


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses with appropriate status codes."""
    if isinstance(exc, AuthenticationError):
        return authentication_error_response(exc)
    if isinstance(exc, NotFoundError):
        status_code = 404
        error_type = "not_found"
    elif isinstance(exc, ValidationError):
        status_code = 400
        error_type = "validation_error"
    else:
        status_code = 400
        error_type = "bad_request"

    return create_json_error_response(status_code=status_code, message=str(exc), error_type=error_type)


async def request_validation_error_handler(_: Request, exc: Exception) -> Response:
    """Report malformed JSON and invalid fields as 400 with the first problem as message."""
    errors = exc.errors() if isinstance(exc, RequestValidationError) else []
    if errors:
        first = errors[0]
        location = ".".join(part for part in first.get("loc", ()) if isinstance(part, str) and part != "body")
        if first.get("type") == "json_invalid":
            message = "Invalid JSON body"
        elif location:
            message = f"{location}: {first.get('msg')}"
        else:
            message = str(first.get("msg"))
    else:
        message = "Invalid request"
    return create_json_error_response(status_code=400, message=message, error_type="validation_error")


async def http_exception_handler(_: Request, exc: Exception) -> Response:
    """Render routing errors (unknown path, wrong method) in the standard error format."""
    status_code = exc.status_code if isinstance(exc, StarletteHTTPException) else 500
    message = exc.detail if isinstance(exc, StarletteHTTPException) else "HTTP error"
    error_type = {404: "not_found", 405: "method_not_allowed"}.get(status_code, "http_error")
    return create_json_error_response(status_code=status_code, message=str(message), error_type=error_type)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("Unexpected error: %s", exc)
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type="internal_server_error"
    )
