import structlog
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from medcoders.errors import ErrorKind, UserError

logger = structlog.get_logger(__name__)

STATUS_CODES: dict[ErrorKind, int] = {
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.ACCESS_DENIED: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.VALIDATION: 400,
    ErrorKind.INTERNAL: 500,
}


def create_json_error_response(status_code: int, message: str, error_type: str | None = None) -> JSONResponse:
    """Create JSON error response with optional type for machine parsing."""
    content = {"message": message}
    if error_type:
        content["type"] = error_type
    return JSONResponse(status_code=status_code, content=content)


def format_validation_error(exc: RequestValidationError) -> str:
    """Human-readable message for the first failing field, e.g. `email: value is not a valid email address`."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    message = str(first.get("msg", "Invalid value")).removeprefix("Value error, ")
    field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{field}: {message}" if field else message


async def user_error_handler(_: Request, exc: Exception) -> Response:
    """Handle all UserError subclasses, the status code follows the error kind."""
    kind = exc.kind if isinstance(exc, UserError) else ErrorKind.VALIDATION
    return create_json_error_response(status_code=STATUS_CODES[kind], message=str(exc), error_type=kind)


async def request_validation_handler(_: Request, exc: Exception) -> Response:
    """Malformed request bodies and parameters are client errors (400)."""
    message = format_validation_error(exc) if isinstance(exc, RequestValidationError) else "Invalid request"
    return create_json_error_response(status_code=400, message=message, error_type=ErrorKind.VALIDATION)


async def general_exception_handler(_: Request, exc: Exception) -> Response:
    """Handle unexpected errors (500)."""
    logger.exception("unexpected_error", error=str(exc))
    return create_json_error_response(
        status_code=500, message="An unexpected error occurred.", error_type=ErrorKind.INTERNAL
    )
