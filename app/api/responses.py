import logging
from fastapi import status
from fastapi.responses import JSONResponse
from app.errors import ErrorKind, ServiceError

logger = logging.getLogger("blog.api")

STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INVALID: status.HTTP_400_BAD_REQUEST,
    ErrorKind.TOO_LARGE: status.HTTP_413_CONTENT_TOO_LARGE,
}

REASONS = {
    status.HTTP_400_BAD_REQUEST: "Bad Request",
    status.HTTP_404_NOT_FOUND: "Not Found",
    status.HTTP_413_CONTENT_TOO_LARGE: "Payload Too Large",
    status.HTTP_500_INTERNAL_SERVER_ERROR: "Server Error",
}


def error_body(status_code: int, message: str) -> dict:
    return {"status": status_code, "message": message, "error": REASONS.get(status_code, "Error")}


def error_response(error: ServiceError) -> JSONResponse:
    status_code = STATUS_BY_KIND.get(error.kind, status.HTTP_500_INTERNAL_SERVER_ERROR)
    if error.kind == ErrorKind.NOT_FOUND:
        logger.warning("Resource not found: %s", error.message)
    else:
        logger.info("Rejected request: %s", error.message)
    return JSONResponse(status_code=status_code, content=error_body(status_code, error.message))


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"),
    )
