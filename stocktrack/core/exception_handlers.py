import uuid
import logging
from fastapi import FastAPI, Request, HTTPException, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

log = logging.getLogger("uvicorn")


# Generate a clean request id for every server error
def _rid():
    """Generates a unique request ID for tracing."""
    return uuid.uuid4().hex


def _server_error_body(message: str, rid: str) -> dict:
    # The cause stays in the server log; clients only get the id to quote.
    return {"error": message, "details": f"request_id={rid}"}


def _validation_message(errors: list) -> str:
    """Picks a single human-readable message out of pydantic's error list."""
    if any(err.get("type") == "missing" for err in errors):
        return "Missing required fields"
    for err in errors:
        if err.get("type") == "value_error":
            return str(err.get("msg", "")).removeprefix("Value error, ")
        if err.get("type") == "string_too_long":
            field = err.get("loc", ("value",))[-1]
            return f"{field} must be at most {err['ctx']['max_length']} characters"
    return "Invalid input data"


# ----------- Exception Handlers (called by FastAPI) -----------

def http_exception_handler(request: Request, exc: HTTPException):
    """Handles exceptions raised by HTTPException (e.g., 404, 400)."""
    if exc.status_code >= 500:
        rid = _rid()
        # Routes raise 500s from the exception that caused them
        cause = exc.__cause__ or exc.__context__
        log.error(
            f"{request.method} {request.url.path} failed with {exc.status_code}: {exc.detail} (request_id={rid})",
            exc_info=cause,
        )
        body = _server_error_body(exc.detail, rid)
    else:
        body = {"error": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=body, headers=getattr(exc, "headers", None))


def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handles pydantic validation errors. Malformed input is a 400 in this API."""
    body = {"error": _validation_message(exc.errors())}
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body)


def generic_exception_handler(request: Request, exc: Exception):
    """Handles all unhandled exceptions (500 Internal Server Error)."""
    rid = _rid()
    log.exception(f"Unhandled exception on path: {request.url.path} (request_id={rid})", exc_info=exc)
    return JSONResponse(status_code=500, content=_server_error_body("Internal Server Error", rid))


# ----------- Registration Function -----------

def setup_exception_handlers(app: FastAPI):
    """Registers all custom exception handlers with the FastAPI application."""

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    return app
