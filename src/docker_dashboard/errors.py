"""
Error taxonomy for engine failures and the JSON error envelope.
"""
from dataclasses import dataclass
from enum import Enum

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from python_on_whales.client_config import ClientNotFoundError
from python_on_whales.exceptions import DockerException, NoSuchContainer, NoSuchImage


class ErrorKind(str, Enum):
    """Closed set of failure kinds reported in the `code` field of error bodies."""

    NOT_FOUND = "not_found"
    RUNTIME_UNAVAILABLE = "runtime_unavailable"
    INVALID_STATE = "invalid_state"
    PERMISSION_DENIED = "permission_denied"
    OPERATION_FAILED = "operation_failed"
    INVALID_ARGUMENT = "invalid_argument"


STATUS_BY_KIND = {
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.RUNTIME_UNAVAILABLE: 503,
    ErrorKind.INVALID_STATE: 409,
    ErrorKind.PERMISSION_DENIED: 403,
    ErrorKind.OPERATION_FAILED: 500,
    ErrorKind.INVALID_ARGUMENT: 400,
}

# Checked in order: "permission denied while trying to connect to the Docker
# daemon socket" must not be read as an unreachable engine.
_MESSAGE_MARKERS: list[tuple[ErrorKind, tuple[str, ...]]] = [
    (ErrorKind.PERMISSION_DENIED, ("permission denied",)),
    (
        ErrorKind.RUNTIME_UNAVAILABLE,
        (
            "cannot connect to the docker daemon",
            "is the docker daemon running",
            "error during connect",
            "connection refused",
        ),
    ),
    (ErrorKind.NOT_FOUND, ("no such container", "no such image", "not found")),
    (
        ErrorKind.INVALID_STATE,
        (
            "is not running",
            "is already",
            "is restarting",
            "is paused",
            "conflict",
            "cannot remove a running container",
            "removal of container",
        ),
    ),
]


@dataclass
class ControlError(Exception):
    """
    Failed operation, rendered as `{error, code}` by `control_error_handler`.

    Attributes:
        kind: Classified failure kind.
        message: Generic per-operation message, safe to show to clients.
        status_code: HTTP status answered for this error.
    """

    kind: ErrorKind
    message: str
    status_code: int = 500


def classify_engine_error(exc: BaseException) -> ErrorKind:
    """
    Map an exception raised by the Docker client to an error kind.

    Args:
        exc: Exception raised by an engine call.

    Returns:
        The matching ErrorKind, OPERATION_FAILED when nothing matches.
    """
    if isinstance(exc, (NoSuchContainer, NoSuchImage)):
        return ErrorKind.NOT_FOUND
    if isinstance(exc, ClientNotFoundError):
        return ErrorKind.RUNTIME_UNAVAILABLE
    if isinstance(exc, PermissionError):
        return ErrorKind.PERMISSION_DENIED
    if isinstance(exc, (ConnectionError, FileNotFoundError)):
        return ErrorKind.RUNTIME_UNAVAILABLE
    if isinstance(exc, DockerException):
        text = (exc.stderr or str(exc)).lower()
        for kind, markers in _MESSAGE_MARKERS:
            if any(marker in text for marker in markers):
                return kind
    return ErrorKind.OPERATION_FAILED


def control_error(
    exc: BaseException, message: str, collapse_status: bool = False
) -> ControlError:
    """
    Build the ControlError answered for a failed engine call.

    Args:
        exc: Original exception; only its kind reaches the client.
        message: Generic message for the failed operation.
        collapse_status: If True, answer every kind with HTTP 500.
    """
    kind = classify_engine_error(exc)
    status_code = 500 if collapse_status else STATUS_BY_KIND[kind]
    return ControlError(kind=kind, message=message, status_code=status_code)


async def control_error_handler(_req: Request, exc: ControlError) -> JSONResponse:
    """
    Render a ControlError as the `{error, code}` envelope.

    Args:
        _req: Incoming request (unused).
        exc: Raised ControlError.

    Returns:
        JSONResponse with the error's status code.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message, "code": exc.kind.value},
    )


async def validation_error_handler(_req: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Render request validation failures (e.g. `?force=maybe`) in the same envelope.

    Args:
        _req: Incoming request (unused).
        exc: Validation error raised by FastAPI.

    Returns:
        JSONResponse with status 400 and code `invalid_argument`.
    """
    return JSONResponse(
        status_code=STATUS_BY_KIND[ErrorKind.INVALID_ARGUMENT],
        content={
            "error": "Invalid request parameters",
            "code": ErrorKind.INVALID_ARGUMENT.value,
        },
    )
