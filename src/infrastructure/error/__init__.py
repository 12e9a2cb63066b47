"""Error handling infrastructure package."""

from src.infrastructure.error.context import ExceptionContext
from src.infrastructure.error.error_middleware import (
    EXIT_FAILURE,
    EXIT_SUCCESS,
    ErrorMiddleware,
    ErrorResponse,
    with_error_handling,
)

__all__: list[str] = [
    "ExceptionContext",
    "ErrorMiddleware",
    "ErrorResponse",
    "with_error_handling",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
]
