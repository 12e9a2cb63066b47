"""Error handling middleware for the command line."""

import functools
import json
import sys
from typing import Any, Callable, Dict, Optional, TextIO

from src.domain.core.exceptions import (
    ConfigurationError,
    DemoNotFoundError,
    DomainException,
    ResourceNotFoundError,
    ValidationError,
)
from src.infrastructure.error.context import ExceptionContext
from src.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class ErrorResponse:
    """Serializable description of a handled domain error."""

    def __init__(self, error_code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.error_code = error_code
        self.message = message
        self.details = details or {}

    @classmethod
    def from_exception(cls, error: DomainException) -> "ErrorResponse":
        details: Dict[str, Any] = {}
        if isinstance(error, DemoNotFoundError):
            code = "DEMO_NOT_FOUND"
            details["available"] = error.available
        elif isinstance(error, ResourceNotFoundError):
            code = "RESOURCE_NOT_FOUND"
            details["resource_type"] = error.resource_type
            details["resource_id"] = error.resource_id
        elif isinstance(error, ConfigurationError):
            code = "CONFIGURATION_ERROR"
            if error.missing_fields:
                details["missing_fields"] = error.missing_fields
        elif isinstance(error, ValidationError):
            code = "VALIDATION_ERROR"
            if error.details is not None:
                details["details"] = error.details
        else:
            code = type(error).__name__
        return cls(code, str(error), details)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ErrorMiddleware:
    """Middleware for consistent error handling."""

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream

    def wrap_script_handler(self, script_handler: Callable[..., int]) -> Callable[..., int]:
        """
        Wrap a script handler function with error handling.

        Domain errors are reported as a JSON body on stdout and turned into
        exit code 1. Anything else propagates.

        Args:
            script_handler: The handler function to wrap

        Returns:
            Wrapped handler function returning an exit code
        """

        @functools.wraps(script_handler)
        def wrapped_script_handler(*args, **kwargs) -> int:
            try:
                return script_handler(*args, **kwargs)
            except DomainException as e:
                context = ExceptionContext.from_handler_call(script_handler.__name__, args)
                logger.error(
                    "Command failed",
                    error=str(e),
                    error_type=type(e).__name__,
                    **context.to_dict(),
                )
                error_response = ErrorResponse.from_exception(e)
                stream = self._stream or sys.stdout
                print(json.dumps(error_response.to_dict(), indent=2, default=str), file=stream)
                return EXIT_FAILURE

        return wrapped_script_handler


def with_error_handling(func: Optional[Callable[..., int]] = None, *, stream: Optional[TextIO] = None):
    """
    Decorator for adding error handling to command functions.

    Usable bare (``@with_error_handling``) or with arguments
    (``@with_error_handling(stream=...)``).
    """
    middleware = ErrorMiddleware(stream)
    if func is not None:
        return middleware.wrap_script_handler(func)
    return middleware.wrap_script_handler
