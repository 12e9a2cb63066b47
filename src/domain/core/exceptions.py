# src/domain/core/exceptions.py
from typing import Any, Optional, List, Sequence


class DomainException(Exception):
    """Base exception for all catalog errors."""
    pass


class ValidationError(DomainException):
    """Raised when an object cannot be built from the values it was given."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class ResourceNotFoundError(DomainException):
    """Raised when a requested resource cannot be found."""
    def __init__(self, resource_type: str, resource_id: Any):
        super().__init__(f"{resource_type} with ID {resource_id} not found")
        self.resource_type = resource_type
        self.resource_id = resource_id


class ProfileNotFoundError(ResourceNotFoundError):
    """Raised when the social graph references a profile the network does not hold."""
    def __init__(self, profile_id: int):
        super().__init__("Profile", profile_id)
        self.profile_id = profile_id


class DemoNotFoundError(ResourceNotFoundError):
    """Raised when a demo name is not registered."""
    def __init__(self, name: str, available: Optional[Sequence[str]] = None):
        super().__init__("Demo", name)
        self.name = name
        self.available = list(available or [])


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class IteratorExhaustedError(DomainException):
    """Raised when the next element is requested from an exhausted iterator."""
    def __init__(self, message: str = "No more elements", position: int = 0):
        super().__init__(message)
        self.position = position


class UnsupportedTraversalError(DomainException):
    """Raised when a collection is asked for a traversal kind it does not offer."""
    def __init__(self, kind: str, supported: Sequence[str]):
        super().__init__(
            f"Unsupported traversal '{kind}'. Must be one of: {list(supported)}"
        )
        self.kind = kind
        self.supported = list(supported)


class UnsupportedOperationError(DomainException):
    """Raised when an operation name has no matching implementation."""
    def __init__(self, operation: str, supported: Sequence[str]):
        super().__init__(
            f"Unsupported operation '{operation}'. Must be one of: {list(supported)}"
        )
        self.operation = operation
        self.supported = list(supported)


class UnhandledRequestError(DomainException):
    """Raised when a request travels the whole chain without a handler."""
    def __init__(self, request: str, origin: str):
        super().__init__(f"No handler in the chain accepted '{request}' from {origin}")
        self.request = request
        self.origin = origin
