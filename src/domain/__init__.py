"""
Domain Layer

- core/: exception hierarchy shared by every pattern module and the CLI
"""

from .core.exceptions import DomainException

__all__ = ["DomainException"]
