"""Pattern Catalog - Root Package.

Pedagogical implementations of the classic Gang-of-Four design patterns,
grouped by category, each with a runnable demonstration.

Key Components:
    - behavioral: chain of responsibility, command, iterator, mediator,
      observer, snapshot, state, strategy, template method, visitor
    - creational: abstract factory, builder, factory method, prototype, singleton
    - structural: adapter, bridge, composite, decorator, flyweight, proxy
    - config: default configuration, schema validation and the configuration manager
    - infrastructure: logging, error handling and the demo registry
    - cli: command line interface for listing, describing and running demos

Usage:
    >>> pattern-catalog list
    >>> pattern-catalog run iterator
"""

from ._version import __version__
from ._package import PACKAGE_NAME

__package_name__ = PACKAGE_NAME
