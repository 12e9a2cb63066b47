"""Package metadata and naming constants."""

PACKAGE_NAME = "pattern-catalog"
COMMAND_NAME = "pattern-catalog"
DESCRIPTION = "Gang-of-Four design patterns with runnable demonstrations"
