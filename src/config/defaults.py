# src/config/defaults.py
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDERR = "stderr"
    BOTH = "both"
    NONE = "none"


class OutputFormat(str, Enum):
    """Output format enumeration for the command line."""
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"
    LIST = "list"


class PatternCategory(str, Enum):
    """Pattern categories in the catalog."""
    BEHAVIORAL = "behavioral"
    CREATIONAL = "creational"
    STRUCTURAL = "structural"


CONFIG_FILE_ENV_VAR = "PATTERN_CATALOG_CONFIG"

DEFAULT_CONFIG = {
    # Logging configuration
    "logging": {
        "level": "${LOG_LEVEL:WARNING}",
        "destination": "${LOG_DESTINATION:stderr}",
        "file": {
            "path": "${PATTERN_CATALOG_LOGDIR:logs}/pattern_catalog.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
    },

    # Catalog configuration
    "catalog": {
        "output_format": "table",
        "enabled_categories": [
            PatternCategory.BEHAVIORAL.value,
            PatternCategory.CREATIONAL.value,
            PatternCategory.STRUCTURAL.value,
        ],
        "show_headers": True,
    },
}
