"""Core constants exports."""

from .constants import (
    CONFIG_FILENAME,
    DEFAULT_SOURCES,
    DEFAULT_WORKERS,
    DIGIT_BUCKET,
    FIXED_FIELDS,
    NO_NAME_PLACEHOLDER,
    PRIMARY_SHEET,
    RESOLVER_HOME_DIR,
    SHEET_FILE_SUFFIX,
)

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_SOURCES",
    "DEFAULT_WORKERS",
    "DIGIT_BUCKET",
    "FIXED_FIELDS",
    "NO_NAME_PLACEHOLDER",
    "PRIMARY_SHEET",
    "RESOLVER_HOME_DIR",
    "SHEET_FILE_SUFFIX",
]
