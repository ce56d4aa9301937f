"""Shared constants for the sheet layout and term file format."""

from __future__ import annotations

RESOLVER_HOME_DIR = ".cryptic-resolver"
CONFIG_FILENAME = "config.toml"
SHEET_FILE_SUFFIX = ".toml"

# All ten digits share one bucket file: 0123456789.toml
DIGIT_BUCKET = "0123456789"

PRIMARY_SHEET = "cryptic_computer"
DEFAULT_WORKERS = 4

DEFAULT_SOURCES: dict[str, str] = {
    "computer": "https://github.com/cryptic-resolver/cryptic_computer.git",
    "common": "https://github.com/cryptic-resolver/cryptic_common.git",
    "science": "https://github.com/cryptic-resolver/cryptic_science.git",
    "economy": "https://github.com/cryptic-resolver/cryptic_economy.git",
    "medicine": "https://github.com/cryptic-resolver/cryptic_medicine.git",
}

# Field names used in sheet files
FIELD_DISPLAY = "disp"
FIELD_DESCRIPTION = "desc"
FIELD_FULL = "full"
FIELD_SEE_ALSO = "see"
FIELD_SAME_AS = "same"

FIXED_FIELDS = frozenset(
    {FIELD_DISPLAY, FIELD_DESCRIPTION, FIELD_FULL, FIELD_SEE_ALSO, FIELD_SAME_AS}
)

NO_NAME_PLACEHOLDER = "No name!"

__all__ = [
    "CONFIG_FILENAME",
    "DEFAULT_SOURCES",
    "DEFAULT_WORKERS",
    "DIGIT_BUCKET",
    "FIELD_DESCRIPTION",
    "FIELD_DISPLAY",
    "FIELD_FULL",
    "FIELD_SAME_AS",
    "FIELD_SEE_ALSO",
    "FIXED_FIELDS",
    "NO_NAME_PLACEHOLDER",
    "PRIMARY_SHEET",
    "RESOLVER_HOME_DIR",
    "SHEET_FILE_SUFFIX",
]
