"""Format backends."""

from importexport.backends.format.base import FormatBackend
from importexport.backends.format.csv_backend import (
    CsvFormatBackend,
    CsvFormatConfig,
    AVAILABLE_SEPARATORS,
    normalize_charset,
)

__all__ = [
    "FormatBackend",
    "CsvFormatBackend",
    "CsvFormatConfig",
    "AVAILABLE_SEPARATORS",
    "normalize_charset",
]
