"""Core utilities and shared functionality."""

from importexport.core.exceptions import (
    AppError,
    ValidationError,
    NotFoundError,
    ConflictError,
    BackendLoadError,
    BackendInstantiationError,
    SerializationError,
)
from importexport.core.text import clean_name, now_utc

__all__ = [
    "AppError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "BackendLoadError",
    "BackendInstantiationError",
    "SerializationError",
    "clean_name",
    "now_utc",
]
