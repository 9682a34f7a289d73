"""Pluggable object and format backends."""

from importexport.backends.registry import (
    BackendRegistry,
    BackendServices,
    BackendFactory,
    backend_identifier,
)
from importexport.backends.catalog import (
    backend_factories,
    register_backend_factory,
    reset_backend_factories,
)
from importexport.backends.format import FormatBackend, CsvFormatBackend, CsvFormatConfig
from importexport.backends.object import ObjectBackend

__all__ = [
    "BackendRegistry",
    "BackendServices",
    "BackendFactory",
    "backend_identifier",
    "backend_factories",
    "register_backend_factory",
    "reset_backend_factories",
    "FormatBackend",
    "CsvFormatBackend",
    "CsvFormatConfig",
    "ObjectBackend",
]
