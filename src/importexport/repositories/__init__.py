"""Repository layer - data access abstractions and implementations."""

from importexport.repositories.protocols import (
    TemplateRepository,
    KeyValueRepository,
)

__all__ = [
    "TemplateRepository",
    "KeyValueRepository",
]
