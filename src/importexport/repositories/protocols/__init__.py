"""Repository protocol definitions (interfaces)."""

from importexport.repositories.protocols.template_repo import TemplateRepository
from importexport.repositories.protocols.key_value_repo import KeyValueRepository

__all__ = [
    "TemplateRepository",
    "KeyValueRepository",
]
