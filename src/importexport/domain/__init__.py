"""Domain layer - pure models with no external dependencies."""

from importexport.domain.models import (
    Template,
    TemplateKind,
    ValidityState,
    BackendKind,
    InputType,
    AttributeInput,
    AttributeDescriptor,
)

__all__ = [
    "Template",
    "TemplateKind",
    "ValidityState",
    "BackendKind",
    "InputType",
    "AttributeInput",
    "AttributeDescriptor",
]
