"""Domain models package."""

from importexport.domain.models.enums import (
    TemplateKind,
    ValidityState,
    BackendKind,
    InputType,
)
from importexport.domain.models.template import Template
from importexport.domain.models.attribute import AttributeInput, AttributeDescriptor

__all__ = [
    "TemplateKind",
    "ValidityState",
    "BackendKind",
    "InputType",
    "Template",
    "AttributeInput",
    "AttributeDescriptor",
]
