"""Attribute descriptors returned by backend introspection."""

from dataclasses import dataclass, field
from typing import Optional

from importexport.domain.models.enums import InputType


@dataclass
class AttributeInput:
    """How a single configurable value is entered and validated."""

    type: InputType
    options: dict[str, str] = field(default_factory=dict)  # Selection only
    data: Optional[str] = None  # DTL expression
    required: bool = False
    default_value: Optional[str] = None
    translation: bool = False
    possible_none: bool = False
    size: Optional[int] = None
    max_length: Optional[int] = None


@dataclass
class AttributeDescriptor:
    """One configurable field exposed by a backend. Never persisted."""

    key: str
    name: str
    input: AttributeInput
