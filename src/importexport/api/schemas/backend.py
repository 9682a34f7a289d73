"""Pydantic schemas for backend catalogs and attribute descriptors."""

from typing import Optional

from pydantic import BaseModel

from importexport.domain.models.enums import InputType


class AttributeInputResponse(BaseModel):
    """How an attribute is entered."""

    model_config = {"from_attributes": True}

    type: InputType
    options: dict[str, str] = {}
    data: Optional[str] = None
    required: bool = False
    default_value: Optional[str] = None
    translation: bool = False
    possible_none: bool = False
    size: Optional[int] = None
    max_length: Optional[int] = None


class AttributeResponse(BaseModel):
    """One configurable backend attribute."""

    model_config = {"from_attributes": True}

    key: str
    name: str
    input: AttributeInputResponse


class BackendListResponse(BaseModel):
    """Available backends as name -> label."""

    backends: dict[str, str]
