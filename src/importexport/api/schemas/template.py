"""Pydantic schemas for template endpoints."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from importexport.domain.models.enums import TemplateKind, ValidityState


class TemplateCreateRequest(BaseModel):
    """Request schema for creating a template."""

    kind: TemplateKind
    object_type: str = Field(..., min_length=1, max_length=200)
    format_type: str = Field(..., min_length=1, max_length=200)
    name: str = Field(..., min_length=1, max_length=200)
    validity: ValidityState = ValidityState.VALID
    comment: Optional[str] = Field(default=None, max_length=250)


class TemplateUpdateRequest(BaseModel):
    """Request schema for updating a template."""

    name: str = Field(..., min_length=1, max_length=200)
    validity: ValidityState = ValidityState.VALID
    comment: Optional[str] = Field(default=None, max_length=250)


class TemplateDeleteRequest(BaseModel):
    """Request schema for deleting several templates at once."""

    template_ids: list[int] = Field(..., min_length=1)


class TemplateResponse(BaseModel):
    """Response schema for a single template."""

    model_config = {"from_attributes": True}

    template_id: int
    number: str
    kind: TemplateKind
    object_type: str
    format_type: str
    name: str
    validity: ValidityState
    comment: str = ""
    created_at: Optional[datetime] = None
    created_by: Optional[int] = None
    changed_at: Optional[datetime] = None
    changed_by: Optional[int] = None


class TemplateListResponse(BaseModel):
    """Response schema for listing templates."""

    templates: list[TemplateResponse]
    count: int
