"""Pydantic schemas for API request/response."""

from importexport.api.schemas.template import (
    TemplateCreateRequest,
    TemplateUpdateRequest,
    TemplateDeleteRequest,
    TemplateResponse,
    TemplateListResponse,
)
from importexport.api.schemas.backend import (
    AttributeInputResponse,
    AttributeResponse,
    BackendListResponse,
)
from importexport.api.schemas.transfer import (
    TemplateDataPayload,
    ParseDiagnosticResponse,
    ImportSummaryResponse,
)

__all__ = [
    "TemplateCreateRequest",
    "TemplateUpdateRequest",
    "TemplateDeleteRequest",
    "TemplateResponse",
    "TemplateListResponse",
    "AttributeInputResponse",
    "AttributeResponse",
    "BackendListResponse",
    "TemplateDataPayload",
    "ParseDiagnosticResponse",
    "ImportSummaryResponse",
]
