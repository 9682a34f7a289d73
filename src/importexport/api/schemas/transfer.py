"""Pydantic schemas for template data and import/export endpoints."""

from pydantic import BaseModel


class TemplateDataPayload(BaseModel):
    """Key/value configuration of a template (object data or format data)."""

    data: dict[str, str]


class ParseDiagnosticResponse(BaseModel):
    """Per-line decode problem."""

    model_config = {"from_attributes": True}

    line: int
    code: str
    message: str


class ImportSummaryResponse(BaseModel):
    """Response schema for an import run."""

    model_config = {"from_attributes": True}

    template_id: int
    imported_count: int
    skipped_count: int
    error_count: int
    errors: list[str]
    diagnostics: list[ParseDiagnosticResponse]
