"""Attribute introspection and import/export endpoints."""

from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import Response

from importexport.api.deps import get_import_export_service, get_template_service
from importexport.api.schemas import AttributeResponse, ImportSummaryResponse
from importexport.services import ImportExportService, TemplateService

router = APIRouter(prefix="/templates", tags=["import-export"])


@router.get("/{template_id}/object-attributes", response_model=list[AttributeResponse])
def object_attributes(
    template_id: int,
    service: ImportExportService = Depends(get_import_export_service),
):
    """Configuration attributes of the template's object backend."""
    return [AttributeResponse.model_validate(a) for a in service.object_attributes_get(template_id)]


@router.get("/{template_id}/format-attributes", response_model=list[AttributeResponse])
def format_attributes(
    template_id: int,
    service: ImportExportService = Depends(get_import_export_service),
):
    """Configuration attributes of the template's format backend."""
    return [AttributeResponse.model_validate(a) for a in service.format_attributes_get(template_id)]


@router.get("/{template_id}/object-mapping-attributes", response_model=list[AttributeResponse])
def object_mapping_attributes(
    template_id: int,
    service: ImportExportService = Depends(get_import_export_service),
):
    """Per-column mapping attributes of the template's object backend."""
    return [
        AttributeResponse.model_validate(a)
        for a in service.object_mapping_attributes_get(template_id)
    ]


@router.get("/{template_id}/format-mapping-attributes", response_model=list[AttributeResponse])
def format_mapping_attributes(
    template_id: int,
    service: ImportExportService = Depends(get_import_export_service),
):
    """Per-column mapping attributes of the template's format backend."""
    return [
        AttributeResponse.model_validate(a)
        for a in service.format_mapping_attributes_get(template_id)
    ]


@router.post("/{template_id}/import", response_model=ImportSummaryResponse)
def import_file(
    template_id: int,
    file: UploadFile = File(...),
    service: ImportExportService = Depends(get_import_export_service),
):
    """
    Import an uploaded file through an Import template.

    Valid rows are imported even when other rows fail; failures and
    per-line parse diagnostics are listed in the summary.
    """
    raw = file.file.read()
    summary = service.import_data(template_id, raw)
    return ImportSummaryResponse.model_validate(summary)


@router.get("/{template_id}/export")
def export_file(
    template_id: int,
    service: ImportExportService = Depends(get_import_export_service),
    templates: TemplateService = Depends(get_template_service),
):
    """Download the output of an Export template."""
    template = templates.get(template_id)
    result = service.export_data(template_id)
    content = result.content
    # Raw bytes come from a non UTF-8 template and carry no known text encoding
    media_type = "application/octet-stream" if isinstance(content, bytes) else "text/csv"
    return Response(
        content=content,
        media_type=media_type,
        headers={
            "Content-Disposition": f'attachment; filename="template_{template.number}.csv"'
        },
    )
