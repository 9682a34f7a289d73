"""Backend catalog endpoints."""

from fastapi import APIRouter, Depends

from importexport.api.deps import get_import_export_service
from importexport.api.schemas import BackendListResponse
from importexport.services import ImportExportService

router = APIRouter(prefix="/backends", tags=["backends"])


@router.get("/objects", response_model=BackendListResponse)
def list_object_backends(service: ImportExportService = Depends(get_import_export_service)):
    """Object backends configured for this installation."""
    return BackendListResponse(backends=service.object_list())


@router.get("/formats", response_model=BackendListResponse)
def list_format_backends(service: ImportExportService = Depends(get_import_export_service)):
    """Format backends configured for this installation."""
    return BackendListResponse(backends=service.format_list())
