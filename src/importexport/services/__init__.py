"""Service layer - business logic orchestration."""

from importexport.services.template_data_service import (
    TemplateDataService,
    normalize_template_ids,
)
from importexport.services.template_service import (
    TemplateService,
    TemplateCreate,
    TemplateUpdate,
)
from importexport.services.import_export_service import ImportExportService

__all__ = [
    "TemplateDataService",
    "normalize_template_ids",
    "TemplateService",
    "TemplateCreate",
    "TemplateUpdate",
    "ImportExportService",
]
