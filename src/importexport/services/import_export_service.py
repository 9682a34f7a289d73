"""Import/export dispatch between templates, object backends and format backends."""

import logging
from typing import Optional, Union

from importexport.backends.format.base import FormatBackend
from importexport.backends.object.base import ObjectBackend
from importexport.backends.registry import BackendRegistry
from importexport.config.settings import Settings
from importexport.core.exceptions import AppError, ValidationError
from importexport.domain.models import (
    AttributeDescriptor,
    BackendKind,
    Template,
    TemplateKind,
)
from importexport.domain.views import ExportResult, ImportSummary
from importexport.services.template_data_service import TemplateDataService
from importexport.services.template_service import TemplateService

logger = logging.getLogger(__name__)


class ImportExportService:
    """
    Service tying templates to their backends.

    Looks up a template, resolves its object and format backend through
    the registry and runs the row pipeline between them:

    - import: raw content -> format backend -> rows -> object backend
    - export: object backend -> rows -> format backend -> lines
    """

    def __init__(
        self,
        templates: TemplateService,
        format_data: TemplateDataService,
        registry: BackendRegistry,
        settings: Settings,
    ):
        self._templates = templates
        self._format_data = format_data
        self._registry = registry
        self._settings = settings
        registry.bind_dispatcher(self)

    # Catalogs

    def object_list(self) -> dict[str, str]:
        """Available object backends as name -> label, sorted by name."""
        return self._settings.backend_catalog(BackendKind.OBJECT)

    def format_list(self) -> dict[str, str]:
        """Available format backends as name -> label, sorted by name."""
        return self._settings.backend_catalog(BackendKind.FORMAT)

    # Attribute introspection

    def object_attributes_get(self, template_id: int) -> list[AttributeDescriptor]:
        """Configuration attributes of the template's object backend."""
        template = self._templates.get(template_id)
        return self._object_backend(template).attributes_get(template)

    def format_attributes_get(self, template_id: int) -> list[AttributeDescriptor]:
        """Configuration attributes of the template's format backend."""
        template = self._templates.get(template_id)
        return self._format_backend(template).attributes_get(template)

    def object_mapping_attributes_get(self, template_id: int) -> list[AttributeDescriptor]:
        """Per-column mapping attributes of the template's object backend."""
        template = self._templates.get(template_id)
        return self._object_backend(template).mapping_object_attributes_get(template)

    def format_mapping_attributes_get(self, template_id: int) -> list[AttributeDescriptor]:
        """Per-column mapping attributes of the template's format backend."""
        template = self._templates.get(template_id)
        return self._format_backend(template).mapping_format_attributes_get(template)

    # Pipelines

    def import_data(
        self,
        template_id: int,
        source_content: Optional[Union[str, bytes]],
    ) -> ImportSummary:
        """
        Import content through an Import template.

        Rows rejected by the object backend are counted and reported; they
        do not stop the remaining rows. Parse diagnostics are passed on.
        """
        template = self._templates.get(template_id)
        self._require_kind(template, TemplateKind.IMPORT)

        format_backend = self._format_backend(template)
        object_backend = self._object_backend(template)

        import_data = format_backend.import_data_get(template.template_id, source_content)
        summary = ImportSummary(
            template_id=template.template_id,
            diagnostics=list(import_data.diagnostics),
        )

        rows = import_data.rows
        if rows and self._include_headers(template.template_id):
            rows = rows[1:]
            summary.skipped_count += 1

        for row_num, row in enumerate(rows, start=1):
            try:
                object_backend.import_data_save(template.template_id, row)
                summary.imported_count += 1
            except AppError as e:
                summary.error_count += 1
                summary.errors.append(f"Row {row_num}: {e.message}")
                logger.warning(
                    "Template %s: row %d rejected: %s", template.number, row_num, e.message
                )

        logger.info(
            "Template %s import: %d imported, %d failed, %d diagnostics",
            template.number,
            summary.imported_count,
            summary.error_count,
            len(summary.diagnostics),
        )
        return summary

    def export_data(self, template_id: int) -> ExportResult:
        """Export every row the object backend yields through an Export template."""
        template = self._templates.get(template_id)
        self._require_kind(template, TemplateKind.EXPORT)

        format_backend = self._format_backend(template)
        object_backend = self._object_backend(template)

        result = ExportResult(template_id=template.template_id)
        if self._include_headers(template.template_id):
            headers = object_backend.column_headers_get(template.template_id)
            result.lines.append(format_backend.export_data_save(template.template_id, headers))

        for row in object_backend.export_data_get(template.template_id):
            result.lines.append(format_backend.export_data_save(template.template_id, row))

        logger.info("Template %s export: %d lines", template.number, len(result.lines))
        return result

    # Helpers

    def _object_backend(self, template: Template) -> ObjectBackend:
        return self._registry.resolve(BackendKind.OBJECT, template.object_type)

    def _format_backend(self, template: Template) -> FormatBackend:
        return self._registry.resolve(BackendKind.FORMAT, template.format_type)

    def _include_headers(self, template_id: int) -> bool:
        return self._format_data.get_all(template_id).get("IncludeColumnHeaders") == "1"

    @staticmethod
    def _require_kind(template: Template, kind: TemplateKind) -> None:
        if template.kind != kind:
            logger.error(
                "Template %s is an %s template, expected %s",
                template.number,
                template.kind.value,
                kind.value,
            )
            raise ValidationError(
                f"Template {template.number} is not an {kind.value} template"
            )

