"""View models for service outputs."""

from importexport.domain.views.results import (
    Cell,
    Row,
    ParseDiagnostic,
    ImportData,
    ImportSummary,
    ExportResult,
)

__all__ = [
    "Cell",
    "Row",
    "ParseDiagnostic",
    "ImportData",
    "ImportSummary",
    "ExportResult",
]
