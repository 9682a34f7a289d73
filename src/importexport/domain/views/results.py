"""View models for import/export outputs."""

from dataclasses import dataclass, field
from typing import Union

Cell = Union[str, bytes]
Row = list[Cell]


@dataclass
class ParseDiagnostic:
    """Non-fatal problem found while decoding one line of import content."""

    line: int
    code: str
    message: str


@dataclass
class ImportData:
    """Rows decoded by a format backend plus any per-line diagnostics."""

    rows: list[Row] = field(default_factory=list)
    diagnostics: list[ParseDiagnostic] = field(default_factory=list)


@dataclass
class ImportSummary:
    """Summary of a template import run."""

    template_id: int
    imported_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    errors: list[str] = field(default_factory=list)
    diagnostics: list[ParseDiagnostic] = field(default_factory=list)


@dataclass
class ExportResult:
    """Serialized lines of a template export run."""

    template_id: int
    lines: list[Union[str, bytes]] = field(default_factory=list)

    @property
    def content(self) -> Union[str, bytes]:
        """All lines joined with newlines (the codec itself emits none)."""
        if self.lines and isinstance(self.lines[0], bytes):
            return b"\n".join(self.lines)
        return "\n".join(self.lines)
