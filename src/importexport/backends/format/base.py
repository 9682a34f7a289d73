"""Format backend protocol."""

from typing import Optional, Protocol, Sequence, Union

from importexport.domain.models import AttributeDescriptor, Template
from importexport.domain.views import Cell, ImportData


class FormatBackend(Protocol):
    """
    Protocol for format backends.

    A format backend converts between generic rows (ordered cells) and an
    external serialized representation. Its configuration is read from the
    template's format data.
    """

    def attributes_get(self, template: Template) -> list[AttributeDescriptor]:
        """Describe the backend's own configuration surface."""
        ...

    def mapping_format_attributes_get(self, template: Template) -> list[AttributeDescriptor]:
        """Describe the per-column mapping configuration."""
        ...

    def import_data_get(
        self,
        template_id: int,
        source_content: Optional[Union[str, bytes]],
    ) -> ImportData:
        """
        Parse raw content into rows.

        Absent or empty content yields no rows. Per-line problems are
        reported as diagnostics and do not stop the parse.
        """
        ...

    def export_data_save(self, template_id: int, row: Sequence[Cell]) -> Union[str, bytes]:
        """Serialize exactly one row, without a line terminator."""
        ...
